"""Test configuration: in-memory SQLite and cheap bcrypt, fresh schema per test."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from postapi.core.database import engine
from postapi.models import Base


@pytest.fixture(autouse=True)
def fresh_schema():
    """Drop and recreate all tables so every test starts from an empty store."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
