"""Core app configuration, database and security helpers."""

from postapi.core.config import get_settings, settings
from postapi.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
