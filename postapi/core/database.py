"""SQLite connection, session management and schema bootstrap."""

import logging
from collections.abc import Generator

from sqlalchemy import Engine, create_engine, inspect, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from postapi.core.config import settings

logger = logging.getLogger(__name__)


def _is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite+pysqlite://") or ":memory:" in url


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for a SQLite URL.

    Requests run in a threadpool, so connections may cross threads. An in-memory
    database is pinned to a single shared connection, otherwise each connection
    would see its own empty database.
    """
    kwargs: dict = {"connect_args": {"check_same_thread": False}, "echo": echo}
    if _is_memory_url(url):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create the users and posts tables if they do not exist yet."""
    from postapi.models import Base

    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info("Database schema ready", extra={"database_url": target.url.render_as_string()})


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


def table_status(db: Session) -> dict[str, bool]:
    """Map each table the app defines to whether it exists in the connected database."""
    from postapi.models import Base

    existing = set(inspect(db.connection()).get_table_names())
    return {name: name in existing for name in Base.metadata.tables}
