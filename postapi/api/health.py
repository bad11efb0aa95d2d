"""Health check: database connectivity and the state of the users/posts tables."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from postapi.core.config import settings
from postapi.core.database import check_db_connected, get_db, table_status
from postapi.models import Post
from postapi.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """
    Report whether the store is reachable and its tables exist.
    The post count is included once the posts table is there.
    """
    if not check_db_connected(db):
        return HealthResponse(status="degraded", environment=settings.APP_ENV, database="disconnected")

    tables = table_status(db)
    post_count = db.query(Post).count() if tables.get(Post.__tablename__) else None
    return HealthResponse(
        status="ok" if all(tables.values()) else "degraded",
        environment=settings.APP_ENV,
        database="connected",
        tables=tables,
        posts=post_count,
    )
