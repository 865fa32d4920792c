"""Health check router."""

import logging

from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request):
    """Health check for load balancers and monitoring. Pings the database."""
    try:
        with request.app.state.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Health check: database non raggiungibile: %s", e)
        return {"status": "degraded", "database": "unreachable"}
    return {"status": "healthy", "database": "ok"}
