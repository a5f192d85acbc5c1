"""System-level endpoints."""
import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session
from ..errors import STORE_FAILURES, store_failure_details
from ..schemas import HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/api/health", response_model=HealthStatus)
async def health(session: AsyncSession = Depends(get_db_session)):
    """Readiness probe that round-trips to the database."""

    try:
        await session.execute(text("SELECT 1"))
    except STORE_FAILURES as exc:
        logger.warning("Health check failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Database connection failed", "details": store_failure_details(exc)},
        )
    return HealthStatus(status="Database connection OK")


@router.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)
