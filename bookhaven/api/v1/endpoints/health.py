"""Health check endpoints: liveness, and readiness (store reachable)."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookhaven.core.config import get_settings
from bookhaven.infrastructure.persistence.database import get_db
from bookhaven.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(version=get_settings().app_version)


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"description": "Entity store unreachable"}},
)
async def readiness_check(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HealthResponse | JSONResponse:
    """Return 200 when the entity store answers a trivial query; 503 otherwise."""
    version = get_settings().app_version
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "version": version},
        )
    return HealthResponse(version=version)
