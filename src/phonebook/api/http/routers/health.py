"""Liveness and readiness checks."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.phonebook.api.http.deps import get_db_service
from src.phonebook.core.services import DbSessionService
from src.phonebook.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness: 200 while the process serves requests, no dependency checks."""
    return {"status": "healthy", "service": get_config().app.name}


@router.get("/ready", response_model=None)
def readiness(
    db_service: DbSessionService = Depends(get_db_service),
) -> dict[str, Any] | JSONResponse:
    """Readiness check: 200 when the contact store answers, 503 otherwise."""
    config = get_config()
    db_healthy = db_service.health_check()

    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": config.app.environment,
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": db_service.engine.dialect.name,
                "pool": db_service.get_pool_status(),
            }
        },
    }

    if not db_healthy:
        return JSONResponse(status_code=503, content=response)
    return response
