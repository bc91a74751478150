"""Health check endpoints for debugging and monitoring."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from reservations_api.api.core.dependencies import HealthServiceDep

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(health_service: HealthServiceDep):
    """Database connectivity check; 503 when the database is unreachable."""
    health = await health_service.get_overall_health()
    status_code = 200 if health.status == "healthy" else 503
    return JSONResponse(
        status_code=status_code,
        content={
            "status": health.status,
            "timestamp": health.timestamp,
            "services": {
                name: {
                    "status": result.status,
                    "connected": result.connected,
                    "details": result.details,
                    "error": result.error,
                }
                for name, result in health.services.items()
            },
        },
    )


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "reservations-api"}
