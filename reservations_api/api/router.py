from fastapi import APIRouter

from reservations_api.api.calendar.router import router as calendar_router
from reservations_api.api.health.router import router as health_router
from reservations_api.api.organization.router import router as organization_router
from reservations_api.api.reservation.router import router as reservation_router
from reservations_api.api.user.router import router as user_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(user_router)
# Fixed-prefix routes before the "/{organization_id}/..." ones
api_router.include_router(organization_router)
api_router.include_router(reservation_router)
api_router.include_router(calendar_router)
