from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from reservations_api.api.core.exceptions.base import UnauthorizedError
from reservations_api.api.core.messages import MessageCode
from reservations_api.core.context import AuthenticatedUserContext
from reservations_api.database.models import User
from reservations_api.modules.calendar.use_cases import CalendarService
from reservations_api.modules.health.service import HealthService
from reservations_api.modules.organization.use_cases import OrganizationService
from reservations_api.modules.reservation.use_cases import ReservationService
from reservations_api.modules.user.management import UserManagementService


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def get_user_management_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> UserManagementService:
    """Get user management service with database session."""
    return UserManagementService(db)


async def get_organization_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> OrganizationService:
    """Get organization service with database session."""
    return OrganizationService(db)


async def get_calendar_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> CalendarService:
    """Get calendar service with database session."""
    return CalendarService(db)


async def get_reservation_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ReservationService:
    """Get reservation service with database session."""
    return ReservationService(db)


async def get_health_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> HealthService:
    return HealthService(db)


async def get_current_user_authenticated(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> AuthenticatedUserContext:
    """Resolve the caller from the user id the auth middleware put on request.state."""
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise UnauthorizedError(MessageCode.AUTH_REQUIRED)

    user = await db.get(User, user_id)
    if not user:
        raise UnauthorizedError(
            MessageCode.AUTH_REQUIRED,
            {"description": "User must be logged in"},
        )

    return AuthenticatedUserContext(user=user)


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
UserManagementServiceDep = Annotated[
    UserManagementService, Depends(get_user_management_service)
]
OrganizationServiceDep = Annotated[
    OrganizationService, Depends(get_organization_service)
]
CalendarServiceDep = Annotated[CalendarService, Depends(get_calendar_service)]
ReservationServiceDep = Annotated[
    ReservationService, Depends(get_reservation_service)
]
HealthServiceDep = Annotated[HealthService, Depends(get_health_service)]

CurrentUserAuthDep = Annotated[
    AuthenticatedUserContext, Depends(get_current_user_authenticated)
]
