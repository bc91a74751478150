"""Calendar domain router, scoped to an organization."""

from fastapi import APIRouter

from reservations_api.api.calendar.schemas import (
    CalendarCreateRequest,
    CalendarCreateResponse,
    CalendarDeleteResponse,
    CalendarGetResponse,
    CalendarModel,
    CalendarSearchResponse,
    CalendarUpdateRequest,
    CalendarUpdateResponse,
    CalendarView,
)
from reservations_api.api.core.dependencies import CalendarServiceDep, CurrentUserAuthDep
from reservations_api.api.core.messages import (
    APIResponse,
    MessageCode,
    SearchRequest,
    SearchResult,
)
from reservations_api.api.reservation.schemas import ReservationModel, ReservationView
from reservations_api.modules.calendar.use_cases import CalendarDetails

router = APIRouter(
    prefix="/{organization_id}/calendar",
    tags=["calendars"],
)


def _to_view(details: CalendarDetails) -> CalendarView:
    reservations = None
    if details.reservations is not None:
        reservations = [
            ReservationView(reservation=ReservationModel.model_validate(reservation))
            for reservation in details.reservations
        ]
    return CalendarView(
        calendar=CalendarModel.model_validate(details.calendar),
        num_of_valid_reservations=details.num_of_valid_reservations,
        reservations=reservations,
    )


@router.post("", response_model=CalendarCreateResponse)
async def create_calendar(
    organization_id: str,
    calendar_data: CalendarCreateRequest,
    calendar_service: CalendarServiceDep,
    current_user: CurrentUserAuthDep,
) -> CalendarCreateResponse:
    """Create a calendar; fails with 404 when the organization does not exist."""
    calendar = await calendar_service.create_calendar(
        organization_id,
        user_id=current_user.user_id,
        **calendar_data.model_dump(),
    )
    return APIResponse.success(
        message_code=MessageCode.CALENDAR_CREATED,
        data=_to_view(CalendarDetails(calendar=calendar)),
    )


@router.post("/search", response_model=CalendarSearchResponse)
async def search_calendars(
    organization_id: str,
    search: SearchRequest,
    calendar_service: CalendarServiceDep,
    current_user: CurrentUserAuthDep,
) -> CalendarSearchResponse:
    page = await calendar_service.search_calendars(
        organization_id,
        keyword=search.keyword,
        current_page=search.current_page,
        items_per_page=search.items_per_page,
        sort=search.sort,
    )
    result = page.map(_to_view)
    return APIResponse.success(data=SearchResult[CalendarView](**vars(result)))


@router.get("/{calendar_id}", response_model=CalendarGetResponse)
async def get_calendar(
    organization_id: str,
    calendar_id: str,
    calendar_service: CalendarServiceDep,
    current_user: CurrentUserAuthDep,
) -> CalendarGetResponse:
    details = await calendar_service.get_calendar(organization_id, calendar_id)
    return APIResponse.success(data=_to_view(details))


@router.put("/{calendar_id}", response_model=CalendarUpdateResponse)
async def update_calendar(
    organization_id: str,
    calendar_id: str,
    calendar_data: CalendarUpdateRequest,
    calendar_service: CalendarServiceDep,
    current_user: CurrentUserAuthDep,
) -> CalendarUpdateResponse:
    calendar = await calendar_service.update_calendar(
        organization_id, calendar_id, **calendar_data.model_dump()
    )
    return APIResponse.success(
        message_code=MessageCode.CALENDAR_UPDATED,
        data=CalendarModel.model_validate(calendar),
    )


@router.delete("/{calendar_id}", response_model=CalendarDeleteResponse)
async def delete_calendar(
    organization_id: str,
    calendar_id: str,
    calendar_service: CalendarServiceDep,
    current_user: CurrentUserAuthDep,
) -> CalendarDeleteResponse:
    calendar = await calendar_service.delete_calendar(organization_id, calendar_id)
    return APIResponse.success(
        message_code=MessageCode.CALENDAR_DELETED,
        data=CalendarModel.model_validate(calendar),
    )
