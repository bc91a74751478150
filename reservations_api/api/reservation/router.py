"""Reservation domain router, scoped to an organization and calendar."""

from fastapi import APIRouter

from reservations_api.api.core.dependencies import (
    CurrentUserAuthDep,
    ReservationServiceDep,
)
from reservations_api.api.core.messages import (
    APIResponse,
    MessageCode,
    SearchRequest,
    SearchResult,
)
from reservations_api.api.reservation.schemas import (
    ReservationCreateRequest,
    ReservationCreateResponse,
    ReservationDeleteResponse,
    ReservationGetResponse,
    ReservationModel,
    ReservationSearchResponse,
    ReservationUpdateRequest,
    ReservationUpdateResponse,
    ReservationView,
)

router = APIRouter(
    prefix="/{organization_id}/calendar/{calendar_id}/reservation",
    tags=["reservations"],
)


def _to_view(reservation) -> ReservationView:
    return ReservationView(reservation=ReservationModel.model_validate(reservation))


@router.post("", response_model=ReservationCreateResponse)
async def create_reservation(
    organization_id: str,
    calendar_id: str,
    reservation_data: ReservationCreateRequest,
    reservation_service: ReservationServiceDep,
    current_user: CurrentUserAuthDep,
) -> ReservationCreateResponse:
    """Book a reservation; the caller is recorded as the booker."""
    reservation = await reservation_service.create_reservation(
        organization_id,
        calendar_id,
        booker_id=current_user.user_id,
        **reservation_data.model_dump(),
    )
    return APIResponse.success(
        message_code=MessageCode.RESERVATION_CREATED,
        data=_to_view(reservation),
    )


@router.post("/search", response_model=ReservationSearchResponse)
async def search_reservations(
    organization_id: str,
    calendar_id: str,
    search: SearchRequest,
    reservation_service: ReservationServiceDep,
    current_user: CurrentUserAuthDep,
) -> ReservationSearchResponse:
    page = await reservation_service.search_reservations(
        organization_id,
        calendar_id,
        keyword=search.keyword,
        current_page=search.current_page,
        items_per_page=search.items_per_page,
        sort=search.sort,
    )
    result = page.map(_to_view)
    return APIResponse.success(data=SearchResult[ReservationView](**vars(result)))


@router.get("/{reservation_id}", response_model=ReservationGetResponse)
async def get_reservation(
    organization_id: str,
    calendar_id: str,
    reservation_id: str,
    reservation_service: ReservationServiceDep,
    current_user: CurrentUserAuthDep,
) -> ReservationGetResponse:
    reservation = await reservation_service.get_reservation(
        organization_id, calendar_id, reservation_id
    )
    return APIResponse.success(data=_to_view(reservation))


@router.put("/{reservation_id}", response_model=ReservationUpdateResponse)
async def update_reservation(
    organization_id: str,
    calendar_id: str,
    reservation_id: str,
    reservation_data: ReservationUpdateRequest,
    reservation_service: ReservationServiceDep,
    current_user: CurrentUserAuthDep,
) -> ReservationUpdateResponse:
    reservation = await reservation_service.update_reservation(
        organization_id,
        calendar_id,
        reservation_id,
        **reservation_data.model_dump(),
    )
    return APIResponse.success(
        message_code=MessageCode.RESERVATION_UPDATED,
        data=ReservationModel.model_validate(reservation),
    )


@router.delete("/{reservation_id}", response_model=ReservationDeleteResponse)
async def delete_reservation(
    organization_id: str,
    calendar_id: str,
    reservation_id: str,
    reservation_service: ReservationServiceDep,
    current_user: CurrentUserAuthDep,
) -> ReservationDeleteResponse:
    reservation = await reservation_service.delete_reservation(
        organization_id, calendar_id, reservation_id
    )
    return APIResponse.success(
        message_code=MessageCode.RESERVATION_DELETED,
        data=ReservationModel.model_validate(reservation),
    )
