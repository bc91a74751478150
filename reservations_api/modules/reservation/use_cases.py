from sqlalchemy import select

from reservations_api.api.core.exceptions.base import NotFoundError
from reservations_api.api.core.messages import MessageCode
from reservations_api.core.base import BaseService
from reservations_api.database.models import Calendar, Reservation
from reservations_api.modules.organization.use_cases import OrganizationService
from reservations_api.modules.ownership import verify_ownership
from reservations_api.modules.search.pagination import Page, paginate_query

RESERVATION_CREATE_FIELDS = (
    "name",
    "description",
    "color",
    "cart_id",
    "start_from",
    "end_at",
    "is_whole_day",
    "status",
    "under_name",
)

# Fields replaced wholesale by an update request
RESERVATION_MUTABLE_FIELDS = RESERVATION_CREATE_FIELDS + (
    "booker_id",
    "is_deleted",
    "deleted",
)


class ReservationService(BaseService):
    async def create_reservation(
        self,
        organization_id: str,
        calendar_id: str,
        booker_id: str,
        **reservation_data,
    ) -> Reservation:
        """Book a reservation on a calendar owned by the organization.

        The caller becomes the booker.
        """
        await OrganizationService(self.db).require_organization(organization_id)
        calendar = verify_ownership(
            await self.db.get(Calendar, calendar_id),
            organization_id,
            not_found_code=MessageCode.CALENDAR_NOT_FOUND,
        )

        reservation = Reservation(
            calendar_id=calendar.id,
            organization_id=organization_id,
            booker_id=booker_id,
            **{key: reservation_data.get(key) for key in RESERVATION_CREATE_FIELDS},
        )
        self.db.add(reservation)
        await self.db.commit()
        await self.db.refresh(reservation)

        self.logger.info(
            "Reservation created",
            reservation_id=reservation.id,
            calendar_id=calendar_id,
            organization_id=organization_id,
        )
        return reservation

    async def search_reservations(
        self,
        organization_id: str,
        calendar_id: str,
        keyword: str | None,
        current_page: int,
        items_per_page: int,
        sort: str | None = None,
    ) -> Page[Reservation]:
        stmt = select(Reservation).where(
            Reservation.organization_id == organization_id,
            Reservation.calendar_id == calendar_id,
        )
        return await paginate_query(
            self.db,
            stmt,
            Reservation.name,
            keyword=keyword,
            current_page=current_page,
            items_per_page=items_per_page,
            sort=sort,
        )

    async def get_reservation(
        self, organization_id: str, calendar_id: str, reservation_id: str
    ) -> Reservation:
        stmt = select(Reservation).where(
            Reservation.id == reservation_id,
            Reservation.organization_id == organization_id,
            Reservation.calendar_id == calendar_id,
        )
        reservation = (await self.db.execute(stmt)).scalar_one_or_none()
        if not reservation:
            raise NotFoundError(
                MessageCode.RESERVATION_NOT_FOUND,
                {
                    "description": "The specified reservation was not found "
                    "within the given organization and calendar."
                },
            )
        return reservation

    async def update_reservation(
        self,
        organization_id: str,
        calendar_id: str,
        reservation_id: str,
        **reservation_data,
    ) -> Reservation:
        reservation = verify_ownership(
            await self.db.get(Reservation, reservation_id),
            organization_id,
            calendar_id,
            not_found_code=MessageCode.RESERVATION_NOT_FOUND,
        )

        for key in RESERVATION_MUTABLE_FIELDS:
            setattr(reservation, key, reservation_data.get(key))

        await self.db.commit()
        await self.db.refresh(reservation)
        return reservation

    async def delete_reservation(
        self, organization_id: str, calendar_id: str, reservation_id: str
    ) -> Reservation:
        reservation = verify_ownership(
            await self.db.get(Reservation, reservation_id),
            organization_id,
            calendar_id,
            not_found_code=MessageCode.RESERVATION_NOT_FOUND,
        )

        await self.db.delete(reservation)
        await self.db.commit()

        self.logger.info(
            "Reservation deleted",
            reservation_id=reservation_id,
            calendar_id=calendar_id,
        )
        return reservation
