from dataclasses import dataclass, field
from datetime import datetime, timezone

from sqlalchemy import func, select

from reservations_api.api.core.exceptions.base import NotFoundError
from reservations_api.api.core.messages import MessageCode
from reservations_api.core.base import BaseService
from reservations_api.database.models import Calendar, Reservation
from reservations_api.modules.organization.use_cases import OrganizationService
from reservations_api.modules.ownership import verify_ownership
from reservations_api.modules.search.pagination import Page, paginate_query

# Fields replaced wholesale by an update request
CALENDAR_MUTABLE_FIELDS = (
    "name",
    "description",
    "color",
    "default_location",
    "is_public",
    "max_attendees",
    "min_attendees",
    "time_scale",
    "time_zone",
)


@dataclass
class CalendarDetails:
    """A calendar annotated with its upcoming reservation count."""

    calendar: Calendar
    num_of_valid_reservations: int = 0
    reservations: list[Reservation] | None = field(default=None)


class CalendarService(BaseService):
    async def create_calendar(
        self, organization_id: str, user_id: str, **calendar_data
    ) -> Calendar:
        """Create a calendar under an existing organization."""
        organization = await OrganizationService(self.db).require_organization(
            organization_id
        )

        calendar = Calendar(
            organization_id=organization.id,
            created_by=user_id,
            **{key: calendar_data.get(key) for key in CALENDAR_MUTABLE_FIELDS},
        )
        self.db.add(calendar)
        await self.db.commit()
        await self.db.refresh(calendar)

        self.logger.info(
            "Calendar created",
            calendar_id=calendar.id,
            organization_id=organization_id,
        )
        return calendar

    async def count_valid_reservations(
        self, calendar_id: str, now: datetime | None = None
    ) -> int:
        """Count non-deleted reservations starting strictly after ``now``."""
        now = now or datetime.now(timezone.utc)
        stmt = (
            select(func.count())
            .select_from(Reservation)
            .where(Reservation.calendar_id == calendar_id)
            .where(Reservation.start_from > now)
            .where(Reservation.is_deleted.is_(False))
        )
        return (await self.db.execute(stmt)).scalar_one()

    async def search_calendars(
        self,
        organization_id: str,
        keyword: str | None,
        current_page: int,
        items_per_page: int,
        sort: str | None = None,
    ) -> Page[CalendarDetails]:
        page = await paginate_query(
            self.db,
            select(Calendar).where(Calendar.organization_id == organization_id),
            Calendar.name,
            keyword=keyword,
            current_page=current_page,
            items_per_page=items_per_page,
            sort=sort,
        )

        now = datetime.now(timezone.utc)
        # One count query per returned calendar
        counts = {
            calendar.id: await self.count_valid_reservations(calendar.id, now)
            for calendar in page.items
        }
        return page.map(
            lambda calendar: CalendarDetails(
                calendar=calendar, num_of_valid_reservations=counts[calendar.id]
            )
        )

    async def get_calendar(
        self, organization_id: str, calendar_id: str
    ) -> CalendarDetails:
        stmt = select(Calendar).where(
            Calendar.id == calendar_id, Calendar.organization_id == organization_id
        )
        calendar = (await self.db.execute(stmt)).scalar_one_or_none()
        if not calendar:
            raise NotFoundError(MessageCode.CALENDAR_NOT_FOUND)

        reservations_stmt = (
            select(Reservation)
            .where(Reservation.calendar_id == calendar.id)
            .order_by(Reservation.start_from)
        )
        reservations = (await self.db.execute(reservations_stmt)).scalars().all()

        return CalendarDetails(
            calendar=calendar,
            num_of_valid_reservations=await self.count_valid_reservations(
                calendar.id
            ),
            reservations=list(reservations),
        )

    async def update_calendar(
        self, organization_id: str, calendar_id: str, **calendar_data
    ) -> Calendar:
        calendar = verify_ownership(
            await self.db.get(Calendar, calendar_id),
            organization_id,
            not_found_code=MessageCode.CALENDAR_NOT_FOUND,
        )

        for key in CALENDAR_MUTABLE_FIELDS:
            setattr(calendar, key, calendar_data.get(key))

        await self.db.commit()
        await self.db.refresh(calendar)
        return calendar

    async def delete_calendar(self, organization_id: str, calendar_id: str) -> Calendar:
        calendar = verify_ownership(
            await self.db.get(Calendar, calendar_id),
            organization_id,
            not_found_code=MessageCode.CALENDAR_NOT_FOUND,
        )

        await self.db.delete(calendar)
        await self.db.commit()

        self.logger.info(
            "Calendar deleted",
            calendar_id=calendar_id,
            organization_id=organization_id,
        )
        return calendar
