"""Calendar API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from reservations_api.api.core.messages import APIResponse, SearchResult
from reservations_api.api.reservation.schemas import ReservationView


class CalendarModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    organization_id: str
    time_zone: str
    color: str | None = None
    is_public: bool
    is_deleted: bool
    default_location: str | None = None
    max_attendees: int
    min_attendees: int
    time_scale: int
    created_by: str
    created: datetime


class CalendarView(BaseModel):
    calendar: CalendarModel
    num_of_valid_reservations: int = 0
    reservations: list[ReservationView] | None = None


class CalendarCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    time_zone: str = Field(..., min_length=1, max_length=36)
    color: str | None = Field(None, max_length=12)
    is_public: bool = False
    default_location: str | None = None
    max_attendees: int = Field(0, ge=0)
    min_attendees: int = Field(0, ge=0)
    time_scale: int = Field(0, ge=0)


class CalendarUpdateRequest(CalendarCreateRequest):
    pass


CalendarCreateResponse = APIResponse[CalendarView]
CalendarSearchResponse = APIResponse[SearchResult[CalendarView]]
CalendarGetResponse = APIResponse[CalendarView]
CalendarUpdateResponse = APIResponse[CalendarModel]
CalendarDeleteResponse = APIResponse[CalendarModel]
