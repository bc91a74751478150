"""Reservation API schemas."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, model_validator

from reservations_api.api.core.constants import ID_LENGTH
from reservations_api.api.core.messages import APIResponse, SearchResult


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ReservationModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    calendar_id: str
    organization_id: str
    name: str
    description: str | None = None
    color: str | None = None
    cart_id: str | None = None
    start_from: datetime
    end_at: datetime
    is_whole_day: bool
    booker_id: str
    status: str
    under_name: str | None = None
    created: datetime
    is_deleted: bool
    deleted: datetime | None = None


class ReservationView(BaseModel):
    reservation: ReservationModel


class ReservationCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    color: str | None = Field(None, max_length=36)
    cart_id: str | None = Field(None, max_length=36)
    start_from: datetime
    end_at: datetime
    is_whole_day: bool = False
    status: str = Field(..., min_length=1, max_length=36)
    under_name: str | None = None

    @model_validator(mode="after")
    def check_time_range(self):
        if _as_utc(self.end_at) < _as_utc(self.start_from):
            raise ValueError("end_at must not be before start_from")
        return self


class ReservationUpdateRequest(ReservationCreateRequest):
    booker_id: str = Field(..., min_length=1, max_length=ID_LENGTH)
    is_deleted: bool = False
    deleted: datetime | None = None


ReservationCreateResponse = APIResponse[ReservationView]
ReservationSearchResponse = APIResponse[SearchResult[ReservationView]]
ReservationGetResponse = APIResponse[ReservationView]
ReservationUpdateResponse = APIResponse[ReservationModel]
ReservationDeleteResponse = APIResponse[ReservationModel]
