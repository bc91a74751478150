"""Reservation model."""

from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reservations_api.api.core.constants import ID_LENGTH
from .base import Base, UTCDateTime, generate_id, utc_now


class Reservation(Base):
    __tablename__ = "reservations"

    id: Mapped[str] = mapped_column(
        String(ID_LENGTH), primary_key=True, default=generate_id
    )
    calendar_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("calendars.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Denormalized from the calendar for tenant-scoped queries
    organization_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(String(36), nullable=True)
    cart_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    start_from: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    is_whole_day: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    booker_id: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False)
    status: Mapped[str] = mapped_column(String(36), nullable=False)
    under_name: Mapped[str | None] = mapped_column(String, nullable=True)
    created: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    deleted: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    calendar = relationship("Calendar", back_populates="reservations")
