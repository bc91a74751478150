"""Calendar model."""

from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reservations_api.api.core.constants import ID_LENGTH
from .base import Base, UTCDateTime, generate_id, utc_now


class Calendar(Base):
    __tablename__ = "calendars"

    id: Mapped[str] = mapped_column(
        String(ID_LENGTH), primary_key=True, default=generate_id
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    organization_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    time_zone: Mapped[str] = mapped_column(String(36), nullable=False)
    color: Mapped[str | None] = mapped_column(String(12), nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    default_location: Mapped[str | None] = mapped_column(String, nullable=True)
    max_attendees: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    min_attendees: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    # Slot granularity in minutes
    time_scale: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_by: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False)
    created: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now)

    organization = relationship("Organization", back_populates="calendars")
    reservations = relationship(
        "Reservation",
        back_populates="calendar",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
