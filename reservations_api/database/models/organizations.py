"""Organization model."""

from datetime import datetime

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reservations_api.api.core.constants import ID_LENGTH
from .base import Base, UTCDateTime, generate_id, utc_now


class Organization(Base):
    __tablename__ = "organizations"

    id: Mapped[str] = mapped_column(
        String(ID_LENGTH), primary_key=True, default=generate_id
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    created_by: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False)
    created: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now)
    is_suspended: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Children are removed by the database (ON DELETE CASCADE)
    memberships = relationship(
        "OrganizationMembership",
        back_populates="organization",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    calendars = relationship(
        "Calendar",
        back_populates="organization",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
