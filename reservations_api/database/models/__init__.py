"""Database models for the reservations API."""

from .base import Base
from .calendars import Calendar
from .organizations import Organization
from .reservations import Reservation
from .roles import OrganizationMembership, OrganizationRole
from .users import User

__all__ = [
    # Base
    "Base",
    # Models
    "User",
    "Organization",
    "OrganizationRole",
    "OrganizationMembership",
    "Calendar",
    "Reservation",
]
