"""Test factories for Reservations API models."""

from .base import AsyncSQLAlchemyModelFactory
from .users import TEST_PASSWORD, UserFactory
from .organizations import OrganizationFactory, OrganizationMembershipFactory
from .calendars import CalendarFactory, ReservationFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "TEST_PASSWORD",
    "UserFactory",
    "OrganizationFactory",
    "OrganizationMembershipFactory",
    "CalendarFactory",
    "ReservationFactory",
]
