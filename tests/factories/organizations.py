"""Factories for organizations and their memberships."""

import factory

from reservations_api.api.core.constants import ADMIN_ROLE_ID
from reservations_api.database.models import Organization, OrganizationMembership

from .base import AsyncSQLAlchemyModelFactory, IDFactory


class OrganizationFactory(AsyncSQLAlchemyModelFactory[Organization]):
    """Factory for creating Organization instances."""

    class Meta:
        model = Organization

    id = IDFactory()
    name = factory.Faker("company")
    created_by = IDFactory()
    is_suspended = False
    is_deleted = False


class OrganizationMembershipFactory(AsyncSQLAlchemyModelFactory[OrganizationMembership]):
    class Meta:
        model = OrganizationMembership

    id = IDFactory()
    role_id = ADMIN_ROLE_ID
