from sqlalchemy import select

from reservations_api.api.core.constants import ADMIN_ROLE_ID
from reservations_api.api.core.exceptions.base import NotFoundError
from reservations_api.api.core.messages import MessageCode
from reservations_api.core.base import BaseService
from reservations_api.database.models import Organization, OrganizationMembership
from reservations_api.modules.search.pagination import Page, paginate_query


class OrganizationService(BaseService):
    async def get_organization_by_id(
        self, organization_id: str
    ) -> Organization | None:
        return await self.db.get(Organization, organization_id)

    async def require_organization(self, organization_id: str) -> Organization:
        organization = await self.get_organization_by_id(organization_id)
        if not organization:
            raise NotFoundError(
                MessageCode.ORGANIZATION_NOT_FOUND,
                {"description": "Organization not found"},
            )
        return organization

    async def create_organization(
        self, name: str, user_id: str
    ) -> tuple[Organization, list[OrganizationMembership]]:
        """Create an organization and grant its creator the admin role.

        Both rows are written by a single commit.
        """
        organization = Organization(name=name, created_by=user_id)
        self.db.add(organization)
        await self.db.flush()

        self.db.add(
            OrganizationMembership(
                organization_id=organization.id,
                user_id=user_id,
                role_id=ADMIN_ROLE_ID,
            )
        )
        await self.db.commit()
        await self.db.refresh(organization)

        self.logger.info(
            "Organization created",
            organization_id=organization.id,
            created_by=user_id,
        )
        members = await self.list_memberships(organization.id)
        return organization, members

    async def list_memberships(
        self, organization_id: str
    ) -> list[OrganizationMembership]:
        stmt = select(OrganizationMembership).where(
            OrganizationMembership.organization_id == organization_id
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def search_organizations(
        self,
        keyword: str | None,
        current_page: int,
        items_per_page: int,
        sort: str | None = None,
    ) -> Page[Organization]:
        return await paginate_query(
            self.db,
            select(Organization),
            Organization.name,
            keyword=keyword,
            current_page=current_page,
            items_per_page=items_per_page,
            sort=sort,
        )

    async def update_organization(self, organization_id: str, name: str) -> Organization:
        organization = await self.require_organization(organization_id)
        organization.name = name
        await self.db.commit()
        await self.db.refresh(organization)
        return organization

    async def delete_organization(self, organization_id: str) -> Organization:
        """Hard-delete an organization; calendars, reservations and memberships go with it."""
        organization = await self.require_organization(organization_id)
        await self.db.delete(organization)
        await self.db.commit()

        self.logger.info("Organization deleted", organization_id=organization_id)
        return organization
