from sqlalchemy import select

from reservations_api.api.core.constants import DEFAULT_ROLES
from reservations_api.core.base import BaseService
from reservations_api.database.models import OrganizationRole


class RoleService(BaseService):
    async def list_roles(self) -> list[OrganizationRole]:
        result = await self.db.execute(select(OrganizationRole))
        return list(result.scalars().all())

    async def ensure_default_roles(self) -> list[OrganizationRole]:
        """Insert any missing default roles. Safe to call on every startup."""
        existing = {role.id for role in await self.list_roles()}
        created = []
        for role_id, name in DEFAULT_ROLES.items():
            if role_id in existing:
                continue
            role = OrganizationRole(id=role_id, name=name)
            self.db.add(role)
            created.append(role)

        if created:
            await self.db.commit()
            self.logger.info(
                "Seeded default organization roles",
                roles=[role.id for role in created],
            )
        return created
