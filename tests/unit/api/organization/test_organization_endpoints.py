"""Organization endpoint tests."""

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from reservations_api.api.core.constants import ADMIN_ROLE_ID
from reservations_api.api.core.messages import MessageCode
from reservations_api.database.models import (
    Calendar,
    Organization,
    OrganizationMembership,
    Reservation,
)
from tests.utils.assertions import (
    ResponseHelper,
    assert_error_response,
    assert_not_found_error,
    assert_success_response,
    assert_validation_error,
)


@pytest.mark.asyncio
async def test_create_organization_grants_creator_admin(
    app, authorized_client: AsyncClient, test_user, db_session: AsyncSession
):
    response = await authorized_client.post("/organization", json={"name": "Acme"})

    data = assert_success_response(
        response,
        MessageCode.ORGANIZATION_CREATED,
        data_assertions={"organization.name": "Acme"},
    )
    organization = data["organization"]
    assert organization["created_by"] == test_user.id
    assert organization["is_suspended"] is False
    assert organization["is_deleted"] is False
    assert len(organization["id"]) == 36

    members = data["organization_members"]
    assert len(members) == 1
    assert members[0]["role_id"] == ADMIN_ROLE_ID
    assert members[0]["user_id"] == test_user.id
    assert members[0]["organization_id"] == organization["id"]

    stored = await db_session.get(Organization, organization["id"])
    assert stored is not None


@pytest.mark.asyncio
async def test_create_organization_requires_name(app, authorized_client: AsyncClient):
    response = await authorized_client.post("/organization", json={})

    assert_validation_error(response, fields=["name"])


@pytest.mark.asyncio
async def test_create_organization_requires_authentication(
    app, public_client: AsyncClient, db_session: AsyncSession
):
    response = await public_client.post("/organization", json={"name": "Acme"})

    assert_error_response(response, MessageCode.AUTH_REQUIRED, 401)
    count = (
        await db_session.execute(select(func.count()).select_from(Organization))
    ).scalar_one()
    assert count == 0


@pytest.mark.asyncio
async def test_get_organization(
    app, authorized_client: AsyncClient, test_organization: Organization
):
    response = await authorized_client.get(f"/organization/{test_organization.id}")

    assert_success_response(
        response,
        data_assertions={
            "organization.id": test_organization.id,
            "organization.name": "Test Organization",
        },
    )


@pytest.mark.asyncio
async def test_get_missing_organization(app, authorized_client: AsyncClient):
    response = await authorized_client.get("/organization/does-not-exist")

    assert_not_found_error(response, "organization")


@pytest.mark.asyncio
async def test_update_organization_replaces_name(
    app,
    authorized_client: AsyncClient,
    test_organization: Organization,
    db_session: AsyncSession,
):
    response = await authorized_client.put(
        f"/organization/{test_organization.id}", json={"name": "Renamed"}
    )

    assert_success_response(
        response, MessageCode.ORGANIZATION_UPDATED, data_assertions={"name": "Renamed"}
    )
    stored = await db_session.get(
        Organization, test_organization.id, populate_existing=True
    )
    assert stored.name == "Renamed"


@pytest.mark.asyncio
async def test_update_missing_organization(app, authorized_client: AsyncClient):
    response = await authorized_client.put(
        "/organization/does-not-exist", json={"name": "Renamed"}
    )

    assert_not_found_error(response, "organization")


@pytest.mark.asyncio
async def test_delete_organization_cascades(
    app,
    authorized_client: AsyncClient,
    test_user,
    test_organization: Organization,
    test_calendar: Calendar,
    membership_factory,
    reservation_factory,
    db_session: AsyncSession,
):
    await membership_factory.create_async(
        db_session, organization_id=test_organization.id, user_id=test_user.id
    )
    await reservation_factory.create_async(
        db_session,
        calendar_id=test_calendar.id,
        organization_id=test_organization.id,
    )

    response = await authorized_client.delete(f"/organization/{test_organization.id}")

    assert_success_response(
        response,
        MessageCode.ORGANIZATION_DELETED,
        data_assertions={"id": test_organization.id, "name": "Test Organization"},
    )

    db_session.expunge_all()
    for model in (Organization, OrganizationMembership, Calendar, Reservation):
        count = (
            await db_session.execute(select(func.count()).select_from(model))
        ).scalar_one()
        assert count == 0, f"{model.__name__} rows survived the delete"


@pytest.mark.asyncio
async def test_delete_missing_organization(app, authorized_client: AsyncClient):
    response = await authorized_client.delete("/organization/does-not-exist")

    assert_not_found_error(response, "organization")


class TestOrganizationSearch:
    @pytest.mark.asyncio
    async def test_search_pages_through_all_organizations(
        self,
        app,
        authorized_client: AsyncClient,
        organization_factory,
        db_session: AsyncSession,
    ):
        for i in range(5):
            await organization_factory.create_async(db_session, name=f"Org {i}")

        response = await authorized_client.post(
            "/organization/search",
            json={"current_page": 2, "items_per_page": 2, "sort": "name"},
        )

        items = ResponseHelper.assert_search_page(
            response, expected_total=5, expected_page=2, expected_total_pages=3
        )
        assert len(items) == 2
        assert all("organization" in item for item in items)
        assert response.json()["data"]["sort"] == "name"

    @pytest.mark.asyncio
    async def test_search_filters_by_keyword(
        self,
        app,
        authorized_client: AsyncClient,
        organization_factory,
        db_session: AsyncSession,
    ):
        await organization_factory.create_async(db_session, name="Acme Rockets")
        await organization_factory.create_async(db_session, name="Globex")

        response = await authorized_client.post(
            "/organization/search",
            json={"keyword": "Acme", "current_page": 1, "items_per_page": 10},
        )

        items = ResponseHelper.assert_search_page(response, expected_total=1)
        assert items[0]["organization"]["name"] == "Acme Rockets"
        assert response.json()["data"]["keyword"] == "Acme"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "current_page, items_per_page", [(0, 10), (1, 0), (-3, 5)]
    )
    async def test_search_rejects_non_positive_page_params(
        self, app, authorized_client: AsyncClient, current_page, items_per_page
    ):
        response = await authorized_client.post(
            "/organization/search",
            json={"current_page": current_page, "items_per_page": items_per_page},
        )

        assert_error_response(
            response, MessageCode.INVALID_PAGINATION, status.HTTP_400_BAD_REQUEST
        )

    @pytest.mark.asyncio
    async def test_search_requires_page_params(
        self, app, authorized_client: AsyncClient
    ):
        response = await authorized_client.post("/organization/search", json={})

        assert_validation_error(response, fields=["current_page", "items_per_page"])
