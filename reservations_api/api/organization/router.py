"""Organization domain router."""

from fastapi import APIRouter

from reservations_api.api.core.dependencies import (
    CurrentUserAuthDep,
    OrganizationServiceDep,
)
from reservations_api.api.core.messages import (
    APIResponse,
    MessageCode,
    SearchRequest,
    SearchResult,
)
from reservations_api.api.organization.schemas import (
    OrganizationCreateData,
    OrganizationCreateRequest,
    OrganizationCreateResponse,
    OrganizationDeleteResponse,
    OrganizationGetResponse,
    OrganizationMembershipModel,
    OrganizationModel,
    OrganizationSearchResponse,
    OrganizationUpdateRequest,
    OrganizationUpdateResponse,
    OrganizationView,
)

router = APIRouter(
    prefix="/organization",
    tags=["organizations"],
)


def _to_view(organization) -> OrganizationView:
    return OrganizationView(organization=OrganizationModel.model_validate(organization))


@router.post("", response_model=OrganizationCreateResponse)
async def create_organization(
    organization_data: OrganizationCreateRequest,
    org_service: OrganizationServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationCreateResponse:
    """Create an organization; the caller becomes its admin."""
    organization, members = await org_service.create_organization(
        name=organization_data.name,
        user_id=current_user.user_id,
    )

    return APIResponse.success(
        message_code=MessageCode.ORGANIZATION_CREATED,
        data=OrganizationCreateData(
            organization=OrganizationModel.model_validate(organization),
            organization_members=[
                OrganizationMembershipModel.model_validate(member)
                for member in members
            ],
        ),
    )


@router.post("/search", response_model=OrganizationSearchResponse)
async def search_organizations(
    search: SearchRequest,
    org_service: OrganizationServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationSearchResponse:
    page = await org_service.search_organizations(
        keyword=search.keyword,
        current_page=search.current_page,
        items_per_page=search.items_per_page,
        sort=search.sort,
    )
    result = page.map(_to_view)
    return APIResponse.success(data=SearchResult[OrganizationView](**vars(result)))


@router.get("/{organization_id}", response_model=OrganizationGetResponse)
async def get_organization(
    organization_id: str,
    org_service: OrganizationServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationGetResponse:
    organization = await org_service.require_organization(organization_id)
    return APIResponse.success(data=_to_view(organization))


@router.put("/{organization_id}", response_model=OrganizationUpdateResponse)
async def update_organization(
    organization_id: str,
    organization_data: OrganizationUpdateRequest,
    org_service: OrganizationServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationUpdateResponse:
    organization = await org_service.update_organization(
        organization_id, name=organization_data.name
    )
    return APIResponse.success(
        message_code=MessageCode.ORGANIZATION_UPDATED,
        data=OrganizationModel.model_validate(organization),
    )


@router.delete("/{organization_id}", response_model=OrganizationDeleteResponse)
async def delete_organization(
    organization_id: str,
    org_service: OrganizationServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationDeleteResponse:
    """Delete an organization together with its calendars, reservations and memberships."""
    organization = await org_service.delete_organization(organization_id)
    return APIResponse.success(
        message_code=MessageCode.ORGANIZATION_DELETED,
        data=OrganizationModel.model_validate(organization),
    )
