"""Organization API schemas (combined models/requests)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from reservations_api.api.core.messages import APIResponse, SearchResult


class OrganizationModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_by: str
    created: datetime
    is_suspended: bool
    is_deleted: bool


class OrganizationMembershipModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    organization_id: str
    user_id: str
    role_id: str


class OrganizationView(BaseModel):
    organization: OrganizationModel


class OrganizationCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)


class OrganizationUpdateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)


class OrganizationCreateData(BaseModel):
    organization: OrganizationModel
    organization_members: list[OrganizationMembershipModel]


OrganizationCreateResponse = APIResponse[OrganizationCreateData]
OrganizationSearchResponse = APIResponse[SearchResult[OrganizationView]]
OrganizationGetResponse = APIResponse[OrganizationView]
OrganizationUpdateResponse = APIResponse[OrganizationModel]
OrganizationDeleteResponse = APIResponse[OrganizationModel]
