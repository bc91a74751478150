"""Login and registration endpoints."""

from fastapi import APIRouter

from reservations_api.api.core.dependencies import UserManagementServiceDep
from reservations_api.api.core.exceptions.base import UnauthorizedError
from reservations_api.api.core.messages import APIResponse, MessageCode
from reservations_api.api.user.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenData,
    UserModel,
)
from reservations_api.modules.user.tokens import create_access_token

router = APIRouter(tags=["users"])


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    user_service: UserManagementServiceDep,
) -> LoginResponse:
    """Exchange a user name and password for a bearer token."""
    user = await user_service.authenticate(credentials.username, credentials.password)
    if not user:
        # Same response for unknown user and wrong password
        raise UnauthorizedError(MessageCode.INVALID_CREDENTIALS)

    token, expires_at = create_access_token(user.id)
    return APIResponse.success(
        message_code=MessageCode.USER_LOGGED_IN,
        data=TokenData(token=token, expires_at=expires_at),
    )


@router.post("/register", response_model=RegisterResponse)
async def register(
    registration: RegisterRequest,
    user_service: UserManagementServiceDep,
) -> RegisterResponse:
    user = await user_service.register_user(
        user_name=registration.username,
        email=registration.email,
        password=registration.password,
        name=registration.name,
    )
    return APIResponse.success(
        message_code=MessageCode.USER_REGISTERED,
        data=UserModel.model_validate(user),
    )
