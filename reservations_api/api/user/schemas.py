"""User API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from reservations_api.api.core.messages import APIResponse


class UserModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_name: str
    email: str
    name: str | None = None
    email_confirmed: bool


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=256)
    email: str = Field(..., max_length=256, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(..., min_length=6, max_length=72)
    name: str | None = None


class TokenData(BaseModel):
    token: str
    expires_at: datetime


LoginResponse = APIResponse[TokenData]
RegisterResponse = APIResponse[UserModel]
