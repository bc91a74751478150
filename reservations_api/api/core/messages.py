"""Centralized message codes and default messages for API responses."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from reservations_api.api.core.constants import MAX_PAGE_VALUE


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    SUCCESS = "SUCCESS"
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"

    # Authentication & Authorization
    AUTH_REQUIRED = "AUTH_REQUIRED"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    OWNERSHIP_MISMATCH = "OWNERSHIP_MISMATCH"

    # User management
    USER_REGISTERED = "USER_REGISTERED"
    USER_LOGGED_IN = "USER_LOGGED_IN"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"

    # Organization management
    ORGANIZATION_CREATED = "ORGANIZATION_CREATED"
    ORGANIZATION_UPDATED = "ORGANIZATION_UPDATED"
    ORGANIZATION_DELETED = "ORGANIZATION_DELETED"
    ORGANIZATION_NOT_FOUND = "ORGANIZATION_NOT_FOUND"

    # Calendar management
    CALENDAR_CREATED = "CALENDAR_CREATED"
    CALENDAR_UPDATED = "CALENDAR_UPDATED"
    CALENDAR_DELETED = "CALENDAR_DELETED"
    CALENDAR_NOT_FOUND = "CALENDAR_NOT_FOUND"

    # Reservation management
    RESERVATION_CREATED = "RESERVATION_CREATED"
    RESERVATION_UPDATED = "RESERVATION_UPDATED"
    RESERVATION_DELETED = "RESERVATION_DELETED"
    RESERVATION_NOT_FOUND = "RESERVATION_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    CONFLICT = "CONFLICT"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.SUCCESS: "Operation completed successfully",
    MessageCode.CREATED: "Resource created successfully",
    MessageCode.UPDATED: "Resource updated successfully",
    MessageCode.DELETED: "Resource deleted successfully",
    # Authentication & Authorization
    MessageCode.AUTH_REQUIRED: "Authentication required",
    MessageCode.UNAUTHORIZED: "Unauthorized",
    MessageCode.INVALID_TOKEN: "Invalid authentication token",
    MessageCode.INVALID_CREDENTIALS: "Invalid credentials",
    MessageCode.OWNERSHIP_MISMATCH: "Resource does not belong to the requested scope",
    # User management
    MessageCode.USER_REGISTERED: "User registered and email confirmed",
    MessageCode.USER_LOGGED_IN: "Login successful",
    MessageCode.USER_NOT_FOUND: "User not found",
    MessageCode.USER_ALREADY_EXISTS: "User name is already taken",
    # Organization management
    MessageCode.ORGANIZATION_CREATED: "Organization created successfully",
    MessageCode.ORGANIZATION_UPDATED: "Organization updated successfully",
    MessageCode.ORGANIZATION_DELETED: "Organization deleted successfully",
    MessageCode.ORGANIZATION_NOT_FOUND: "Organization not found",
    # Calendar management
    MessageCode.CALENDAR_CREATED: "Calendar created successfully",
    MessageCode.CALENDAR_UPDATED: "Calendar updated successfully",
    MessageCode.CALENDAR_DELETED: "Calendar deleted successfully",
    MessageCode.CALENDAR_NOT_FOUND: "Calendar not found",
    # Reservation management
    MessageCode.RESERVATION_CREATED: "Reservation created successfully",
    MessageCode.RESERVATION_UPDATED: "Reservation updated successfully",
    MessageCode.RESERVATION_DELETED: "Reservation deleted successfully",
    MessageCode.RESERVATION_NOT_FOUND: "Reservation not found",
    # Validation errors
    MessageCode.VALIDATION_ERROR: "Validation failed",
    MessageCode.INVALID_INPUT: "Invalid input provided",
    MessageCode.INVALID_PAGINATION: "Invalid pagination parameters",
    MessageCode.PAYLOAD_TOO_LARGE: "Request payload too large",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.RESOURCE_NOT_FOUND: "Resource not found",
    MessageCode.BAD_REQUEST: "Bad request",
    MessageCode.CONFLICT: "Data integrity constraint violated",
}

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Base API response model with consistent structure and proper typing."""

    message_code: MessageCode
    message: str
    data: T | None = None

    @classmethod
    def success(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create a success response."""
        return cls(
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Success"),
            data=data,
        )

    @classmethod
    def error(
        cls,
        message_code: MessageCode,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create an error response."""
        return cls(
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Error occurred"),
            data=data,
        )


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")


class SearchRequest(BaseModel):
    """Common body of every ``/search`` endpoint.

    ``sort`` is echoed back in the result and not applied.
    """

    keyword: str | None = None
    sort: str | None = None
    current_page: int = Field(..., le=MAX_PAGE_VALUE)
    items_per_page: int = Field(..., le=MAX_PAGE_VALUE)


class SearchResult(BaseModel, Generic[T]):
    """Generic search page wrapper."""

    keyword: str | None = None
    sort: str | None = None
    current_page: int
    items_per_page: int
    total_items: int
    total_pages: int
    items: list[T]
