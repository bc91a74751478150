"""Tenant scoping checks run before any update or delete."""

from typing import TypeVar

from reservations_api.api.core.exceptions.base import NotFoundError, UnauthorizedError
from reservations_api.api.core.messages import MessageCode

T = TypeVar("T")


def verify_ownership(
    resource: T | None,
    organization_id: str,
    calendar_id: str | None = None,
    not_found_code: MessageCode = MessageCode.RESOURCE_NOT_FOUND,
) -> T:
    """Check that a fetched resource belongs to the organization (and calendar) in the path.

    Missing resources raise ``NotFoundError``; any scope mismatch raises
    ``UnauthorizedError``. Returns the resource so callers can keep using it.
    """
    if resource is None:
        raise NotFoundError(not_found_code)

    if resource.organization_id != organization_id:
        raise UnauthorizedError(
            MessageCode.OWNERSHIP_MISMATCH,
            {"description": "Resource does not belong to the specified organization."},
        )

    if calendar_id is not None and resource.calendar_id != calendar_id:
        raise UnauthorizedError(
            MessageCode.OWNERSHIP_MISMATCH,
            {"description": "Resource does not belong to the specified calendar."},
        )

    return resource
