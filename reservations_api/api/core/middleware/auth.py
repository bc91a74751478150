import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from jose import JWTError

from reservations_api.api.core.constants import SKIP_AUTH_PATHS
from reservations_api.api.core.exceptions.base import UnauthorizedError
from reservations_api.api.core.messages import MessageCode
from reservations_api.modules.user.tokens import decode_access_token
from reservations_api.utils.path_helpers import path_matches

logger = structlog.get_logger(__name__)


def _reject(exc: UnauthorizedError) -> JSONResponse:
    # Exceptions raised here would bypass the app's exception handlers
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response_dict(),
        headers=exc.headers,
    )


async def auth_middleware(request: Request, call_next):
    """
    Resolve the bearer token once per request.

    On success the caller's id is stored on ``request.state.user_id``; the
    ``CurrentUserAuthDep`` dependency turns it into a user record for handlers.
    """
    request.state.user_id = None

    if request.method == "OPTIONS" or path_matches(request.url.path, SKIP_AUTH_PATHS):
        logger.debug("Skipping auth for path", path=request.url.path)
        return await call_next(request)

    authorization = request.headers.get("Authorization", "")
    if not authorization:
        logger.debug("No authentication provided - rejecting request")
        return _reject(
            UnauthorizedError(
                MessageCode.AUTH_REQUIRED,
                {"description": "Provide an 'Authorization: Bearer <token>' header"},
            )
        )

    auth_parts = authorization.split(" ")
    if len(auth_parts) != 2 or auth_parts[0].lower() != "bearer":
        logger.debug(
            "Invalid authorization header format", auth_parts_count=len(auth_parts)
        )
        return _reject(
            UnauthorizedError(
                MessageCode.INVALID_TOKEN,
                {"description": "Authorization header must be 'Bearer <token>'"},
            )
        )

    try:
        payload = decode_access_token(auth_parts[1])
    except JWTError as e:
        logger.info("JWT decoding failed", error=str(e))
        return _reject(
            UnauthorizedError(
                MessageCode.INVALID_TOKEN,
                {"description": "Invalid or expired authentication token"},
            )
        )

    user_id = payload.get("sub")
    if not user_id:
        return _reject(UnauthorizedError(MessageCode.INVALID_TOKEN))

    request.state.user_id = user_id
    structlog.contextvars.bind_contextvars(user_id=user_id)

    return await call_next(request)
