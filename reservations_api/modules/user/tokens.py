"""Bearer token issuance and verification."""

import uuid
from datetime import datetime, timedelta, timezone

from jose import jwt

from reservations_api.api.core.constants import JWT_ALGORITHM
from reservations_api.utils.settings.auth import AuthSettings


def create_access_token(user_id: str) -> tuple[str, datetime]:
    """Issue a signed token carrying the user id and a random token id."""
    settings = AuthSettings()
    issued_at = datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(days=settings.JWT_EXPIRE_DAYS)

    payload = {
        "sub": user_id,
        "jti": str(uuid.uuid4()),
        "iat": issued_at,
        "exp": expires_at,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
    }
    token = jwt.encode(payload, settings.JWT_SECRET, algorithm=JWT_ALGORITHM)
    return token, expires_at


def decode_access_token(token: str) -> dict:
    """Verify signature, expiry, issuer and audience. Raises ``JWTError`` on failure."""
    settings = AuthSettings()
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
    )
