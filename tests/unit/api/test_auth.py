"""Authentication middleware and cross-cutting middleware tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import status
from httpx import AsyncClient
from jose import jwt

from reservations_api.api.core.constants import API_VERSION_HEADER, JWT_ALGORITHM
from reservations_api.api.core.messages import MessageCode
from reservations_api.utils.settings.auth import AuthSettings
from tests.utils.assertions import assert_authentication_error, assert_error_response


def make_token(user_id: str, **overrides) -> str:
    settings = AuthSettings()
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "jti": "test-jti",
        "iat": now,
        "exp": now + timedelta(hours=1),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
    }
    payload.update(overrides)
    secret = payload.pop("secret", settings.JWT_SECRET)
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


@pytest.mark.asyncio
async def test_missing_token_is_rejected(app, public_client: AsyncClient):
    response = await public_client.post(
        "/organization/search", json={"current_page": 1, "items_per_page": 10}
    )

    assert_authentication_error(response)
    assert response.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_non_bearer_scheme_is_rejected(app, public_client: AsyncClient):
    response = await public_client.get(
        "/organization/anything", headers={"Authorization": "Basic dXNlcjpwYXNz"}
    )

    assert_authentication_error(response, MessageCode.INVALID_TOKEN)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"exp": datetime.now(timezone.utc) - timedelta(minutes=5)},
        {"aud": "someone-else"},
        {"iss": "someone-else"},
        {"secret": "not-the-secret"},
    ],
    ids=["expired", "wrong-audience", "wrong-issuer", "wrong-secret"],
)
async def test_invalid_tokens_are_rejected(
    app, public_client: AsyncClient, test_user, overrides
):
    token = make_token(test_user.id, **overrides)

    response = await public_client.get(
        "/organization/anything", headers={"Authorization": f"Bearer {token}"}
    )

    assert_authentication_error(response, MessageCode.INVALID_TOKEN)


@pytest.mark.asyncio
async def test_token_for_unknown_user_is_rejected(app, public_client: AsyncClient):
    token = make_token("no-such-user")

    response = await public_client.get(
        "/organization/anything", headers={"Authorization": f"Bearer {token}"}
    )

    assert_authentication_error(response, MessageCode.AUTH_REQUIRED)


@pytest.mark.asyncio
async def test_valid_token_reaches_handler(
    app, public_client: AsyncClient, test_user
):
    token = make_token(test_user.id)

    response = await public_client.get(
        "/organization/anything", headers={"Authorization": f"Bearer {token}"}
    )

    assert_error_response(response, MessageCode.ORGANIZATION_NOT_FOUND, 404)


@pytest.mark.asyncio
async def test_responses_carry_request_id_and_security_headers(
    app, public_client: AsyncClient
):
    response = await public_client.get("/health/liveness")

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["X-Request-ID"]
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert API_VERSION_HEADER in response.headers


@pytest.mark.asyncio
async def test_oversized_payload_is_rejected(app, authorized_client: AsyncClient):
    response = await authorized_client.post(
        "/organization",
        content=b"{}",
        headers={
            "Content-Length": str(10 * 1024 * 1024),
            "Content-Type": "application/json",
        },
    )

    assert_error_response(response, MessageCode.PAYLOAD_TOO_LARGE, 413)


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(app, authorized_client: AsyncClient):
    response = await authorized_client.get("/no/such/route/here")

    assert_error_response(response, MessageCode.RESOURCE_NOT_FOUND, 404)
