"""Tests for auth skip-path matching."""

import pytest

from reservations_api.api.core.constants import SKIP_AUTH_PATHS
from reservations_api.utils.path_helpers import path_matches


@pytest.mark.parametrize(
    "path", ["/login", "/login/", "/register", "/health", "/health/", "/docs"]
)
def test_public_paths_match(path):
    assert path_matches(path, SKIP_AUTH_PATHS)


@pytest.mark.parametrize(
    "path", ["/organization", "/login/extra", "/healthz", "/org/calendar"]
)
def test_protected_paths_do_not_match(path):
    assert not path_matches(path, SKIP_AUTH_PATHS)


def test_allowed_path_with_trailing_slash():
    assert path_matches("/status", {"/status/"})
