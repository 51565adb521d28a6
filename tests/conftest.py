# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["AUTHZ_DECISION_LOGGING"] = "true"
os.environ["LOG_LEVEL"] = "DEBUG"

from payconsole.main import app
from payconsole.rbac.registry import AuthorizationRegistry


def subject_headers(
    roles: list[str], user_type: str | None = None, subject_id: str = "user-1"
) -> dict[str, str]:
    """Build the identity headers the session gateway would forward."""
    headers = {"X-Subject-Id": subject_id, "X-Subject-Roles": ",".join(roles)}
    if user_type:
        headers["X-Subject-Type"] = user_type
    return headers


@pytest.fixture(autouse=True)
def reset_registry():
    """Give every test a freshly built registry."""
    AuthorizationRegistry.reset_instance()
    yield
    AuthorizationRegistry.reset_instance()


@pytest.fixture
def client():
    """Create a test client running the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Headers of a root user holding the super admin role."""
    return subject_headers(["Super Administrator"], "ROOT_USER", "root")


@pytest.fixture
def merchant_headers() -> dict[str, str]:
    """Headers of a merchant support agent."""
    return subject_headers(["Merchant Support"], "MERCHANT_USER", "merchant-1")


@pytest.fixture
def make_headers():
    """Factory for identity headers."""
    return subject_headers
