"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from accounts.sessions import create_session
from tests import factories


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user():
    return factories.create_user()


@pytest.fixture
def auth_client(user) -> APIClient:
    """Client carrying a valid bearer token for `user`."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {create_session(user)}")
    return client
