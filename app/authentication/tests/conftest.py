"""
Test configuration and fixtures for authentication tests.

This module provides:
- Reusable user fixtures
- Test clients for anonymous and signed-in requests

Usage:
    def test_example(authenticated_client):
        response = authenticated_client.get("/accounts/manage/")
        assert response.status_code == 200
"""

import pytest
from django.test import Client

from authentication.models import User
from authentication.tests.factories import DEFAULT_PASSWORD, UserFactory

# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def password():
    """Password used by UserFactory unless overridden."""
    return DEFAULT_PASSWORD


@pytest.fixture
def user(db):
    """Create a basic active user with known names."""
    return UserFactory(first_name="Ada", last_name="Lovelace")


@pytest.fixture
def superuser(db):
    """Create a superuser with admin privileges."""
    return User.objects.create_superuser(
        email="admin@example.com",
        password="AdminPass123!",
        first_name="Grace",
        last_name="Hopper",
    )


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def anonymous_client():
    """Client with no session."""
    return Client()


@pytest.fixture
def authenticated_client(user):
    """Client signed in as the default user fixture."""
    client = Client()
    client.force_login(user)
    return client


@pytest.fixture
def signup_data():
    """Valid registration form data."""
    return {
        "email": "new.user@example.com",
        "password1": "Str0ng-Passphrase!",
        "password2": "Str0ng-Passphrase!",
        "first_name": "Katherine",
        "last_name": "Johnson",
    }
