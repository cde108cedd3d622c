"""
Test configuration and fixtures for notification tests.

This module provides:
- Deterministic NOTIFICATIONS settings (host, app name)
- User fixtures (recipient, actor, bystander)
- Workspace fixtures (public and private repositories)
- API client helpers for authenticated requests

Usage:
    def test_example(user, authenticated_client):
        response = authenticated_client.get('/api/v1/notifications/')
        assert response.status_code == 200
"""

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from authentication.tests.factories import UserFactory
from notifications.conf import NotificationConfig
from workspace.models import Privacy
from workspace.tests.factories import GroupFactory, RepositoryFactory

HOST = "https://docs.example.com"


@pytest.fixture(autouse=True)
def notification_settings(settings):
    """Pin host and app name so rendered links are predictable."""
    settings.NOTIFICATIONS = {
        **settings.NOTIFICATIONS,
        "HOST": HOST,
        "APP_NAME": "BlueDoc",
        "ABILITY_CHECKER": "workspace.abilities.can_read",
    }
    settings.DEFAULT_FROM_EMAIL = "noreply@example.com"
    return settings.NOTIFICATIONS


@pytest.fixture
def config(notification_settings):
    return NotificationConfig.from_settings()


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def user(db):
    """Create a user to receive notifications."""
    return UserFactory(slug="jason", name="Jason")


@pytest.fixture
def other_user(db):
    """Create another user for multi-user tests."""
    return UserFactory()


@pytest.fixture
def actor_user(db):
    """Create a user to act as notification actor (trigger)."""
    return UserFactory(name="Alice")


# =============================================================================
# Workspace Fixtures
# =============================================================================


@pytest.fixture
def group(db):
    return GroupFactory()


@pytest.fixture
def public_repo(group):
    return RepositoryFactory(group=group, privacy=Privacy.PUBLIC)


@pytest.fixture
def private_repo(group):
    return RepositoryFactory(group=group, privacy=Privacy.PRIVATE)


# =============================================================================
# Delivery Fixtures
# =============================================================================


@pytest.fixture
def mock_email_task(mocker):
    """Patch the email task so dispatch tests only see enqueue calls."""
    return mocker.patch("notifications.tasks.send_notification_email.delay")


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def authenticated_client(user):
    """API client authenticated with JWT token for the default user fixture."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {refresh.access_token}")
    return client
