"""
Test configuration and fixtures for workspace tests.
"""

import pytest

from authentication.tests.factories import UserFactory
from workspace.models import Privacy
from workspace.tests.factories import GroupFactory, RepositoryFactory


@pytest.fixture
def user(db):
    return UserFactory()


@pytest.fixture
def group(db):
    return GroupFactory()


@pytest.fixture
def public_repo(group):
    return RepositoryFactory(group=group, privacy=Privacy.PUBLIC)


@pytest.fixture
def private_repo(group):
    return RepositoryFactory(group=group, privacy=Privacy.PRIVATE)
