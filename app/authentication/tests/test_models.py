"""
Tests for the User model.
"""

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from authentication.models import validate_slug_format
from authentication.tests.factories import UserFactory


class TestUserModel:
    """Tests for identity fields used by notification rendering."""

    def test_str_is_email(self, user):
        assert str(user) == user.email

    def test_display_name_prefers_name(self, db):
        user = UserFactory(name="Jason Lee", slug="jason")

        assert user.display_name == "Jason Lee"
        assert user.get_full_name() == "Jason Lee"

    def test_display_name_falls_back_to_slug(self, db):
        user = UserFactory(name="", slug="jason")

        assert user.display_name == "jason"

    def test_slug_must_be_unique(self, db):
        UserFactory(slug="taken")

        with pytest.raises(IntegrityError):
            UserFactory(slug="taken")


class TestSlugValidator:

    @pytest.mark.parametrize("value", ["jason", "j_lee", "a-b-c", "user42"])
    def test_accepts_valid_slugs(self, value):
        validate_slug_format(value)

    @pytest.mark.parametrize("value", ["a", "has space", "bad@char", "x" * 51])
    def test_rejects_invalid_slugs(self, value):
        with pytest.raises(ValidationError):
            validate_slug_format(value)
