"""
Tests for UserManager.

Covers email-based user creation, slug derivation and the superuser
flag checks.
"""

import pytest

from authentication.models import User


class TestUserManagerCreateUser:
    """Tests for UserManager.create_user() method."""

    def test_creates_user_with_email_and_password(self, db):
        user = User.objects.create_user(
            email="mgr_create_user@example.com", password="SecurePass123!"
        )

        assert user.pk is not None
        assert user.check_password("SecurePass123!") is True

    def test_normalizes_email_domain_to_lowercase(self, db):
        user = User.objects.create_user(email="Test.User@EXAMPLE.COM")

        assert user.email == "Test.User@example.com"

    def test_derives_slug_from_email_when_missing(self, db):
        user = User.objects.create_user(email="jason@example.com")

        assert user.slug == "jason"

    def test_keeps_explicit_slug(self, db):
        user = User.objects.create_user(email="jason@example.com", slug="jlee")

        assert user.slug == "jlee"

    def test_sets_unusable_password_when_omitted(self, db):
        user = User.objects.create_user(email="nopass@example.com")

        assert user.has_usable_password() is False

    def test_rejects_missing_email(self, db):
        with pytest.raises(ValueError, match="Email"):
            User.objects.create_user(email="")


class TestUserManagerCreateSuperuser:
    """Tests for UserManager.create_superuser() method."""

    def test_sets_staff_and_superuser_flags(self, superuser):
        assert superuser.is_staff is True
        assert superuser.is_superuser is True

    def test_rejects_is_staff_false(self, db):
        with pytest.raises(ValueError, match="is_staff=True"):
            User.objects.create_superuser(
                email="bad@example.com", password="x", is_staff=False
            )
