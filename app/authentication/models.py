"""
Authentication models.

This module defines the account model every other app points at:
- User: Custom user model with email-based authentication

Besides credentials, a user carries the two identity fields the
notification layer renders:
- slug: Handle used for @mentions inside documents and comments
- name: Display name shown as the actor of a notification

Related files:
    - managers.py: Custom user manager for email-based creation
"""

import re

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.core.exceptions import ValidationError
from django.db import models

from authentication.managers import UserManager


def validate_slug_format(value):
    """Validate slug format: 2-50 chars, alphanumeric + _ + -."""
    if not re.match(r"^[a-zA-Z0-9_-]{2,50}$", value):
        raise ValidationError(
            "Slug must be 2-50 characters and contain only "
            "letters, numbers, underscores, and hyphens."
        )


class User(AbstractBaseUser, PermissionsMixin):
    """
    Custom User model using email as the primary identifier.

    Fields:
        email: Primary identifier, unique, used for login and delivery
        slug: Unique mention handle (``@slug``)
        name: Display name, falls back to slug when blank
        is_active: Whether the user account is active
        is_staff: Whether the user can access Django admin
        date_joined: When the user account was created
        updated_at: When the user record was last modified

    Usage:
        user = User.objects.create_user(
            email='jason@example.com',
            password='securepassword',
            slug='jason',
            name='Jason Lee',
        )
    """

    # Primary identifier (replaces username)
    email = models.EmailField(
        unique=True,
        db_index=True,
        max_length=254,
        help_text="User's email address (primary identifier)",
    )

    slug = models.CharField(
        max_length=50,
        unique=True,
        validators=[validate_slug_format],
        help_text="Mention handle, referenced as @slug",
    )
    name = models.CharField(
        max_length=100,
        blank=True,
        help_text="Display name",
    )

    # Account status flags
    is_active = models.BooleanField(
        default=True,
        help_text="Whether this user account is active. Deselect instead of deleting.",
    )
    is_staff = models.BooleanField(
        default=False,
        help_text="Whether the user can access the admin site.",
    )

    # Timestamps
    date_joined = models.DateTimeField(
        auto_now_add=True,
        help_text="When the user account was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the user record was last modified",
    )

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["slug"]

    objects = UserManager()

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering = ["-date_joined"]

    def __str__(self):
        return self.email

    def get_full_name(self):
        return self.name or self.slug

    def get_short_name(self):
        return self.slug

    @property
    def display_name(self):
        """Name rendered as the actor in notification content."""
        return self.name or self.slug
