"""
Factory Boy factories for authentication models.

Usage:
    from authentication.tests.factories import UserFactory

    user = UserFactory()
    staff = UserFactory(is_staff=True)
    inactive = UserFactory(is_active=False)
"""

import factory

from authentication.models import User


class UserFactory(factory.django.DjangoModelFactory):
    """
    Factory for User model.

    Slugs and names are sequence-based so they render unchanged inside
    HTML notification bodies.
    """

    class Meta:
        model = User
        skip_postgeneration_save = True

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    slug = factory.Sequence(lambda n: f"user{n}")
    name = factory.Sequence(lambda n: f"User {n}")
    is_active = True
    is_staff = False

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Override create to use UserManager.create_user()."""
        password = kwargs.pop("password", "TestPass123!")
        return model_class.objects.create_user(
            email=kwargs.pop("email"), password=password, **kwargs
        )
