"""
pytest configuration for the Django apps.

This module adjusts settings for the test session and auto-marks tests
as unit/integration based on their filename. App-specific fixtures are
defined in each app's tests/conftest.py.
"""

import pytest


def pytest_configure():
    """Adjust Django settings for the test session."""
    from django.conf import settings

    # Use fast password hasher for tests (PBKDF2 is too slow with 870K iterations)
    settings.PASSWORD_HASHERS = [
        "django.contrib.auth.hashers.MD5PasswordHasher",
    ]

    # Keep tests independent of Redis
    settings.CACHES = {
        "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"}
    }
    settings.CELERY_TASK_ALWAYS_EAGER = True
    settings.CELERY_TASK_EAGER_PROPAGATES = True

    settings.REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []
    settings.REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {}


def pytest_collection_modifyitems(items):
    """
    Auto-mark tests based on filename patterns.

    Mapping:
    - test_views.py, test_services.py, test_tasks.py, etc. → integration
    - test_models.py, test_formatters.py, test_resolvers.py, etc. → unit
    - Unmatched files → integration (safe default for Django)

    Explicit markers on test functions/classes take precedence.
    """
    integration_patterns = [
        "test_views.py",
        "test_services.py",
        "test_tasks.py",
        "test_abilities.py",
        "test_gates.py",
    ]

    unit_patterns = [
        "test_models.py",
        "test_formatters.py",
        "test_resolvers.py",
        "test_email.py",
        "test_logging.py",
    ]

    for item in items:
        existing_markers = {m.name for m in item.iter_markers()}
        if existing_markers & {"unit", "integration", "e2e"}:
            continue

        filename = str(item.fspath).split("/")[-1]

        if any(pattern in filename for pattern in integration_patterns):
            item.add_marker(pytest.mark.integration)
        elif any(pattern in filename for pattern in unit_patterns):
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)
