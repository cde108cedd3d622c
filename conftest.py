"""
Root pytest configuration for the Django project.

pytest-django loads config.settings before any conftest runs, so local
defaults (SECRET_KEY, DATABASE_URL, APP_HOST) come from .env.development
via django-environ. App-specific fixtures are defined in each app's
tests/conftest.py.
"""

import os

# Ensure Django settings are configured before any tests run
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
