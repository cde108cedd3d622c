"""
Django app configuration for workspace.
"""

from django.apps import AppConfig


class WorkspaceConfig(AppConfig):
    """Configuration for the workspace application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "workspace"
    verbose_name = "Workspace"
