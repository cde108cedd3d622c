"""
Notification configuration.

Settings are read once per operation into an immutable NotificationConfig
which is then passed explicitly to the resolver, formatter and mailer.

Settings:
    NOTIFICATIONS = {
        "HOST": "https://docs.example.com",
        "APP_NAME": "BlueDoc",
        "ABILITY_CHECKER": "workspace.abilities.can_read",
        "TARGET_MODELS": {"Member": "workspace.Member", ...},
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from django.conf import settings

DEFAULT_ABILITY_CHECKER = "workspace.abilities.can_read"


@dataclass(frozen=True)
class NotificationConfig:
    """
    Explicit configuration for rendering and gating notifications.

    Attributes:
        host: Public base URL, e.g. ``https://docs.example.com``
        app_name: Display name used in the email sender
        ability_checker: Dotted path to ``can_read(user, target) -> bool``
        target_models: Target kind -> ``app_label.ModelName``
    """

    host: str
    app_name: str = ""
    ability_checker: str = DEFAULT_ABILITY_CHECKER
    target_models: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_settings(cls) -> NotificationConfig:
        options = getattr(settings, "NOTIFICATIONS", {})
        return cls(
            host=options.get("HOST", "").rstrip("/"),
            app_name=options.get("APP_NAME", getattr(settings, "APP_NAME", "")),
            ability_checker=options.get("ABILITY_CHECKER", DEFAULT_ABILITY_CHECKER),
            target_models=dict(options.get("TARGET_MODELS", {})),
        )

    @property
    def domain(self) -> str:
        """Hostname of ``host``, used as the right-hand side of Message-IDs."""
        return urlsplit(self.host).hostname or self.host or "localhost"

    def absolute_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.host.rstrip('/')}{path}"

    def notification_url(self, notification_id) -> str:
        return self.absolute_url(f"/notifications/{notification_id}")
