"""
Exceptions raised by the notification dispatch core.

These signal caller bugs, not runtime conditions: an unresolvable target
or a (notify_type, target kind) pair nothing knows how to render.
Suppressed dispatches (unknown type, self-notification, permission
denial) never raise.
"""

from core.exceptions import BaseApplicationError


class NotificationError(BaseApplicationError):
    """Base class for notification errors."""

    default_error_code = "NOTIFICATION_ERROR"


class TargetResolutionError(NotificationError):
    """Target is missing, unsaved, or of an unregistered model."""

    default_error_code = "TARGET_UNRESOLVABLE"


class UnsupportedTargetError(NotificationError):
    """No formatter is registered for the notify_type and target kind."""

    default_error_code = "UNSUPPORTED_TARGET"
