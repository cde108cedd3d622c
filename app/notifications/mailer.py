"""
Email delivery for notifications.

NotificationMailer hands a committed notification to the Celery task
``send_notification_email`` and, inside that task, renders and sends the
message through EmailService. Enqueue failures are logged and swallowed
so they never fail the dispatch that produced the notification.

Threading headers:
    Message-ID:  <{message_id}/{notification_id}@{domain}>
    In-Reply-To: <{message_id}@{domain}>
    References:  <{message_id}@{domain}>

Emails about the same subject therefore thread together in mail clients.
"""

from __future__ import annotations

import logging
from html import unescape
from typing import TYPE_CHECKING

from django.conf import settings
from django.template.loader import render_to_string
from django.utils.html import strip_tags

from notifications.conf import NotificationConfig
from toolkit.services.email import EmailService

if TYPE_CHECKING:
    from notifications.models import Notification
    from toolkit.protocols import EmailSender

logger = logging.getLogger(__name__)


class NotificationMailer:
    """Schedules and sends notification emails."""

    @staticmethod
    def enqueue(notification: Notification) -> bool:
        """
        Schedule the email for ``notification``.

        Returns:
            False if the task could not be enqueued (already logged)
        """
        # Import here to avoid circular imports
        from notifications.tasks import send_notification_email

        try:
            send_notification_email.delay(notification.pk)
        except Exception:
            logger.exception(
                f"Failed to enqueue email for notification {notification.pk}"
            )
            return False

        logger.debug(f"Email queued for notification {notification.pk}")
        return True

    @staticmethod
    def sender(config: NotificationConfig) -> str:
        if not config.app_name:
            return settings.DEFAULT_FROM_EMAIL
        return f"{config.app_name} <{settings.DEFAULT_FROM_EMAIL}>"

    @staticmethod
    def headers(notification: Notification, config: NotificationConfig) -> dict[str, str]:
        thread = f"<{notification.message_id}@{config.domain}>"
        return {
            "Message-ID": f"<{notification.message_id}/{notification.pk}@{config.domain}>",
            "In-Reply-To": thread,
            "References": thread,
        }

    @classmethod
    def deliver(
        cls,
        notification: Notification,
        *,
        config: NotificationConfig | None = None,
        email_sender: EmailSender = EmailService,
    ) -> bool:
        """
        Render and send the email for ``notification``.

        Transport errors propagate so the calling task can retry.
        """
        config = config or NotificationConfig.from_settings()
        context = {
            "title": notification.title,
            "body": notification.body,
            "text": unescape(strip_tags(notification.body)),
            "url": notification.url,
            "app_name": config.app_name,
        }

        return email_sender.send_raw(
            to=notification.email,
            subject=notification.title,
            body_text=render_to_string("notifications/email/notification.txt", context),
            body_html=render_to_string("notifications/email/notification.html", context),
            from_email=cls.sender(config),
            headers=cls.headers(notification, config),
            fail_silently=False,
        )
