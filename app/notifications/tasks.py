"""
Celery tasks for notification delivery.

Tasks:
    send_notification_email: Render and send the email for one notification

Design:
    - Tasks receive the notification id, never the instance
    - Transport errors (SMTP, connection, timeout) are retried with backoff
    - A missing notification, a recipient without email or a deleted
      target is a no-op

Usage:
    # Called automatically by NotificationMailer.enqueue() after commit
    send_notification_email.delay(notification_id)
"""

from __future__ import annotations

import logging
from smtplib import SMTPException

from celery import shared_task

from notifications.exceptions import NotificationError
from notifications.mailer import NotificationMailer
from notifications.models import Notification
from toolkit.helpers import mask_email

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    autoretry_for=(SMTPException, ConnectionError, TimeoutError),
    retry_backoff=True,
    retry_kwargs={"max_retries": 3},
)
def send_notification_email(self, notification_id: int) -> bool:
    """
    Send a notification via email.

    Flow:
        1. Fetch notification with recipient and actor
        2. Skip if not found or recipient has no email
        3. Skip if the target can no longer be rendered
        4. Render and send through NotificationMailer.deliver

    Returns:
        True if sent, False if skipped

    Raises:
        SMTPException, ConnectionError, TimeoutError: transient (retried)
    """
    try:
        notification = Notification.objects.select_related(
            "user", "actor", "target_content_type"
        ).get(pk=notification_id)
    except Notification.DoesNotExist:
        logger.warning(f"Notification {notification_id} not found, email skipped")
        return False

    if not notification.email:
        logger.info(
            f"Email skipped for notification {notification_id}: recipient has no email"
        )
        return False

    logger.info(
        f"Sending email for notification {notification_id} "
        f"to {mask_email(notification.email)} (attempt {self.request.retries + 1})"
    )
    try:
        return NotificationMailer.deliver(notification)
    except NotificationError as e:
        # target deleted or no longer renderable; retrying cannot help
        logger.warning(f"Email skipped for notification {notification_id}: {e}")
        return False
