"""
Notification service layer.

This module provides the dispatch orchestrator and the read-state
operations of the notification store.

Services:
    NotificationService: track_notification, read_targets and inbox helpers

Design Principles:
    - Services are stateless (use class methods)
    - The actor is always passed explicitly, never read from a request
    - Suppressed dispatches (unknown type, self-notification, permission
      denial) return None without side effects
    - Caller bugs (unresolvable target) raise TargetResolutionError
    - The email is scheduled only after the record commits
    - read_at is only ever moved from null to a timestamp

Usage:
    from notifications.services import NotificationService

    notification = NotificationService.track_notification(
        NotifyType.NEW_ISSUE,
        issue,
        user=watcher,
        actor=issue.user,
    )

    NotificationService.read_targets(user, TargetKind.DOC, [doc.id])

    result = NotificationService.mark_as_read(notification, user)
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import partial
from typing import TYPE_CHECKING

from django.contrib.auth import get_user_model
from django.contrib.contenttypes.models import ContentType
from django.db import models, transaction
from django.utils import timezone

from core.services import BaseService, ServiceResult

from notifications.conf import NotificationConfig
from notifications.exceptions import TargetResolutionError
from notifications.gates import may_notify
from notifications.mailer import NotificationMailer
from notifications.models import Notification, NotifyType
from notifications.resolvers import model_for_kind, target_kind

if TYPE_CHECKING:
    from django.db.models import Model

    from authentication.models import User


class NotificationService(BaseService):
    """
    Service for notification dispatch and read state.

    Methods:
        allow_type: Whether a notify_type is on the allow-list
        track_notification: Create a notification and schedule its email
        read_targets: Mark a recipient's notifications on given targets read
        mark_as_read: Mark a single notification as read
        mark_all_as_read: Mark all user's unread notifications as read
        unread_count: Number of unread notifications for a user
    """

    @classmethod
    def allow_type(cls, notify_type) -> bool:
        return notify_type in NotifyType.values

    @classmethod
    def track_notification(
        cls,
        notify_type,
        target: Model,
        *,
        user: User | None = None,
        user_id: int | None = None,
        actor: User | None = None,
        actor_id: int | None = None,
        meta: dict | None = None,
        config: NotificationConfig | None = None,
    ) -> Notification | None:
        """
        Record a notification for one recipient about ``target``.

        Implementation:
            1. Ignore notify types outside the allow-list
            2. Resolve the target kind (raises on caller bugs)
            3. Skip when the recipient is absent or is the actor
            4. Skip when the recipient may not read the target
            5. Create the record in a transaction
            6. Schedule the email on commit

        Args:
            notify_type: NotifyType value
            target: Entity the notification is about
            user / user_id: Recipient
            actor / actor_id: User who caused the event (optional)
            meta: Type-specific data, e.g. {"status": "success"}
            config: Explicit configuration, read from settings when omitted

        Returns:
            The created Notification, or None when suppressed

        Raises:
            TargetResolutionError: target is missing, unsaved or unregistered
        """
        logger = cls.get_logger()

        if not cls.allow_type(notify_type):
            logger.debug(f"Ignoring unknown notify_type {notify_type!r}")
            return None

        config = config or NotificationConfig.from_settings()
        target_kind(target, config)

        recipient = cls._resolve_user(user, user_id)
        if recipient is None:
            logger.debug(f"No recipient for {notify_type} notification, skipping")
            return None

        actor = cls._resolve_user(actor, actor_id)
        if actor is not None and actor.pk == recipient.pk:
            logger.debug(
                f"Suppressed {notify_type} self-notification for user {recipient.pk}"
            )
            return None

        if not may_notify(recipient, target, config=config):
            logger.info(
                f"User {recipient.pk} cannot read {target._meta.label} {target.pk}, "
                f"skipping {notify_type} notification"
            )
            return None

        with cls.atomic():
            notification = Notification.objects.create(
                notify_type=NotifyType(notify_type),
                actor=actor,
                user=recipient,
                target_content_type=ContentType.objects.get_for_model(target),
                target_id=str(target.pk),
                meta=meta or {},
            )
            transaction.on_commit(partial(NotificationMailer.enqueue, notification))

        logger.info(
            f"Created notification {notification.pk} of type {notify_type} "
            f"for user {recipient.pk}"
        )
        return notification

    @classmethod
    def read_targets(
        cls,
        user: User | None,
        target_type,
        target_ids: Iterable,
        *,
        config: NotificationConfig | None = None,
    ) -> int:
        """
        Mark ``user``'s unread notifications on the given targets as read.

        Idempotent: already-read notifications are left untouched.

        Args:
            user: Recipient; None matches nothing
            target_type: TargetKind, its value (e.g. "Doc") or a model class
            target_ids: Primary keys of the targets

        Returns:
            Number of notifications transitioned to read

        Raises:
            TargetResolutionError: target_type is not a registered kind
        """
        if user is None:
            return 0

        ids = [str(target_id) for target_id in target_ids]
        if not ids:
            return 0

        content_type = cls._content_type_for(target_type, config)
        now = timezone.now()
        count = (
            Notification.objects.for_user(user)
            .unread()
            .filter(target_content_type=content_type, target_id__in=ids)
            .update(read_at=now, updated_at=now)
        )

        cls.get_logger().info(
            f"Marked {count} notifications on {content_type.model} {ids} "
            f"as read for user {user.pk}"
        )
        return count

    @classmethod
    def mark_as_read(
        cls,
        notification: Notification,
        user: User,
    ) -> ServiceResult[Notification]:
        """
        Mark a single notification as read.

        Validates that the user owns the notification before marking.
        Operation is idempotent - marking an already-read notification succeeds.

        Error codes:
            NOT_OWNER: User doesn't own the notification
        """
        if notification.user_id != user.pk:
            cls.get_logger().warning(
                f"User {user.pk} attempted to mark notification {notification.pk} "
                f"owned by user {notification.user_id}"
            )
            return ServiceResult.failure(
                "Cannot mark notification you don't own",
                error_code="NOT_OWNER",
            )

        if notification.read_at is None:
            now = timezone.now()
            updated = (
                Notification.objects.unread()
                .filter(pk=notification.pk)
                .update(read_at=now, updated_at=now)
            )
            if updated:
                notification.read_at = now
                cls.get_logger().debug(f"Marked notification {notification.pk} as read")
            else:
                notification.refresh_from_db(fields=["read_at"])

        return ServiceResult.success(notification)

    @classmethod
    def mark_all_as_read(cls, user: User) -> ServiceResult[int]:
        """Mark all user's unread notifications as read in one query."""
        now = timezone.now()
        count = Notification.objects.for_user(user).unread().update(
            read_at=now, updated_at=now
        )

        cls.get_logger().info(f"Marked {count} notifications as read for user {user.pk}")
        return ServiceResult.success(count)

    @classmethod
    def unread_count(cls, user: User) -> int:
        return Notification.objects.for_user(user).unread().count()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _resolve_user(user: User | None, user_id: int | None) -> User | None:
        if user is not None:
            return user
        if user_id is None:
            return None
        return get_user_model().objects.filter(pk=user_id).first()

    @staticmethod
    def _content_type_for(target_type, config: NotificationConfig | None) -> ContentType:
        if isinstance(target_type, type) and issubclass(target_type, models.Model):
            return ContentType.objects.get_for_model(target_type)

        config = config or NotificationConfig.from_settings()
        if not target_type:
            raise TargetResolutionError("Target type is required")
        return ContentType.objects.get_for_model(model_for_kind(target_type, config))
