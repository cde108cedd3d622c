"""
Notification system models.

This module defines the durable notification record:
- NotifyType: Allow-list of event types that produce notifications
- TargetKind: Concrete kinds of entity a notification can point at
- Notification: One notification for one recipient about one target

Design Decisions:
    - Notification inherits from BaseModel (timestamps, ordering)
    - Actor uses SET_NULL (preserve notification when actor deleted)
    - GenericForeignKey links to the target entity
    - Title, body and message id are derived on read, never stored
    - read_at is only ever set, never cleared
    - No uniqueness on the derived message id; concurrent dispatch of the
      same event may store two records

Usage:
    from notifications.services import NotificationService

    notification = NotificationService.track_notification(
        NotifyType.ADD_MEMBER, member, user=member.user, actor=request.user
    )
    notification.title
    notification.body
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

from django.conf import settings
from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models

from core.models import BaseModel

if TYPE_CHECKING:
    from notifications.formatters import FormattedMessage
    from notifications.resolvers import TargetInfo


# =============================================================================
# Enums
# =============================================================================


class NotifyType(models.TextChoices):
    """Event types that can produce a notification."""

    ADD_MEMBER = "add_member", "Added as member"
    REPO_IMPORT = "repo_import", "Repository imported"
    COMMENT = "comment", "New comment"
    MENTION = "mention", "Mentioned"
    ISSUE_ASSIGN = "issue_assign", "Issue assigned"
    NEW_ISSUE = "new_issue", "New issue"
    CLOSE_ISSUE = "close_issue", "Issue closed"
    REOPEN_ISSUE = "reopen_issue", "Issue reopened"


class TargetKind(models.TextChoices):
    """
    Concrete kinds of notification target.

    Group never appears as a target on its own; it is the subject of a
    Member target.
    """

    MEMBER = "Member", "Member"
    REPOSITORY = "Repository", "Repository"
    COMMENT = "Comment", "Comment"
    ISSUE = "Issue", "Issue"
    DOC = "Doc", "Doc"
    GROUP = "Group", "Group"


# =============================================================================
# Notification
# =============================================================================


class NotificationQuerySet(models.QuerySet):

    def unread(self):
        return self.filter(read_at__isnull=True)

    def for_user(self, user):
        return self.filter(user=user)


class Notification(BaseModel):
    """
    Notification record for a user.

    Records are created only through NotificationService.track_notification
    and mutated only by the read-state operations.

    Fields:
        notify_type: Event type (NotifyType)
        actor: User who caused the event, absent for system events
        user: Recipient
        target_content_type/target_id/target: Generic FK to the subject entity
        meta: Type-specific auxiliary data, e.g. {"status": "success"}
        read_at: When the recipient read it; null while unread

    Inherits from BaseModel:
        created_at: Timestamp (auto, indexed)
        updated_at: Timestamp (auto)
    """

    notify_type = models.CharField(
        max_length=30,
        choices=NotifyType.choices,
        db_index=True,
        help_text="Event type of this notification",
    )

    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="triggered_notifications",
        help_text="User who triggered this notification (optional)",
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
        help_text="User receiving this notification",
    )

    target_content_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
        help_text="Content type of the target entity",
    )

    target_id = models.CharField(
        max_length=36,
        help_text="ID of the target entity (supports UUID and integer PKs)",
    )

    target = GenericForeignKey("target_content_type", "target_id")

    meta = models.JSONField(
        default=dict,
        blank=True,
        help_text="Type-specific auxiliary data",
    )

    read_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the recipient read this notification",
    )

    objects = NotificationQuerySet.as_manager()

    class Meta:
        db_table = "notifications_notification"
        ordering = ["-created_at"]
        indexes = [
            # Unread listings and badge counts
            models.Index(
                fields=["user", "read_at"],
                name="notif_user_read_idx",
            ),
            # read_targets lookups
            models.Index(
                fields=["target_content_type", "target_id"],
                name="notif_target_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=~models.Q(actor=models.F("user")),
                name="notif_actor_not_recipient",
            ),
        ]

    def __str__(self) -> str:
        read_status = "read" if self.is_read else "unread"
        return f"Notification({self.notify_type}) -> User {self.user_id} [{read_status}]"

    # -------------------------------------------------------------------------
    # Derived fields
    # -------------------------------------------------------------------------

    @property
    def is_read(self) -> bool:
        return self.read_at is not None

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def actor_name(self) -> str:
        if self.actor is None:
            return ""
        return self.actor.display_name

    @cached_property
    def target_info(self) -> TargetInfo:
        from notifications.conf import NotificationConfig
        from notifications.resolvers import resolve_target

        return resolve_target(
            self.target,
            self.notify_type,
            recipient=self.user,
            config=NotificationConfig.from_settings(),
        )

    @cached_property
    def message(self) -> FormattedMessage:
        from notifications.conf import NotificationConfig
        from notifications.formatters import format_message

        return format_message(
            self.notify_type,
            self.target_info,
            actor_name=self.actor_name,
            config=NotificationConfig.from_settings(),
            notification_id=self.pk,
            meta=self.meta,
        )

    @property
    def title(self) -> str:
        return self.message.title

    @property
    def body(self) -> str:
        return self.message.body

    @property
    def message_id(self) -> str:
        return self.message.message_id

    @property
    def url(self) -> str:
        return self.target_info.url

    @property
    def mention_excerpt(self) -> str:
        return self.target_info.mention_excerpt

    @property
    def detail_url(self) -> str:
        from notifications.conf import NotificationConfig

        return NotificationConfig.from_settings().notification_url(self.pk)
