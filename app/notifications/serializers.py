"""
Serializers for notification API.

Serializers:
    NotificationSerializer: Read-only serializer for notification details
    UnreadCountSerializer: Response for unread count endpoint
    MarkAllReadResponseSerializer: Response for mark-read endpoints
    ReadTargetsSerializer: Request body for the read-targets endpoint

Usage:
    from notifications.serializers import NotificationSerializer

    serializer = NotificationSerializer(notification)
    data = serializer.data
"""

from __future__ import annotations

from rest_framework import serializers

from notifications.exceptions import NotificationError
from notifications.models import Notification, TargetKind


class TargetTextField(serializers.CharField):
    """
    Read-only text rendered from the notification's target.

    Targets can be deleted after the notification was stored; such
    notifications render empty text instead of failing the whole list.
    """

    def __init__(self, **kwargs):
        kwargs["read_only"] = True
        super().__init__(**kwargs)

    def get_attribute(self, instance):
        try:
            return super().get_attribute(instance)
        except NotificationError:
            return ""


class NotificationSerializer(serializers.ModelSerializer):
    """
    Serializer for Notification model.

    Title, body, message id, URL and excerpt are rendered on read from the
    notification's target, and are empty once the target is deleted.
    actor_name is empty for system notifications.
    """

    actor_name = serializers.CharField(read_only=True)
    title = TargetTextField()
    body = TargetTextField()
    message_id = TargetTextField()
    url = TargetTextField()
    mention_excerpt = TargetTextField()
    is_read = serializers.BooleanField(read_only=True)

    class Meta:
        model = Notification
        fields = [
            "id",
            "notify_type",
            "actor_name",
            "title",
            "body",
            "message_id",
            "url",
            "mention_excerpt",
            "meta",
            "is_read",
            "read_at",
            "created_at",
        ]
        read_only_fields = fields


class UnreadCountSerializer(serializers.Serializer):
    unread_count = serializers.IntegerField()


class MarkAllReadResponseSerializer(serializers.Serializer):
    marked_count = serializers.IntegerField()


class ReadTargetsSerializer(serializers.Serializer):
    """
    Request body for marking notifications on targets as read.

    Fields:
        target_type: Target kind, e.g. "Doc"
        target_ids: Primary keys of the targets
    """

    target_type = serializers.ChoiceField(choices=TargetKind.choices)
    target_ids = serializers.ListField(
        child=serializers.CharField(max_length=36),
        allow_empty=False,
        max_length=500,
    )
