"""
Tests for the Notification model.

Covers stored fields, constraints and the cheap derived properties.
Rendering of title/body/message id is covered in test_formatters.
"""

import pytest
from django.db import IntegrityError
from django.utils import timezone

from notifications.models import Notification, NotifyType
from notifications.tests.factories import NotificationFactory
from workspace.tests.factories import IssueFactory


class TestNotificationFields:

    def test_is_read_follows_read_at(self, db):
        unread = NotificationFactory()
        read = NotificationFactory(read_at=timezone.now())

        assert unread.is_read is False
        assert read.is_read is True

    def test_email_is_recipient_email(self, user):
        notification = NotificationFactory(user=user)

        assert notification.email == user.email

    def test_actor_name_uses_display_name(self, user, actor_user):
        notification = NotificationFactory(user=user, actor=actor_user)

        assert notification.actor_name == "Alice"

    def test_actor_name_empty_without_actor(self, user):
        notification = NotificationFactory(user=user, actor=None)

        assert notification.actor_name == ""

    def test_actor_deletion_keeps_notification(self, user, actor_user):
        notification = NotificationFactory(user=user, actor=actor_user)

        actor_user.delete()
        notification.refresh_from_db()

        assert notification.actor is None

    def test_target_generic_relation(self, user):
        issue = IssueFactory()
        notification = NotificationFactory(user=user, target=issue)

        assert Notification.objects.get(pk=notification.pk).target == issue

    def test_meta_defaults_to_empty_dict(self, db):
        assert NotificationFactory().meta == {}

    def test_detail_url(self, db):
        notification = NotificationFactory()

        assert notification.detail_url == f"https://docs.example.com/notifications/{notification.pk}"

    def test_str_shows_read_state(self, db):
        notification = NotificationFactory(notify_type=NotifyType.NEW_ISSUE)

        assert "new_issue" in str(notification)
        assert "[unread]" in str(notification)


class TestNotificationConstraints:

    def test_actor_cannot_be_recipient(self, user):
        with pytest.raises(IntegrityError):
            NotificationFactory(user=user, actor=user)


class TestNotificationQuerySet:

    def test_unread_and_for_user(self, user, other_user):
        mine = NotificationFactory(user=user)
        NotificationFactory(user=user, read_at=timezone.now())
        NotificationFactory(user=other_user)

        assert list(Notification.objects.for_user(user).unread()) == [mine]
