"""
Notifications app: the notification dispatch core.

This app provides:
- Notification model with derived title, body, message id and URL
- Permission gate, target resolver and message formatter registry
- NotificationService for dispatch and read-state tracking
- Celery task for async email delivery
- REST API for listing and reading notifications

Usage:
    from notifications.models import NotifyType
    from notifications.services import NotificationService

    notification = NotificationService.track_notification(
        NotifyType.ADD_MEMBER,
        member,
        user=member.user,
        actor=request.user,
    )
"""
