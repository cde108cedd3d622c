"""
Django admin configuration for notification models.

Notifications are created only by NotificationService, so the admin is
read-only apart from deletion by superusers.
"""

from django.contrib import admin

from notifications.models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    """
    Admin configuration for Notification.

    Provides read-only view of notifications for debugging and support.
    """

    list_display = [
        "id",
        "notify_type",
        "user",
        "actor",
        "target_content_type",
        "target_id",
        "read_at",
        "created_at",
    ]
    list_filter = ["notify_type", "target_content_type", "created_at"]
    search_fields = ["user__email", "actor__email", "target_id"]
    raw_id_fields = ["user", "actor"]
    date_hierarchy = "created_at"
    readonly_fields = [
        "notify_type",
        "user",
        "actor",
        "target_content_type",
        "target_id",
        "meta",
        "read_at",
        "created_at",
        "updated_at",
    ]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
