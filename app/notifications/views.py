"""
Views for notification API.

ViewSets:
    NotificationViewSet: ReadOnlyModelViewSet with custom actions for read status

Views:
    notification_redirect: HTML entry point linked from emails

Endpoints:
    GET /api/v1/notifications/ - List user's notifications (paginated, filtered)
    GET /api/v1/notifications/{id}/ - Get notification detail
    GET /api/v1/notifications/unread-count/ - Get unread count
    POST /api/v1/notifications/{id}/read/ - Mark single notification as read
    POST /api/v1/notifications/read-all/ - Mark all notifications as read
    POST /api/v1/notifications/read-targets/ - Mark notifications on targets as read
    GET /notifications/{id}/ - Mark read and redirect to the target
"""

from __future__ import annotations

import logging

from django.contrib.auth.decorators import login_required
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from drf_spectacular.utils import (
    extend_schema,
    extend_schema_view,
    OpenApiParameter,
    OpenApiResponse,
)

from notifications.exceptions import NotificationError
from notifications.models import Notification
from notifications.serializers import (
    MarkAllReadResponseSerializer,
    NotificationSerializer,
    ReadTargetsSerializer,
    UnreadCountSerializer,
)
from notifications.services import NotificationService

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(
        operation_id="list_notifications",
        summary="List notifications",
        description=(
            "Get paginated list of notifications for the authenticated user. "
            "Supports filtering by read status and notify type."
        ),
        parameters=[
            OpenApiParameter(
                name="is_read",
                type=bool,
                location=OpenApiParameter.QUERY,
                description="Filter by read status (true/false)",
                required=False,
            ),
            OpenApiParameter(
                name="type",
                type=str,
                location=OpenApiParameter.QUERY,
                description="Filter by notify type, e.g. mention",
                required=False,
            ),
        ],
        tags=["Notifications"],
    ),
    retrieve=extend_schema(
        operation_id="get_notification",
        summary="Get notification",
        description="Get details of a specific notification.",
        tags=["Notifications"],
    ),
)
class NotificationViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for notification operations.

    Permissions:
    - All endpoints require authentication
    - Users can only access their own notifications
    """

    permission_classes = [IsAuthenticated]
    serializer_class = NotificationSerializer

    def get_queryset(self):
        queryset = (
            Notification.objects.for_user(self.request.user)
            .select_related("actor", "user", "target_content_type")
            .prefetch_related("target")
        )

        is_read = self.request.query_params.get("is_read")
        if is_read is not None:
            queryset = queryset.filter(read_at__isnull=is_read.lower() != "true")

        notify_type = self.request.query_params.get("type")
        if notify_type:
            queryset = queryset.filter(notify_type=notify_type)

        return queryset

    @extend_schema(
        operation_id="get_unread_notification_count",
        summary="Get unread notification count",
        description="Get the count of unread notifications for badge display.",
        responses={200: UnreadCountSerializer},
        tags=["Notifications"],
    )
    @action(detail=False, methods=["get"], url_path="unread-count")
    def unread_count(self, request):
        count = NotificationService.unread_count(request.user)
        return Response(UnreadCountSerializer({"unread_count": count}).data)

    @extend_schema(
        operation_id="mark_notification_read",
        summary="Mark notification as read",
        description=(
            "Mark a single notification as read. "
            "This operation is idempotent - already-read notifications return success."
        ),
        request=None,
        responses={
            200: NotificationSerializer,
            400: OpenApiResponse(description="Failed to mark notification as read"),
            404: OpenApiResponse(description="Notification not found"),
        },
        tags=["Notifications"],
    )
    @action(detail=True, methods=["post"])
    def read(self, request, pk=None):
        notification = self.get_object()

        result = NotificationService.mark_as_read(notification, request.user)
        if not result.success:
            return Response(
                {"detail": result.error, "error_code": result.error_code},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = self.get_serializer(result.data)
        return Response(serializer.data)

    @extend_schema(
        operation_id="mark_all_notifications_read",
        summary="Mark all notifications as read",
        description="Mark all unread notifications for the authenticated user as read.",
        request=None,
        responses={200: MarkAllReadResponseSerializer},
        tags=["Notifications"],
    )
    @action(detail=False, methods=["post"], url_path="read-all")
    def read_all(self, request):
        result = NotificationService.mark_all_as_read(request.user)
        return Response(MarkAllReadResponseSerializer({"marked_count": result.data}).data)

    @extend_schema(
        operation_id="mark_notification_targets_read",
        summary="Mark notifications on targets as read",
        description=(
            "Mark the user's notifications about the given targets as read, "
            "e.g. after the user opened a doc."
        ),
        request=ReadTargetsSerializer,
        responses={200: MarkAllReadResponseSerializer},
        tags=["Notifications"],
    )
    @action(detail=False, methods=["post"], url_path="read-targets")
    def read_targets(self, request):
        serializer = ReadTargetsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        count = NotificationService.read_targets(
            request.user,
            serializer.validated_data["target_type"],
            serializer.validated_data["target_ids"],
        )
        return Response(MarkAllReadResponseSerializer({"marked_count": count}).data)


@login_required
def notification_redirect(request, pk):
    """
    Mark a notification read and redirect to its target.

    Linked from issue emails. Other users' notifications are a 404.
    """
    notification = get_object_or_404(Notification, pk=pk, user=request.user)
    NotificationService.mark_as_read(notification, request.user)

    try:
        url = notification.url
    except NotificationError as e:
        logger.info(f"Notification {pk} target no longer resolves: {e}")
        raise Http404("Notification target no longer exists")

    return redirect(url)
