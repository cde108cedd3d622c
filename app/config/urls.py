"""
URL configuration for the notification service.

URL Structure:
    /                              - ReDoc API documentation
    /admin/                        - Django admin interface
    /health/                       - Health check endpoint (load balancers, Docker)
    /schema/                       - OpenAPI schema (YAML)
    /notifications/{id}/           - Notification link target: marks read, redirects
    /api/v1/notifications/         - Notification inbox endpoints
        {id}/                      - Notification detail
        unread-count/              - Unread badge count
        {id}/read/                 - Mark one as read
        read-all/                  - Mark all as read
        read-targets/              - Mark notifications of given targets as read

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView

from core.views import health_check
from notifications.views import notification_redirect

# All routes here are prefixed with /api/v1/
api_v1_patterns = [
    path("notifications/", include("notifications.urls")),
]

urlpatterns = [
    # Documentation
    path("", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    # Admin
    path("admin/", admin.site.urls),
    # Health check (Docker, Kubernetes, load balancers)
    path("health/", health_check, name="health_check"),
    # Detail link used in notification emails
    path(
        "notifications/<int:pk>/",
        notification_redirect,
        name="notification-redirect",
    ),
    # API v1
    path("api/v1/", include(api_v1_patterns)),
]

admin.site.site_header = "Notifications Admin"
admin.site.site_title = "Notifications Admin"
admin.site.index_title = "Notification dispatch"
