"""
Core views providing infrastructure endpoints.

Views here are not part of the notification domain but are needed to run
the service behind a load balancer.
"""

from django.core.cache import cache
from django.db import connection
from django.http import JsonResponse


def health_check(request):
    """
    Health check endpoint for Docker, Kubernetes probes and load balancers.

    The database is required; the cache is reported but only degrades
    the status since notification dispatch never reads from it.

    HTTP Status Codes:
        200: Database reachable
        503: Database unreachable

    Example Response:
        {"status": "healthy", "database": "connected", "cache": "connected"}
    """
    health_status = {
        "status": "healthy",
        "database": "unknown",
        "cache": "unknown",
    }
    is_healthy = True

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        health_status["database"] = "connected"
    except Exception:
        health_status["database"] = "disconnected"
        health_status["status"] = "unhealthy"
        is_healthy = False

    try:
        cache.set("health_check", "ok", timeout=1)
        health_status["cache"] = (
            "connected" if cache.get("health_check") == "ok" else "disconnected"
        )
    except Exception:
        health_status["cache"] = "disconnected"

    return JsonResponse(health_status, status=200 if is_healthy else 503)
