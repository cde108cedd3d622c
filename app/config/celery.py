"""
Celery configuration for the notification service.

Celery runs the only asynchronous boundary of the dispatch core: outbound
notification email. Tasks are enqueued after the notification record
commits and never block the request that produced the event.

This configuration uses Redis as both the message broker and result backend.
Tasks are auto-discovered from all installed Django apps.

Usage:
    from notifications.tasks import send_notification_email

    send_notification_email.delay(notification.id)

For more information, see:
https://docs.celeryq.dev/en/stable/django/first-steps-with-django.html
"""

import os

from celery import Celery

# Set the default Django settings module for the Celery worker
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("config")

# All Celery settings are prefixed with CELERY_ in settings.py
app.config_from_object("django.conf:settings", namespace="CELERY")

# Celery will look for a tasks.py module in each installed app
app.autodiscover_tasks()
