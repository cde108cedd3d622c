import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("contenttypes", "0002_remove_content_type_name"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Notification",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "notify_type",
                    models.CharField(
                        choices=[
                            ("add_member", "Added as member"),
                            ("repo_import", "Repository imported"),
                            ("comment", "New comment"),
                            ("mention", "Mentioned"),
                            ("issue_assign", "Issue assigned"),
                            ("new_issue", "New issue"),
                            ("close_issue", "Issue closed"),
                            ("reopen_issue", "Issue reopened"),
                        ],
                        db_index=True,
                        help_text="Event type of this notification",
                        max_length=30,
                    ),
                ),
                (
                    "target_id",
                    models.CharField(
                        help_text="ID of the target entity (supports UUID and integer PKs)",
                        max_length=36,
                    ),
                ),
                (
                    "meta",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Type-specific auxiliary data",
                    ),
                ),
                (
                    "read_at",
                    models.DateTimeField(
                        blank=True,
                        help_text="When the recipient read this notification",
                        null=True,
                    ),
                ),
                (
                    "actor",
                    models.ForeignKey(
                        blank=True,
                        help_text="User who triggered this notification (optional)",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="triggered_notifications",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "target_content_type",
                    models.ForeignKey(
                        help_text="Content type of the target entity",
                        on_delete=django.db.models.deletion.CASCADE,
                        to="contenttypes.contenttype",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        help_text="User receiving this notification",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="notifications",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "notifications_notification",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["user", "read_at"], name="notif_user_read_idx"
                    ),
                    models.Index(
                        fields=["target_content_type", "target_id"],
                        name="notif_target_idx",
                    ),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("actor", models.F("user")), _negated=True),
                        name="notif_actor_not_recipient",
                    ),
                ],
            },
        ),
    ]
