import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


def _timestamps():
    return [
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
    ]


def _id():
    return (
        "id",
        models.BigAutoField(
            auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
        ),
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("contenttypes", "0002_remove_content_type_name"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Group",
            fields=[
                _id(),
                *_timestamps(),
                ("slug", models.SlugField(max_length=100, unique=True)),
                ("name", models.CharField(max_length=200)),
            ],
            options={"ordering": ["slug"]},
        ),
        migrations.CreateModel(
            name="Repository",
            fields=[
                _id(),
                *_timestamps(),
                ("slug", models.SlugField(max_length=100)),
                ("name", models.CharField(max_length=200)),
                (
                    "privacy",
                    models.CharField(
                        choices=[("public", "Public"), ("private", "Private")],
                        default="public",
                        max_length=20,
                    ),
                ),
                (
                    "group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="repositories",
                        to="workspace.group",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "repositories",
                "ordering": ["group__slug", "slug"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("group", "slug"),
                        name="workspace_repository_group_slug_unique",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Member",
            fields=[
                _id(),
                *_timestamps(),
                ("subject_id", models.PositiveBigIntegerField()),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("reader", "Reader"),
                            ("editor", "Editor"),
                            ("admin", "Admin"),
                        ],
                        default="reader",
                        max_length=20,
                    ),
                ),
                (
                    "subject_content_type",
                    models.ForeignKey(
                        help_text="Content type of the Group or Repository",
                        on_delete=django.db.models.deletion.CASCADE,
                        to="contenttypes.contenttype",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="memberships",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("subject_content_type", "subject_id", "user"),
                        name="workspace_member_subject_user_unique",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Doc",
            fields=[
                _id(),
                *_timestamps(),
                ("slug", models.SlugField(max_length=200)),
                ("title", models.CharField(max_length=500)),
                ("body", models.TextField(blank=True, default="")),
                ("body_html", models.TextField(blank=True, default="")),
                (
                    "repository",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="docs",
                        to="workspace.repository",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("repository", "slug"),
                        name="workspace_doc_repository_slug_unique",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Issue",
            fields=[
                _id(),
                *_timestamps(),
                ("iid", models.PositiveIntegerField()),
                ("title", models.CharField(max_length=500)),
                ("body", models.TextField(blank=True, default="")),
                ("body_html", models.TextField(blank=True, default="")),
                (
                    "status",
                    models.CharField(
                        choices=[("open", "Open"), ("closed", "Closed")],
                        default="open",
                        max_length=20,
                    ),
                ),
                (
                    "repository",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="issues",
                        to="workspace.repository",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="issues",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("repository", "iid"),
                        name="workspace_issue_repository_iid_unique",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                _id(),
                *_timestamps(),
                ("commentable_id", models.PositiveBigIntegerField()),
                ("body", models.TextField(blank=True, default="")),
                ("body_html", models.TextField(blank=True, default="")),
                (
                    "commentable_content_type",
                    models.ForeignKey(
                        help_text="Content type of the Doc or Issue",
                        on_delete=django.db.models.deletion.CASCADE,
                        to="contenttypes.contenttype",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="comments",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(
                        fields=["commentable_content_type", "commentable_id"],
                        name="workspace_comment_target_idx",
                    )
                ],
            },
        ),
    ]
