"""
Workspace models.

This module defines the entities users collaborate on:
- Group: Top-level namespace owning repositories
- Repository: Collection of docs and issues, public or private
- Member: Grants a user a role on a Group or Repository
- Doc: Markdown document inside a repository
- Issue: Tracked issue inside a repository
- Comment: Comment on a Doc or Issue

Every entity exposes the same small surface used when rendering
notifications:
- get_absolute_url(): Path of the entity's page, without host
- display_title: Short human label

Design Decisions:
    - Rendered HTML (body_html) is produced upstream and stored as-is
    - Member and Comment use generic relations so one table serves
      both kinds of subject / commentable
    - Repository ownership is always a Group
"""

from __future__ import annotations

from django.conf import settings
from django.contrib.contenttypes.fields import GenericForeignKey, GenericRelation
from django.contrib.contenttypes.models import ContentType
from django.db import models

from core.models import BaseModel


# =============================================================================
# Enums
# =============================================================================


class Privacy(models.TextChoices):
    """Repository visibility."""

    PUBLIC = "public", "Public"
    PRIVATE = "private", "Private"


class MemberRole(models.TextChoices):
    """Roles a user can hold on a group or repository."""

    READER = "reader", "Reader"
    EDITOR = "editor", "Editor"
    ADMIN = "admin", "Admin"


class IssueStatus(models.TextChoices):
    OPEN = "open", "Open"
    CLOSED = "closed", "Closed"


# =============================================================================
# Membership subjects
# =============================================================================


class MemberSubjectMixin(models.Model):
    """Shared membership helpers for Group and Repository."""

    members = GenericRelation(
        "workspace.Member",
        content_type_field="subject_content_type",
        object_id_field="subject_id",
    )

    class Meta:
        abstract = True

    def add_member(self, user, role=MemberRole.READER) -> Member:
        """Grant ``user`` the given role, updating an existing membership."""
        member, _ = Member.objects.update_or_create(
            subject_content_type=ContentType.objects.get_for_model(self),
            subject_id=self.pk,
            user=user,
            defaults={"role": role},
        )
        return member

    def has_member(self, user) -> bool:
        if user is None or user.pk is None:
            return False
        return self.members.filter(user_id=user.pk).exists()


class Group(MemberSubjectMixin, BaseModel):
    """
    Namespace owning repositories.

    Fields:
        slug: URL segment, unique
        name: Display name
    """

    slug = models.SlugField(max_length=100, unique=True)
    name = models.CharField(max_length=200)

    class Meta:
        ordering = ["slug"]

    def __str__(self) -> str:
        return self.name

    def get_absolute_url(self) -> str:
        return f"/{self.slug}"

    @property
    def display_title(self) -> str:
        return self.name


class Repository(MemberSubjectMixin, BaseModel):
    """
    Repository owned by a group.

    A public repository is readable by anyone; a private one only by
    members of the repository or of its owning group.
    """

    group = models.ForeignKey(
        Group,
        on_delete=models.CASCADE,
        related_name="repositories",
    )
    slug = models.SlugField(max_length=100)
    name = models.CharField(max_length=200)
    privacy = models.CharField(
        max_length=20,
        choices=Privacy.choices,
        default=Privacy.PUBLIC,
    )

    class Meta:
        verbose_name_plural = "repositories"
        ordering = ["group__slug", "slug"]
        constraints = [
            models.UniqueConstraint(
                fields=["group", "slug"],
                name="workspace_repository_group_slug_unique",
            ),
        ]

    def __str__(self) -> str:
        return self.display_title

    @property
    def is_public(self) -> bool:
        return self.privacy == Privacy.PUBLIC

    @property
    def owner_name(self) -> str:
        return self.group.name

    def get_absolute_url(self) -> str:
        return f"/{self.group.slug}/{self.slug}"

    @property
    def display_title(self) -> str:
        return f"{self.owner_name} / {self.name}"


class Member(BaseModel):
    """
    Role of a user on a Group or Repository.

    Fields:
        subject: Generic FK to the Group or Repository
        user: The member
        role: reader, editor or admin
    """

    subject_content_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
        help_text="Content type of the Group or Repository",
    )
    subject_id = models.PositiveBigIntegerField()
    subject = GenericForeignKey("subject_content_type", "subject_id")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    role = models.CharField(
        max_length=20,
        choices=MemberRole.choices,
        default=MemberRole.READER,
    )

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["subject_content_type", "subject_id", "user"],
                name="workspace_member_subject_user_unique",
            ),
        ]

    def __str__(self) -> str:
        return f"Member({self.user_id} {self.role} on {self.subject})"

    def get_absolute_url(self) -> str:
        return self.subject.get_absolute_url()

    @property
    def display_title(self) -> str:
        return self.subject.display_title


# =============================================================================
# Repository content
# =============================================================================


class Doc(BaseModel):
    """
    Document inside a repository.

    ``body`` holds the raw markdown source, ``body_html`` its rendering.
    """

    repository = models.ForeignKey(
        Repository,
        on_delete=models.CASCADE,
        related_name="docs",
    )
    slug = models.SlugField(max_length=200)
    title = models.CharField(max_length=500)
    body = models.TextField(blank=True, default="")
    body_html = models.TextField(blank=True, default="")

    comments = GenericRelation(
        "workspace.Comment",
        content_type_field="commentable_content_type",
        object_id_field="commentable_id",
    )

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["repository", "slug"],
                name="workspace_doc_repository_slug_unique",
            ),
        ]

    def __str__(self) -> str:
        return self.title

    def get_absolute_url(self) -> str:
        return f"{self.repository.get_absolute_url()}/{self.slug}"

    @property
    def display_title(self) -> str:
        return self.title


class Issue(BaseModel):
    """Issue tracked inside a repository, numbered per repository by ``iid``."""

    repository = models.ForeignKey(
        Repository,
        on_delete=models.CASCADE,
        related_name="issues",
    )
    iid = models.PositiveIntegerField()
    title = models.CharField(max_length=500)
    body = models.TextField(blank=True, default="")
    body_html = models.TextField(blank=True, default="")
    status = models.CharField(
        max_length=20,
        choices=IssueStatus.choices,
        default=IssueStatus.OPEN,
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="issues",
    )

    comments = GenericRelation(
        "workspace.Comment",
        content_type_field="commentable_content_type",
        object_id_field="commentable_id",
    )

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["repository", "iid"],
                name="workspace_issue_repository_iid_unique",
            ),
        ]

    def __str__(self) -> str:
        return f"#{self.iid} {self.title}"

    def get_absolute_url(self) -> str:
        return f"{self.repository.get_absolute_url()}/issues/{self.iid}"

    @property
    def display_title(self) -> str:
        return self.title


class Comment(BaseModel):
    """
    Comment on a Doc or Issue.

    Fields:
        commentable: Generic FK to the Doc or Issue commented on
        user: Author
        body: Raw markdown
        body_html: Rendered HTML
    """

    commentable_content_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
        help_text="Content type of the Doc or Issue",
    )
    commentable_id = models.PositiveBigIntegerField()
    commentable = GenericForeignKey("commentable_content_type", "commentable_id")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="comments",
    )
    body = models.TextField(blank=True, default="")
    body_html = models.TextField(blank=True, default="")

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(
                fields=["commentable_content_type", "commentable_id"],
                name="workspace_comment_target_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"Comment({self.pk}) on {self.commentable_title}"

    @property
    def commentable_title(self) -> str:
        return self.commentable.display_title

    def get_absolute_url(self) -> str:
        return f"{self.commentable.get_absolute_url()}#comment-{self.pk}"

    @property
    def display_title(self) -> str:
        return self.commentable_title
