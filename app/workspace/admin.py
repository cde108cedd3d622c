"""
Django admin configuration for workspace models.
"""

from django.contrib import admin

from workspace.models import Comment, Doc, Group, Issue, Member, Repository


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    list_display = ("slug", "name", "created_at")
    search_fields = ("slug", "name")


@admin.register(Repository)
class RepositoryAdmin(admin.ModelAdmin):
    list_display = ("slug", "name", "group", "privacy", "created_at")
    list_filter = ("privacy",)
    search_fields = ("slug", "name", "group__slug")
    raw_id_fields = ("group",)


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = ("user", "role", "subject_content_type", "subject_id", "created_at")
    list_filter = ("role", "subject_content_type")
    raw_id_fields = ("user",)


@admin.register(Doc)
class DocAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "repository", "created_at")
    search_fields = ("title", "slug")
    raw_id_fields = ("repository",)


@admin.register(Issue)
class IssueAdmin(admin.ModelAdmin):
    list_display = ("iid", "title", "repository", "status", "user", "created_at")
    list_filter = ("status",)
    search_fields = ("title",)
    raw_id_fields = ("repository", "user")


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "commentable_content_type", "commentable_id", "user", "created_at")
    list_filter = ("commentable_content_type",)
    raw_id_fields = ("user",)
