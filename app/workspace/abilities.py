"""
Read-ability checks for workspace entities.

Access Model:
    - Inactive or anonymous users can read nothing
    - Groups are readable by every active user
    - Public repositories are readable by every active user
    - Private repositories are readable by members of the repository
      or of its owning group
    - Docs and issues inherit their repository's access
    - Comments inherit their commentable's access
    - Memberships inherit their subject's access

Usage:
    from workspace.abilities import can_read

    if can_read(user, issue):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.services import BaseService
from workspace.models import Comment, Doc, Group, Issue, Member, Repository

if TYPE_CHECKING:
    from authentication.models import User


class WorkspaceAbility(BaseService):
    """
    Centralized read-permission check for workspace entities.

    Unknown entity types are never readable.
    """

    @classmethod
    def can_read(cls, user: User | None, target) -> bool:
        if user is None or not getattr(user, "is_active", False):
            return False
        if target is None:
            return False

        if isinstance(target, Group):
            return True
        if isinstance(target, Repository):
            return cls._can_read_repository(user, target)
        if isinstance(target, (Doc, Issue)):
            return cls._can_read_repository(user, target.repository)
        if isinstance(target, Comment):
            return cls.can_read(user, target.commentable)
        if isinstance(target, Member):
            return cls.can_read(user, target.subject)

        cls.get_logger().debug(
            f"No read rule for {type(target).__name__}, denying user {user.pk}"
        )
        return False

    @classmethod
    def _can_read_repository(cls, user: User, repository: Repository) -> bool:
        if repository.is_public:
            return True
        return repository.has_member(user) or repository.group.has_member(user)


def can_read(user, target) -> bool:
    """Module-level entry point referenced by NOTIFICATIONS["ABILITY_CHECKER"]."""
    return WorkspaceAbility.can_read(user, target)
