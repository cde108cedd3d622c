"""
Target resolution for notifications.

Turns a target entity into a TargetInfo: its kind, canonical URL, title
and, for mention and comment events, an HTML excerpt. Entities are
consumed through a small duck-typed surface:

    get_absolute_url()    every entity
    display_title         every entity
    subject               Member (the Group or Repository)
    commentable           Comment (the Doc or Issue)
    body_html             Comment
    body                  Doc (raw source scanned for mentions)

Kinds are looked up from NotificationConfig.target_models, so a model
that is not registered there cannot be a notification target.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from django.apps import apps
from django.utils.html import escape

from notifications.exceptions import TargetResolutionError
from notifications.models import NotifyType, TargetKind

if TYPE_CHECKING:
    from django.db.models import Model

    from notifications.conf import NotificationConfig

# Attribute holding the parent entity, per kind
PARENT_ATTRIBUTES = {
    TargetKind.MEMBER: "subject",
    TargetKind.COMMENT: "commentable",
}

EXCERPT_TYPES = (NotifyType.MENTION, NotifyType.COMMENT)


@dataclass(frozen=True)
class TargetInfo:
    """
    Everything the formatter needs to know about a target.

    Attributes:
        kind: Concrete kind of the target
        id: Primary key of the target
        url: Canonical absolute URL
        title: Short human label
        mention_excerpt: HTML fragment, empty unless mention/comment
        parent_kind: Kind of the membership subject or commentable
        parent_id: Primary key of the parent
        parent_title: Label of the parent
        body_html: Rendered comment body
    """

    kind: TargetKind
    id: int | str
    url: str
    title: str
    mention_excerpt: str = ""
    parent_kind: TargetKind | None = None
    parent_id: int | str | None = None
    parent_title: str = ""
    body_html: str = ""


def target_kind(target: Model | None, config: NotificationConfig) -> TargetKind:
    """
    Return the registered kind of ``target``.

    Raises:
        TargetResolutionError: target is None, unsaved or unregistered
    """
    if target is None:
        raise TargetResolutionError("Notification target is missing")

    meta = getattr(target, "_meta", None)
    if meta is None:
        raise TargetResolutionError(
            "Notification target is not a model instance",
            details={"type": type(target).__name__},
        )
    if target.pk is None:
        raise TargetResolutionError(
            "Notification target has not been saved",
            details={"model": meta.label},
        )

    for kind, label in config.target_models.items():
        if label.lower() == meta.label_lower:
            return TargetKind(kind)

    raise TargetResolutionError(
        f"Unsupported notification target: {meta.label}",
        details={"model": meta.label},
    )


def model_for_kind(kind, config: NotificationConfig) -> type[Model]:
    """
    Return the model class registered for ``kind``.

    Raises:
        TargetResolutionError: unknown kind or no model registered for it
    """
    try:
        kind = TargetKind(kind)
        label = config.target_models[kind.value]
    except (ValueError, KeyError):
        raise TargetResolutionError(
            f"Unknown target type: {kind}",
            details={"target_type": str(kind)},
        ) from None
    return apps.get_model(label)


def mention_pattern(slug: str) -> re.Pattern:
    """Match ``@slug`` not followed by another slug character."""
    return re.compile(rf"@{re.escape(slug)}(?![\w-])")


def doc_mention_excerpt(body: str, slug: str | None) -> str:
    """
    Collect every line of ``body`` mentioning ``@slug``.

    Matching lines are stripped, joined by a blank line, escaped and
    rendered with ``<br />`` line breaks. Empty when nothing matches.
    """
    if not body or not slug:
        return ""

    pattern = mention_pattern(slug)
    lines = [line.strip() for line in body.splitlines() if pattern.search(line)]
    if not lines:
        return ""

    return str(escape("\n\n".join(lines))).replace("\n", "<br />")


def _mention_excerpt(target, kind: TargetKind, notify_type: str, recipient) -> str:
    if notify_type not in EXCERPT_TYPES:
        return ""
    if kind == TargetKind.COMMENT:
        return target.body_html or ""
    if kind == TargetKind.DOC and notify_type == NotifyType.MENTION:
        return doc_mention_excerpt(target.body, getattr(recipient, "slug", None))
    return ""


def resolve_target(
    target: Model | None,
    notify_type: str,
    *,
    recipient=None,
    config: NotificationConfig,
) -> TargetInfo:
    """
    Build the TargetInfo for ``target`` as seen by ``recipient``.

    Args:
        target: The entity the notification is about
        notify_type: Event type; selects whether an excerpt is extracted
        recipient: User the excerpt is extracted for (Doc mentions)
        config: Host and target registry

    Raises:
        TargetResolutionError: Target or its parent cannot be resolved
    """
    kind = target_kind(target, config)

    parent_kind = None
    parent_id = None
    parent_title = ""
    parent_attribute = PARENT_ATTRIBUTES.get(kind)
    if parent_attribute:
        parent = getattr(target, parent_attribute)
        parent_kind = target_kind(parent, config)
        parent_id = parent.pk
        parent_title = parent.display_title

    return TargetInfo(
        kind=kind,
        id=target.pk,
        url=config.absolute_url(target.get_absolute_url()),
        title=target.display_title,
        mention_excerpt=_mention_excerpt(target, kind, notify_type, recipient),
        parent_kind=parent_kind,
        parent_id=parent_id,
        parent_title=parent_title,
        body_html=getattr(target, "body_html", "") if kind == TargetKind.COMMENT else "",
    )
