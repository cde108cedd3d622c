"""
Message formatting for notifications.

One strategy per (notify_type, target kind) pair produces the title, the
HTML body and the message id used to thread emails about the same
subject. Strategies are plain functions registered with ``@register``;
``check_registry()`` runs at startup and fails when a NotifyType has no
strategy at all.

Titles are plain text. Interpolated plain values are escaped in bodies
through format_html; already-rendered HTML (comment bodies, excerpts) is
inserted as-is.

Usage:
    from notifications.formatters import format_message

    message = format_message(
        NotifyType.COMMENT,
        target_info,
        actor_name="Jason",
        config=config,
    )
    message.title, message.body, message.message_id
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from django.core.exceptions import ImproperlyConfigured
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from notifications.exceptions import UnsupportedTargetError
from notifications.models import NotifyType, TargetKind

if TYPE_CHECKING:
    from notifications.conf import NotificationConfig
    from notifications.resolvers import TargetInfo


@dataclass(frozen=True)
class FormattedMessage:
    title: str
    body: str
    message_id: str


@dataclass(frozen=True)
class FormatContext:
    """Inputs handed to every formatting strategy."""

    notify_type: NotifyType
    info: TargetInfo
    actor_name: str
    config: NotificationConfig
    notification_id: int | None = None
    meta: Mapping = field(default_factory=dict)


Formatter = Callable[[FormatContext], FormattedMessage]

_registry: dict[tuple[NotifyType, TargetKind], Formatter] = {}


def register(notify_type: NotifyType, *kinds: TargetKind):
    """Register the decorated function for ``notify_type`` on each kind."""

    def decorator(func: Formatter) -> Formatter:
        for kind in kinds:
            key = (NotifyType(notify_type), TargetKind(kind))
            if key in _registry:
                raise ImproperlyConfigured(
                    f"Duplicate notification formatter for {key[0].value}/{key[1].value}"
                )
            _registry[key] = func
        return func

    return decorator


def supported_kinds(notify_type) -> list[TargetKind]:
    notify_type = NotifyType(notify_type)
    return [kind for (type_, kind) in _registry if type_ == notify_type]


def check_registry() -> None:
    """
    Verify every NotifyType has at least one formatter.

    Raises:
        ImproperlyConfigured: listing the notify types without a formatter
    """
    missing = [
        notify_type.value
        for notify_type in NotifyType
        if not supported_kinds(notify_type)
    ]
    if missing:
        raise ImproperlyConfigured(
            f"No notification formatter registered for: {', '.join(missing)}"
        )


def format_message(
    notify_type,
    info: TargetInfo,
    *,
    actor_name: str,
    config: NotificationConfig,
    notification_id: int | None = None,
    meta: Mapping | None = None,
) -> FormattedMessage:
    """
    Render title, body and message id for a notification.

    Raises:
        UnsupportedTargetError: No strategy for (notify_type, info.kind)
    """
    try:
        notify_type = NotifyType(notify_type)
    except ValueError:
        raise UnsupportedTargetError(
            f"Unknown notify type: {notify_type}",
            details={"notify_type": str(notify_type)},
        ) from None

    formatter = _registry.get((notify_type, info.kind))
    if formatter is None:
        raise UnsupportedTargetError(
            f"{notify_type.value} notifications do not support {info.kind.value} targets",
            details={"notify_type": notify_type.value, "kind": info.kind.value},
        )

    context = FormatContext(
        notify_type=notify_type,
        info=info,
        actor_name=actor_name or "",
        config=config,
        notification_id=notification_id,
        meta=meta or {},
    )
    return formatter(context)


def _plain(template: str, message_id: str, *args) -> FormattedMessage:
    # title stays plain text, body gets the escaped values
    return FormattedMessage(
        title=template.format(*args),
        body=format_html(template, *args),
        message_id=message_id,
    )


# =============================================================================
# Strategies
# =============================================================================


@register(NotifyType.ADD_MEMBER, TargetKind.MEMBER)
def format_add_member(ctx: FormatContext) -> FormattedMessage:
    info = ctx.info
    if info.parent_kind == TargetKind.GROUP:
        # Groups share the user namespace, hence the "User" label
        message_id = f"add_member-User-{info.parent_id}"
    elif info.parent_kind == TargetKind.REPOSITORY:
        message_id = f"add_member-Repository-{info.parent_id}"
    else:
        raise UnsupportedTargetError(
            "add_member notifications need a Group or Repository membership",
            details={"subject_kind": getattr(info.parent_kind, "value", None)},
        )
    return _plain(
        "{} has added you as a member of [{}]",
        message_id,
        ctx.actor_name,
        info.parent_title,
    )


@register(NotifyType.REPO_IMPORT, TargetKind.REPOSITORY)
def format_repo_import(ctx: FormatContext) -> FormattedMessage:
    status = ctx.meta.get("status", "")
    return _plain(
        "Repository [{}] has been imported {}.",
        f"repo_import-Repository-{ctx.info.id}",
        ctx.info.title,
        status,
    )


def _thread_id(info: TargetInfo) -> str:
    # comment and mention share one thread per commentable
    if info.kind == TargetKind.COMMENT:
        return f"comment-{info.parent_kind.value}-{info.parent_id}"
    return f"comment-{info.kind.value}-{info.id}"


@register(NotifyType.COMMENT, TargetKind.COMMENT)
def format_comment(ctx: FormatContext) -> FormattedMessage:
    info = ctx.info
    body = format_html(
        '<p><a style="font-weight:bold; color: #333" href="{}">{}</a></p>'
        "<p><strong>{}</strong> said:</p> {}",
        info.url,
        info.parent_title,
        ctx.actor_name,
        mark_safe(info.body_html),
    )
    return FormattedMessage(
        title=f"{info.parent_title} got a comment.",
        body=body,
        message_id=_thread_id(info),
    )


@register(NotifyType.MENTION, TargetKind.COMMENT)
def format_comment_mention(ctx: FormatContext) -> FormattedMessage:
    info = ctx.info
    body = format_html(
        "<p><strong>{}</strong> mentioned you:</p><div>{}</div>",
        ctx.actor_name,
        mark_safe(info.mention_excerpt),
    )
    return FormattedMessage(
        title=f"{info.parent_title} got a comment.",
        body=body,
        message_id=_thread_id(info),
    )


@register(NotifyType.MENTION, TargetKind.DOC)
def format_doc_mention(ctx: FormatContext) -> FormattedMessage:
    info = ctx.info
    body = format_html(
        "<p><strong>{}</strong> has mentioned you in [{}].</p><div>{}</div>",
        ctx.actor_name,
        info.title,
        mark_safe(info.mention_excerpt),
    )
    return FormattedMessage(
        title=f"{info.title} content has mentioned you.",
        body=body,
        message_id=_thread_id(info),
    )


# notify_type -> (title suffix, body verb phrase)
ISSUE_PHRASES = {
    NotifyType.ISSUE_ASSIGN: ("has assigned to you.", "has assigned issue to you"),
    NotifyType.NEW_ISSUE: ("has opened new issue.", "has opened new issue"),
    NotifyType.CLOSE_ISSUE: ("has closed issue.", "has closed issue"),
    NotifyType.REOPEN_ISSUE: ("has reopened issue.", "has reopened issue"),
}


@register(NotifyType.ISSUE_ASSIGN, TargetKind.ISSUE)
@register(NotifyType.NEW_ISSUE, TargetKind.ISSUE)
@register(NotifyType.CLOSE_ISSUE, TargetKind.ISSUE)
@register(NotifyType.REOPEN_ISSUE, TargetKind.ISSUE)
def format_issue_event(ctx: FormatContext) -> FormattedMessage:
    info = ctx.info
    title_suffix, verb = ISSUE_PHRASES[ctx.notify_type]
    body = format_html(
        '<p><strong>{}</strong> {}:</p><a href="{}">{}</a>',
        ctx.actor_name,
        verb,
        ctx.config.notification_url(ctx.notification_id),
        info.title,
    )
    return FormattedMessage(
        title=f"{info.title} {title_suffix}",
        body=body,
        message_id=f"{ctx.notify_type.value}-Issue-{info.id}",
    )
