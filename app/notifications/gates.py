"""
Permission gate for notification dispatch.

Delegates to the configured ability checker and fails closed: any error
raised while loading or calling it is logged and treated as a denial.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from django.utils.module_loading import import_string

if TYPE_CHECKING:
    from collections.abc import Callable

    from notifications.conf import NotificationConfig

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def load_ability_checker(path: str) -> Callable[..., bool]:
    return import_string(path)


def may_notify(recipient, target, *, config: NotificationConfig) -> bool:
    """
    Return True when ``recipient`` may be told about ``target``.

    An absent recipient is never notified.
    """
    if recipient is None:
        return False

    try:
        checker = load_ability_checker(config.ability_checker)
        return bool(checker(recipient, target))
    except Exception:
        logger.warning(
            f"Ability check via {config.ability_checker} failed for user "
            f"{getattr(recipient, 'pk', None)}, denying notification",
            exc_info=True,
        )
        return False
