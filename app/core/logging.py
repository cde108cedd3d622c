"""
Logging helpers shared by every handler in settings.LOGGING.

SensitiveDataFilter scrubs credentials and document bodies from log
records before they reach the console or the rotating log file. Keys are
matched as substrings, case-insensitively, against mapping arguments and
``key=value`` pairs inside the rendered message.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

FILTERED = "[FILTERED]"

SENSITIVE_KEYS = (
    "passw",
    "secret",
    "token",
    "_key",
    "crypt",
    "salt",
    "certificate",
    "otp",
    "ssn",
    "draft_body",
    "body",
    "password_confirmation",
)

_PAIR_RE = re.compile(
    r"(?P<key>[\w-]*(?:%s)[\w-]*)(?P<sep>\s*[=:]\s*)(?P<value>'[^']*'|\"[^\"]*\"|[^\s,}&]+)"
    % "|".join(re.escape(key) for key in SENSITIVE_KEYS),
    re.IGNORECASE,
)


def is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(fragment in lowered for fragment in SENSITIVE_KEYS)


def scrub(value):
    """Return ``value`` with sensitive entries replaced by ``[FILTERED]``."""
    if isinstance(value, Mapping):
        return {
            key: FILTERED if is_sensitive(str(key)) else scrub(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(scrub(item) for item in value)
    if isinstance(value, str):
        return _PAIR_RE.sub(
            lambda m: f"{m.group('key')}{m.group('sep')}{FILTERED}", value
        )
    return value


class SensitiveDataFilter(logging.Filter):
    """Logging filter that redacts sensitive parameters in place."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, Mapping):
            record.args = scrub(record.args)
        elif isinstance(record.args, tuple):
            record.args = tuple(scrub(arg) for arg in record.args)
        if isinstance(record.msg, str):
            record.msg = scrub(record.msg)
        return True
