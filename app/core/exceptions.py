"""
Base exception classes for application-wide error handling.

This module provides the root of the application exception hierarchy:
- Consistent error payloads across the application
- Machine-readable error codes for client handling
- Detailed error information for debugging

Usage:
    from core.exceptions import BaseApplicationError

    class TargetResolutionError(BaseApplicationError):
        default_error_code = "TARGET_UNRESOLVABLE"

    raise TargetResolutionError(
        "Unsupported target",
        details={"model": "auth.Permission"},
    )

Note:
    These exceptions signal caller bugs and domain errors.
    Expected business outcomes are returned as ServiceResult instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for client-side handling
        details: Additional error context (model labels, ids, etc.)
    """

    default_error_code: str = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )
