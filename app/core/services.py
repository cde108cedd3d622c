"""
Base service layer patterns for business logic encapsulation.

This module provides foundational patterns for the service layer:
- ServiceResult: Standard result wrapper for consistent success/failure handling
- BaseService: Base class with common service utilities

Service Layer Philosophy:
    Services encapsulate business logic separate from views and models.
    Views handle HTTP concerns, models handle data, services handle logic.

Pattern Comparison:
    - ServiceResult: Use for expected failures (ownership, business rules)
    - Exceptions: Use for caller bugs and unexpected failures

Usage:
    from core.services import BaseService, ServiceResult

    class InboxService(BaseService):
        @classmethod
        def mark_as_read(cls, notification, user) -> ServiceResult[Notification]:
            if notification.user_id != user.id:
                return ServiceResult.failure("Not yours", error_code="NOT_OWNER")

            with cls.atomic():
                notification.save()

            cls.get_logger().info(f"Marked {notification.id} as read")
            return ServiceResult.success(notification)
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from django.db import transaction

if TYPE_CHECKING:
    from collections.abc import Generator

# Generic type for ServiceResult data
T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Standard result wrapper for service operations.

    Provides consistent success/failure handling without exceptions.
    Use this for expected failures (ownership checks, business rule violations).

    Attributes:
        success: Whether the operation succeeded
        data: Result data if successful (None if failed)
        error: Error message if failed (None if successful)
        error_code: Machine-readable code for client handling

    Usage:
        result = NotificationService.mark_as_read(notification, user)
        if result.success:
            notification = result.data
        else:
            print(f"Error: {result.error} ({result.error_code})")
    """

    success: bool
    data: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def success(cls, data: T) -> ServiceResult[T]:
        """Create a successful result carrying ``data``."""
        return cls(success=True, data=data)

    @classmethod
    def failure(
        cls,
        error: str,
        error_code: str | None = None,
    ) -> ServiceResult[T]:
        """
        Create a failed result.

        Args:
            error: Human-readable error message
            error_code: Machine-readable error code for client handling

        Returns:
            ServiceResult with success=False and error details
        """
        return cls(
            success=False,
            error=error,
            error_code=error_code,
        )

    def __bool__(self) -> bool:
        return self.success


class BaseService:
    """
    Base class for service layer classes.

    Provides common utilities for services:
    - Logging setup per service
    - Database transaction management

    Design Notes:
        - Use @classmethod (no instance state)
        - Use ServiceResult for expected failures
        - Raise exceptions for caller bugs
    """

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get logger for this service.

        Returns a logger named after the service class for
        easy filtering in logs.
        """
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    @classmethod
    @contextmanager
    def atomic(cls) -> Generator[None, None, None]:
        """
        Execute operations in a database transaction.

        Thin wrapper around Django's transaction.atomic() that makes
        transaction boundaries explicit in service code.
        """
        with transaction.atomic():
            yield
