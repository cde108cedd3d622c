"""
Core Application - Infrastructure & Base Classes

Generic, reusable building blocks with no notification-specific logic.

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Services (import from core.services):
    - BaseService: Base class for service layer
    - ServiceResult: Standard result wrapper for success/failure handling

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes

Logging (import from core.logging):
    - SensitiveDataFilter: Redacts credentials and bodies from log records

Note:
    Django models are NOT imported here to avoid AppRegistryNotReady
    errors. Import them directly from their modules.
"""

from .exceptions import BaseApplicationError
from .services import BaseService, ServiceResult

__all__ = [
    "BaseService",
    "ServiceResult",
    "BaseApplicationError",
]
