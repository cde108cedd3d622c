"""
Service classes for toolkit app.

Usage:
    from toolkit.services import EmailService
"""

from toolkit.services.email import EmailService

__all__ = ["EmailService"]
