"""
Authentication application.

Provides the email-based User model that notifications are addressed to
and attributed from.

Usage:
    from authentication.models import User
"""
