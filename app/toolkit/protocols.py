"""
Protocol definitions (interfaces) for outbound delivery services.

Protocols define contracts that services must fulfill, enabling:
- Duck typing with static type checking
- Easy substitution in tests

Available Protocols:
    EmailSender: Email sending interface

Usage:
    from toolkit.protocols import EmailSender

    def deliver(sender: EmailSender, address: str):
        sender.send_raw(address, "Subject", "Plain text body")

Note:
    - @runtime_checkable allows isinstance() checks
    - toolkit.services.email.EmailService satisfies EmailSender
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any


@runtime_checkable
class EmailSender(Protocol):
    """
    Protocol for email sending services.

    Example:
        class SMTPEmailService:
            @staticmethod
            def send_raw(to, subject, body_text, body_html=None, **kwargs) -> bool:
                return True
    """

    def send_raw(
        self,
        to: str | list[str],
        subject: str,
        body_text: str,
        body_html: str | None = None,
        **kwargs: Any,
    ) -> bool:
        """
        Send email.

        Args:
            to: Recipient email address(es)
            subject: Email subject
            body_text: Plain text body
            body_html: HTML body (optional)
            **kwargs: Additional options (from_email, headers, etc.)

        Returns:
            True if email was sent successfully
        """
        ...
