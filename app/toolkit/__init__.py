"""
Toolkit - Delivery Utilities & Services.

Key components:
    - services/email.py: EmailService class (outbound email transport)
    - helpers.py: mask_email for log-safe addresses
    - protocols.py: EmailSender interface

Usage:
    from toolkit.services.email import EmailService
    from toolkit.protocols import EmailSender

Note:
    This app has no models.
"""
