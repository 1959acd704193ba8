"""
Mailer boundary modules.

Exports: ResendEmailClient, EmailMessage
"""

from .resend_client import EmailMessage, ResendEmailClient

__all__ = ["ResendEmailClient", "EmailMessage"]
