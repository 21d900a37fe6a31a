"""SendGrid mail adapter."""

from .client import MockMailClient, SendGridMailClient, SentMail

__all__ = ["MockMailClient", "SendGridMailClient", "SentMail"]
