"""SendGrid mail client implementation."""

import asyncio
from dataclasses import dataclass
from typing import Any

import httpx
import logfire

from social.adapter.error import MailError
from social.adapter.sendgrid.templates import render
from social.domain.service.mailer import MailClient


class SendGridMailClient(MailClient):
    """Delivers mail through the SendGrid v3 API.

    Failed attempts are retried with a linear backoff.
    """

    send_url = "https://api.sendgrid.com/v3/mail/send"

    def __init__(
        self,
        api_key: str,
        from_email: str,
        from_name: str,
        max_retries: int = 3,
        backoff_seconds: float = 1.0,
    ) -> None:
        """Initialize SendGrid client.

        Args:
            api_key: SendGrid API key
            from_email: Sender address
            from_name: Sender display name
            max_retries: Delivery attempts per message
            backoff_seconds: Delay unit between attempts
        """
        self.api_key = api_key
        self.from_email = from_email
        self.from_name = from_name
        self.max_retries = max_retries
        self.backoff_seconds = backoff_seconds

    async def send(
        self,
        template: str,
        display_name: str,
        address: str,
        template_vars: dict[str, Any],
        sandbox: bool,
    ) -> None:
        """Render and deliver a templated message.

        Raises:
            MailError: If rendering fails or every attempt fails
        """
        rendered = render(template, template_vars)

        payload = {
            "personalizations": [{"to": [{"email": address, "name": display_name}]}],
            "from": {"email": self.from_email, "name": self.from_name},
            "subject": rendered.subject,
            "content": [{"type": "text/html", "value": rendered.html}],
            "mail_settings": {"sandbox_mode": {"enable": sandbox}},
        }

        last_error = ""
        with logfire.span("sendgrid.send", template=template, sandbox=sandbox):
            for attempt in range(1, self.max_retries + 1):
                try:
                    async with httpx.AsyncClient() as client:
                        response = await client.post(
                            self.send_url,
                            json=payload,
                            headers={"Authorization": f"Bearer {self.api_key}"},
                            timeout=30.0,
                        )
                except httpx.HTTPError as e:
                    last_error = str(e)
                else:
                    if response.status_code < 300:
                        logfire.info(
                            "Mail sent",
                            template=template,
                            status_code=response.status_code,
                            attempt=attempt,
                        )
                        return
                    last_error = f"status {response.status_code}: {response.text}"

                logfire.warn(
                    "Mail delivery attempt failed",
                    template=template,
                    attempt=attempt,
                    error=last_error,
                )
                if attempt < self.max_retries:
                    await asyncio.sleep(self.backoff_seconds * attempt)

        raise MailError(
            f"Failed to send {template} after {self.max_retries} attempts: {last_error}"
        )


@dataclass
class SentMail:
    """Message captured by MockMailClient."""

    template: str
    display_name: str
    address: str
    template_vars: dict[str, Any]
    sandbox: bool


class MockMailClient(MailClient):
    """Mail client for testing.

    Records messages instead of sending them. Set ``fail`` to make every
    send raise MailError.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[SentMail] = []

    async def send(
        self,
        template: str,
        display_name: str,
        address: str,
        template_vars: dict[str, Any],
        sandbox: bool,
    ) -> None:
        """Record the message, or fail if configured to."""
        if self.fail:
            raise MailError("mock mail delivery failure")

        render(template, template_vars)
        self.sent.append(
            SentMail(
                template=template,
                display_name=display_name,
                address=address,
                template_vars=dict(template_vars),
                sandbox=sandbox,
            )
        )
