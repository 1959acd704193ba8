"""
Resend transactional email client.

Sends HTML emails with a plain-text alternative through the Resend HTTP API.

Dependencies: httpx
System role: Outbound email delivery for leads and confirmations
"""

import logging
import re
from dataclasses import dataclass

import httpx

from franchise_site.core.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)


@dataclass
class EmailMessage:
    """An outgoing email."""

    to: str
    subject: str
    html: str
    text: str | None = None
    reply_to: str | None = None


def html_to_text_fallback(body_html: str) -> str:
    """Plain-text fallback by stripping HTML tags."""
    text = re.sub(r"<[^>]+>", " ", body_html)
    return re.sub(r"\s+", " ", text).strip()


class ResendEmailClient:
    """Async client for the Resend send-email endpoint."""

    def __init__(
        self,
        api_key: str | None,
        from_email: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the email client.

        Args:
            api_key: Resend API key (sending fails when unset)
            from_email: Sender address
            api_url: Send-email endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self._api_key = api_key
        self._from_email = from_email
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self._api_key and self._from_email)

    async def send(self, message: EmailMessage) -> str:
        """
        Send one email.

        Args:
            message: Email to send

        Returns:
            str: Provider message id ("" when the provider returns none)

        Raises:
            EmailDeliveryError: Not configured, HTTP failure or non-2xx response
        """
        if not self.configured:
            raise EmailDeliveryError("Resend is not configured", recipient=message.to)

        payload = {
            "from": self._from_email,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
            "text": message.text or html_to_text_fallback(message.html),
        }
        if message.reply_to:
            payload["reply_to"] = message.reply_to

        headers = {"Authorization": f"Bearer {self._api_key}", "Content-Type": "application/json"}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._api_url, headers=headers, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise EmailDeliveryError(
                "Email provider rejected message",
                recipient=message.to,
                details={"status_code": e.response.status_code, "body": e.response.text[:500]},
            ) from e
        except httpx.HTTPError as e:
            raise EmailDeliveryError(
                f"Email request failed: {type(e).__name__}",
                recipient=message.to,
            ) from e

        provider_id = ""
        try:
            body = response.json() if response.content else None
        except ValueError:
            body = None
        if isinstance(body, dict):
            provider_id = str(body.get("id") or "")
        logger.info(
            "Email sent",
            extra={"recipient": message.to, "subject": message.subject, "provider_id": provider_id},
        )
        return provider_id
