"""
GoHighLevel webhook client.

Posts lead payloads to an agent's inbound webhook.

Dependencies: httpx
System role: Outbound lead delivery to agent CRMs
"""

import logging
from typing import Any

import httpx

from franchise_site.core.exceptions import WebhookDeliveryError

logger = logging.getLogger(__name__)


class GHLWebhookClient:
    """Async JSON poster for agent webhooks."""

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def post_lead(self, webhook_url: str, payload: dict[str, Any]) -> int:
        """
        Deliver a lead payload.

        Args:
            webhook_url: Agent's webhook URL
            payload: JSON-serialisable lead data

        Returns:
            int: HTTP status code returned by the webhook

        Raises:
            WebhookDeliveryError: Transport failure or non-2xx response
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(webhook_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise WebhookDeliveryError(
                "Webhook returned an error status",
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise WebhookDeliveryError(
                f"Webhook request failed: {type(e).__name__}",
                details={"error_msg": str(e)},
            ) from e

        logger.info("Lead delivered to agent webhook", extra={"status_code": response.status_code})
        return response.status_code
