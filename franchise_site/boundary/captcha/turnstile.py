"""
Cloudflare Turnstile verification.

Dependencies: httpx
System role: Bot protection for public forms
"""

import logging

import httpx

logger = logging.getLogger(__name__)


class TurnstileVerifier:
    """Verifies Turnstile tokens against the siteverify endpoint."""

    def __init__(
        self,
        secret_key: str | None,
        verify_url: str = "https://challenges.cloudflare.com/turnstile/v0/siteverify",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._secret_key = secret_key
        self._verify_url = verify_url
        self._timeout = timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        """Verification runs only when a secret key is configured."""
        return bool(self._secret_key)

    async def verify(self, token: str | None, remote_ip: str | None = None) -> bool:
        """
        Verify a widget token.

        Args:
            token: Token posted by the form widget
            remote_ip: Requester IP forwarded to Cloudflare

        Returns:
            bool: True when verification is disabled or the token is valid
        """
        if not self.enabled:
            return True
        if not token:
            return False

        data = {"secret": self._secret_key, "response": token}
        if remote_ip:
            data["remoteip"] = remote_ip

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._verify_url, data=data)
                response.raise_for_status()
                result = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "Turnstile verification request failed",
                extra={"error_type": type(e).__name__, "error_msg": str(e)},
            )
            return False

        success = bool(result.get("success"))
        if not success:
            logger.warning(
                "Turnstile verification rejected",
                extra={"error_codes": result.get("error-codes", [])},
            )
        return success
