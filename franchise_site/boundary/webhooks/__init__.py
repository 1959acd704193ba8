"""
Webhook boundary modules.

Exports: GHLWebhookClient
"""

from .ghl_client import GHLWebhookClient

__all__ = ["GHLWebhookClient"]
