"""
Boundary layer for external system integrations.

Handles all interactions with external systems (database, object storage,
email provider, CAPTCHA and agent webhooks).
"""
