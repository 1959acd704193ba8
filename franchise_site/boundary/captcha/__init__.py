"""
CAPTCHA boundary modules.

Exports: TurnstileVerifier
"""

from .turnstile import TurnstileVerifier

__all__ = ["TurnstileVerifier"]
