"""
Tests for environment-driven configuration.

System role: Verification of env prefixes and the shared settings base
"""

import pytest

from franchise_site.configs.base import BaseSettings
from franchise_site.configs.database import DatabaseSettings
from franchise_site.configs.integrations import CaptchaSettings, EmailSettings, WebhookSettings
from franchise_site.configs.settings import Settings
from franchise_site.configs.site import AuthSettings, SiteSettings
from franchise_site.configs.storage import StorageSettings


@pytest.mark.parametrize(
    "settings_class",
    [DatabaseSettings, StorageSettings, EmailSettings, CaptchaSettings, WebhookSettings, SiteSettings, AuthSettings],
)
def test_config_classes_share_base(settings_class) -> None:
    assert issubclass(settings_class, BaseSettings)
    assert settings_class.model_config["extra"] == "ignore"
    assert settings_class.model_config["env_file"] == ".env"
    assert settings_class.model_config["case_sensitive"] is False


def test_env_prefixes_are_applied(monkeypatch) -> None:
    monkeypatch.setenv("SITE_NAME", "Franchise Finders")
    monkeypatch.setenv("S3_MEDIA_BUCKET", "franchise-media")
    monkeypatch.setenv("TURNSTILE_SECRET_KEY", "turnstile-secret")

    assert SiteSettings().name == "Franchise Finders"
    assert StorageSettings().bucket == "franchise-media"
    assert CaptchaSettings().secret_key == "turnstile-secret"


def test_unknown_keys_are_ignored() -> None:
    settings = StorageSettings(bucket="media", not_a_setting="x")

    assert settings.bucket == "media"
    assert not hasattr(settings, "not_a_setting")


def test_app_level_settings(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.debug is False
