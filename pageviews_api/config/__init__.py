"""Configuration package for runtime settings, credentials and logging."""

from .credentials import (
    ANALYTICS_READONLY_SCOPE,
    CredentialsLoadError,
    ServiceAccountKey,
    config_build_google_credentials,
    config_load_service_account_key,
)
from .logging_setup import config_configure_logging
from .settings import AppSettings, SettingsLoadError, config_load_settings

__all__ = [
    "ANALYTICS_READONLY_SCOPE",
    "AppSettings",
    "CredentialsLoadError",
    "ServiceAccountKey",
    "SettingsLoadError",
    "config_build_google_credentials",
    "config_configure_logging",
    "config_load_service_account_key",
    "config_load_settings",
]
