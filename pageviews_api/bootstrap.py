"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging

from fastapi import FastAPI

from pageviews_api.adapters import (
    GoogleAnalyticsAdminAdapter,
    GoogleAnalyticsDataAdapter,
    adapter_create_admin_client,
    adapter_create_data_client,
)
from pageviews_api.api import create_api_application
from pageviews_api.config import (
    AppSettings,
    config_build_google_credentials,
    config_load_service_account_key,
    config_load_settings,
)
from pageviews_api.reporting import PageViewFetcher, PropertyNameResolver

logger = logging.getLogger(__name__)


def bootstrap_create_page_view_fetcher(settings: AppSettings) -> PageViewFetcher:
    """Load credentials and assemble the GA4 reporting service.

    Args:
        settings: Validated runtime settings.

    Returns:
        PageViewFetcher: Fetcher wired to GA4 Admin and Data adapters.

    Raises:
        CredentialsLoadError: Raised when the service account key is missing or invalid.
    """

    service_account_key = config_load_service_account_key(settings.google_application_credentials)
    credentials = config_build_google_credentials(service_account_key)
    logger.info("Successfully loaded service account key for: %s", service_account_key.client_email)

    metadata_adapter = GoogleAnalyticsAdminAdapter(
        credentials=credentials,
        client_factory=lambda: adapter_create_admin_client(credentials),
        request_timeout_seconds=settings.upstream_timeout_seconds,
    )
    report_adapter = GoogleAnalyticsDataAdapter(
        client_factory=lambda: adapter_create_data_client(credentials),
        request_timeout_seconds=settings.upstream_timeout_seconds,
    )
    return PageViewFetcher(
        report_adapter=report_adapter,
        name_resolver=PropertyNameResolver(metadata_adapter=metadata_adapter),
        max_concurrency=settings.batch_max_concurrency,
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        CredentialsLoadError: Raised when the service account key is missing or invalid.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(
        settings=resolved_settings,
        page_view_service=bootstrap_create_page_view_fetcher(resolved_settings),
    )
