"""Adapter layer package for GA4 integration boundaries."""

from .admin_service import GoogleAnalyticsAdminAdapter, adapter_create_admin_client
from .data_service import GoogleAnalyticsDataAdapter, adapter_create_data_client
from .error_codes import adapter_translate_error
from .errors import (
    AnalyticsAdapterError,
    AnalyticsAuthorizationError,
    AnalyticsTimeoutError,
    AnalyticsUpstreamError,
    AnalyticsValidationError,
)
from .interfaces import PageViewReportPort, PropertyMetadataPort

__all__ = [
    "AnalyticsAdapterError",
    "AnalyticsAuthorizationError",
    "AnalyticsTimeoutError",
    "AnalyticsUpstreamError",
    "AnalyticsValidationError",
    "GoogleAnalyticsAdminAdapter",
    "GoogleAnalyticsDataAdapter",
    "PageViewReportPort",
    "PropertyMetadataPort",
    "adapter_create_admin_client",
    "adapter_create_data_client",
    "adapter_translate_error",
]
