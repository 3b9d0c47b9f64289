"""Project-native typed exceptions for GA4 adapter failures."""

from __future__ import annotations

from pageviews_api.domain import ErrorCategory


class AnalyticsAdapterError(Exception):
    """Base exception for adapter-level GA4 failures.

    Attributes:
        category: Failure class used for HTTP status mapping.
        status_code: Optional upstream HTTP-equivalent status code.
    """

    category: ErrorCategory = ErrorCategory.UPSTREAM

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AnalyticsValidationError(AnalyticsAdapterError, ValueError):
    """Upstream rejected the request arguments, for example a malformed property id."""

    category = ErrorCategory.VALIDATION


class AnalyticsAuthorizationError(AnalyticsAdapterError, PermissionError):
    """Upstream rejected the service account credentials or permissions."""

    category = ErrorCategory.AUTHORIZATION


class AnalyticsUpstreamError(AnalyticsAdapterError, RuntimeError):
    """Any other upstream failure, including unknown properties and malformed payloads."""

    category = ErrorCategory.UPSTREAM


class AnalyticsTimeoutError(AnalyticsUpstreamError, TimeoutError):
    """Upstream call exceeded the configured timeout."""
