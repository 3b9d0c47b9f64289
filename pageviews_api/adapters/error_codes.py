"""Canonical GA4 error translation for adapter-layer routing."""

from __future__ import annotations

import asyncio
from typing import Final

from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions

from .errors import (
    AnalyticsAdapterError,
    AnalyticsAuthorizationError,
    AnalyticsTimeoutError,
    AnalyticsUpstreamError,
    AnalyticsValidationError,
)

ANALYTICS_VALIDATION_STATUS_CODES: Final[frozenset[int]] = frozenset({400})

ANALYTICS_AUTHORIZATION_STATUS_CODES: Final[frozenset[int]] = frozenset({401, 403})


def adapter_translate_error(error: BaseException) -> AnalyticsAdapterError:
    """Convert a client library exception into a tagged adapter error.

    Args:
        error: Exception raised by google-auth, google-api-core or asyncio.

    Returns:
        AnalyticsAdapterError: Tagged error preserving the original message.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(error, AnalyticsAdapterError):
        return error

    if isinstance(error, (asyncio.TimeoutError, TimeoutError, google_exceptions.DeadlineExceeded)):
        return AnalyticsTimeoutError(f"GA4 request timed out: {error}", status_code=504)

    if isinstance(error, auth_exceptions.RefreshError):
        return AnalyticsAuthorizationError(f"GA4 authentication failed: {error}", status_code=401)

    if isinstance(error, google_exceptions.GoogleAPICallError):
        status_code = error.code
        message = error.message or str(error)
        if status_code in ANALYTICS_VALIDATION_STATUS_CODES:
            return AnalyticsValidationError(message, status_code=status_code)
        if status_code in ANALYTICS_AUTHORIZATION_STATUS_CODES:
            return AnalyticsAuthorizationError(message, status_code=status_code)
        return AnalyticsUpstreamError(message, status_code=status_code)

    return AnalyticsUpstreamError(str(error) or error.__class__.__name__)
