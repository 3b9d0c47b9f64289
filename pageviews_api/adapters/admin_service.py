"""GA4 Admin API adapter implementation for property metadata."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from google.analytics.admin_v1beta import AnalyticsAdminServiceAsyncClient
from google.auth.transport import requests as google_auth_requests

from .error_codes import adapter_translate_error
from .interfaces import PropertyMetadataPort

logger = logging.getLogger(__name__)


class GoogleAnalyticsAdminAdapter(PropertyMetadataPort):
    """Adapter implementation for the GA4 Admin API `GetProperty` call."""

    def __init__(
        self,
        credentials: Any | None = None,
        client: Any | None = None,
        client_factory: Callable[[], Any] | None = None,
        request_timeout_seconds: float = 10.0,
    ):
        """Initialize GA4 Admin API adapter.

        Args:
            credentials: Shared google-auth credentials, refreshed when not valid.
            client: Ready async client, mainly for tests.
            client_factory: Factory building an `AnalyticsAdminServiceAsyncClient` on first use.
            request_timeout_seconds: Per-call timeout in seconds.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        if client is None and client_factory is None:
            raise ValueError("client or client_factory must be provided")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._credentials = credentials
        self._client = client
        self._client_factory = client_factory
        self._request_timeout_seconds = request_timeout_seconds
        self._authorize_lock = asyncio.Lock()

    async def adapter_fetch_display_name(self, property_id: str) -> str | None:
        """Authorize and read the display name of one property.

        Args:
            property_id: GA4 property identifier.

        Returns:
            str | None: Display name, or None when upstream returns an empty name.

        Raises:
            AnalyticsAdapterError: Raised for authentication or lookup failures.
        """

        normalized_property_id = property_id.strip()
        if not normalized_property_id:
            raise ValueError("property_id must not be blank")

        try:
            await self._adapter_authorize()
            property_resource = await self._adapter_client().get_property(
                name=f"properties/{normalized_property_id}",
                timeout=self._request_timeout_seconds,
            )
        except Exception as error:
            translated_error = adapter_translate_error(error)
            logger.warning("GA4 property lookup failed for property %s: %s", normalized_property_id, translated_error)
            raise translated_error from error

        display_name = (property_resource.display_name or "").strip()
        return display_name or None

    async def _adapter_authorize(self) -> None:
        """Refresh shared credentials when no valid token is cached.

        Safe to call before every request; a valid token is left untouched.
        Concurrent callers wait on one refresh instead of starting their own.

        Raises:
            RefreshError: Raised when the identity provider rejects the key.
            TimeoutError: Raised when the refresh exceeds the request timeout.
        """

        if self._credentials is None or self._credentials.valid:
            return
        async with self._authorize_lock:
            if self._credentials.valid:
                return
            await asyncio.wait_for(
                asyncio.to_thread(self._credentials.refresh, google_auth_requests.Request()),
                timeout=self._request_timeout_seconds,
            )

    def _adapter_client(self) -> Any:
        """Return the async client, building it on first use inside the event loop."""

        if self._client is None:
            self._client = self._client_factory()
        return self._client


def adapter_create_admin_client(credentials: Any) -> AnalyticsAdminServiceAsyncClient:
    """Build the async GA4 Admin API client.

    Args:
        credentials: google-auth credentials.

    Returns:
        AnalyticsAdminServiceAsyncClient: Client bound to the running event loop.
    """

    return AnalyticsAdminServiceAsyncClient(credentials=credentials)
