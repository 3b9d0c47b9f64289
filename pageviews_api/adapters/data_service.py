"""GA4 Data API adapter implementation for page-view reports."""

from __future__ import annotations

import logging
from typing import Any, Callable, Final

from google.analytics.data_v1beta import BetaAnalyticsDataAsyncClient
from google.analytics.data_v1beta.types import DateRange as ReportDateRange
from google.analytics.data_v1beta.types import Metric, RunReportRequest

from pageviews_api.domain import DateRange

from .error_codes import adapter_translate_error
from .interfaces import PageViewReportPort

logger = logging.getLogger(__name__)


class GoogleAnalyticsDataAdapter(PageViewReportPort):
    """Adapter implementation for the GA4 Data API `RunReport` call."""

    PAGE_VIEW_METRIC: Final[str] = "screenPageViews"

    def __init__(
        self,
        client: Any | None = None,
        client_factory: Callable[[], Any] | None = None,
        request_timeout_seconds: float = 10.0,
    ):
        """Initialize GA4 Data API adapter.

        Args:
            client: Ready async client, mainly for tests.
            client_factory: Factory building a `BetaAnalyticsDataAsyncClient` on first use.
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

        self._client = client
        self._client_factory = client_factory
        self._request_timeout_seconds = request_timeout_seconds

    async def adapter_fetch_page_view_value(self, property_id: str, date_range: DateRange) -> str | None:
        """Run a one-metric report and return the first row value.

        Args:
            property_id: GA4 property identifier.
            date_range: Inclusive report date range.

        Returns:
            str | None: Raw metric value, or None when the report has no rows.

        Raises:
            AnalyticsAdapterError: Raised for any upstream or transport failure.
        """

        normalized_property_id = property_id.strip()
        if not normalized_property_id:
            raise ValueError("property_id must not be blank")

        request = RunReportRequest(
            property=f"properties/{normalized_property_id}",
            date_ranges=[ReportDateRange(start_date=date_range.start_date, end_date=date_range.end_date)],
            metrics=[Metric(name=self.PAGE_VIEW_METRIC)],
        )
        try:
            response = await self._adapter_client().run_report(
                request=request,
                timeout=self._request_timeout_seconds,
            )
        except Exception as error:
            translated_error = adapter_translate_error(error)
            logger.warning("GA4 report failed for property %s: %s", normalized_property_id, translated_error)
            raise translated_error from error

        if not response.rows:
            return None
        return response.rows[0].metric_values[0].value

    def _adapter_client(self) -> Any:
        """Return the async client, building it on first use inside the event loop."""

        if self._client is None:
            self._client = self._client_factory()
        return self._client


def adapter_create_data_client(credentials: Any) -> BetaAnalyticsDataAsyncClient:
    """Build the async GA4 Data API client.

    Args:
        credentials: google-auth credentials.

    Returns:
        BetaAnalyticsDataAsyncClient: Client bound to the running event loop.
    """

    return BetaAnalyticsDataAsyncClient(credentials=credentials)
