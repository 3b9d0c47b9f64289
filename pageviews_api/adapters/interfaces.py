"""Typed interfaces for adapter-layer responsibilities."""

from typing import Protocol

from pageviews_api.domain import DateRange


class PropertyMetadataPort(Protocol):
    """Port definition for reading GA4 property metadata."""

    async def adapter_fetch_display_name(self, property_id: str) -> str | None:
        """Fetch the display name of one property.

        Args:
            property_id: GA4 property identifier.

        Returns:
            str | None: Display name, or None when upstream has none.

        Raises:
            AnalyticsAdapterError: Raised when the lookup fails.
        """


class PageViewReportPort(Protocol):
    """Port definition for running GA4 page-view reports."""

    async def adapter_fetch_page_view_value(self, property_id: str, date_range: DateRange) -> str | None:
        """Fetch the raw page-view metric value for one property.

        Args:
            property_id: GA4 property identifier.
            date_range: Inclusive report date range.

        Returns:
            str | None: Raw metric value of the first row, or None when the report has no rows.

        Raises:
            AnalyticsAdapterError: Raised when the report call fails.
        """
