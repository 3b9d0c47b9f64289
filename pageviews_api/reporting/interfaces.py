"""Typed interfaces for reporting-layer responsibilities."""

from typing import Protocol, Sequence

from pageviews_api.domain import PropertyResult


class PageViewServicePort(Protocol):
    """Port definition consumed by the HTTP surface."""

    async def reporting_fetch_property(self, property_id: str) -> PropertyResult:
        """Fetch page views for one property.

        Args:
            property_id: GA4 property identifier.

        Returns:
            PropertyResult: Success or captured-failure record.
        """

    async def reporting_fetch_properties(self, property_ids: Sequence[str]) -> list[PropertyResult]:
        """Fetch page views for many properties, preserving input order.

        Args:
            property_ids: Property identifiers in request order.

        Returns:
            list[PropertyResult]: One record per input id.

        Raises:
            RuntimeError: Raised when batch scheduling fails.
        """
