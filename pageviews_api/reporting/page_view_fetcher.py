"""Page-view fetch workflow for single properties and concurrent batches."""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Callable, Sequence

from pageviews_api.adapters import (
    AnalyticsUpstreamError,
    PageViewReportPort,
    adapter_translate_error,
)
from pageviews_api.domain import (
    BatchResponse,
    PropertyResult,
    domain_format_count,
    domain_placeholder_property_name,
    domain_trailing_day_range,
)

from .interfaces import PageViewServicePort
from .name_resolver import PropertyNameResolver

logger = logging.getLogger(__name__)


class PageViewFetcher(PageViewServicePort):
    """Combine GA4 page-view reports with property names into result records."""

    def __init__(
        self,
        report_adapter: PageViewReportPort,
        name_resolver: PropertyNameResolver,
        max_concurrency: int = 0,
        today_provider: Callable[[], date] = date.today,
    ):
        """Initialize fetcher dependencies.

        Args:
            report_adapter: Adapter running page-view reports.
            name_resolver: Resolver for property display names.
            max_concurrency: Maximum in-flight property fetches per batch, 0 for no cap.
            today_provider: Callable returning the local calendar date.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when dependencies are invalid.
        """

        if report_adapter is None:
            raise ValueError("report_adapter must not be None")
        if name_resolver is None:
            raise ValueError("name_resolver must not be None")
        if max_concurrency < 0:
            raise ValueError("max_concurrency must be >= 0")

        self._report_adapter = report_adapter
        self._name_resolver = name_resolver
        self._max_concurrency = max_concurrency
        self._today_provider = today_provider

    async def reporting_fetch_property(self, property_id: str) -> PropertyResult:
        """Fetch yesterday-through-today page views for one property.

        Failures are captured in the returned record instead of raised. On
        failure the property name is resolved a second time so the record
        still carries a usable name.

        Args:
            property_id: GA4 property identifier.

        Returns:
            PropertyResult: Success record with counts, or failure record with
            error message and category.
        """

        date_range = domain_trailing_day_range(self._today_provider)
        try:
            property_name = await self._name_resolver.reporting_resolve_name(property_id)
            raw_value = await self._report_adapter.adapter_fetch_page_view_value(property_id, date_range)
            pageviews = reporting_parse_metric_value(raw_value)
        except Exception as error:  # pylint: disable=broad-exception-caught
            adapter_error = adapter_translate_error(error)
            logger.warning("Error fetching data for property %s: %s", property_id, adapter_error)
            return PropertyResult(
                property_id=property_id,
                property_name=await self._reporting_resolve_name_after_failure(property_id),
                error=str(adapter_error),
                error_category=adapter_error.category,
            )

        return PropertyResult(
            property_id=property_id,
            property_name=property_name,
            pageviews=pageviews,
            pageviews_formatted=domain_format_count(pageviews),
        )

    async def reporting_fetch_properties(self, property_ids: Sequence[str]) -> list[PropertyResult]:
        """Fetch page views for many properties concurrently.

        Args:
            property_ids: Property identifiers in request order.

        Returns:
            list[PropertyResult]: One record per input id, in input order.

        Raises:
            RuntimeError: Raised only when task scheduling itself fails.
        """

        if self._max_concurrency == 0:
            return list(
                await asyncio.gather(*(self.reporting_fetch_property(property_id) for property_id in property_ids))
            )

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _fetch_bounded(property_id: str) -> PropertyResult:
            async with semaphore:
                return await self.reporting_fetch_property(property_id)

        return list(await asyncio.gather(*(_fetch_bounded(property_id) for property_id in property_ids)))

    async def _reporting_resolve_name_after_failure(self, property_id: str) -> str:
        try:
            return await self._name_resolver.reporting_resolve_name(property_id)
        except Exception:  # pylint: disable=broad-exception-caught
            return domain_placeholder_property_name(property_id)


def reporting_parse_metric_value(raw_value: str | None) -> int:
    """Parse a raw GA4 metric value as a base-10 integer.

    Args:
        raw_value: Metric value string, or None when the report had no rows.

    Returns:
        int: Parsed count, 0 when there were no rows.

    Raises:
        AnalyticsUpstreamError: Raised when the value is not a plain ASCII digit string.
    """

    if raw_value is None:
        return 0
    normalized_value = str(raw_value).strip()
    if not (normalized_value.isascii() and normalized_value.isdigit()):
        raise AnalyticsUpstreamError(f"non-numeric metric value from GA4: {raw_value!r}")
    return int(normalized_value)


def reporting_summarize_batch(results: Sequence[PropertyResult]) -> BatchResponse:
    """Build the batch envelope with the total of successful counts.

    Args:
        results: Per-property results.

    Returns:
        BatchResponse: Results plus total page views; failed entries count as 0.
    """

    total = sum(result.pageviews or 0 for result in results if not result.failed)
    return BatchResponse(properties=list(results), total=total)


__all__ = [
    "PageViewFetcher",
    "reporting_parse_metric_value",
    "reporting_summarize_batch",
]
