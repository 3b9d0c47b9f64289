"""Typed domain models shared across runtime layers.

This module provides simple data contracts for cross-layer communication
between GA4 adapters, the reporting services, and the HTTP surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """Failure classes used to map upstream errors onto HTTP status codes."""

    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    UPSTREAM = "upstream"


@dataclass(frozen=True)
class DateRange:
    """Calendar date range sent to the reporting API.

    Attributes:
        start_date: Inclusive start date in ISO `YYYY-MM-DD` form.
        end_date: Inclusive end date in ISO `YYYY-MM-DD` form.
    """

    start_date: str
    end_date: str


@dataclass(frozen=True)
class PropertyResult:
    """Outcome of one property page-view fetch.

    Exactly one of `pageviews` and `error` is set. `property_name` is always
    usable, falling back to a placeholder when the name lookup fails.

    Attributes:
        property_id: GA4 property identifier.
        property_name: Display name or `Property {id}` placeholder.
        pageviews: Page-view count on success.
        pageviews_formatted: Comma-grouped count on success.
        error: Failure message when the fetch failed.
        error_category: Failure class when the fetch failed.
    """

    property_id: str
    property_name: str
    pageviews: int | None = None
    pageviews_formatted: str | None = None
    error: str | None = None
    error_category: ErrorCategory | None = None

    @property
    def failed(self) -> bool:
        """Return whether this result captures a failure."""

        return self.error is not None


@dataclass(frozen=True)
class BatchResponse:
    """Aggregated batch result.

    Attributes:
        properties: Per-property results in request order.
        total: Sum of page views across successful entries.
    """

    properties: list[PropertyResult]
    total: int


def domain_placeholder_property_name(property_id: str) -> str:
    """Return the fallback display name for a property.

    Args:
        property_id: GA4 property identifier.

    Returns:
        str: Placeholder name.
    """

    return f"Property {property_id}"
