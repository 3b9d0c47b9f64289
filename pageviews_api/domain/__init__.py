"""Domain models used across application layer boundaries."""

from .dates import domain_trailing_day_range
from .formatting import domain_format_count
from .models import (
    BatchResponse,
    DateRange,
    ErrorCategory,
    PropertyResult,
    domain_placeholder_property_name,
)

__all__ = [
    "BatchResponse",
    "DateRange",
    "ErrorCategory",
    "PropertyResult",
    "domain_format_count",
    "domain_placeholder_property_name",
    "domain_trailing_day_range",
]
