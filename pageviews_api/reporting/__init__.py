"""Reporting layer package for page-view fetch workflows."""

from .interfaces import PageViewServicePort
from .name_resolver import PropertyNameResolver
from .page_view_fetcher import PageViewFetcher, reporting_parse_metric_value, reporting_summarize_batch

__all__ = [
    "PageViewFetcher",
    "PageViewServicePort",
    "PropertyNameResolver",
    "reporting_parse_metric_value",
    "reporting_summarize_batch",
]
