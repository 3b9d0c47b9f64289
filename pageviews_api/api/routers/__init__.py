"""API router package for endpoint composition."""

from .health import api_create_health_router
from .pageviews import api_create_pageviews_router

__all__ = ["api_create_health_router", "api_create_pageviews_router"]
