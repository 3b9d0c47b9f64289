"""GA4 page-view REST service."""
