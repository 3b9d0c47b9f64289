"""Property display-name resolution with placeholder fallback."""
# pylint: disable=too-few-public-methods

from __future__ import annotations

import logging

from pageviews_api.adapters import PropertyMetadataPort
from pageviews_api.domain import domain_placeholder_property_name

logger = logging.getLogger(__name__)


class PropertyNameResolver:
    """Resolve GA4 property display names, never raising to callers."""

    def __init__(self, metadata_adapter: PropertyMetadataPort):
        """Initialize resolver dependencies.

        Args:
            metadata_adapter: Adapter reading property metadata.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when metadata_adapter is invalid.
        """

        if metadata_adapter is None:
            raise ValueError("metadata_adapter must not be None")
        self._metadata_adapter = metadata_adapter

    async def reporting_resolve_name(self, property_id: str) -> str:
        """Return the property display name or its placeholder.

        Args:
            property_id: GA4 property identifier.

        Returns:
            str: Upstream display name, or `Property {id}` when the lookup fails
            or upstream has no name.
        """

        try:
            display_name = await self._metadata_adapter.adapter_fetch_display_name(property_id)
        except Exception as error:  # pylint: disable=broad-exception-caught
            logger.warning("Error fetching property name for %s: %s", property_id, error)
            return domain_placeholder_property_name(property_id)

        return display_name or domain_placeholder_property_name(property_id)
