"""Page-view API router composition for single and batch property reads."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from pageviews_api.adapters import AnalyticsAdapterError
from pageviews_api.domain import BatchResponse, PropertyResult
from pageviews_api.reporting import PageViewServicePort, reporting_summarize_batch

from ..errors import (
    INTERNAL_ERROR_MESSAGE,
    PROPERTY_ID_REQUIRED_MESSAGE,
    PROPERTY_IDS_BODY_REQUIRED_MESSAGE,
    PROPERTY_IDS_EMPTY_MESSAGE,
    PROPERTY_IDS_QUERY_REQUIRED_MESSAGE,
    api_category_error_response,
    api_error_response,
)

logger = logging.getLogger(__name__)


def api_create_pageviews_router(page_view_service: PageViewServicePort) -> APIRouter:
    """Create router exposing page-view endpoints.

    Args:
        page_view_service: Reporting service performing GA4 fetches.

    Returns:
        APIRouter: Router exposing `/api/pageviews` endpoints.

    Raises:
        ValueError: Raised when page_view_service is invalid.
    """

    if page_view_service is None:
        raise ValueError("page_view_service must not be None")

    router = APIRouter(prefix="/api/pageviews", tags=["pageviews"])

    @router.get("/{property_id}")
    async def api_pageviews_single(property_id: str) -> JSONResponse:
        """Return page views for one property in the legacy `{pageviews}` shape.

        Args:
            property_id: GA4 property identifier path parameter.

        Returns:
            JSONResponse: `{"pageviews": n}` or an error payload.
        """

        normalized_property_id = property_id.strip()
        if not normalized_property_id:
            return api_error_response(PROPERTY_ID_REQUIRED_MESSAGE, status.HTTP_400_BAD_REQUEST)

        logger.info("Fetching pageviews for property: %s", normalized_property_id)
        # PageViewServicePort implementations may raise tagged errors instead of capturing them.
        try:
            result = await page_view_service.reporting_fetch_property(normalized_property_id)
        except AnalyticsAdapterError as error:
            logger.error("Error processing request for property %s: %s", normalized_property_id, error)
            return api_category_error_response(error.category)

        if result.failed:
            logger.error("Error processing request for property %s: %s", normalized_property_id, result.error)
            return api_error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return JSONResponse(content={"pageviews": result.pageviews}, status_code=status.HTTP_200_OK)

    @router.get("")
    async def api_pageviews_batch_query(ids: str | None = Query(default=None)) -> JSONResponse:
        """Return page views for comma-separated property ids.

        Args:
            ids: Comma-separated property identifiers.

        Returns:
            JSONResponse: Batch envelope or validation error payload.
        """

        if ids is None or not ids.strip():
            return api_error_response(PROPERTY_IDS_QUERY_REQUIRED_MESSAGE, status.HTTP_400_BAD_REQUEST)

        property_ids = [property_id.strip() for property_id in ids.split(",") if property_id.strip()]
        if not property_ids:
            return api_error_response(PROPERTY_IDS_EMPTY_MESSAGE, status.HTTP_400_BAD_REQUEST)

        logger.info("Fetching pageviews for properties: %s", ", ".join(property_ids))
        return await _api_fetch_batch(page_view_service, property_ids)

    @router.post("")
    async def api_pageviews_batch_body(request: Request) -> JSONResponse:
        """Return page views for property ids posted as `{"propertyIds": [...]}`.

        Args:
            request: Incoming request carrying the JSON body.

        Returns:
            JSONResponse: Batch envelope or validation error payload.
        """

        try:
            body = await request.json()
        except ValueError:
            body = None

        property_ids = api_parse_property_ids_body(body)
        if property_ids is None:
            return api_error_response(PROPERTY_IDS_BODY_REQUIRED_MESSAGE, status.HTTP_400_BAD_REQUEST)

        logger.info("Fetching pageviews for properties (POST): %s", ", ".join(property_ids))
        return await _api_fetch_batch(page_view_service, property_ids)

    return router


async def _api_fetch_batch(page_view_service: PageViewServicePort, property_ids: list[str]) -> JSONResponse:
    try:
        results = await page_view_service.reporting_fetch_properties(property_ids)
    except AnalyticsAdapterError as error:
        logger.error("Error processing multi-property request: %s", error)
        return api_category_error_response(error.category)

    return JSONResponse(
        content=api_serialize_batch_response(reporting_summarize_batch(results)),
        status_code=status.HTTP_200_OK,
    )


def api_parse_property_ids_body(body: object) -> list[str] | None:
    """Extract trimmed property ids from a POST body.

    Args:
        body: Decoded JSON body.

    Returns:
        list[str] | None: Trimmed ids, or None when the body does not carry a
        non-empty array of non-blank strings.
    """

    if not isinstance(body, dict):
        return None
    raw_property_ids = body.get("propertyIds")
    if not isinstance(raw_property_ids, list) or not raw_property_ids:
        return None
    if not all(isinstance(property_id, str) and property_id.strip() for property_id in raw_property_ids):
        return None
    return [property_id.strip() for property_id in raw_property_ids]


def api_serialize_property_result(result: PropertyResult) -> dict[str, object]:
    """Serialize one property result to its JSON payload.

    Args:
        result: Typed property result.

    Returns:
        dict[str, object]: camelCase payload; failed entries carry `error` and null counts.
    """

    payload: dict[str, object] = {
        "propertyId": result.property_id,
        "propertyName": result.property_name,
        "pageviews": result.pageviews,
        "pageviewsFormatted": result.pageviews_formatted,
    }
    if result.failed:
        payload["error"] = result.error
    return payload


def api_serialize_batch_response(batch: BatchResponse) -> dict[str, object]:
    """Serialize a batch envelope to its JSON payload.

    Args:
        batch: Typed batch response.

    Returns:
        dict[str, object]: `{"properties": [...], "total": n}` payload.
    """

    return {
        "properties": [api_serialize_property_result(result) for result in batch.properties],
        "total": batch.total,
    }


__all__ = [
    "api_create_pageviews_router",
    "api_parse_property_ids_body",
    "api_serialize_batch_response",
    "api_serialize_property_result",
]
