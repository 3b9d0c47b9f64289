"""FastAPI application factory for the GA4 page-view service.

This module defines API application composition: index metadata, CORS,
the fallback error handler, and the health and page-view routers.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pageviews_api.config import AppSettings
from pageviews_api.reporting import PageViewServicePort

from .errors import INTERNAL_ERROR_MESSAGE, api_error_response
from .routers import api_create_health_router, api_create_pageviews_router

logger = logging.getLogger(__name__)

API_INDEX_PAYLOAD: dict[str, object] = {
    "name": "GA4 Pageviews API",
    "description": "API to fetch pageviews from Google Analytics 4",
    "endpoints": [
        {
            "path": "/api/pageviews/:propertyId",
            "description": "Get pageviews for a specific GA4 property",
            "method": "GET",
            "params": {"propertyId": "GA4 property ID (required)"},
        },
        {
            "path": "/api/pageviews?ids=id1,id2,id3",
            "description": "Get pageviews for multiple GA4 properties using GET",
            "method": "GET",
            "query": {"ids": "Comma-separated list of GA4 property IDs (required)"},
        },
        {
            "path": "/api/pageviews",
            "description": "Get pageviews for multiple GA4 properties using POST",
            "method": "POST",
            "body": {"propertyIds": "Array of GA4 property IDs (required)"},
        },
        {
            "path": "/healthcheck",
            "description": "Simple health check endpoint",
            "method": "GET",
        },
    ],
}


def create_api_application(
    settings: AppSettings,
    page_view_service: PageViewServicePort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for middleware config.
        page_view_service: Reporting service used by page-view endpoints.

    Returns:
        FastAPI: Framework application instance with all routers mounted.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(title="GA4 Pageviews API")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.exception_handler(Exception)
    async def api_unhandled_error(request: Request, error: Exception) -> JSONResponse:
        """Return the fixed 500 payload for unexpected failures.

        Args:
            request: Request that failed.
            error: Unhandled exception.

        Returns:
            JSONResponse: `{"error": "Internal server error"}` with HTTP 500.
        """

        logger.exception("Error processing request %s %s", request.method, request.url.path, exc_info=error)
        return api_error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> JSONResponse:
        """Return static service description and endpoint list.

        Returns:
            JSONResponse: Index payload.
        """

        return JSONResponse(content=API_INDEX_PAYLOAD, status_code=status.HTTP_200_OK)

    application.include_router(api_create_health_router())
    application.include_router(api_create_pageviews_router(page_view_service=page_view_service))

    return application
