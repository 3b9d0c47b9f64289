"""HTTP error contract and failure-category mapping."""

from __future__ import annotations

from typing import Final

from fastapi import status
from fastapi.responses import JSONResponse

from pageviews_api.domain import ErrorCategory

PROPERTY_ID_REQUIRED_MESSAGE: Final[str] = "Property ID is required"
PROPERTY_IDS_QUERY_REQUIRED_MESSAGE: Final[str] = (
    'Property IDs are required. Use the "ids" query parameter with comma-separated values.'
)
PROPERTY_IDS_EMPTY_MESSAGE: Final[str] = "At least one property ID is required"
PROPERTY_IDS_BODY_REQUIRED_MESSAGE: Final[str] = "Property IDs array is required in request body"

INVALID_PROPERTY_ID_MESSAGE: Final[str] = "Invalid property ID format"
AUTHORIZATION_FAILED_MESSAGE: Final[str] = "Authentication error. Please check the service account permissions."
INTERNAL_ERROR_MESSAGE: Final[str] = "Internal server error"

API_ERROR_CATEGORY_RESPONSES: Final[dict[ErrorCategory, tuple[int, str]]] = {
    ErrorCategory.VALIDATION: (status.HTTP_400_BAD_REQUEST, INVALID_PROPERTY_ID_MESSAGE),
    ErrorCategory.AUTHORIZATION: (status.HTTP_403_FORBIDDEN, AUTHORIZATION_FAILED_MESSAGE),
    ErrorCategory.UPSTREAM: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE),
}


def api_error_response(message: str, status_code: int) -> JSONResponse:
    """Build the `{"error": message}` response payload.

    Args:
        message: Human-readable error message.
        status_code: HTTP status code.

    Returns:
        JSONResponse: Error response.
    """

    return JSONResponse(content={"error": message}, status_code=status_code)


def api_category_error_response(category: ErrorCategory | None) -> JSONResponse:
    """Map a failure category onto its fixed HTTP error response.

    Args:
        category: Failure category, None is treated as an upstream failure.

    Returns:
        JSONResponse: 400, 403 or 500 error response.
    """

    status_code, message = API_ERROR_CATEGORY_RESPONSES[category or ErrorCategory.UPSTREAM]
    return api_error_response(message=message, status_code=status_code)
