"""Regression tests for page-view API endpoints and error mapping."""

from __future__ import annotations

import asyncio
from datetime import date

from fastapi.testclient import TestClient

from pageviews_api.adapters import (
    AnalyticsAuthorizationError,
    AnalyticsUpstreamError,
    AnalyticsValidationError,
)
from pageviews_api.api.application import create_api_application
from pageviews_api.api.errors import API_ERROR_CATEGORY_RESPONSES
from pageviews_api.config import AppSettings
from pageviews_api.domain import DateRange, ErrorCategory, PropertyResult
from pageviews_api.reporting import PageViewFetcher, PropertyNameResolver


class _MetadataAdapterStub:
    """Metadata adapter double resolving `Site {id}` names."""

    async def adapter_fetch_display_name(self, property_id: str) -> str | None:
        """Return deterministic display name.

        Args:
            property_id: GA4 property identifier.

        Returns:
            str | None: Display name.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        return f"Site {property_id}"


class _ReportAdapterStub:
    """Report adapter double with configured values and failures."""

    def __init__(self, values: dict[str, str | None], errors: dict[str, Exception] | None = None):
        self.values = values
        self.errors = errors or {}
        self.calls: list[str] = []

    async def adapter_fetch_page_view_value(self, property_id: str, date_range: DateRange) -> str | None:
        """Return configured raw value or raise configured error.

        Args:
            property_id: GA4 property identifier.
            date_range: Report date range.

        Returns:
            str | None: Raw metric value.

        Raises:
            Exception: Configured error for this property.
        """

        _ = date_range
        self.calls.append(property_id)
        await asyncio.sleep(0)
        if property_id in self.errors:
            raise self.errors[property_id]
        return self.values.get(property_id)


class _ExplodingService:
    """Page-view service double raising from every call."""

    def __init__(self, error: Exception):
        self.error = error

    async def reporting_fetch_property(self, property_id: str) -> PropertyResult:
        """Raise configured error."""

        _ = property_id
        raise self.error

    async def reporting_fetch_properties(self, property_ids: list[str]) -> list[PropertyResult]:
        """Raise configured error."""

        _ = property_ids
        raise self.error


def _build_settings() -> AppSettings:
    """Build deterministic app settings for page-view API tests.

    Returns:
        AppSettings: Test settings.

    Raises:
        ValueError: Raised when settings are invalid.
    """

    return AppSettings(environment_name="test-api-pageviews", google_application_credentials="unused.json")


def _build_client(report_adapter: _ReportAdapterStub) -> TestClient:
    fetcher = PageViewFetcher(
        report_adapter=report_adapter,
        name_resolver=PropertyNameResolver(metadata_adapter=_MetadataAdapterStub()),
        max_concurrency=0,
        today_provider=lambda: date(2026, 10, 19),
    )
    return TestClient(create_api_application(settings=_build_settings(), page_view_service=fetcher))


def test_api_pageviews_single_returns_legacy_shape() -> None:
    """Return only `{pageviews}` for the single-property endpoint.

    Returns:
        None: Assertions validate legacy payload.

    Raises:
        AssertionError: Raised when payload shape deviates.
    """

    client = _build_client(_ReportAdapterStub(values={"123": "4321"}))

    response = client.get("/api/pageviews/123")

    assert response.status_code == 200
    assert response.json() == {"pageviews": 4321}


def test_api_pageviews_single_zero_rows_returns_zero() -> None:
    """Return zero page views when the report has no rows.

    Returns:
        None: Assertions validate empty-report response.

    Raises:
        AssertionError: Raised when zero rows are not reported as 0.
    """

    client = _build_client(_ReportAdapterStub(values={}))

    response = client.get("/api/pageviews/999")

    assert response.status_code == 200
    assert response.json() == {"pageviews": 0}


def test_api_pageviews_single_captured_failures_return_500() -> None:
    """Return the fixed 500 payload for every captured single-property failure.

    Returns:
        None: Assertions validate legacy single-path status handling.

    Raises:
        AssertionError: Raised when a captured failure maps to another status.
    """

    client = _build_client(
        _ReportAdapterStub(
            values={},
            errors={
                "bad": AnalyticsValidationError("INVALID_ARGUMENT", status_code=400),
                "denied": AnalyticsAuthorizationError("PERMISSION_DENIED", status_code=403),
                "missing": AnalyticsUpstreamError("NOT_FOUND", status_code=404),
                "broken": RuntimeError("connection reset"),
            },
        )
    )

    for property_id in ("bad", "denied", "missing", "broken"):
        response = client.get(f"/api/pageviews/{property_id}")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


def test_api_pageviews_single_maps_raised_adapter_errors_by_category() -> None:
    """Map tagged errors raised by the service onto 400/403/500.

    Returns:
        None: Assertions validate category mapping for raised errors.

    Raises:
        AssertionError: Raised when mapping deviates.
    """

    expectations = [
        (AnalyticsValidationError("bad", status_code=400), 400, "Invalid property ID format"),
        (
            AnalyticsAuthorizationError("denied", status_code=403),
            403,
            "Authentication error. Please check the service account permissions.",
        ),
        (AnalyticsUpstreamError("down", status_code=503), 500, "Internal server error"),
    ]
    for error, expected_status, expected_message in expectations:
        client = TestClient(
            create_api_application(settings=_build_settings(), page_view_service=_ExplodingService(error)),
        )

        response = client.get("/api/pageviews/123")

        assert response.status_code == expected_status
        assert response.json() == {"error": expected_message}


def test_api_pageviews_single_non_numeric_metric_returns_500() -> None:
    """Reject a non-numeric metric value as an upstream failure.

    Returns:
        None: Assertions validate non-numeric metric handling.

    Raises:
        AssertionError: Raised when malformed values produce a count.
    """

    client = _build_client(_ReportAdapterStub(values={"5": "not-a-number"}))

    response = client.get("/api/pageviews/5")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_api_pageviews_single_blank_id_returns_400() -> None:
    """Reject a whitespace-only property id.

    Returns:
        None: Assertions validate path validation.

    Raises:
        AssertionError: Raised when blank ids are accepted.
    """

    client = _build_client(_ReportAdapterStub(values={}))

    response = client.get("/api/pageviews/%20")

    assert response.status_code == 400
    assert response.json() == {"error": "Property ID is required"}


def test_api_pageviews_batch_query_mixes_success_and_failure() -> None:
    """Return per-item failures inline with HTTP 200 and a success-only total.

    Returns:
        None: Assertions validate the mixed batch contract.

    Raises:
        AssertionError: Raised when batch payload deviates.
    """

    client = _build_client(
        _ReportAdapterStub(values={"1": "500"}, errors={"2": AnalyticsUpstreamError("report failed")}),
    )

    response = client.get("/api/pageviews", params={"ids": "1,2"})

    assert response.status_code == 200
    assert response.json() == {
        "properties": [
            {"propertyId": "1", "propertyName": "Site 1", "pageviews": 500, "pageviewsFormatted": "500"},
            {
                "propertyId": "2",
                "propertyName": "Site 2",
                "pageviews": None,
                "pageviewsFormatted": None,
                "error": "report failed",
            },
        ],
        "total": 500,
    }


def test_api_pageviews_batch_query_trims_ids_and_drops_blanks() -> None:
    """Trim whitespace around ids and skip empty entries.

    Returns:
        None: Assertions validate id parsing.

    Raises:
        AssertionError: Raised when parsing deviates.
    """

    report_adapter = _ReportAdapterStub(values={"10": "1000", "20": "2500"})
    client = _build_client(report_adapter)

    response = client.get("/api/pageviews", params={"ids": " 10 , ,20,"})

    assert response.status_code == 200
    payload = response.json()
    assert [entry["propertyId"] for entry in payload["properties"]] == ["10", "20"]
    assert payload["properties"][1]["pageviewsFormatted"] == "2,500"
    assert payload["total"] == 3500
    assert sorted(report_adapter.calls) == ["10", "20"]


def test_api_pageviews_batch_query_requires_ids() -> None:
    """Reject missing or empty `ids` query parameters.

    Returns:
        None: Assertions validate query validation.

    Raises:
        AssertionError: Raised when missing ids are accepted.
    """

    client = _build_client(_ReportAdapterStub(values={}))

    missing_response = client.get("/api/pageviews")
    assert missing_response.status_code == 400
    assert missing_response.json() == {
        "error": 'Property IDs are required. Use the "ids" query parameter with comma-separated values.'
    }

    empty_response = client.get("/api/pageviews", params={"ids": " , "})
    assert empty_response.status_code == 400
    assert empty_response.json() == {"error": "At least one property ID is required"}


def test_api_pageviews_batch_post_returns_batch_envelope() -> None:
    """Accept `propertyIds` in a JSON body and keep request order.

    Returns:
        None: Assertions validate POST batch payload.

    Raises:
        AssertionError: Raised when POST batch payload deviates.
    """

    client = _build_client(_ReportAdapterStub(values={"a": "1200", "b": "34"}))

    response = client.post("/api/pageviews", json={"propertyIds": ["b", "a"]})

    assert response.status_code == 200
    payload = response.json()
    assert [entry["propertyId"] for entry in payload["properties"]] == ["b", "a"]
    assert payload["properties"][1]["pageviewsFormatted"] == "1,200"
    assert payload["total"] == 1234


def test_api_pageviews_batch_post_rejects_invalid_bodies() -> None:
    """Reject bodies without a non-empty array of ids.

    Returns:
        None: Assertions validate body validation.

    Raises:
        AssertionError: Raised when invalid bodies are accepted.
    """

    client = _build_client(_ReportAdapterStub(values={}))
    expected_payload = {"error": "Property IDs array is required in request body"}

    for body in ({}, {"propertyIds": []}, {"propertyIds": "123"}, {"propertyIds": [123]}, ["123"]):
        response = client.post("/api/pageviews", json=body)
        assert response.status_code == 400
        assert response.json() == expected_payload

    malformed_response = client.post(
        "/api/pageviews",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert malformed_response.status_code == 400
    assert malformed_response.json() == expected_payload


def test_api_pageviews_batch_maps_request_level_adapter_errors() -> None:
    """Map adapter errors escaping the batch service onto status codes.

    Returns:
        None: Assertions validate request-level mapping.

    Raises:
        AssertionError: Raised when mapping deviates.
    """

    application = create_api_application(
        settings=_build_settings(),
        page_view_service=_ExplodingService(AnalyticsAuthorizationError("denied", status_code=401)),
    )
    client = TestClient(application)

    response = client.get("/api/pageviews", params={"ids": "1"})

    assert response.status_code == 403
    assert response.json()["error"].startswith("Authentication error")


def test_api_pageviews_unexpected_errors_return_fixed_500_payload() -> None:
    """Return the fixed JSON 500 payload for unexpected exceptions.

    Returns:
        None: Assertions validate fallback handler.

    Raises:
        AssertionError: Raised when unexpected errors leak.
    """

    application = create_api_application(
        settings=_build_settings(),
        page_view_service=_ExplodingService(KeyError("boom")),
    )
    client = TestClient(application, raise_server_exceptions=False)

    response = client.post("/api/pageviews", json={"propertyIds": ["1"]})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_api_error_category_table_covers_every_category() -> None:
    """Ensure every failure category has an HTTP mapping.

    Returns:
        None: Assertions validate mapping completeness.

    Raises:
        AssertionError: Raised when a category is unmapped.
    """

    assert set(API_ERROR_CATEGORY_RESPONSES) == set(ErrorCategory)
