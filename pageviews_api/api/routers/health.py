"""Health endpoint router composition."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse


def api_create_health_router() -> APIRouter:
    """Create health-check router.

    Returns:
        APIRouter: Router exposing `/healthcheck` endpoint.
    """

    router = APIRouter(tags=["health"])

    @router.get("/healthcheck")
    def api_health_status() -> JSONResponse:
        """Return static liveness payload.

        Returns:
            JSONResponse: Always `{"status": "ok"}` with HTTP 200.
        """

        return JSONResponse(content={"status": "ok"}, status_code=status.HTTP_200_OK)

    return router
