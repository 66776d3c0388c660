"""Health check endpoint; used for liveness probes."""

from fastapi import APIRouter, Request

from restws.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return ok status and registration counts (zero before startup completes)."""
    service = getattr(request.app.state, "rest_service", None)
    if service is None:
        return HealthResponse()
    return HealthResponse(
        resources=len(service.get_resource_names()),
        search_handlers=len(service.get_all_search_handlers()),
    )
