"""Search handler API: lists registered search declarations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from restws.api.v1.dependencies import get_rest_service
from restws.application.services.rest_service import RestService
from restws.schemas.search_handler import (
    SearchHandlerListResponse,
    SearchHandlerResponse,
)

router = APIRouter()


@router.get("", response_model=SearchHandlerListResponse)
def list_search_handlers(
    rest_service: Annotated[RestService, Depends(get_rest_service)],
    resource: str | None = Query(None, description="Only handlers of this resource"),
) -> SearchHandlerListResponse:
    """List search handlers, optionally for a single resource."""
    handlers = (
        rest_service.get_search_handlers(resource)
        if resource
        else rest_service.get_all_search_handlers()
    )
    return SearchHandlerListResponse(
        results=[SearchHandlerResponse.from_config(h.search_config) for h in handlers]
    )
