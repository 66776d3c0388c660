"""Resource API: dispatches requests to the resolved resource or search handler.

Resolution happens in RestService; this module only extracts request input
and forwards results. Errors propagate to core.exception_handlers.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status

from restws.api.v1.dependencies import (
    get_request_context,
    get_rest_service,
    search_parameters,
)
from restws.application.dtos.context import RequestContext
from restws.application.interfaces.resources import SubResourceParent
from restws.application.services.rest_service import RestService
from restws.core.constants import REQUEST_PROPERTY_FOR_PURGE, REQUEST_PROPERTY_FOR_REASON
from restws.domain.exceptions import UnknownResourceException
from restws.schemas.resource import ResultsResponse

router = APIRouter()

Service = Annotated[RestService, Depends(get_rest_service)]
Context = Annotated[RequestContext, Depends(get_request_context)]
Payload = Annotated[dict[str, Any], Body()]


def _sub_resource_parent(
    adapter: Any, resource: str, sub_resource: str
) -> SubResourceParent:
    if not isinstance(adapter, SubResourceParent):
        raise UnknownResourceException(f"{resource}/{sub_resource}")
    return adapter


@router.get("/{resource}", response_model=ResultsResponse)
def search_or_list(resource: str, rest_service: Service, context: Context) -> ResultsResponse:
    """Run the matching search handler, or list all objects when no search applies."""
    adapter = rest_service.get_resource_by_name(resource)
    parameters = search_parameters(rest_service, context)
    handler = rest_service.get_search_handler(resource, parameters)
    if handler is not None:
        return ResultsResponse(results=handler.search(context))
    return ResultsResponse(results=adapter.get_all(context))


@router.post("/{resource}", status_code=status.HTTP_201_CREATED)
def create(resource: str, payload: Payload, rest_service: Service, context: Context) -> Any:
    return rest_service.get_resource_by_name(resource).create(payload, context)


@router.get("/{resource}/{uuid}")
def retrieve(resource: str, uuid: str, rest_service: Service, context: Context) -> Any:
    return rest_service.get_resource_by_name(resource).retrieve(uuid, context)


@router.post("/{resource}/{uuid}")
def update(
    resource: str, uuid: str, payload: Payload, rest_service: Service, context: Context
) -> Any:
    return rest_service.get_resource_by_name(resource).update(uuid, payload, context)


@router.delete("/{resource}/{uuid}", status_code=status.HTTP_204_NO_CONTENT)
def delete(resource: str, uuid: str, rest_service: Service, context: Context) -> Response:
    """Void the object, or purge it when ?purge=true."""
    adapter = rest_service.get_resource_by_name(resource)
    purge = (context.get_parameter(REQUEST_PROPERTY_FOR_PURGE) or "").lower() == "true"
    if purge:
        adapter.purge(uuid, context)
    else:
        adapter.delete(uuid, context.get_parameter(REQUEST_PROPERTY_FOR_REASON), context)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{resource}/{uuid}/{sub_resource}", response_model=ResultsResponse)
def list_sub_resource(
    resource: str, uuid: str, sub_resource: str, rest_service: Service, context: Context
) -> ResultsResponse:
    adapter = _sub_resource_parent(
        rest_service.get_resource_by_name(resource), resource, sub_resource
    )
    return ResultsResponse(results=adapter.list_sub_resource(uuid, sub_resource, context))


@router.post("/{resource}/{uuid}/{sub_resource}", status_code=status.HTTP_201_CREATED)
def create_child(
    resource: str,
    uuid: str,
    sub_resource: str,
    payload: Payload,
    rest_service: Service,
    context: Context,
) -> Any:
    adapter = _sub_resource_parent(
        rest_service.get_resource_by_name(resource), resource, sub_resource
    )
    return adapter.create_child(uuid, sub_resource, payload, context)
