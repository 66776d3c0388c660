"""Application services: the resolvers and the RestService facade."""

from restws.application.services.representation_resolver import RepresentationResolver
from restws.application.services.resource_registry import (
    ResourceDefinition,
    ResourceRegistry,
)
from restws.application.services.rest_service import RestService
from restws.application.services.search_handler_registry import SearchHandlerRegistry

__all__ = [
    "RepresentationResolver",
    "ResourceDefinition",
    "ResourceRegistry",
    "RestService",
    "SearchHandlerRegistry",
]
