"""RestService: single entry point over the three resolvers.

Built once at startup (see core.lifespan) and passed to the HTTP shell via
app.state; tests build isolated instances directly.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from restws.application.interfaces.resources import (
    Resource,
    ResourceFactory,
    SearchHandler,
)
from restws.application.services.representation_resolver import RepresentationResolver
from restws.application.services.resource_registry import (
    ResourceDefinition,
    ResourceRegistry,
)
from restws.application.services.search_handler_registry import SearchHandlerRegistry
from restws.core.constants import REQUEST_PROPERTY_FOR_REPRESENTATION
from restws.domain.representation import Representation

if TYPE_CHECKING:
    from restws.core.config import Settings


class RestService:
    """Resolves representations, resources, and search handlers for requests."""

    def __init__(
        self,
        representation_resolver: RepresentationResolver,
        resource_registry: ResourceRegistry,
        search_handler_registry: SearchHandlerRegistry,
        representation_parameter: str = REQUEST_PROPERTY_FOR_REPRESENTATION,
    ) -> None:
        self.representation_resolver = representation_resolver
        self.resource_registry = resource_registry
        self.search_handler_registry = search_handler_registry
        self.representation_parameter = representation_parameter

    @classmethod
    def from_settings(cls, settings: Settings) -> RestService:
        """Build an empty service configured from settings."""
        return cls(
            representation_resolver=RepresentationResolver(
                custom_prefix=settings.custom_representation_prefix
            ),
            resource_registry=ResourceRegistry(),
            search_handler_registry=SearchHandlerRegistry(
                platform_version=settings.platform_version,
                selector_parameter=settings.search_selector_parameter,
            ),
            representation_parameter=settings.representation_parameter,
        )

    @property
    def selector_parameter(self) -> str:
        return self.search_handler_registry.selector_parameter

    # Representations

    def get_representation(self, token: str | None) -> Representation:
        """Return the representation for a request token (see RepresentationResolver)."""
        return self.representation_resolver.resolve(token)

    # Resources

    def register_resource(
        self, name: str, supported_class: type, factory: ResourceFactory
    ) -> ResourceDefinition:
        return self.resource_registry.register(name, supported_class, factory)

    def get_resource_by_name(self, name: str) -> Resource:
        """Return the adapter for a resource name (raises UnknownResourceException)."""
        return self.resource_registry.get_by_name(name)()

    def get_resource_by_supported_class(self, cls: type) -> Resource:
        """Return the adapter of the most specific registered ancestor of cls."""
        return self.resource_registry.get_by_supported_class(cls)()

    def get_resource_for(self, obj: Any) -> Resource:
        """Return the adapter handling a domain object's runtime class."""
        return self.resource_registry.get_by_supported_class(type(obj))()

    def get_resource_names(self) -> list[str]:
        return self.resource_registry.names()

    # Search handlers

    def register_search_handler(self, handler: SearchHandler) -> bool:
        return self.search_handler_registry.register(handler)

    def get_search_handler(
        self, resource_name: str, parameters: Mapping[str, Sequence[str]]
    ) -> SearchHandler | None:
        """Return the handler for a search request, or None if no search applies.

        Raises:
            UnknownSearchIdException: Explicit id not registered for the resource.
            AmbiguousSearchException: Several equally specific handlers match.
        """
        return self.search_handler_registry.get_search_handler(resource_name, parameters)

    def get_search_handlers(self, resource_name: str) -> list[SearchHandler]:
        return self.search_handler_registry.get_for_resource(resource_name)

    def get_all_search_handlers(self) -> list[SearchHandler]:
        return self.search_handler_registry.get_all()
