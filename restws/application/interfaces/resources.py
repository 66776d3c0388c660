"""Resource and search handler interfaces (ports).

Protocols define the contracts the registries resolve to. Implementations
are the delegating resources in application.resources and any search
handler discovered at startup.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from restws.application.dtos.context import RequestContext
    from restws.domain.search import SearchConfig


# Resource adapter interface
class Resource(Protocol):
    """Protocol for a CRUD resource adapter."""

    def create(self, payload: dict[str, Any], context: RequestContext) -> Any:
        """Create a new object from payload and return its representation."""

    def retrieve(self, uuid: str, context: RequestContext) -> Any:
        """Return the representation of the object with uuid."""

    def update(self, uuid: str, payload: dict[str, Any], context: RequestContext) -> Any:
        """Apply payload to the object with uuid, save it, and return its representation."""

    def delete(self, uuid: str, reason: str | None, context: RequestContext) -> None:
        """Void (soft-delete) the object with uuid."""

    def purge(self, uuid: str, context: RequestContext) -> None:
        """Permanently remove the object with uuid."""

    def get_all(self, context: RequestContext) -> list[Any]:
        """Return representations of all objects (no search applied)."""


@runtime_checkable
class SubResourceParent(Protocol):
    """Protocol for resources exposing nested collections (e.g. a patient's names)."""

    def list_sub_resource(
        self, uuid: str, sub_resource: str, context: RequestContext
    ) -> list[Any]:
        """Return the current values of a sub-resource of the object with uuid."""

    def create_child(
        self,
        uuid: str,
        sub_resource: str,
        payload: dict[str, Any],
        context: RequestContext,
    ) -> Any:
        """Add a new child to a sub-resource and return its representation."""


ResourceFactory = Callable[[], Resource]
"""Zero-argument callable returning the adapter for a registered resource."""


# Search handler interface
class SearchHandler(Protocol):
    """Protocol for a parameterized search over one resource."""

    @property
    def search_config(self) -> SearchConfig:
        """Declaration used for registration and disambiguation."""

    def search(self, context: RequestContext) -> list[Any]:
        """Run the search with the request parameters in context."""
