"""Search handler registry and disambiguation.

Resolves a resource name plus request parameters to exactly one registered
search handler:

1. An explicit id in the selector parameter wins outright; an unknown id is
   an error, never a fallback to signature matching.
2. Otherwise every (handler, query) pair whose signature accepts the supplied
   parameter names is a candidate. No candidates means no search applies.
3. Among candidates, a pair whose required set is a strict subset of another
   candidate's required set is dropped. One remaining handler is returned;
   several are reported as ambiguous.

Step 3 keeps only maximal elements under strict required-set inclusion, so
no total order is ever guessed between incomparable signatures.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence

from restws.application.interfaces.resources import SearchHandler
from restws.core.constants import REQUEST_PROPERTY_FOR_SEARCH_ID
from restws.domain.exceptions import (
    AmbiguousSearchException,
    DuplicateSearchHandlerException,
    UnknownSearchIdException,
)
from restws.domain.search import SearchQuery
from restws.domain.versions import is_version_supported

logger = logging.getLogger(__name__)

_Candidate = tuple[SearchHandler, SearchQuery]


def _first_value(values: Sequence[str] | str | None) -> str | None:
    """Return the first non-empty value of a request parameter."""
    if values is None:
        return None
    if isinstance(values, str):
        return values or None
    for value in values:
        if value:
            return value
    return None


def _maximal(candidates: list[_Candidate]) -> list[_Candidate]:
    """Drop candidates whose required set is strictly contained in another's."""
    return [
        (handler, query)
        for handler, query in candidates
        if not any(
            query.required_parameters < other.required_parameters
            for _, other in candidates
        )
    ]


def _distinct_handlers(candidates: list[_Candidate]) -> list[SearchHandler]:
    seen: list[SearchHandler] = []
    for handler, _ in candidates:
        if not any(handler is s for s in seen):
            seen.append(handler)
    return seen


class SearchHandlerRegistry:
    """Registered search handlers and the resolution of requests to one of them."""

    def __init__(
        self,
        platform_version: str,
        selector_parameter: str = REQUEST_PROPERTY_FOR_SEARCH_ID,
    ) -> None:
        """Initialize an empty registry.

        Args:
            platform_version: Running platform version; handlers not supporting it are skipped.
            selector_parameter: Request parameter carrying an explicit handler id.
        """
        self.platform_version = platform_version
        self.selector_parameter = selector_parameter
        self._lock = threading.Lock()
        self._handlers: tuple[SearchHandler, ...] = ()

    def register(self, handler: SearchHandler) -> bool:
        """Register a search handler if it supports the running platform version.

        Returns:
            True if registered, False if skipped as version-incompatible.

        Raises:
            DuplicateSearchHandlerException: If a handler with the same id is
                already registered for the same resource.
        """
        config = handler.search_config
        if not is_version_supported(self.platform_version, config.supported_versions):
            logger.info(
                "Skipping search handler '%s' for '%s': supports %s, platform is %s",
                config.id,
                config.supported_resource,
                ", ".join(config.supported_versions),
                self.platform_version,
            )
            return False
        with self._lock:
            for existing in self._handlers:
                existing_config = existing.search_config
                if (
                    existing_config.supported_resource == config.supported_resource
                    and existing_config.id == config.id
                ):
                    raise DuplicateSearchHandlerException(
                        config.supported_resource, config.id
                    )
            self._handlers = (*self._handlers, handler)
        logger.info(
            "Registered search handler '%s' for '%s'", config.id, config.supported_resource
        )
        return True

    def get_all(self) -> list[SearchHandler]:
        """Return all registered handlers in registration order."""
        return list(self._handlers)

    def get_for_resource(self, resource_name: str) -> list[SearchHandler]:
        """Return handlers whose supported_resource is resource_name."""
        return [
            h for h in self._handlers if h.search_config.supported_resource == resource_name
        ]

    def get_search_handler(
        self,
        resource_name: str,
        parameters: Mapping[str, Sequence[str]],
    ) -> SearchHandler | None:
        """Resolve the handler servicing a search request.

        Args:
            resource_name: Resource the request is addressed to.
            parameters: Request parameters (name -> values); may include the selector.

        Returns:
            The single matching handler, or None when no handler's signature
            accepts the supplied parameters.

        Raises:
            UnknownSearchIdException: Selector names no handler of the resource.
            AmbiguousSearchException: Several equally specific handlers match.
        """
        supplied = {k: v for k, v in parameters.items() if k != self.selector_parameter}
        search_id = _first_value(parameters.get(self.selector_parameter))
        handlers = self.get_for_resource(resource_name)

        if search_id is not None:
            for handler in handlers:
                if handler.search_config.id == search_id:
                    logger.debug(
                        "Search on '%s' resolved by id to '%s'", resource_name, search_id
                    )
                    return handler
            logger.warning(
                "Unknown search id '%s' for resource '%s'", search_id, resource_name
            )
            raise UnknownSearchIdException(search_id, resource_name)

        names = frozenset(supplied)
        candidates: list[_Candidate] = [
            (handler, query)
            for handler in handlers
            for query in handler.search_config.search_queries
            if query.accepts(names)
        ]
        if not candidates:
            logger.debug(
                "No search handler for '%s' accepts parameters %s",
                resource_name,
                sorted(names),
            )
            return None

        winners = _distinct_handlers(_maximal(candidates))
        if len(winners) == 1:
            logger.debug(
                "Search on '%s' resolved to '%s'",
                resource_name,
                winners[0].search_config.id,
            )
            return winners[0]

        ids = [h.search_config.id for h in winners]
        logger.warning(
            "Ambiguous search on '%s': %d equally specific candidates %s",
            resource_name,
            len(ids),
            ids,
        )
        raise AmbiguousSearchException(resource_name, ids, self.selector_parameter)
