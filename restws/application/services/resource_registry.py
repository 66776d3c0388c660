"""Class-hierarchy resource registry.

Maps resource names and supported classes to resource factories. Lookup by
class walks the runtime class's MRO (most derived first), so the most
specific registered ancestor wins and unrelated siblings are never matched.

Registrations are copy-on-write: writers serialize on a lock and publish new
dicts; readers use whatever dicts are current, without locking.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from restws.application.interfaces.resources import ResourceFactory
from restws.domain.exceptions import (
    DuplicateResourceException,
    UnknownResourceException,
    ValidationException,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceDefinition:
    """Registration record: resource name, supported class, and adapter factory."""

    name: str
    supported_class: type
    factory: ResourceFactory


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class ResourceRegistry:
    """Registry of resource definitions by name and by supported class."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_name: Mapping[str, ResourceDefinition] = MappingProxyType({})
        self._by_class: Mapping[type, ResourceDefinition] = MappingProxyType({})

    def register(
        self, name: str, supported_class: type, factory: ResourceFactory
    ) -> ResourceDefinition:
        """Register a resource.

        Args:
            name: Resource name used in request paths (e.g. 'patient').
            supported_class: Domain class the resource handles.
            factory: Zero-argument callable returning the adapter.

        Returns:
            The stored ResourceDefinition.

        Raises:
            ValidationException: If name is empty or supported_class is not a class.
            DuplicateResourceException: If name or supported_class is already registered.
        """
        if not name:
            raise ValidationException("Resource name is required", field="name")
        if not isinstance(supported_class, type):
            raise ValidationException(
                "Resource supported_class must be a class", field="supported_class"
            )
        definition = ResourceDefinition(name, supported_class, factory)
        with self._lock:
            if name in self._by_name:
                raise DuplicateResourceException(
                    f"A resource named '{name}' is already registered",
                    name=name,
                )
            existing = self._by_class.get(supported_class)
            if existing is not None:
                raise DuplicateResourceException(
                    f"Resources '{existing.name}' and '{name}' cannot both support "
                    f"{_qualified_name(supported_class)}",
                    name=name,
                    supported_class=_qualified_name(supported_class),
                    registered_name=existing.name,
                )
            self._by_name = MappingProxyType({**self._by_name, name: definition})
            self._by_class = MappingProxyType({**self._by_class, supported_class: definition})
        logger.info(
            "Registered resource '%s' for %s", name, _qualified_name(supported_class)
        )
        return definition

    def get_by_name(self, name: str) -> ResourceFactory:
        """Return the factory registered under name.

        Raises:
            UnknownResourceException: If no resource has that name.
        """
        definition = self._by_name.get(name)
        if definition is None:
            raise UnknownResourceException(name)
        return definition.factory

    def get_definition_by_supported_class(self, cls: type | Any) -> ResourceDefinition:
        """Return the definition of the most specific registered ancestor of cls.

        Args:
            cls: A class, or an instance (resolved through its type).

        Raises:
            UnknownResourceException: If neither cls nor any ancestor is registered.
        """
        if not isinstance(cls, type):
            cls = type(cls)
        by_class = self._by_class
        for ancestor in cls.__mro__:
            definition = by_class.get(ancestor)
            if definition is not None:
                logger.debug(
                    "Resolved %s to resource '%s' via %s",
                    _qualified_name(cls),
                    definition.name,
                    _qualified_name(ancestor),
                )
                return definition
        raise UnknownResourceException(_qualified_name(cls))

    def get_by_supported_class(self, cls: type | Any) -> ResourceFactory:
        """Return the factory of the most specific registered ancestor of cls."""
        return self.get_definition_by_supported_class(cls).factory

    def get_definitions(self) -> list[ResourceDefinition]:
        """Return all definitions in registration order."""
        return list(self._by_name.values())

    def names(self) -> list[str]:
        """Return registered resource names in registration order."""
        return list(self._by_name)
