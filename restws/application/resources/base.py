"""Base class for resources that delegate CRUD to a domain service.

Subclasses supply the service calls (new/save/get/void/purge/list) and the
property lists per representation; this class turns them into the Resource
contract and selects properties according to the request's representation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, ClassVar, Generic, TypeVar

from restws.application.dtos.context import RequestContext
from restws.core.constants import PROPERTY_DISPLAY, PROPERTY_UUID
from restws.domain.exceptions import (
    ObjectNotFoundException,
    ResourceDeletionException,
    ValidationException,
)
from restws.domain.representation import (
    CustomRepresentation,
    DefaultRepresentation,
    FullRepresentation,
    NamedRepresentation,
    RefRepresentation,
    Representation,
)

T = TypeVar("T")


def parse_custom_spec(spec: str) -> tuple[str, ...]:
    """Return the property names of a custom representation spec.

    Accepts "(a,b,c)" or "a,b,c"; whitespace around names is ignored.

    Raises:
        ValidationException: If the spec names no property.
    """
    body = spec.strip()
    if body.startswith("(") and body.endswith(")"):
        body = body[1:-1]
    names = tuple(p.strip() for p in body.split(",") if p.strip())
    if not names:
        raise ValidationException(
            f"Custom representation '{spec}' names no properties", field="v"
        )
    return names


def to_json_value(value: Any) -> Any:
    """Convert a property value to a JSON-ready value (nested objects become refs)."""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    if hasattr(value, PROPERTY_UUID) and hasattr(value, PROPERTY_DISPLAY):
        return {
            PROPERTY_UUID: getattr(value, PROPERTY_UUID),
            PROPERTY_DISPLAY: getattr(value, PROPERTY_DISPLAY),
        }
    return value


class DelegatingCrudResource(ABC, Generic[T]):
    """CRUD resource backed by a domain service.

    Class attributes:
        resource_name: Name the resource is registered under.
        default_properties: Properties of the default representation.
        full_properties: Extra properties of the full representation.
        named_representations: Extra representations by name.
        updatable_properties: Properties a create/update payload may set.
    """

    resource_name: ClassVar[str]
    default_properties: ClassVar[tuple[str, ...]] = ()
    full_properties: ClassVar[tuple[str, ...]] = ()
    named_representations: ClassVar[dict[str, tuple[str, ...]]] = {}
    updatable_properties: ClassVar[frozenset[str]] = frozenset()

    @abstractmethod
    def new_delegate(self, payload: dict[str, Any]) -> T:
        """Build a new, unsaved delegate from a create payload."""

    @abstractmethod
    def save_delegate(self, delegate: T) -> T:
        """Persist the delegate through the domain service."""

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> T | None:
        """Look up a delegate through the domain service."""

    @abstractmethod
    def void_delegate(self, delegate: T, reason: str | None) -> None:
        """Soft-delete the delegate through the domain service."""

    @abstractmethod
    def purge_delegate(self, delegate: T) -> None:
        """Permanently delete the delegate through the domain service."""

    @abstractmethod
    def get_all_delegates(self) -> list[T]:
        """Return every delegate the domain service lists."""

    # Resource contract

    def create(self, payload: dict[str, Any], context: RequestContext) -> dict[str, Any]:
        delegate = self.new_delegate(payload)
        saved = self.save_delegate(delegate)
        return self.represent(saved, context.representation)

    def retrieve(self, uuid: str, context: RequestContext) -> dict[str, Any]:
        return self.represent(self.get_existing(uuid), context.representation)

    def update(
        self, uuid: str, payload: dict[str, Any], context: RequestContext
    ) -> dict[str, Any]:
        delegate = self.get_existing(uuid)
        self.apply_payload(delegate, payload)
        saved = self.save_delegate(delegate)
        return self.represent(saved, context.representation)

    def delete(self, uuid: str, reason: str | None, context: RequestContext) -> None:
        self.void_delegate(self.get_existing(uuid), reason)

    def purge(self, uuid: str, context: RequestContext) -> None:
        """Purge the object; purging an unknown uuid is a no-op.

        Raises:
            ResourceDeletionException: If the domain service refuses the purge.
        """
        delegate = self.get_by_uuid(uuid)
        if delegate is None:
            return
        try:
            self.purge_delegate(delegate)
        except Exception as exc:
            raise ResourceDeletionException(self.resource_name, uuid, str(exc)) from exc

    def get_all(self, context: RequestContext) -> list[dict[str, Any]]:
        return [self.represent(d, context.representation) for d in self.get_all_delegates()]

    # Helpers

    def get_existing(self, uuid: str) -> T:
        """Return the delegate with uuid or raise ObjectNotFoundException."""
        delegate = self.get_by_uuid(uuid)
        if delegate is None:
            raise ObjectNotFoundException(self.resource_name, uuid)
        return delegate

    def apply_payload(self, delegate: T, payload: dict[str, Any]) -> None:
        """Set updatable properties from payload.

        Raises:
            ValidationException: If payload contains a property that cannot be set.
        """
        unknown = set(payload) - self.updatable_properties
        if unknown:
            raise ValidationException(
                f"Cannot set {', '.join(sorted(unknown))} on {self.resource_name}",
                field=sorted(unknown)[0],
            )
        # convert everything first so a bad value leaves the delegate untouched
        converted = {name: self.convert_input(name, value) for name, value in payload.items()}
        for name, value in converted.items():
            setattr(delegate, name, value)

    def convert_input(self, name: str, value: Any) -> Any:
        """Convert a payload value before it is set on the delegate (identity by default)."""
        return value

    def get_display(self, delegate: T) -> str:
        return str(getattr(delegate, PROPERTY_DISPLAY))

    def properties_for(self, representation: Representation) -> tuple[str, ...]:
        """Return the properties rendered for a representation (beyond uuid/display).

        Raises:
            ValidationException: For a named representation this resource does not declare.
        """
        if isinstance(representation, RefRepresentation):
            return ()
        if isinstance(representation, DefaultRepresentation):
            return self.default_properties
        if isinstance(representation, FullRepresentation):
            return self.default_properties + self.full_properties
        if isinstance(representation, CustomRepresentation):
            return parse_custom_spec(representation.spec)
        if isinstance(representation, NamedRepresentation):
            named = self.named_representations.get(representation.name)
            if named is None:
                raise ValidationException(
                    f"Unknown representation '{representation.name}' "
                    f"for resource '{self.resource_name}'",
                    field="v",
                )
            return named
        raise ValidationException(f"Unsupported representation {representation!r}", field="v")

    def represent(self, delegate: T, representation: Representation) -> dict[str, Any]:
        """Return the JSON-ready view of delegate for a representation."""
        result: dict[str, Any] = {
            PROPERTY_UUID: getattr(delegate, PROPERTY_UUID),
            PROPERTY_DISPLAY: self.get_display(delegate),
        }
        for name in self.properties_for(representation):
            if name in result:
                continue
            if name.startswith("_") or not hasattr(delegate, name):
                raise ValidationException(
                    f"Unknown property '{name}' for resource '{self.resource_name}'",
                    field="v",
                )
            result[name] = to_json_value(getattr(delegate, name))
        return result
