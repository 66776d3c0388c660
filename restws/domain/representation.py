"""Representation descriptors.

A representation controls how much of an entity is rendered in a response.
Variants are immutable value objects; equality is structural (same variant,
same payload). Use the DEFAULT, REF and FULL singletons for the fixed variants.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from restws.core.constants import (
    REPRESENTATION_DEFAULT,
    REPRESENTATION_FULL,
    REPRESENTATION_REF,
)


@dataclass(frozen=True)
class Representation(ABC):
    """Base for all representation variants."""

    @property
    @abstractmethod
    def representation(self) -> str:
        """String identity of this representation (token, name, or custom spec)."""


@dataclass(frozen=True)
class DefaultRepresentation(Representation):
    """Default amount of detail; used when the request names no representation."""

    TOKEN: ClassVar[str] = REPRESENTATION_DEFAULT

    @property
    def representation(self) -> str:
        return self.TOKEN


@dataclass(frozen=True)
class RefRepresentation(Representation):
    """Minimal reference: uuid and display only."""

    TOKEN: ClassVar[str] = REPRESENTATION_REF

    @property
    def representation(self) -> str:
        return self.TOKEN


@dataclass(frozen=True)
class FullRepresentation(Representation):
    """Every property the resource exposes."""

    TOKEN: ClassVar[str] = REPRESENTATION_FULL

    @property
    def representation(self) -> str:
        return self.TOKEN


@dataclass(frozen=True)
class NamedRepresentation(Representation):
    """Representation a resource declares under a name of its own.

    The name is kept verbatim (case-sensitive, not normalized).
    """

    name: str

    @property
    def representation(self) -> str:
        return self.name


@dataclass(frozen=True)
class CustomRepresentation(Representation):
    """Caller-specified property list, e.g. spec "(uuid,display)"."""

    spec: str

    @property
    def representation(self) -> str:
        return self.spec


DEFAULT = DefaultRepresentation()
REF = RefRepresentation()
FULL = FullRepresentation()
