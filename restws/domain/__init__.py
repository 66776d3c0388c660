"""Domain layer: entities, representations, search declarations, and exceptions.

No dependencies on the application or HTTP layers.
"""

from restws.domain.entities import Patient, Person, PersonName
from restws.domain.exceptions import (
    AmbiguousSearchException,
    DuplicateResourceException,
    DuplicateSearchHandlerException,
    InvalidSearchException,
    ObjectNotFoundException,
    ResourceDeletionException,
    RestWebServiceException,
    UnknownResourceException,
    UnknownSearchIdException,
    ValidationException,
)
from restws.domain.representation import (
    DEFAULT,
    FULL,
    REF,
    CustomRepresentation,
    DefaultRepresentation,
    FullRepresentation,
    NamedRepresentation,
    RefRepresentation,
    Representation,
)
from restws.domain.search import SearchConfig, SearchQuery

__all__ = [
    # Entities
    "Patient",
    "Person",
    "PersonName",
    # Exceptions
    "AmbiguousSearchException",
    "DuplicateResourceException",
    "DuplicateSearchHandlerException",
    "InvalidSearchException",
    "ObjectNotFoundException",
    "ResourceDeletionException",
    "RestWebServiceException",
    "UnknownResourceException",
    "UnknownSearchIdException",
    "ValidationException",
    # Representations
    "DEFAULT",
    "FULL",
    "REF",
    "CustomRepresentation",
    "DefaultRepresentation",
    "FullRepresentation",
    "NamedRepresentation",
    "RefRepresentation",
    "Representation",
    # Search
    "SearchConfig",
    "SearchQuery",
]
