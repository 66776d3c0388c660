"""Search handler declarations: queries (signatures) and configs.

A search handler declares one or more SearchQuery signatures inside its
SearchConfig. Both types are immutable and validate on construction.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from restws.domain.exceptions import ValidationException


def _as_names(value: Iterable[str] | str) -> frozenset[str]:
    """Normalize a parameter collection to a frozenset (a bare string is one name)."""
    if isinstance(value, str):
        return frozenset({value})
    return frozenset(value)


@dataclass(frozen=True)
class SearchQuery:
    """Signature of a search: required and optional parameter names.

    Required names are never also optional.
    """

    description: str
    required_parameters: frozenset[str] = frozenset()
    optional_parameters: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "required_parameters", _as_names(self.required_parameters))
        object.__setattr__(self, "optional_parameters", _as_names(self.optional_parameters))
        if not self.description:
            raise ValidationException("Search query description is required", field="description")
        overlap = self.required_parameters & self.optional_parameters
        if overlap:
            raise ValidationException(
                f"Parameters cannot be both required and optional: {', '.join(sorted(overlap))}",
                field="optional_parameters",
            )

    @property
    def accepted_parameters(self) -> frozenset[str]:
        """Union of required and optional parameter names."""
        return self.required_parameters | self.optional_parameters

    def accepts(self, supplied: Iterable[str]) -> bool:
        """Return whether the supplied names satisfy this signature.

        Every required name must be supplied and every supplied name must be
        required or optional.

        Args:
            supplied: Request parameter names (selector parameter excluded).

        Returns:
            True if supplied is a superset of required and a subset of accepted.
        """
        names = frozenset(supplied)
        return self.required_parameters <= names <= self.accepted_parameters


@dataclass(frozen=True)
class SearchConfig:
    """Registration record of a search handler.

    Attributes:
        id: Handler id, unique among handlers of supported_resource.
        supported_resource: Resource name the handler searches.
        supported_versions: Platform version patterns (see domain.versions).
        search_queries: Alternative signatures; a bare SearchQuery is wrapped.
    """

    id: str
    supported_resource: str
    supported_versions: tuple[str, ...]
    search_queries: tuple[SearchQuery, ...]

    def __post_init__(self) -> None:
        versions = self.supported_versions
        if isinstance(versions, str):
            versions = (versions,)
        queries = self.search_queries
        if isinstance(queries, SearchQuery):
            queries = (queries,)
        object.__setattr__(self, "supported_versions", tuple(versions))
        object.__setattr__(self, "search_queries", tuple(queries))

        if not self.id:
            raise ValidationException("Search config id is required", field="id")
        if not self.supported_resource:
            raise ValidationException(
                "Search config supported_resource is required", field="supported_resource"
            )
        if not self.supported_versions:
            raise ValidationException(
                "Search config must support at least one version", field="supported_versions"
            )
        if not self.search_queries:
            raise ValidationException(
                "Search config must declare at least one search query", field="search_queries"
            )
