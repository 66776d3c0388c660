"""Search handler API schemas."""

from pydantic import BaseModel, Field

from restws.domain.search import SearchConfig, SearchQuery


class SearchQueryResponse(BaseModel):
    """One signature of a search handler."""

    description: str
    required_parameters: list[str] = Field(default_factory=list)
    optional_parameters: list[str] = Field(default_factory=list)

    @classmethod
    def from_query(cls, query: SearchQuery) -> "SearchQueryResponse":
        return cls(
            description=query.description,
            required_parameters=sorted(query.required_parameters),
            optional_parameters=sorted(query.optional_parameters),
        )


class SearchHandlerResponse(BaseModel):
    """Registered search handler declaration."""

    id: str
    supported_resource: str
    supported_versions: list[str]
    search_queries: list[SearchQueryResponse]

    @classmethod
    def from_config(cls, config: SearchConfig) -> "SearchHandlerResponse":
        return cls(
            id=config.id,
            supported_resource=config.supported_resource,
            supported_versions=list(config.supported_versions),
            search_queries=[SearchQueryResponse.from_query(q) for q in config.search_queries],
        )


class SearchHandlerListResponse(BaseModel):
    """Registered search handlers (optionally filtered by resource)."""

    results: list[SearchHandlerResponse]
