"""Tests for SearchQuery and SearchConfig value objects."""

import pytest

from restws.domain.exceptions import ValidationException
from restws.domain.search import SearchConfig, SearchQuery


def test_search_query_normalizes_parameters() -> None:
    """Lists become frozensets; a bare string is one parameter name."""
    query = SearchQuery("By mapping", required_parameters=["sourceName", "code"], optional_parameters="q")
    assert query.required_parameters == frozenset({"sourceName", "code"})
    assert query.optional_parameters == frozenset({"q"})
    assert query.accepted_parameters == frozenset({"sourceName", "code", "q"})


def test_search_query_accepts() -> None:
    query = SearchQuery("By source", required_parameters={"sourceName"}, optional_parameters={"code"})
    assert query.accepts({"sourceName"})
    assert query.accepts({"sourceName", "code"})
    assert not query.accepts({"code"})
    assert not query.accepts({"sourceName", "q"})


def test_search_query_rejects_overlap() -> None:
    with pytest.raises(ValidationException) as exc_info:
        SearchQuery("Bad", required_parameters={"q"}, optional_parameters={"q", "code"})
    assert exc_info.value.details == {"field": "optional_parameters"}


def test_search_query_requires_description() -> None:
    with pytest.raises(ValidationException):
        SearchQuery("", required_parameters={"q"})


def test_search_query_is_immutable_and_hashable() -> None:
    query = SearchQuery("By name", required_parameters={"q"})
    with pytest.raises(AttributeError):
        query.description = "changed"  # type: ignore[misc]
    assert query == SearchQuery("By name", required_parameters=["q"])
    assert len({query, SearchQuery("By name", required_parameters={"q"})}) == 1


def test_search_config_wraps_single_values() -> None:
    query = SearchQuery("By name", required_parameters={"q"})
    config = SearchConfig("byName", "patient", "1.9.*", query)
    assert config.supported_versions == ("1.9.*",)
    assert config.search_queries == (query,)


@pytest.mark.parametrize(
    ("kwargs", "field"),
    [
        ({"id": ""}, "id"),
        ({"supported_resource": ""}, "supported_resource"),
        ({"supported_versions": ()}, "supported_versions"),
        ({"search_queries": ()}, "search_queries"),
    ],
)
def test_search_config_validation(kwargs: dict, field: str) -> None:
    values = {
        "id": "byName",
        "supported_resource": "patient",
        "supported_versions": ("1.9.*",),
        "search_queries": (SearchQuery("By name", required_parameters={"q"}),),
    }
    values.update(kwargs)
    with pytest.raises(ValidationException) as exc_info:
        SearchConfig(**values)
    assert exc_info.value.details == {"field": field}
