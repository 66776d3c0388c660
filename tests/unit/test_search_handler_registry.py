"""Tests for SearchHandlerRegistry (registration and disambiguation)."""

import logging

import pytest

from restws.application.services.search_handler_registry import SearchHandlerRegistry
from restws.domain.exceptions import (
    AmbiguousSearchException,
    DuplicateSearchHandlerException,
    InvalidSearchException,
    UnknownSearchIdException,
)
from restws.domain.search import SearchConfig, SearchQuery


@pytest.fixture
def registry() -> SearchHandlerRegistry:
    return SearchHandlerRegistry(platform_version="1.9.0")


def _params(*names: str, **values: str) -> dict[str, list[str]]:
    params = {name: ["x"] for name in names}
    params.update({k: [v] for k, v in values.items()})
    return params


def test_unknown_search_id(registry: SearchHandlerRegistry, make_handler) -> None:
    registry.register(make_handler("conceptByMapping", required={"sourceName", "code"}))

    with pytest.raises(UnknownSearchIdException) as exc_info:
        registry.get_search_handler(
            "concept", _params("sourceName", "code", s="conceptByMapping2")
        )

    exc = exc_info.value
    assert isinstance(exc, InvalidSearchException)
    assert exc.message == (
        "The search with id 'conceptByMapping2' for 'concept' resource is not recognized"
    )
    assert exc.error_code == "UNKNOWN_SEARCH_ID"
    assert exc.details == {"resource": "concept", "search_id": "conceptByMapping2"}


def test_search_id_wins_regardless_of_parameters(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    handler = make_handler("conceptByMapping", required={"sourceName", "code"})
    registry.register(handler)

    assert registry.get_search_handler("concept", _params(s="conceptByMapping")) is handler
    assert (
        registry.get_search_handler("concept", _params("unrelated", s="conceptByMapping"))
        is handler
    )


def test_search_id_of_another_resource_is_unknown(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    registry.register(make_handler("byName", resource="patient", required={"q"}))
    with pytest.raises(UnknownSearchIdException):
        registry.get_search_handler("concept", _params("q", s="byName"))


def test_identical_signatures_are_ambiguous(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    registry.register(make_handler("conceptByMapping", required={"sourceName", "code"}))
    registry.register(make_handler("conceptByMapping2", required={"sourceName", "code"}))

    with pytest.raises(AmbiguousSearchException) as exc_info:
        registry.get_search_handler("concept", _params("sourceName", "code"))

    exc = exc_info.value
    assert exc.message.startswith("The search is ambiguous. Please specify s=")
    assert exc.message == (
        "The search is ambiguous. Please specify s=conceptByMapping or s=conceptByMapping2"
    )
    assert exc.details["candidates"] == ["conceptByMapping", "conceptByMapping2"]


@pytest.fixture
def mapping_handlers(make_handler):
    """Handler 1 takes {sourceName, code}; handler 2 takes {sourceName} plus optional code."""
    first = make_handler("conceptByMapping", required={"sourceName", "code"})
    second = make_handler("conceptBySource", required={"sourceName"}, optional={"code"})
    third = make_handler("conceptBySourceName", required={"sourceName"})
    return first, second, third


def test_more_required_parameters_win(
    registry: SearchHandlerRegistry, mapping_handlers
) -> None:
    """{sourceName, code} is strictly more specific than {sourceName}[code]."""
    first, second, third = mapping_handlers
    for handler in mapping_handlers:
        registry.register(handler)

    assert registry.get_search_handler("concept", _params("sourceName", "code")) is first


def test_equal_required_sets_are_ambiguous(
    registry: SearchHandlerRegistry, mapping_handlers
) -> None:
    """With only sourceName, handlers 2 and 3 both require exactly {sourceName}."""
    for handler in mapping_handlers:
        registry.register(handler)

    with pytest.raises(AmbiguousSearchException) as exc_info:
        registry.get_search_handler("concept", _params("sourceName"))
    assert exc_info.value.details["candidates"] == ["conceptBySource", "conceptBySourceName"]


def test_missing_required_parameter_gives_none(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    registry.register(make_handler("conceptByMapping", required={"sourceName", "code"}))
    assert registry.get_search_handler("concept", _params("code")) is None


def test_unexpected_parameter_gives_none(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    registry.register(make_handler("conceptByMapping", required={"sourceName", "code"}))
    assert registry.get_search_handler("concept", _params("sourceName", "code", "q")) is None


def test_unknown_resource_gives_none(registry: SearchHandlerRegistry, make_handler) -> None:
    registry.register(make_handler("conceptByMapping", required={"sourceName", "code"}))
    assert registry.get_search_handler("nonexisting", _params("sourceName", "code")) is None


def test_empty_registry_gives_none(registry: SearchHandlerRegistry) -> None:
    assert registry.get_search_handler("concept", _params("q")) is None


def test_optional_only_signature_matches_no_parameters(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    handler = make_handler("all", optional={"q"})
    registry.register(handler)
    assert registry.get_search_handler("concept", {}) is handler
    assert registry.get_search_handler("concept", _params("q")) is handler


@pytest.mark.parametrize("selector", [[], [""], ["", ""]])
def test_blank_selector_is_ignored(
    registry: SearchHandlerRegistry, make_handler, selector: list[str]
) -> None:
    """A blank selector is treated as absent and excluded from signature matching."""
    handler = make_handler("byQuery", required={"q"})
    registry.register(handler)
    assert registry.get_search_handler("concept", {"q": ["x"], "s": selector}) is handler


def test_first_non_empty_selector_value_is_used(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    handler = make_handler("byQuery", required={"q"})
    registry.register(handler)
    assert registry.get_search_handler("concept", {"s": ["", "byQuery", "other"]}) is handler


def test_custom_selector_parameter(make_handler) -> None:
    registry = SearchHandlerRegistry(platform_version="1.9.0", selector_parameter="searchId")
    first = make_handler("a", required={"q"})
    registry.register(first)
    registry.register(make_handler("b", required={"q"}))

    assert registry.get_search_handler("concept", {"q": ["x"], "searchId": ["a"]}) is first
    with pytest.raises(AmbiguousSearchException) as exc_info:
        registry.get_search_handler("concept", {"q": ["x"]})
    assert "searchId=a or searchId=b" in exc_info.value.message
    # "s" is an ordinary parameter once the selector is renamed
    assert registry.get_search_handler("concept", {"q": ["x"], "s": ["a"]}) is None


def test_handler_with_several_queries(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    handler = make_handler("byName", required={"q"})
    multi = make_handler("byCodeOrMapping")
    multi.search_config = SearchConfig(
        id="byCodeOrMapping",
        supported_resource="concept",
        supported_versions=("1.9.*",),
        search_queries=(
            SearchQuery("By code", required_parameters={"code"}),
            SearchQuery("By mapping", required_parameters={"sourceName", "code"}),
        ),
    )
    registry.register(handler)
    registry.register(multi)

    assert registry.get_search_handler("concept", _params("code")) is multi
    assert registry.get_search_handler("concept", _params("sourceName", "code")) is multi
    assert registry.get_search_handler("concept", _params("q")) is handler


def test_one_handler_matching_through_two_queries_is_not_ambiguous(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    handler = make_handler("twice")
    handler.search_config = SearchConfig(
        id="twice",
        supported_resource="concept",
        supported_versions="1.9.*",
        search_queries=(
            SearchQuery("First", required_parameters={"q"}, optional_parameters={"code"}),
            SearchQuery("Second", required_parameters={"code"}, optional_parameters={"q"}),
        ),
    )
    registry.register(handler)
    assert registry.get_search_handler("concept", _params("q", "code")) is handler


def test_incomparable_signatures_are_ambiguous(
    registry: SearchHandlerRegistry, make_handler, caplog
) -> None:
    """{a,b} and {a,c} both beat {a} but neither contains the other."""
    registry.register(make_handler("a", required={"a"}, optional={"b", "c"}))
    registry.register(make_handler("ab", required={"a", "b"}, optional={"c"}))
    registry.register(make_handler("ac", required={"a", "c"}, optional={"b"}))

    with caplog.at_level(logging.WARNING):
        with pytest.raises(AmbiguousSearchException) as exc_info:
            registry.get_search_handler("concept", _params("a", "b", "c"))

    assert exc_info.value.details["candidates"] == ["ab", "ac"]
    assert any("Ambiguous search" in r.getMessage() for r in caplog.records)


def test_greatest_signature_wins_among_many(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    registry.register(make_handler("a", required={"a"}, optional={"b", "c"}))
    registry.register(make_handler("ab", required={"a", "b"}, optional={"c"}))
    registry.register(make_handler("ac", required={"a", "c"}, optional={"b"}))
    abc = make_handler("abc", required={"a", "b", "c"})
    registry.register(abc)

    assert registry.get_search_handler("concept", _params("a", "b", "c")) is abc


def test_three_way_tie_names_all_candidates(
    registry: SearchHandlerRegistry, make_handler, caplog
) -> None:
    for search_id in ("x", "y", "z"):
        registry.register(make_handler(search_id, required={"q"}))

    with caplog.at_level(logging.WARNING):
        with pytest.raises(AmbiguousSearchException) as exc_info:
            registry.get_search_handler("concept", _params("q"))

    assert exc_info.value.message == "The search is ambiguous. Please specify s=x or s=y or s=z"
    messages = [r.getMessage() for r in caplog.records if r.levelname == "WARNING"]
    assert messages == [
        "Ambiguous search on 'concept': 3 equally specific candidates ['x', 'y', 'z']"
    ]


def test_version_incompatible_handler_is_skipped(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    old = make_handler("old", required={"q"}, versions=("1.8.*",))
    current = make_handler("current", required={"q"}, versions=("1.8.*", "1.9.*"))

    assert registry.register(old) is False
    assert registry.register(current) is True
    assert registry.get_all() == [current]
    assert registry.get_search_handler("concept", _params("q")) is current
    with pytest.raises(UnknownSearchIdException):
        registry.get_search_handler("concept", _params(s="old"))


def test_duplicate_id_for_same_resource_rejected(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    registry.register(make_handler("default", required={"q"}))
    with pytest.raises(DuplicateSearchHandlerException) as exc_info:
        registry.register(make_handler("default", required={"code"}))
    assert exc_info.value.details == {"resource": "concept", "search_id": "default"}
    assert len(registry.get_all()) == 1


def test_same_id_on_different_resources_allowed(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    concept = make_handler("default", resource="concept", required={"q"})
    patient = make_handler("default", resource="patient", required={"q"})
    registry.register(concept)
    registry.register(patient)

    assert registry.get_for_resource("patient") == [patient]
    assert registry.get_search_handler("concept", _params(s="default")) is concept
    assert registry.get_search_handler("patient", _params(s="default")) is patient


def test_handler_accepting_every_supplied_parameter_is_chosen(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    """{sourceName}[code] accounts for code; {sourceName} alone does not accept it."""
    with_code = make_handler("conceptBySource", required={"sourceName"}, optional={"code"})
    registry.register(with_code)
    registry.register(make_handler("conceptBySourceName", required={"sourceName"}))

    assert registry.get_search_handler("concept", _params("sourceName", "code")) is with_code


def test_only_optional_counterpart_supplied_gives_none(
    registry: SearchHandlerRegistry, make_handler
) -> None:
    registry.register(make_handler("conceptBySourceName", required={"sourceName"}))
    assert registry.get_search_handler("concept", _params("code")) is None
