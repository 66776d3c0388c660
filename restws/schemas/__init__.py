"""Pydantic response models for the HTTP shell."""

from restws.schemas.health import HealthResponse
from restws.schemas.resource import ResultsResponse
from restws.schemas.search_handler import (
    SearchHandlerListResponse,
    SearchHandlerResponse,
    SearchQueryResponse,
)

__all__ = [
    "HealthResponse",
    "ResultsResponse",
    "SearchHandlerListResponse",
    "SearchHandlerResponse",
    "SearchQueryResponse",
]
