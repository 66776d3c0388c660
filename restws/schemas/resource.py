"""Resource API schemas."""

from typing import Any

from pydantic import BaseModel


class ResultsResponse(BaseModel):
    """List of representations (search results or all objects)."""

    results: list[Any]
