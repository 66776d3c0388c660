"""Request context passed from the HTTP shell to resources and search handlers."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from restws.domain.representation import DEFAULT, Representation


@dataclass(frozen=True)
class RequestContext:
    """Per-request input to adapters (no dependency on FastAPI)."""

    representation: Representation = DEFAULT
    parameters: Mapping[str, Sequence[str]] = field(default_factory=dict)
    request_id: str | None = None

    def get_parameter(self, name: str) -> str | None:
        """Return the first value of a request parameter, or None if absent."""
        values = self.parameters.get(name)
        return values[0] if values else None
