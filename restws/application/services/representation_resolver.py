"""Maps the request's representation token to a Representation."""

from restws.core.constants import (
    REPRESENTATION_CUSTOM_PREFIX,
    REPRESENTATION_DEFAULT,
    REPRESENTATION_FULL,
    REPRESENTATION_REF,
)
from restws.domain.representation import (
    DEFAULT,
    FULL,
    REF,
    CustomRepresentation,
    NamedRepresentation,
    Representation,
)

_FIXED: dict[str, Representation] = {
    REPRESENTATION_REF: REF,
    REPRESENTATION_DEFAULT: DEFAULT,
    REPRESENTATION_FULL: FULL,
}


class RepresentationResolver:
    """Resolves representation tokens (pure; never raises)."""

    def __init__(self, custom_prefix: str = REPRESENTATION_CUSTOM_PREFIX) -> None:
        self.custom_prefix = custom_prefix

    def resolve(self, token: str | None) -> Representation:
        """Return the representation named by token.

        Empty or missing tokens give DEFAULT; reserved tokens give their
        fixed variant; tokens with the custom prefix give a
        CustomRepresentation of the remainder; anything else is kept
        verbatim as a NamedRepresentation.
        """
        if not token:
            return DEFAULT
        fixed = _FIXED.get(token)
        if fixed is not None:
            return fixed
        if token.startswith(self.custom_prefix):
            return CustomRepresentation(token[len(self.custom_prefix):])
        return NamedRepresentation(token)
