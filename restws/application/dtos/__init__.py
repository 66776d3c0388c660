"""Application DTOs (no dependency on the HTTP shell)."""

from restws.application.dtos.context import RequestContext

__all__ = ["RequestContext"]
