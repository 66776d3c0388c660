"""Application interfaces (ports): resource, search handler, and domain service protocols.

Define contracts for adapters and external services (DIP).
No runtime imports from restws.api.
"""

from restws.application.interfaces.resources import (
    Resource,
    ResourceFactory,
    SearchHandler,
    SubResourceParent,
)
from restws.application.interfaces.services import IPatientService, IPersonService

__all__ = [
    "IPatientService",
    "IPersonService",
    "Resource",
    "ResourceFactory",
    "SearchHandler",
    "SubResourceParent",
]
