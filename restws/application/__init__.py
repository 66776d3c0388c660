"""Application layer: interfaces, resolvers, and delegating resources.

Depends only on domain and protocol definitions (DIP). Domain services
(person, patient) are external and implement the interfaces.
"""

from restws.application.dtos import RequestContext
from restws.application.interfaces import (
    IPatientService,
    IPersonService,
    Resource,
    ResourceFactory,
    SearchHandler,
    SubResourceParent,
)
from restws.application.services import (
    RepresentationResolver,
    ResourceDefinition,
    ResourceRegistry,
    RestService,
    SearchHandlerRegistry,
)

__all__ = [
    "IPatientService",
    "IPersonService",
    "RepresentationResolver",
    "RequestContext",
    "Resource",
    "ResourceDefinition",
    "ResourceFactory",
    "ResourceRegistry",
    "RestService",
    "SearchHandler",
    "SearchHandlerRegistry",
    "SubResourceParent",
]
