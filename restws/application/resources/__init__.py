"""Delegating resource adapters for person-related entities."""

from restws.application.resources.base import DelegatingCrudResource
from restws.application.resources.patient import PatientResource
from restws.application.resources.person import PersonNameResource, PersonResource

__all__ = [
    "DelegatingCrudResource",
    "PatientResource",
    "PersonNameResource",
    "PersonResource",
]
