"""Registration helpers used at startup.

Discovery of resources and search handlers belongs to the hosting platform;
these helpers register the person-related resources shipped here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from restws.application.interfaces.resources import SearchHandler
from restws.application.interfaces.services import IPatientService, IPersonService
from restws.application.resources import (
    PatientResource,
    PersonNameResource,
    PersonResource,
)
from restws.application.services.rest_service import RestService
from restws.domain.entities import Patient, Person, PersonName

logger = logging.getLogger(__name__)


def register_core_resources(
    service: RestService,
    person_service: IPersonService,
    patient_service: IPatientService,
) -> None:
    """Register person, patient, and personname resources (one shared instance each)."""
    names = PersonNameResource(person_service)
    person = PersonResource(person_service)
    patient = PatientResource(patient_service, names)

    service.register_resource(PersonResource.resource_name, Person, lambda: person)
    service.register_resource(PatientResource.resource_name, Patient, lambda: patient)
    service.register_resource(PersonNameResource.resource_name, PersonName, lambda: names)


def register_search_handlers(
    service: RestService, handlers: Iterable[SearchHandler]
) -> int:
    """Register discovered search handlers; return how many were accepted."""
    accepted = sum(1 for handler in handlers if service.register_search_handler(handler))
    logger.info("Registered %d search handler(s)", accepted)
    return accepted
