"""Patient resource: CRUD via IPatientService plus the "names" sub-resource."""

from __future__ import annotations

import logging
from typing import Any

from restws.application.dtos.context import RequestContext
from restws.application.interfaces.services import IPatientService
from restws.application.resources.base import DelegatingCrudResource
from restws.application.resources.person import (
    PersonNameResource,
    check_fields,
    new_uuid,
    parse_birthdate,
)
from restws.domain.entities import Patient
from restws.domain.exceptions import UnknownResourceException

logger = logging.getLogger(__name__)

_PATIENT_FIELDS = frozenset({"gender", "birthdate", "identifier"})
SUB_RESOURCE_NAMES = "names"


class PatientResource(DelegatingCrudResource[Patient]):
    """Patients, with listing and adding of the "names" sub-resource."""

    resource_name = "patient"
    default_properties = ("identifier", "gender", "birthdate", "preferred_name")
    full_properties = ("names", "voided", "void_reason")
    named_representations = {"summary": ("identifier", "gender")}
    updatable_properties = _PATIENT_FIELDS

    def __init__(
        self, patient_service: IPatientService, name_resource: PersonNameResource
    ) -> None:
        self.patient_service = patient_service
        self.name_resource = name_resource

    def new_delegate(self, payload: dict[str, Any]) -> Patient:
        check_fields(self.resource_name, payload, _PATIENT_FIELDS)
        return Patient(
            uuid=new_uuid(payload),
            gender=payload.get("gender"),
            birthdate=parse_birthdate(payload.get("birthdate")),
            identifier=payload.get("identifier"),
        )

    def convert_input(self, name: str, value: Any) -> Any:
        return parse_birthdate(value) if name == "birthdate" else value

    def save_delegate(self, delegate: Patient) -> Patient:
        return self.patient_service.save_patient(delegate)

    def get_by_uuid(self, uuid: str) -> Patient | None:
        return self.patient_service.get_patient_by_uuid(uuid)

    def void_delegate(self, delegate: Patient, reason: str | None) -> None:
        self.patient_service.void_patient(delegate, reason)

    def purge_delegate(self, delegate: Patient) -> None:
        self.patient_service.purge_patient(delegate)

    def get_all_delegates(self) -> list[Patient]:
        return self.patient_service.get_all_patients()

    # Sub-resources

    def _check_sub_resource(self, sub_resource: str) -> None:
        if sub_resource != SUB_RESOURCE_NAMES:
            raise UnknownResourceException(f"{self.resource_name}/{sub_resource}")

    def list_sub_resource(
        self, uuid: str, sub_resource: str, context: RequestContext
    ) -> list[dict[str, Any]]:
        """List the current (non-voided) names of a patient."""
        self._check_sub_resource(sub_resource)
        patient = self.get_existing(uuid)
        return [
            self.name_resource.represent(name, context.representation)
            for name in patient.names
            if not name.voided
        ]

    def create_child(
        self,
        uuid: str,
        sub_resource: str,
        payload: dict[str, Any],
        context: RequestContext,
    ) -> dict[str, Any]:
        """Add a name to a patient and save the patient."""
        self._check_sub_resource(sub_resource)
        patient = self.get_existing(uuid)
        name = self.name_resource.new_delegate({**payload, "person": patient.uuid})
        patient.add_name(name)
        self.patient_service.save_patient(patient)
        logger.info("Added name %s to patient %s", name.uuid, patient.uuid)
        return self.name_resource.represent(name, context.representation)
