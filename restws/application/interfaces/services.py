"""Domain service interfaces (ports).

The person and patient services are external collaborators; resources
delegate to them and never reimplement save/void/purge.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from restws.domain.entities import Patient, Person


class IPersonService(Protocol):
    """Protocol for the person service (DIP)."""

    def get_person_by_uuid(self, uuid: str) -> Person | None:
        """Return person by uuid."""

    def get_all_persons(self) -> list[Person]:
        """Return all non-voided persons."""

    def save_person(self, person: Person) -> Person:
        """Create or update a person."""

    def void_person(self, person: Person, reason: str | None) -> Person:
        """Mark a person voided with a reason."""

    def purge_person(self, person: Person) -> None:
        """Remove a person permanently. May raise if the person is referenced."""


class IPatientService(Protocol):
    """Protocol for the patient service (DIP)."""

    def get_patient_by_uuid(self, uuid: str) -> Patient | None:
        """Return patient by uuid."""

    def get_all_patients(self) -> list[Patient]:
        """Return all non-voided patients."""

    def save_patient(self, patient: Patient) -> Patient:
        """Create or update a patient."""

    def void_patient(self, patient: Patient, reason: str | None) -> Patient:
        """Mark a patient voided with a reason."""

    def purge_patient(self, patient: Patient) -> None:
        """Remove a patient permanently. May raise if the patient has data."""
