"""Person, patient, and person name domain entities.

Plain domain models owned by the external person/patient services; the
resource adapters only read and forward them. Patient extends Person, so
resource lookup by class resolves a Patient to the patient resource and any
other Person to the person resource.
"""

from dataclasses import dataclass, field
from datetime import date

from restws.domain.exceptions import ValidationException


@dataclass
class PersonName:
    """A name of a person. Validation runs on construction."""

    uuid: str
    given_name: str
    family_name: str
    middle_name: str | None = None
    preferred: bool = False
    voided: bool = False
    void_reason: str | None = None
    person_uuid: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.uuid:
            raise ValidationException("Person name uuid is required", field="uuid")
        if not self.given_name and not self.family_name:
            raise ValidationException(
                "Person name needs a given or family name", field="given_name"
            )

    @property
    def display(self) -> str:
        """Full name for display ("Given Middle Family")."""
        parts = (self.given_name, self.middle_name, self.family_name)
        return " ".join(p for p in parts if p)


@dataclass
class Person:
    """A person known to the platform."""

    uuid: str
    gender: str | None = None
    birthdate: date | None = None
    names: list[PersonName] = field(default_factory=list)
    voided: bool = False
    void_reason: str | None = None

    def __post_init__(self) -> None:
        if not self.uuid:
            raise ValidationException("Person uuid is required", field="uuid")

    @property
    def preferred_name(self) -> PersonName | None:
        """Preferred non-voided name, falling back to the first non-voided one."""
        active = [n for n in self.names if not n.voided]
        for name in active:
            if name.preferred:
                return name
        return active[0] if active else None

    @property
    def display(self) -> str:
        name = self.preferred_name
        return name.display if name else self.uuid

    def add_name(self, name: PersonName) -> None:
        """Attach a name; the first name added becomes preferred."""
        name.person_uuid = self.uuid
        if not any(not n.voided for n in self.names):
            name.preferred = True
        self.names.append(name)


@dataclass
class Patient(Person):
    """A person receiving care; identified by a patient identifier."""

    identifier: str | None = None

    @property
    def display(self) -> str:
        name = super().display
        return f"{self.identifier} - {name}" if self.identifier else name
