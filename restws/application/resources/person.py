"""Resources for persons and person names (delegate to IPersonService)."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date
from typing import Any

from restws.application.interfaces.services import IPersonService
from restws.application.resources.base import DelegatingCrudResource
from restws.domain.entities import Person, PersonName
from restws.domain.exceptions import ObjectNotFoundException, ValidationException

_PERSON_FIELDS = frozenset({"gender", "birthdate"})
_NAME_FIELDS = frozenset({"given_name", "middle_name", "family_name", "preferred"})


def parse_birthdate(value: Any) -> date | None:
    """Parse an ISO date (YYYY-MM-DD); None and date instances pass through."""
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise ValidationException(
            f"Invalid birthdate '{value}', expected YYYY-MM-DD", field="birthdate"
        ) from exc


def new_uuid(payload: dict[str, Any]) -> str:
    return str(payload.get("uuid") or uuid_lib.uuid4())


def check_fields(resource: str, payload: dict[str, Any], allowed: frozenset[str]) -> None:
    unknown = set(payload) - allowed - {"uuid"}
    if unknown:
        raise ValidationException(
            f"Cannot set {', '.join(sorted(unknown))} on {resource}",
            field=sorted(unknown)[0],
        )


class PersonNameResource(DelegatingCrudResource[PersonName]):
    """Names of persons. A name is saved by saving the person that owns it."""

    resource_name = "personname"
    default_properties = ("given_name", "middle_name", "family_name", "preferred")
    full_properties = ("voided", "void_reason")
    updatable_properties = _NAME_FIELDS

    def __init__(self, person_service: IPersonService) -> None:
        self.person_service = person_service

    def new_delegate(self, payload: dict[str, Any]) -> PersonName:
        check_fields(self.resource_name, payload, _NAME_FIELDS | {"person"})
        return PersonName(
            uuid=new_uuid(payload),
            given_name=payload.get("given_name") or "",
            middle_name=payload.get("middle_name"),
            family_name=payload.get("family_name") or "",
            preferred=bool(payload.get("preferred", False)),
            person_uuid=payload.get("person"),
        )

    def _owner(self, name: PersonName) -> Person:
        if not name.person_uuid:
            raise ValidationException("Person name must belong to a person", field="person")
        person = self.person_service.get_person_by_uuid(name.person_uuid)
        if person is None:
            raise ObjectNotFoundException("person", name.person_uuid)
        return person

    def save_delegate(self, delegate: PersonName) -> PersonName:
        person = self._owner(delegate)
        if not any(n.uuid == delegate.uuid for n in person.names):
            person.add_name(delegate)
        self.person_service.save_person(person)
        return delegate

    def get_by_uuid(self, uuid: str) -> PersonName | None:
        for person in self.person_service.get_all_persons():
            for name in person.names:
                if name.uuid == uuid:
                    return name
        return None

    def void_delegate(self, delegate: PersonName, reason: str | None) -> None:
        delegate.voided = True
        delegate.void_reason = reason
        self.person_service.save_person(self._owner(delegate))

    def purge_delegate(self, delegate: PersonName) -> None:
        person = self._owner(delegate)
        person.names = [n for n in person.names if n.uuid != delegate.uuid]
        self.person_service.save_person(person)

    def get_all_delegates(self) -> list[PersonName]:
        return [
            name
            for person in self.person_service.get_all_persons()
            for name in person.names
            if not name.voided
        ]


class PersonResource(DelegatingCrudResource[Person]):
    """Persons (non-patients included)."""

    resource_name = "person"
    default_properties = ("gender", "birthdate", "preferred_name")
    full_properties = ("names", "voided", "void_reason")
    updatable_properties = _PERSON_FIELDS

    def __init__(self, person_service: IPersonService) -> None:
        self.person_service = person_service

    def new_delegate(self, payload: dict[str, Any]) -> Person:
        check_fields(self.resource_name, payload, _PERSON_FIELDS)
        return Person(
            uuid=new_uuid(payload),
            gender=payload.get("gender"),
            birthdate=parse_birthdate(payload.get("birthdate")),
        )

    def convert_input(self, name: str, value: Any) -> Any:
        return parse_birthdate(value) if name == "birthdate" else value

    def save_delegate(self, delegate: Person) -> Person:
        return self.person_service.save_person(delegate)

    def get_by_uuid(self, uuid: str) -> Person | None:
        return self.person_service.get_person_by_uuid(uuid)

    def void_delegate(self, delegate: Person, reason: str | None) -> None:
        self.person_service.void_person(delegate, reason)

    def purge_delegate(self, delegate: Person) -> None:
        self.person_service.purge_person(delegate)

    def get_all_delegates(self) -> list[Person]:
        return self.person_service.get_all_persons()
