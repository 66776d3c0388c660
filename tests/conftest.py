"""Pytest configuration and fixtures for restws.

Every test gets its own RestService (no shared registration tables) backed
by an in-memory person/patient service. HTTP tests use create_app(rest_service)
through httpx's ASGITransport.
"""

from collections.abc import Callable, Iterable
from datetime import date
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from restws.application.bootstrap import register_core_resources, register_search_handlers
from restws.application.dtos.context import RequestContext
from restws.application.services.rest_service import RestService
from restws.core.config import Settings, get_settings
from restws.domain.entities import Patient, Person, PersonName
from restws.domain.search import SearchConfig, SearchQuery
from restws.main import create_app

PLATFORM_VERSION = "1.9.0"


class InMemoryPersonService:
    """Person and patient service over a dict (implements IPersonService and IPatientService)."""

    def __init__(self) -> None:
        self.people: dict[str, Person] = {}
        self.referenced: set[str] = set()
        self.saved: list[str] = []

    # IPersonService
    def get_person_by_uuid(self, uuid: str) -> Person | None:
        return self.people.get(uuid)

    def get_all_persons(self) -> list[Person]:
        return [p for p in self.people.values() if not p.voided]

    def save_person(self, person: Person) -> Person:
        self.people[person.uuid] = person
        self.saved.append(person.uuid)
        return person

    def void_person(self, person: Person, reason: str | None) -> Person:
        person.voided = True
        person.void_reason = reason
        return person

    def purge_person(self, person: Person) -> None:
        if person.uuid in self.referenced:
            raise ValueError(f"{person.uuid} is referenced by other data")
        del self.people[person.uuid]

    # IPatientService
    def get_patient_by_uuid(self, uuid: str) -> Patient | None:
        person = self.people.get(uuid)
        return person if isinstance(person, Patient) else None

    def get_all_patients(self) -> list[Patient]:
        return [p for p in self.get_all_persons() if isinstance(p, Patient)]

    def save_patient(self, patient: Patient) -> Patient:
        return self.save_person(patient)

    def void_patient(self, patient: Patient, reason: str | None) -> Patient:
        return self.void_person(patient, reason)

    def purge_patient(self, patient: Patient) -> None:
        self.purge_person(patient)


class StubSearchHandler:
    """Search handler returning a marker naming itself."""

    def __init__(self, search_config: SearchConfig) -> None:
        self.search_config = search_config

    def search(self, context: RequestContext) -> list[Any]:
        return [{"handler": self.search_config.id}]


class PatientIdentifierSearch:
    """Finds patients by exact identifier."""

    def __init__(self, service: InMemoryPersonService) -> None:
        self.service = service
        self.search_config = SearchConfig(
            id="patientByIdentifier",
            supported_resource="patient",
            supported_versions=("1.9.*",),
            search_queries=SearchQuery(
                "Find patients by identifier", required_parameters={"identifier"}
            ),
        )

    def search(self, context: RequestContext) -> list[Any]:
        wanted = context.get_parameter("identifier")
        return [
            {"uuid": p.uuid, "display": p.display}
            for p in self.service.get_all_patients()
            if p.identifier == wanted
        ]


@pytest.fixture
def settings() -> Settings:
    """Default settings with the test platform version."""
    get_settings.cache_clear()
    return Settings(platform_version=PLATFORM_VERSION)


@pytest.fixture
def make_handler() -> Callable[..., StubSearchHandler]:
    """Factory for stub search handlers: make_handler(id, resource, required, optional, versions)."""

    def _make(
        search_id: str,
        resource: str = "concept",
        required: Iterable[str] = (),
        optional: Iterable[str] = (),
        versions: Iterable[str] = ("1.9.*",),
    ) -> StubSearchHandler:
        return StubSearchHandler(
            SearchConfig(
                id=search_id,
                supported_resource=resource,
                supported_versions=tuple(versions),
                search_queries=SearchQuery(
                    "description",
                    required_parameters=frozenset(required),
                    optional_parameters=frozenset(optional),
                ),
            )
        )

    return _make


@pytest.fixture
def person_service() -> InMemoryPersonService:
    """Store with one patient (pat-1, two names) and one non-patient person (per-1)."""
    service = InMemoryPersonService()
    patient = Patient(
        uuid="pat-1",
        gender="F",
        birthdate=date(1990, 5, 17),
        identifier="ID-100",
    )
    patient.add_name(PersonName(uuid="name-1", given_name="Jane", family_name="Doe"))
    patient.add_name(
        PersonName(uuid="name-2", given_name="Janet", family_name="Doe", voided=True)
    )
    person = Person(uuid="per-1", gender="M")
    person.add_name(PersonName(uuid="name-3", given_name="John", family_name="Roe"))
    service.people = {patient.uuid: patient, person.uuid: person}
    return service


@pytest.fixture
def rest_service(
    settings: Settings,
    person_service: InMemoryPersonService,
    make_handler: Callable[..., StubSearchHandler],
) -> RestService:
    """RestService with person/patient/personname resources and patient search handlers."""
    service = RestService.from_settings(settings)
    register_core_resources(service, person_service, person_service)
    register_search_handlers(
        service,
        [
            PatientIdentifierSearch(person_service),
            make_handler("patientByName", "patient", required={"q"}),
            make_handler("patientByNameFuzzy", "patient", required={"q"}),
            make_handler("patientByGender", "patient", required={"gender"}, optional={"q"}),
        ],
    )
    return service


@pytest.fixture
async def client(rest_service: RestService) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    app = create_app(rest_service)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
