"""Domain entities.

Pure domain models; no persistence concerns.
"""

from restws.domain.entities.person import Patient, Person, PersonName

__all__ = [
    "Patient",
    "Person",
    "PersonName",
]
