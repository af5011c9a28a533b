"""
Roster core: clean-architecture layout.

- domain: Person and surname ordering (OrderedRecordCollection). No outer dependencies.
- application: use cases (RosterService), ports (PersonRepository), DTOs.
- infrastructure: adapters (InMemoryPersonRepository).
"""

from roster.application import (
    PersonAdded,
    PersonNotFound,
    PersonRenamed,
    PersonRepository,
    PersonSummary,
    RosterService,
)
from roster.domain import (
    OrderedRecordCollection,
    Person,
    by_surname,
    sort_records,
    sorted_by_surname,
    surname_precedes,
)
from roster.infrastructure import InMemoryPersonRepository

__all__ = [
    "InMemoryPersonRepository",
    "OrderedRecordCollection",
    "Person",
    "PersonAdded",
    "PersonNotFound",
    "PersonRenamed",
    "PersonRepository",
    "PersonSummary",
    "RosterService",
    "by_surname",
    "sort_records",
    "sorted_by_surname",
    "surname_precedes",
]
