"""Application DTOs: summaries and use-case results."""

from dataclasses import dataclass

from roster.domain import Person


@dataclass(frozen=True)
class PersonSummary:
    person_id: str
    first_name: str
    last_name: str
    display_name: str

    @classmethod
    def from_person(cls, person: Person) -> "PersonSummary":
        return cls(
            person_id=person.id,
            first_name=person.first_name,
            last_name=person.last_name,
            display_name=person.display_name,
        )


@dataclass(frozen=True)
class PersonAdded:
    person_id: str
    display_name: str


@dataclass(frozen=True)
class PersonRenamed:
    person_id: str
    display_name: str


@dataclass(frozen=True)
class PersonNotFound:
    person_id: str
