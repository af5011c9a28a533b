"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from roster.domain import Person


class PersonRepository(Protocol):
    """Holds Person records for the lifetime of a roster."""

    def add(self, person: Person) -> None:
        """Store a person. Adding an id that is already stored does nothing."""
        ...

    def get_by_id(self, person_id: str) -> Person | None:
        """Return the person with the given id, or None."""
        ...

    def list_all(self) -> list[Person]:
        """Return all people in insertion order."""
        ...
