"""Roster use cases: add, rename, list in insertion or surname order."""

import logging

from roster.application.dto import (
    PersonAdded,
    PersonNotFound,
    PersonRenamed,
    PersonSummary,
)
from roster.application.ports import PersonRepository
from roster.domain import Person, sorted_by_surname

logger = logging.getLogger(__name__)


class RosterService:
    """People held in a repository, listed as stored or sorted by surname."""

    def __init__(self, repository: PersonRepository) -> None:
        self._repo = repository

    def add_person(self, first_name: str, last_name: str) -> PersonAdded:
        """Store a new person. Names are kept as given."""
        person = Person(first_name=first_name, last_name=last_name)
        self._repo.add(person)
        logger.debug("Added person %s (%s)", person.id, person.display_name)
        return PersonAdded(person_id=person.id, display_name=person.display_name)

    def rename(
        self,
        person_id: str,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> PersonRenamed | PersonNotFound:
        """Change first and/or last name in place. None leaves a field as is."""
        person = self._repo.get_by_id(person_id)
        if person is None:
            return PersonNotFound(person_id=person_id)
        if first_name is not None:
            person.first_name = first_name
        if last_name is not None:
            person.last_name = last_name
        logger.debug("Renamed person %s to %s", person.id, person.display_name)
        return PersonRenamed(person_id=person.id, display_name=person.display_name)

    def get_person(self, person_id: str) -> PersonSummary | None:
        person = self._repo.get_by_id(person_id)
        if person is None:
            return None
        return PersonSummary.from_person(person)

    def list_people(self) -> list[PersonSummary]:
        """Return everyone in insertion order."""
        return [PersonSummary.from_person(p) for p in self._repo.list_all()]

    def list_sorted(self) -> list[PersonSummary]:
        """Return everyone by surname; equal surnames stay in insertion order."""
        return [
            PersonSummary.from_person(p)
            for p in sorted_by_surname(self._repo.list_all())
        ]

    def display_lines(self) -> list[str]:
        """Return "<last>, <first>" for everyone, in surname order."""
        return [s.display_name for s in self.list_sorted()]
