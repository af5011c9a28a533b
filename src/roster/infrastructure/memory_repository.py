"""In-memory implementation of PersonRepository (no DB)."""

from roster.domain import Person


class InMemoryPersonRepository:
    """Stores people in memory. Order preserved by insertion."""

    def __init__(self) -> None:
        self._by_id: dict[str, Person] = {}
        self._order: list[str] = []

    def add(self, person: Person) -> None:
        if person.id in self._by_id:
            return
        self._by_id[person.id] = person
        self._order.append(person.id)

    def get_by_id(self, person_id: str) -> Person | None:
        return self._by_id.get(person_id)

    def list_all(self) -> list[Person]:
        return [self._by_id[pid] for pid in self._order if pid in self._by_id]
