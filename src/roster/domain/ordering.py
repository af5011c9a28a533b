"""Surname ordering: comparators, a stable generic sort, and OrderedRecordCollection.

The comparison rule lives here as plain function values so callers can pass a
different policy to sort_records without touching Person.
"""

from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import TypeVar

from roster.domain.entities import Person

T = TypeVar("T")

Precedes = Callable[[T, T], bool]


def by_surname(person: Person) -> str:
    return person.last_name


def surname_precedes(a: Person, b: Person) -> bool:
    """True if a sorts before b: last_name ascending, plain str comparison."""
    return a.last_name < b.last_name


def sort_records(records: Iterable[T], precedes: Precedes = surname_precedes) -> list[T]:
    """Return a new list sorted by the `precedes` (less-than) predicate.

    Stable: records neither preceding the other keep their input order.
    """

    def compare(a: T, b: T) -> int:
        if precedes(a, b):
            return -1
        if precedes(b, a):
            return 1
        return 0

    return sorted(records, key=cmp_to_key(compare))


def sorted_by_surname(records: Iterable[Person]) -> list[Person]:
    """Return records ordered by last_name, equal surnames in input order."""
    return sorted(records, key=by_surname)


class OrderedRecordCollection:
    """Holds Person records in insertion order and yields them sorted."""

    def __init__(
        self,
        records: Iterable[Person] = (),
        *,
        precedes: Precedes = surname_precedes,
    ) -> None:
        self._records: list[Person] = list(records)
        self._precedes = precedes

    @property
    def records(self) -> list[Person]:
        """Records in insertion order (a copy)."""
        return list(self._records)

    def add(self, person: Person) -> None:
        self._records.append(person)

    def extend(self, persons: Iterable[Person]) -> None:
        self._records.extend(persons)

    def sorted(self) -> list[Person]:
        if self._precedes is surname_precedes:
            return sorted_by_surname(self._records)
        return sort_records(self._records, self._precedes)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.sorted())

    def __len__(self) -> int:
        return len(self._records)
