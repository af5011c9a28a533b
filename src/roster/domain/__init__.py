"""Domain layer: Person and surname ordering. No dependencies on outer layers."""

from roster.domain.entities import Person
from roster.domain.ordering import (
    OrderedRecordCollection,
    by_surname,
    sort_records,
    sorted_by_surname,
    surname_precedes,
)

__all__ = [
    "OrderedRecordCollection",
    "Person",
    "by_surname",
    "sort_records",
    "sorted_by_surname",
    "surname_precedes",
]
