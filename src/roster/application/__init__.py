"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from roster.application.dto import (
    PersonAdded,
    PersonNotFound,
    PersonRenamed,
    PersonSummary,
)
from roster.application.ports import PersonRepository
from roster.application.roster_service import RosterService

__all__ = [
    "PersonAdded",
    "PersonNotFound",
    "PersonRenamed",
    "PersonRepository",
    "PersonSummary",
    "RosterService",
]
