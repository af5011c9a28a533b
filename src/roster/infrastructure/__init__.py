"""Infrastructure layer: concrete implementations of application ports."""

from roster.infrastructure.memory_repository import InMemoryPersonRepository

__all__ = ["InMemoryPersonRepository"]
