"""Domain entities: Person and its surname ordering."""

import uuid
from dataclasses import dataclass, field


@dataclass(eq=False)
class Person:
    """
    A named record shown in a roster.
    Ordered by last_name only; id is for display identity and never compared.
    """

    first_name: str = ""
    last_name: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.last_name < other.last_name

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Person id is immutable.")
        super().__setattr__(name, value)

    @property
    def display_name(self) -> str:
        return f"{self.last_name}, {self.first_name}"
