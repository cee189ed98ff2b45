"""A person with a name and an age."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    """A named person of a given age."""

    name: str
    age: int

    def show_data(self) -> str:
        """Render the name and age on two lines."""
        return f"name: {self.name}\nage: {self.age}\n"