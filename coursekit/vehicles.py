"""Vehicles carrying passengers and baggage, and a city that keeps a list of them."""

from __future__ import annotations

from dataclasses import dataclass, field

CITY_CAPACITY = 100


@dataclass
class Vehicle:
    """Something that carries passengers and baggage."""

    passenger: int
    baggage: float

    def ride(self, person: int) -> None:
        """Take on ``person`` more passengers."""
        self.passenger += person

    def load(self, weight: float) -> None:
        """Add ``weight`` to the baggage."""
        self.baggage += weight

    def _common_lines(self, title: str) -> str:
        return (
            f"<<{title}>> \n"
            f"passenger: {self.passenger}\n"
            f"baggage: {self.baggage:g}\n"
        )

    def show_data(self) -> str:
        """Render the vehicle's load."""
        return self._common_lines("Vehicle")


@dataclass
class Airplane(Vehicle):
    """A vehicle with a crew."""

    crew_man: int

    def take_crew(self, crew: int) -> None:
        """Add ``crew`` crew members."""
        self.crew_man += crew

    def show_data(self) -> str:
        """Render passengers, baggage and crew."""
        return self._common_lines("Airplane") + f"crew man: {self.crew_man}\n"


@dataclass
class Train(Vehicle):
    """A vehicle with a length."""

    length: int

    def add_length(self, length: int) -> None:
        """Extend the train by ``length``."""
        self.length += length

    def show_data(self) -> str:
        """Render passengers, baggage and length."""
        return self._common_lines("Train") + f"length : {self.length}\n"


@dataclass
class City:
    """A city holding up to ``capacity`` vehicles in the order they were added."""

    capacity: int = CITY_CAPACITY
    vehicles: list[Vehicle] = field(default_factory=list)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        """Add ``vehicle``; OverflowError when the city is full."""
        if len(self.vehicles) >= self.capacity:
            raise OverflowError("city cannot hold more vehicles")
        self.vehicles.append(vehicle)

    def show_list(self) -> str:
        """Render every vehicle in turn."""
        return "".join(vehicle.show_data() for vehicle in self.vehicles)