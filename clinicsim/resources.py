"""Treatment resources: electro devices, ultrasound devices and gym rooms."""

from __future__ import annotations

from dataclasses import dataclass, field

from clinicsim.defs import ResourceType


@dataclass(eq=False)
class Resource:
    """A resource that can be assigned to a treatment; use a concrete subclass."""

    id: int = 0
    type: ResourceType = ResourceType.NONE
    available: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        if type(self) is Resource:
            raise TypeError("Resource is abstract; use EDevice, UDevice or XRoom")

    def mark_available(self) -> None:
        self.available = True

    def mark_unavailable(self) -> None:
        self.available = False

    def _availability(self) -> str:
        return "Available" if self.available else "UnAvailable"

    def __str__(self) -> str:
        return f"[ID: {self.id}, {self._availability()}]"


@dataclass(eq=False)
class EDevice(Resource):
    """Electro therapy device."""


@dataclass(eq=False)
class UDevice(Resource):
    """Ultrasound therapy device."""


@dataclass(eq=False)
class XRoom(Resource):
    """Gym room holding up to `capacity` patients at once."""

    capacity: int = 0
    num_patients: int = field(default=0, init=False)

    def increment_patients(self) -> None:
        self.num_patients += 1

    def __str__(self) -> str:
        return (
            f"[ID: {self.id}, {self._availability()}, "
            f"Cap: {self.capacity}, Pts: {self.num_patients}]"
        )