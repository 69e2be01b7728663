"""Therapies a patient can require and how they reach a waiting list."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from clinicsim.defs import TreatmentType

if TYPE_CHECKING:
    from clinicsim.patient import Patient
    from clinicsim.resources import Resource


class Treatment(ABC):
    """A single therapy session of a fixed duration; use a concrete subclass."""

    def __init__(
        self,
        patient: Optional["Patient"] = None,
        duration: int = 0,
        type: TreatmentType = TreatmentType.ULTRA,
        assignment_time: int = 0,
    ) -> None:
        self.patient = patient
        self.duration = duration
        self.assignment_time = assignment_time
        self._type = type
        self.assigned_resource: Optional["Resource"] = None

    @property
    def type(self) -> TreatmentType:
        """The kind of therapy; fixed at creation."""
        return self._type

    def assign_resource(self, resource: "Resource") -> None:
        """Attach a resource to this treatment and mark it as taken."""
        self.assigned_resource = resource
        resource.mark_unavailable()

    def finish(self) -> None:
        """Release the assigned resource."""
        if self.assigned_resource is None:
            raise RuntimeError("treatment has no assigned resource")
        self.assigned_resource.mark_available()

    @abstractmethod
    def move_to_wait(self, scheduler: Any) -> None:
        """Put the patient on the waiting list matching this treatment."""

    def __str__(self) -> str:
        return f"<<{self._type.name} {self.duration}>>"


class ETherapy(Treatment):
    """Electro therapy."""

    def __init__(
        self,
        patient: Optional["Patient"] = None,
        duration: int = 0,
        assignment_time: int = 0,
    ) -> None:
        super().__init__(patient, duration, TreatmentType.ELECTRO, assignment_time)

    @staticmethod
    def can_assign(scheduler: Any) -> bool:
        """True when an electro device is free."""
        return len(scheduler.e_devices) != 0

    def move_to_wait(self, scheduler: Any) -> None:
        scheduler.add_to_wait_e(self.patient)


class UTherapy(Treatment):
    """Ultrasound therapy."""

    def __init__(
        self,
        patient: Optional["Patient"] = None,
        duration: int = 0,
        assignment_time: int = 0,
    ) -> None:
        super().__init__(patient, duration, TreatmentType.ULTRA, assignment_time)

    @staticmethod
    def can_assign(scheduler: Any) -> bool:
        """True when an ultrasound device is free."""
        return len(scheduler.u_devices) != 0

    def move_to_wait(self, scheduler: Any) -> None:
        scheduler.add_to_wait_u(self.patient)


class XTherapy(Treatment):
    """Gym exercise therapy."""

    def __init__(
        self,
        patient: Optional["Patient"] = None,
        duration: int = 0,
        assignment_time: int = 0,
    ) -> None:
        super().__init__(patient, duration, TreatmentType.GYM, assignment_time)

    @staticmethod
    def can_assign(scheduler: Any) -> bool:
        """True when a gym room has space."""
        return len(scheduler.x_rooms) != 0

    def move_to_wait(self, scheduler: Any) -> None:
        scheduler.add_to_wait_x(self.patient)