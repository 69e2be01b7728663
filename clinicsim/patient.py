"""A patient and the queue of treatments they still require."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from clinicsim.containers import LinkedQueue
from clinicsim.defs import PatientStatus, TreatmentType
from clinicsim.treatments import Treatment

MAX_TREATMENTS = 4


@dataclass(eq=False)
class Patient:
    """A patient with appointment time `pt`, arrival time `vt` and required treatments."""

    scheduler: Any
    id: int
    pt: int
    vt: int
    num_treatments: int
    is_normal: bool
    penalty: int = 0
    status: PatientStatus = PatientStatus.IDLE
    _treatments: LinkedQueue[Treatment] = field(
        default_factory=LinkedQueue, init=False, repr=False
    )

    @property
    def treatments(self) -> tuple[Treatment, ...]:
        """Required treatments, next one first."""
        return tuple(self._treatments)

    def peek_treatment(self) -> Optional[Treatment]:
        """The next required treatment, or None when there is none."""
        return self._treatments.peek() if len(self._treatments) else None

    def has_treatment(self, treatment_type: TreatmentType) -> bool:
        """True if a treatment of this type is still required."""
        return any(t.type == treatment_type for t in self._treatments)

    def add_treatment(self, treatment: Treatment) -> bool:
        """Append a treatment; return False if the patient already has the maximum."""
        if len(self._treatments) >= MAX_TREATMENTS:
            return False
        self._treatments.enqueue(treatment)
        return True

    def has_last_treatment(self) -> bool:
        """True when exactly one treatment remains."""
        return len(self._treatments) == 1

    def reorder_treatments(self, treatment_type: TreatmentType) -> None:
        """Rotate the treatments so the first one of this type is at the front."""
        if not self.has_treatment(treatment_type):
            raise ValueError(f"patient {self.id} has no {treatment_type.name} treatment")
        while self._treatments.peek().type != treatment_type:
            self._treatments.enqueue(self._treatments.dequeue())

    def move_next_treatment_to_wait(self) -> None:
        """Place the patient on the waiting list of their next treatment.

        Normal patients take their treatments in order; recovering patients
        go to the list with the lowest latency among the treatments they need.
        """
        if self.is_normal:
            self._treatments.peek().move_to_wait(self.scheduler)
            return
        for treatment_type in self.scheduler.min_latency_order():
            if self.has_treatment(treatment_type):
                self.reorder_treatments(treatment_type)
                self._treatments.peek().move_to_wait(self.scheduler)
                return

    def __str__(self) -> str:
        kind = "N" if self.is_normal else "R"
        return (
            f"[Patient ID: {self.id}, PT: {self.pt}, VT: {self.vt}, Type: {kind}] "
            f"{self._treatments.render()}"
        )