"""Early-arrival list and the waiting lists for each kind of therapy."""

from __future__ import annotations

import random
from typing import Optional

from clinicsim.containers import LinkedQueue, PriQueue
from clinicsim.containers import _PriEntry
from clinicsim.patient import Patient


def rand_in_range(low: int, high: int) -> int:
    """A random integer in [low, high], both ends included."""
    return random.randint(low, high)


class EarlyPList(PriQueue[Patient]):
    """Patients who arrived before their appointment, earliest appointment first."""

    def reschedule(self) -> Optional[Patient]:
        """Push a random patient's appointment later; return that patient, or None if empty."""
        if not len(self):
            return None
        index = rand_in_range(0, len(self) - 1)
        patient = self._entries.pop(index).item
        patient.pt += rand_in_range(0, patient.pt // 2)
        self.enqueue(patient, -patient.pt)
        return patient


class UEWaitlist(LinkedQueue[Patient]):
    """Waiting list for ultrasound or electro therapy."""

    def insert_sorted(self, patient: Patient) -> None:
        """Insert before the first patient with a later appointment time."""
        index = next(
            (i for i, waiting in enumerate(self._items) if waiting.pt > patient.pt),
            len(self._items),
        )
        self._items.insert(index, patient)

    def calc_treatment_latency(self) -> int:
        """Sum of the next treatment durations of every waiting patient."""
        return sum(p.peek_treatment().duration for p in self._items)


class XWaitlist(UEWaitlist):
    """Waiting list for gym therapy, from which patients may cancel."""

    def pick_random_cancel_patient(self) -> Optional[Patient]:
        """Remove and return a random patient whose gym session is their last treatment.

        Returns None when no waiting patient qualifies.
        """
        count = len(self._items)
        visited: set[int] = set()
        while len(visited) < count:
            index = rand_in_range(0, count - 1)
            if index in visited:
                continue
            visited.add(index)
            patient = self._items[index]
            if patient.has_last_treatment():
                del self._items[index]
                return patient
        return None


__all__ = ["rand_in_range", "EarlyPList", "UEWaitlist", "XWaitlist", "_PriEntry"]