"""The clinic scheduler: patient lists, resources and the time-step loop."""

from __future__ import annotations

import re
import sys
from typing import Any

from clinicsim.containers import ArrayStack, LinkedQueue, PriQueue
from clinicsim.defs import PatientStatus, ResourceType, TreatmentType
from clinicsim.patient import Patient
from clinicsim.resources import EDevice, UDevice, XRoom
from clinicsim.treatments import ETherapy, Treatment, UTherapy, XTherapy
from clinicsim.waitlists import EarlyPList, UEWaitlist, XWaitlist

_THERAPIES: dict[str, type[Treatment]] = {
    "E": ETherapy,
    "U": UTherapy,
    "X": XTherapy,
}


class _Reader:
    """Reads whitespace-separated integers and single characters from text."""

    _INT = re.compile(r"\s*([+-]?\d+)")
    _CHAR = re.compile(r"\s*(\S)")

    def __init__(self, text: str, source: str) -> None:
        self._text = text
        self._source = source
        self._pos = 0

    def _match(self, pattern: re.Pattern[str], what: str) -> str:
        found = pattern.match(self._text, self._pos)
        if found is None:
            raise ValueError(f"{self._source}: expected {what} at offset {self._pos}")
        self._pos = found.end()
        return found.group(1)

    def integer(self) -> int:
        return int(self._match(self._INT, "an integer"))

    def char(self) -> str:
        return self._match(self._CHAR, "a character")


class Scheduler:
    """Holds every patient list and resource and advances the simulation."""

    def __init__(self) -> None:
        self.ts = 0

        self.idle: LinkedQueue[Patient] = LinkedQueue()
        self.early = EarlyPList()
        self.late: PriQueue[Patient] = PriQueue()

        self.wait_u = UEWaitlist()
        self.wait_e = UEWaitlist()
        self.wait_x = XWaitlist()

        self.serving: PriQueue[Patient] = PriQueue()

        self.u_devices: LinkedQueue[UDevice] = LinkedQueue()
        self.e_devices: LinkedQueue[EDevice] = LinkedQueue()
        self.x_rooms: LinkedQueue[XRoom] = LinkedQueue()

        self.finish: ArrayStack[Patient] = ArrayStack()

        self.p_resc = 0
        self.p_cancel = 0
        self.num_patients = 0

    def load_input_file(self, path: Any) -> None:
        """Read devices, rooms, probabilities and patients from an input file."""
        with open(path, encoding="utf-8") as handle:
            reader = _Reader(handle.read(), str(path))

        num_e_devices = reader.integer()
        num_u_devices = reader.integer()
        num_x_rooms = reader.integer()
        capacities = [reader.integer() for _ in range(num_x_rooms)]

        for i in range(num_e_devices):
            self.e_devices.enqueue(EDevice((i + 1) * 10, ResourceType.EDEVICE))
        for i in range(num_u_devices):
            self.u_devices.enqueue(UDevice((i + 1) * 100, ResourceType.UDEVICE))
        for i, capacity in enumerate(capacities):
            self.x_rooms.enqueue(XRoom((i + 1) * 1000, ResourceType.XROOM, capacity))

        self.p_cancel = reader.integer()
        self.p_resc = reader.integer()
        self.num_patients = reader.integer()

        for patient_id in range(1, self.num_patients + 1):
            is_normal = reader.char() == "N"
            pt = reader.integer()
            vt = reader.integer()
            num_treatments = reader.integer()
            patient = Patient(self, patient_id, pt, vt, num_treatments, is_normal)
            self.idle.enqueue(patient)
            for _ in range(num_treatments):
                kind = reader.char()
                duration = reader.integer()
                therapy = _THERAPIES.get(kind)
                if therapy is not None:
                    patient.add_treatment(therapy(patient, duration))

    @staticmethod
    def _add_to_wait(waitlist: UEWaitlist, patient: Patient) -> None:
        if patient.status == PatientStatus.ERLY:
            waitlist.enqueue(patient)
        elif patient.status in (PatientStatus.LATE, PatientStatus.SERV):
            waitlist.insert_sorted(patient)

    def add_to_wait_u(self, patient: Patient) -> None:
        """Put a patient on the ultrasound waiting list according to their status."""
        self._add_to_wait(self.wait_u, patient)

    def add_to_wait_e(self, patient: Patient) -> None:
        """Put a patient on the electro waiting list according to their status."""
        self._add_to_wait(self.wait_e, patient)

    def add_to_wait_x(self, patient: Patient) -> None:
        """Put a patient on the gym waiting list according to their status."""
        self._add_to_wait(self.wait_x, patient)

    def add_to_serve(self, patient: Patient) -> None:
        """Put a patient in service, ordered by the time their treatment ends."""
        treatment = patient.peek_treatment()
        if treatment is None:
            raise ValueError(f"patient {patient.id} has no treatment to serve")
        finish_time = treatment.duration + treatment.assignment_time
        self.serving.enqueue(patient, -finish_time)

    def step(self) -> None:
        """Advance the simulation by one time step."""
        self.ts += 1
        self.move_arrived_patients()
        self.move_early_patients_to_wait()
        self.move_late_patients_to_wait()
        self.move_u_wait_patients_to_serve()
        self.move_e_wait_patients_to_serve()
        self.move_x_wait_patients_to_serve()

    def run(self, ui: Any) -> None:
        """Step, show the state and wait for a line on standard input; stop at end of input."""
        while True:
            self.step()
            ui.print_all_information(self, self.ts)
            if not sys.stdin.readline():
                return

    def move_arrived_patients(self) -> None:
        """Move patients arriving now from the idle list to the early or late list."""
        while self.idle and self.idle.peek().vt == self.ts:
            patient = self.idle.dequeue()
            pt, vt = patient.pt, patient.vt
            if vt < pt:
                self.early.enqueue(patient, -pt)
                patient.status = PatientStatus.ERLY
            elif vt > pt:
                penalty = (vt - pt) // 2
                self.late.enqueue(patient, -pt)
                patient.penalty = penalty
                patient.pt = pt + penalty
                patient.status = PatientStatus.LATE

    def move_early_patients_to_wait(self) -> None:
        """Move early patients whose appointment is now to a waiting list."""
        while self.early:
            _, priority = self.early.peek()
            if self.ts != -priority:
                break
            patient, _ = self.early.dequeue()
            patient.move_next_treatment_to_wait()

    def move_late_patients_to_wait(self) -> None:
        """Move late patients whose penalty has elapsed to a waiting list."""
        while self.late:
            patient, _ = self.late.peek()
            if self.ts != patient.vt + patient.penalty:
                break
            self.late.dequeue()
            patient.move_next_treatment_to_wait()

    def min_latency_order(self) -> list[TreatmentType]:
        """Treatment types ordered by waiting-list latency, lowest first; ties keep U, E, X."""
        latencies = [
            (TreatmentType.ULTRA, self.wait_u.calc_treatment_latency()),
            (TreatmentType.ELECTRO, self.wait_e.calc_treatment_latency()),
            (TreatmentType.GYM, self.wait_x.calc_treatment_latency()),
        ]
        return [kind for kind, _ in sorted(latencies, key=lambda pair: pair[1])]

    def _serve(self, patient: Patient, resource: Any) -> None:
        treatment = patient.peek_treatment()
        if treatment is None:
            raise ValueError(f"patient {patient.id} has no treatment to serve")
        treatment.assignment_time = self.ts
        treatment.assign_resource(resource)
        self.add_to_serve(patient)

    def move_u_wait_patients_to_serve(self) -> None:
        """Assign free ultrasound devices to waiting patients."""
        while self.wait_u and UTherapy.can_assign(self):
            patient = self.wait_u.dequeue()
            self._serve(patient, self.u_devices.dequeue())

    def move_e_wait_patients_to_serve(self) -> None:
        """Assign free electro devices to waiting patients."""
        while ETherapy.can_assign(self) and self.wait_e:
            patient = self.wait_e.dequeue()
            self._serve(patient, self.e_devices.dequeue())

    def move_x_wait_patients_to_serve(self) -> None:
        """Place waiting patients in gym rooms; a room leaves the free list when full."""
        while XTherapy.can_assign(self) and self.wait_x:
            patient = self.wait_x.dequeue()
            room = self.x_rooms.peek()
            room.increment_patients()
            if room.num_patients == room.capacity:
                self.x_rooms.dequeue()
            self._serve(patient, room)