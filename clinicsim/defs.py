"""Enumerations shared across the clinic simulation."""

from __future__ import annotations

from enum import IntEnum


class ResourceType(IntEnum):
    """Kind of treatment resource."""

    UDEVICE = 0
    EDEVICE = 1
    XROOM = 2
    NONE = 3


class PatientStatus(IntEnum):
    """Where a patient currently is in the simulation."""

    IDLE = 0
    ERLY = 1
    LATE = 2
    WAIT = 3
    SERV = 4
    FNSH = 5


class TreatmentType(IntEnum):
    """Kind of therapy a patient can require."""

    ULTRA = 0
    ELECTRO = 1
    GYM = 2