import random

import pytest

from clinicsim.patient import Patient
from clinicsim.treatments import ETherapy, UTherapy, XTherapy
from clinicsim.waitlists import EarlyPList, UEWaitlist, XWaitlist, rand_in_range


def patient(pid, pt, durations=(), kinds=None):
    p = Patient(None, pid, pt, pt, len(durations), True)
    kinds = kinds or [UTherapy] * len(durations)
    for cls, d in zip(kinds, durations):
        p.add_treatment(cls(p, d))
    return p


@pytest.mark.parametrize("low, high", [(0, 0), (0, 5), (3, 9), (-2, 2)])
def test_rand_in_range_bounds(low, high):
    random.seed(1)
    values = {rand_in_range(low, high) for _ in range(200)}
    assert min(values) >= low
    assert max(values) <= high


def test_rand_in_range_single_value():
    assert rand_in_range(7, 7) == 7


def test_insert_sorted_orders_by_pt_and_keeps_ties_stable():
    w = UEWaitlist()
    a, b, c, d = patient(1, 10), patient(2, 5), patient(3, 10), patient(4, 7)
    for p in (a, b, c, d):
        w.insert_sorted(p)
    assert list(w) == [b, d, a, c]
    assert [p.pt for p in w] == sorted(p.pt for p in w)


def test_insert_sorted_into_empty():
    w = UEWaitlist()
    p = patient(1, 3)
    w.insert_sorted(p)
    assert w.peek() is p
    assert len(w) == 1


def test_calc_latency_uses_front_treatment_only():
    w = UEWaitlist()
    assert w.calc_treatment_latency() == 0
    p1 = patient(1, 2, durations=(4, 100))
    p2 = patient(2, 3, durations=(6,))
    w.enqueue(p1)
    w.enqueue(p2)
    assert w.calc_treatment_latency() == p1.treatments[0].duration + p2.treatments[0].duration


def test_reschedule_empty_returns_none():
    assert EarlyPList().reschedule() is None


def test_reschedule_keeps_order_and_pushes_later():
    random.seed(3)
    early = EarlyPList()
    patients = [patient(i, pt) for i, pt in enumerate((4, 8, 12, 20), start=1)]
    for p in patients:
        early.enqueue(p, -p.pt)
    old = {p.id: p.pt for p in patients}
    moved = early.reschedule()
    assert len(early) == 4
    assert old[moved.id] <= moved.pt <= old[moved.id] + old[moved.id] // 2
    pts = [p.pt for p in early]
    assert pts == sorted(pts)
    assert set(early) == set(patients)


def test_pick_cancel_empty_returns_none():
    assert XWaitlist().pick_random_cancel_patient() is None


def test_pick_cancel_none_eligible():
    w = XWaitlist()
    for i in range(3):
        w.enqueue(patient(i, i, durations=(1, 2), kinds=[XTherapy, ETherapy]))
    assert w.pick_random_cancel_patient() is None
    assert len(w) == 3


def test_pick_cancel_removes_only_eligible_patient():
    random.seed(5)
    w = XWaitlist()
    others = [patient(i, i, durations=(1, 2), kinds=[XTherapy, UTherapy]) for i in range(4)]
    eligible = patient(9, 9, durations=(3,), kinds=[XTherapy])
    for p in others[:2] + [eligible] + others[2:]:
        w.enqueue(p)
    assert w.pick_random_cancel_patient() is eligible
    assert list(w) == others
    assert w.pick_random_cancel_patient() is None