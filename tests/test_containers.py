import pytest

from clinicsim.containers import ArrayStack, LinkedQueue, PriQueue, StackFullError


# LinkedQueue

def test_queue_is_fifo():
    q = LinkedQueue()
    for value in ("a", "b", "c"):
        q.enqueue(value)
    assert [q.dequeue(), q.dequeue(), q.dequeue()] == ["a", "b", "c"]
    assert len(q) == 0


def test_queue_peek_does_not_remove():
    q = LinkedQueue()
    q.enqueue(5)
    q.enqueue(6)
    assert q.peek() == 5
    assert len(q) == 2
    assert list(q) == [5, 6]


def test_queue_empty_raises():
    q = LinkedQueue()
    with pytest.raises(IndexError):
        q.dequeue()
    with pytest.raises(IndexError):
        q.peek()
    assert not q


def test_queue_render_separators():
    q = LinkedQueue()
    for value in (1, 2, 3):
        q.enqueue(value)
    assert q.render(False) == "1, 2, 3"
    assert q.render(True) == "1\n2\n3"


def test_queue_render_limits_to_ten_items():
    q = LinkedQueue()
    for value in range(15):
        q.enqueue(value)
    rendered = q.render(True).split("\n")
    assert rendered == [str(v) for v in range(10)]
    assert len(q) == 15


def test_queue_render_empty():
    assert LinkedQueue().render(False) == ""


# PriQueue

def test_priqueue_highest_first():
    pq = PriQueue()
    pq.enqueue("low", 1)
    pq.enqueue("high", 9)
    pq.enqueue("mid", 5)
    assert list(pq) == ["high", "mid", "low"]
    assert pq.dequeue() == ("high", 9)


def test_priqueue_ties_keep_arrival_order():
    pq = PriQueue()
    for name in ("first", "second", "third"):
        pq.enqueue(name, 3)
    pq.enqueue("top", 4)
    assert list(pq) == ["top", "first", "second", "third"]


def test_priqueue_negative_priorities_give_earliest_time_first():
    pq = PriQueue()
    for time in (7, 2, 5):
        pq.enqueue(f"t{time}", -time)
    drained = [pq.dequeue() for _ in range(len(pq))]
    assert drained == [("t2", -2), ("t5", -5), ("t7", -7)]


def test_priqueue_peek_and_empty():
    pq = PriQueue()
    with pytest.raises(IndexError):
        pq.peek()
    with pytest.raises(IndexError):
        pq.dequeue()
    pq.enqueue("x", 0)
    assert pq.peek() == ("x", 0)
    assert len(pq) == 1


def test_priqueue_render_limit():
    pq = PriQueue()
    for value in range(12):
        pq.enqueue(value, 0)
    assert pq.render(False).split(", ") == [str(v) for v in range(10)]


# ArrayStack

def test_stack_is_lifo():
    s = ArrayStack()
    for value in (1, 2, 3):
        s.push(value)
    assert s.peek() == 3
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]


def test_stack_iterates_top_to_bottom():
    s = ArrayStack()
    for value in "abc":
        s.push(value)
    assert list(s) == ["c", "b", "a"]


def test_stack_full_at_hundred():
    s = ArrayStack()
    for value in range(100):
        s.push(value)
    with pytest.raises(StackFullError):
        s.push(100)
    assert len(s) == 100


def test_stack_empty_raises():
    s = ArrayStack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.peek()


def test_stack_render_always_one_per_line():
    s = ArrayStack()
    for value in (1, 2):
        s.push(value)
    assert s.render(False) == "2\n1"
    assert s.render(True) == s.render(False)