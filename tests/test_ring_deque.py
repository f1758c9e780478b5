import random
from collections import deque

import pytest

from dsalgo.ring_deque import DEFAULT_CAPACITY, RingDeque


def test_default_capacity_matches_source():
    ring = RingDeque()
    assert ring.capacity == DEFAULT_CAPACITY == 5


def test_empty_deque():
    ring = RingDeque(3)
    assert ring.is_empty()
    assert not ring.is_full()
    assert len(ring) == 0
    assert list(ring) == []


def test_push_back_until_full():
    ring = RingDeque(5)
    for value in range(5):
        ring.push_back(value)
    assert ring.is_full()
    assert list(ring) == [0, 1, 2, 3, 4]
    with pytest.raises(IndexError):
        ring.push_back(99)
    with pytest.raises(IndexError):
        ring.push_front(99)
    assert list(ring) == [0, 1, 2, 3, 4]


def test_push_front_wraps_around():
    ring = RingDeque(4)
    ring.push_back(1)
    ring.push_front(2)
    ring.push_front(3)
    assert list(ring) == [3, 2, 1]
    assert len(ring) == 3


def test_pop_from_empty_raises():
    ring = RingDeque(2)
    with pytest.raises(IndexError):
        ring.pop_front()
    with pytest.raises(IndexError):
        ring.pop_back()


def test_pop_both_ends():
    ring = RingDeque(5)
    for value in (7, 8, 9):
        ring.push_back(value)
    assert ring.pop_front() == 7
    assert ring.pop_back() == 9
    assert list(ring) == [8]
    assert ring.pop_back() == 8
    assert ring.is_empty()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        RingDeque(0)


@pytest.mark.parametrize("seed", range(8))
def test_matches_bounded_model(seed):
    rng = random.Random(seed)
    capacity = rng.randint(1, 6)
    ring = RingDeque(capacity)
    model: deque = deque()
    for step in range(300):
        op = rng.choice(["pf", "pb", "of", "ob"])
        if op in ("pf", "pb"):
            if len(model) == capacity:
                with pytest.raises(IndexError):
                    (ring.push_front if op == "pf" else ring.push_back)(step)
            elif op == "pf":
                ring.push_front(step)
                model.appendleft(step)
            else:
                ring.push_back(step)
                model.append(step)
        else:
            if not model:
                with pytest.raises(IndexError):
                    (ring.pop_front if op == "of" else ring.pop_back)()
            elif op == "of":
                assert ring.pop_front() == model.popleft()
            else:
                assert ring.pop_back() == model.pop()
        assert list(ring) == list(model)
        assert len(ring) == len(model)
        assert ring.is_full() == (len(model) == capacity)
        assert ring.is_empty() == (not model)