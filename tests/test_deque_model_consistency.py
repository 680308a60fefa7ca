import random
from collections import deque

import pytest

from ringdeque import RingDeque

# --- Synthetic Operation Mix ---
# Weights for each operation in the random workload. Inserts slightly
# outweigh removals so the deque grows through several resizes.
OPERATION_WEIGHTS = {
    "append": 4,
    "prepend": 4,
    "try_append": 2,
    "pop_first": 3,
    "pop_last": 3,
    "clear": 0.05,
}


def apply_random_operations(
    seed: int, steps: int, start_capacity: int
) -> tuple[RingDeque[int], deque[int]]:
    """Runs the same random operations on a RingDeque and a reference deque.

    ``collections.deque`` serves as the ground truth; ``try_append`` is
    modelled by checking the RingDeque's capacity before the call.

    Returns:
        The RingDeque and the reference deque after the final step.
    """
    rng = random.Random(seed)
    names = list(OPERATION_WEIGHTS)
    weights = list(OPERATION_WEIGHTS.values())

    dq = RingDeque[int](start_capacity)
    expected: deque[int] = deque()

    for step in range(steps):
        op = rng.choices(names, weights)[0]
        capacity_before = dq.capacity
        if op == "append":
            dq.append(step)
            expected.append(step)
        elif op == "prepend":
            dq.prepend(step)
            expected.appendleft(step)
        elif op == "try_append":
            accepted = dq.try_append(step)
            assert accepted == (len(expected) < capacity_before)
            if accepted:
                expected.append(step)
            assert dq.capacity == capacity_before
        elif op == "pop_first":
            assert dq.pop_first() == (expected.popleft() if expected else None)
        elif op == "pop_last":
            assert dq.pop_last() == (expected.pop() if expected else None)
        else:
            dq.clear()
            expected.clear()
            assert dq.capacity == capacity_before

        assert len(dq) == len(expected)
        assert 0 <= len(dq) <= dq.capacity
        assert dq.capacity >= capacity_before
        assert dq.peek_first() == (expected[0] if expected else None)
        assert dq.peek_last() == (expected[-1] if expected else None)

    return dq, expected


@pytest.mark.parametrize("seed", range(10))
@pytest.mark.parametrize("start_capacity", [0, 1, 5, 32])
def test_matches_reference_deque(seed: int, start_capacity: int) -> None:
    """Tests that random workloads leave both deques with equal contents."""
    dq, expected = apply_random_operations(seed, 500, start_capacity)

    assert list(dq) == list(expected)
    assert list(reversed(dq)) == list(reversed(expected))
    assert [dq.at(i) for i in range(len(dq))] == list(expected)
    assert str(dq) == "[" + ", ".join(str(v) for v in expected) + "]"


def test_drain_from_both_ends_after_random_workload() -> None:
    """Tests alternating pops against the reference until both are empty."""
    dq, expected = apply_random_operations(seed=1234, steps=2000, start_capacity=0)

    take_front = True
    while expected:
        if take_front:
            assert dq.pop_first() == expected.popleft()
        else:
            assert dq.pop_last() == expected.pop()
        take_front = not take_front

    assert len(dq) == 0
    assert dq.pop_first() is None
    assert dq.pop_last() is None
