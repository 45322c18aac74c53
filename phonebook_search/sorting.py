import time
from typing import NamedTuple

from .utils import swap


class Sorted(NamedTuple):
    """Outcome of a sort that ran to completion."""
    items: list
    elapsed: float


class TimedOut(NamedTuple):
    """Outcome of a sort that hit its time budget. Carries no partial ordering."""
    elapsed: float


# --- Sort Algorithms ---

def bubble_sort(sequence: list, ascending: bool = True, time_budget: float | None = None) -> Sorted | TimedOut:
    """
    Bubble sort with early exit: passes over a copy of the sequence until a pass makes no swaps.

    The elapsed wall-clock time is checked before every comparison. Once it reaches
    `time_budget` seconds the sort is abandoned and `TimedOut` is returned; the input
    is left untouched either way. A budget of None never aborts.
    """
    start_time = time.perf_counter()
    items = list(sequence)

    is_sorted = False
    while not is_sorted:
        swaps = 0
        for i in range(len(items) - 1):
            elapsed = time.perf_counter() - start_time
            if time_budget is not None and elapsed >= time_budget:
                return TimedOut(elapsed)

            current, following = items[i], items[i + 1]
            out_of_order = current > following if ascending else current < following
            if out_of_order:
                swap(items, i, i + 1)
                swaps += 1
        is_sorted = swaps == 0

    return Sorted(items, time.perf_counter() - start_time)


def quick_sort(sequence: list) -> list:
    """
    Quicksort using the last element as pivot. Elements equal to the pivot go to the left partition,
    and each partition sorts to lower + [pivot] + higher.

    Pending partitions are kept on an explicit stack, so already sorted input or long runs of
    equal keys cannot exhaust the interpreter's recursion limit.

    Known limitation: on such input the partitions are maximally unbalanced, giving O(n^2) comparisons.
    """
    result = []
    # Entries are (partition, None) to sort, or (None, pivot) to emit
    stack = [(list(sequence), None)]
    while stack:
        partition, pivot = stack.pop()
        if partition is None:
            result.append(pivot)
            continue
        if not partition:
            continue

        pivot = partition[-1]
        lower, higher = [], []
        for item in partition[:-1]:
            if item <= pivot:
                lower.append(item)
            else:
                higher.append(item)

        stack.append((higher, None))
        stack.append((None, pivot))
        stack.append((lower, None))

    return result
