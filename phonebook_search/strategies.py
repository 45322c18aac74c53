import time
from typing import Callable, NamedTuple

from .utils import normalize_directory
from .sorting import bubble_sort, quick_sort, TimedOut
from .searches import linear_search, jump_search, binary_search, build_key_set, hash_lookup

DEFAULT_BUDGET_FACTOR = 10.0

LINEAR = "linear search"
BUBBLE_JUMP = "bubble sort + jump search"
QUICK_BINARY = "quick sort + binary search"
HASH_TABLE = "hash table"

STRATEGY_ORDER = (LINEAR, BUBBLE_JUMP, QUICK_BINARY, HASH_TABLE)


class StrategyReport(NamedTuple):
    """
    Result of running one search strategy.

    Times are in seconds. `setup_time` covers sorting or hash table construction and is
    None for strategies without a setup phase; `search_time` is None when no search ran
    (a degraded strategy whose result came from `fallback`).
    """
    name: str
    found: tuple[str, ...]
    total_queries: int
    total_time: float
    setup_time: float | None = None
    search_time: float | None = None
    setup_label: str = "Sorting"
    degraded: bool = False
    fallback: str | None = None

    @property
    def found_count(self) -> int:
        return len(self.found)


# --- Strategy Runners ---

def run_linear_search(directory: list[str], names_to_find: list[str]) -> StrategyReport:
    start_time = time.perf_counter()
    found = linear_search(directory, names_to_find)
    total_time = time.perf_counter() - start_time
    return StrategyReport(LINEAR, tuple(found), len(names_to_find), total_time)


def run_bubble_jump_search(keys: list[str], names_to_find: list[str], time_budget: float | None,
                           fallback: Callable[[], list[str]]) -> StrategyReport:
    """
    Bubble sorts the keys and jump searches every query. If the sort exceeds `time_budget`,
    the result of `fallback` (the linear search) is reported instead and the report is marked degraded.
    """
    start_time = time.perf_counter()
    outcome = bubble_sort(keys, ascending=True, time_budget=time_budget)

    if isinstance(outcome, TimedOut):
        found = fallback()
        total_time = time.perf_counter() - start_time
        return StrategyReport(BUBBLE_JUMP, tuple(found), len(names_to_find), total_time,
                              setup_time=outcome.elapsed, degraded=True, fallback="linear")

    search_start = time.perf_counter()
    found = [name for name in names_to_find if jump_search(outcome.items, name) is not None]
    end_time = time.perf_counter()
    return StrategyReport(BUBBLE_JUMP, tuple(found), len(names_to_find), end_time - start_time,
                          setup_time=outcome.elapsed, search_time=end_time - search_start)


def run_quick_binary_search(keys: list[str], names_to_find: list[str]) -> StrategyReport:
    start_time = time.perf_counter()
    sorted_keys = quick_sort(keys)
    search_start = time.perf_counter()
    found = [name for name in names_to_find if binary_search(sorted_keys, name) is not None]
    end_time = time.perf_counter()
    return StrategyReport(QUICK_BINARY, tuple(found), len(names_to_find), end_time - start_time,
                          setup_time=search_start - start_time, search_time=end_time - search_start)


def run_hash_search(keys: list[str], names_to_find: list[str]) -> StrategyReport:
    start_time = time.perf_counter()
    key_set = build_key_set(keys)
    search_start = time.perf_counter()
    found = hash_lookup(key_set, names_to_find)
    end_time = time.perf_counter()
    return StrategyReport(HASH_TABLE, tuple(found), len(names_to_find), end_time - start_time,
                          setup_time=search_start - start_time, search_time=end_time - search_start,
                          setup_label="Creating")


def run_strategies(directory: list[str], names_to_find: list[str],
                   budget_factor: float | None = DEFAULT_BUDGET_FACTOR,
                   progress_callback=None) -> list[StrategyReport]:
    """
    Runs the four strategies one after another and returns their reports in STRATEGY_ORDER.

    The bubble sort budget is `budget_factor` times the measured linear search duration,
    so the linear search always runs first; a factor of None lets bubble sort run to completion.
    Normalized keys are computed once and every strategy gets its own copy.
    """
    keys = normalize_directory(directory)

    def notify(name):
        if progress_callback is not None:
            progress_callback(name)

    notify(LINEAR)
    linear = run_linear_search(directory, names_to_find)

    notify(BUBBLE_JUMP)
    time_budget = None if budget_factor is None else linear.total_time * budget_factor
    bubble = run_bubble_jump_search(list(keys), names_to_find, time_budget,
                                    fallback=lambda: linear_search(directory, names_to_find))

    notify(QUICK_BINARY)
    quick = run_quick_binary_search(list(keys), names_to_find)

    notify(HASH_TABLE)
    hashed = run_hash_search(list(keys), names_to_find)

    return [linear, bubble, quick, hashed]
