import math

from .utils import windowed

# --- Search Algorithms ---
# jump_search and binary_search expect a sequence sorted ascending. This is not checked:
# on unsorted input they may report a present element as missing.

def linear_search(directory: list[str], names_to_find: list[str]) -> list[str]:
    """
    Baseline: scans the raw directory records for every query.
    A query counts as found when any record contains it as a substring, so
    "Jane Doe" matches the record "2 Jane Doe" without normalizing it first.
    Returns the found queries in query order.
    """
    return [name for name in names_to_find if any(name in record for record in directory)]


def jump_search(sorted_data: list, target):
    """
    Jump search: splits the data into blocks of floor(sqrt(n)) elements, picks the first
    block whose bounds bracket the target and scans that block backwards.
    Returns the matching element, or None if not found.
    """
    n = len(sorted_data)
    if n == 0:
        return None

    jump_size = math.isqrt(n)
    for block in windowed(sorted_data, jump_size, jump_size):
        if block[0] <= target <= block[-1]:
            for item in reversed(block):
                if item == target:
                    return item
            return None
    return None


def binary_search(sorted_data: list, target, first_index: int = 0):
    """
    Binary search over [first_index, n - 1].
    Returns the matching element, or None if not found.

    `first_index=1` reproduces the legacy phone book behaviour, which never inspected
    the first element of the sorted data.
    """
    left, right = first_index, len(sorted_data) - 1
    while left <= right:
        middle = (left + right) // 2
        middle_item = sorted_data[middle]
        if middle_item == target:
            return middle_item
        elif middle_item > target:
            right = middle - 1
        else:
            left = middle + 1
    return None


# --- Hash Table Lookup ---

def build_key_set(keys: list[str]) -> set[str]:
    return set(keys)


def hash_lookup(key_set: set[str], names_to_find: list[str]) -> list[str]:
    return [name for name in names_to_find if name in key_set]


def hash_membership(keys: list[str], names_to_find: list[str]) -> list[str]:
    """Builds a set of normalized keys and keeps the queries that are members of it."""
    return hash_lookup(build_key_set(keys), names_to_find)
