import pytest

from phonebook_search.searches import (
    linear_search, jump_search, binary_search, build_key_set, hash_lookup, hash_membership,
)

SORTED_NAMES = ["Alice Adams", "Bob Lee", "Carla Chen", "Jane Doe", "John Smith", "Zoe Xu"]


def test_linear_search_matches_substrings():
    directory = ["1 John Smith", "2 Jane Doe"]
    assert linear_search(directory, ["Jane Doe", "Bob Lee", "Smith"]) == ["Jane Doe", "Smith"]


def test_linear_search_empty_inputs():
    assert linear_search([], ["Jane Doe"]) == []
    assert linear_search(["1 Jane Doe"], []) == []


@pytest.mark.parametrize("target", SORTED_NAMES)
def test_jump_search_finds_every_element(target):
    assert jump_search(SORTED_NAMES, target) == target


def test_jump_search_finds_element_in_trailing_partial_block():
    data = ["a", "b", "c", "d", "e"]
    assert jump_search(data, "e") == "e"


@pytest.mark.parametrize("target", ["Aaron", "Bobby", "Zzz", "Jane"])
def test_jump_search_missing(target):
    assert jump_search(SORTED_NAMES, target) is None


@pytest.mark.parametrize("target", SORTED_NAMES)
def test_binary_search_finds_every_element(target):
    assert binary_search(SORTED_NAMES, target) == target


@pytest.mark.parametrize("target", ["Aaron", "Bobby", "Zzz", "Jane"])
def test_binary_search_missing(target):
    assert binary_search(SORTED_NAMES, target) is None


def test_binary_search_legacy_lower_bound_skips_first_element():
    assert binary_search(SORTED_NAMES, "Alice Adams", first_index=1) is None
    assert binary_search(SORTED_NAMES, "Zoe Xu", first_index=1) == "Zoe Xu"


@pytest.mark.parametrize("search", [jump_search, binary_search])
def test_sorted_searches_on_empty_sequence(search):
    assert search([], "Jane Doe") is None


@pytest.mark.parametrize("search", [jump_search, binary_search])
def test_sorted_searches_single_element(search):
    assert search(["Jane Doe"], "Jane Doe") == "Jane Doe"
    assert search(["Jane Doe"], "Bob Lee") is None


def test_hash_membership_exact_match_only():
    keys = ["John Smith", "Jane Doe", "Jane Doe"]
    assert build_key_set(keys) == {"John Smith", "Jane Doe"}
    assert hash_membership(keys, ["Jane Doe", "Jane", "Bob Lee"]) == ["Jane Doe"]


def test_searches_are_idempotent():
    key_set = build_key_set(SORTED_NAMES)
    queries = ["Jane Doe", "Nobody", "Zoe Xu"]
    assert hash_lookup(key_set, queries) == hash_lookup(key_set, queries)
    for query in queries:
        assert jump_search(SORTED_NAMES, query) == jump_search(SORTED_NAMES, query)
        assert binary_search(SORTED_NAMES, query) == binary_search(SORTED_NAMES, query)
