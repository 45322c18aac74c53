import pytest

from phonebook_search.data_loader import load_lines, load_phonebook, generate_phonebook, write_phonebook
from phonebook_search.utils import normalize_directory


def test_load_phonebook_reads_both_files(tmp_path):
    (tmp_path / "directory.txt").write_text("1 John Smith\n2 Jane Doe\n\n", encoding="utf-8")
    (tmp_path / "find.txt").write_text("Jane Doe\r\nBob Lee\n", encoding="utf-8")

    directory, names_to_find = load_phonebook(str(tmp_path))

    assert directory == ["1 John Smith", "2 Jane Doe"]
    assert names_to_find == ["Jane Doe", "Bob Lee"]


def test_load_lines_missing_file_returns_empty(tmp_path, capsys):
    assert load_lines(str(tmp_path / "nope.txt")) == []
    assert "not found" in capsys.readouterr().out


def test_generate_phonebook_is_reproducible():
    assert generate_phonebook(100, 20, seed=1) == generate_phonebook(100, 20, seed=1)


def test_generate_phonebook_shapes_and_misses():
    directory, names_to_find = generate_phonebook(200, 40, miss_ratio=0.25, seed=5)
    keys = set(normalize_directory(directory))

    assert len(directory) == 200
    assert len(names_to_find) == 40
    assert sum(name not in keys for name in names_to_find) == 10
    assert all(len(record.split()) == 3 for record in directory)


def test_generate_empty_phonebook_only_has_misses():
    directory, names_to_find = generate_phonebook(0, 5)
    assert directory == []
    assert len(names_to_find) == 5


@pytest.mark.parametrize("size, num_queries, miss_ratio", [(-1, 5, 0.1), (5, -1, 0.1), (5, 5, 1.5)])
def test_generate_phonebook_rejects_bad_arguments(size, num_queries, miss_ratio):
    with pytest.raises(ValueError):
        generate_phonebook(size, num_queries, miss_ratio)


def test_write_then_load_phonebook(tmp_path):
    directory, names_to_find = generate_phonebook(30, 5, seed=2)
    write_phonebook(str(tmp_path / "book"), directory, names_to_find)
    assert load_phonebook(str(tmp_path / "book")) == (directory, names_to_find)
