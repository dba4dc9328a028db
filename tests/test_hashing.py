import itertools
import string

import pytest

from dsalgo.hashing import (
    ChainedHashTable,
    DuplicateKeyError,
    LinearProbingTable,
    QuadraticProbingTable,
    TableFullError,
    hash_string,
    transform,
)

WORDS = ["do", "for", "if", "case", "else", "return", "function"]


def _colliding(size, count):
    """Return ``count`` distinct keys that all hash to the same slot."""
    groups = {}
    for a, b in itertools.product(string.ascii_lowercase, repeat=2):
        key = a + b
        groups.setdefault(hash_string(key, size), []).append(key)
        for members in groups.values():
            if len(members) == count:
                return members
    raise AssertionError("not enough collisions")


def test_transform_horner_value():
    assert transform("do") == 3211
    assert transform("") == 0


def test_transform_stays_in_signed_32_bits():
    value = transform("function" * 20)
    assert -(2**31) <= value < 2**31


def test_hash_string_range_and_errors():
    for word in WORDS + ["function" * 20]:
        assert 0 <= hash_string(word, 13) < 13
    with pytest.raises(ValueError):
        hash_string("do", 0)


def test_chained_add_and_search():
    table = ChainedHashTable()
    data = [8, 1, 9, 6, 13]
    slots = [table.add(key) for key in data]
    for key, slot in zip(data, slots):
        assert table.search(key) == slot
        assert key in table
    assert "[1] 8 -> 1 -> " in str(table).splitlines()


def test_chained_negative_key_lands_in_table():
    table = ChainedHashTable()
    slot = table.add(-1)
    assert 0 <= slot < table.size
    assert table.search(-1) == slot


def test_chained_duplicate_and_missing():
    table = ChainedHashTable()
    table.add(8)
    with pytest.raises(DuplicateKeyError):
        table.add(8)
    with pytest.raises(KeyError):
        table.search(15)
    assert 15 not in table


def test_chained_str_has_one_line_per_bucket():
    table = ChainedHashTable(size=5)
    assert len(str(table).splitlines()) == 5


@pytest.mark.parametrize("cls", [LinearProbingTable, QuadraticProbingTable])
def test_probing_add_and_search(cls):
    table = cls()
    slots = [table.add(word) for word in WORDS]
    assert len(set(slots)) == len(WORDS)
    for word, slot in zip(WORDS, slots):
        assert table.search(word) == slot
        assert word in table
    lines = str(table).splitlines()
    assert len(lines) == table.size
    for word, slot in zip(WORDS, slots):
        assert lines[slot] == f"[{slot}] {word} "


@pytest.mark.parametrize("cls", [LinearProbingTable, QuadraticProbingTable])
def test_probing_handles_collisions(cls):
    keys = _colliding(13, 4)
    table = cls()
    slots = [table.add(key) for key in keys]
    assert slots[0] == hash_string(keys[0], 13)
    assert len(set(slots)) == 4
    assert [table.search(key) for key in keys] == slots


def test_linear_probing_takes_next_slot():
    first, second = _colliding(13, 2)
    table = LinearProbingTable()
    home = table.add(first)
    assert table.add(second) == (home + 1) % 13


def test_quadratic_probing_jump():
    first, second, third = _colliding(13, 3)
    table = QuadraticProbingTable()
    home = table.add(first)
    assert table.add(second) == (home + 1) % 13
    assert table.add(third) == (home + 1 + 4) % 13


@pytest.mark.parametrize("cls", [LinearProbingTable, QuadraticProbingTable])
def test_probing_duplicate_and_missing(cls):
    table = cls()
    table.add("do")
    with pytest.raises(DuplicateKeyError):
        table.add("do")
    with pytest.raises(KeyError):
        table.search("while")
    assert "while" not in table


@pytest.mark.parametrize("cls", [LinearProbingTable, QuadraticProbingTable])
def test_probing_full_table(cls):
    table = cls(size=3)
    for word in ["do", "for", "if"]:
        table.add(word)
    with pytest.raises(TableFullError):
        table.add("case")
    with pytest.raises(KeyError):
        table.search("case")


def test_probing_rejects_empty_key():
    with pytest.raises(ValueError):
        LinearProbingTable().add("")
    assert "" not in LinearProbingTable()