"""
Tests for the separate-chaining HashTable.

Covers:
- put/get/remove/contains_key basics and overwrite semantics
- None-key handling
- Resize behaviour and the load-factor bound
- Colliding keys sharing a chain
"""

import logging

import pytest

from memengine.core.exceptions import InvalidArgumentError
from memengine.index.hash import HashTable


class CollidingKey:
    """Key whose hash is fixed, so every instance lands in the same bucket."""

    def __init__(self, name: str):
        self.name = name

    def __hash__(self) -> int:
        return 7

    def __eq__(self, other) -> bool:
        return isinstance(other, CollidingKey) and other.name == self.name


class TestHashTableBasics:

    def setup_method(self):
        self.table = HashTable()

    def test_new_table_is_empty(self):
        assert self.table.size() == 0
        assert self.table.is_empty()
        assert len(self.table) == 0
        assert self.table.capacity == 16

    def test_put_and_get(self):
        self.table.put("alice", 1)
        self.table.put("bob", 2)

        assert self.table.get("alice") == 1
        assert self.table.get("bob") == 2
        assert self.table.size() == 2

    def test_get_missing_key_returns_none(self):
        assert self.table.get("ghost") is None

    def test_put_existing_key_overwrites(self):
        self.table.put("alice", 1)
        self.table.put("alice", 99)

        assert self.table.get("alice") == 99
        assert self.table.size() == 1

    def test_remove_returns_value_and_forgets_key(self):
        self.table.put("alice", 1)

        assert self.table.remove("alice") == 1
        assert not self.table.contains_key("alice")
        assert self.table.size() == 0

    def test_remove_missing_key_returns_none(self):
        self.table.put("alice", 1)
        assert self.table.remove("bob") is None
        assert self.table.size() == 1

    def test_contains_key_and_in_operator(self):
        self.table.put(42, "answer")
        assert self.table.contains_key(42)
        assert 42 in self.table
        assert 43 not in self.table

    def test_contains_key_true_for_none_value(self):
        self.table.put("empty", None)
        assert self.table.contains_key("empty")
        assert self.table.get("empty") is None

    def test_put_none_key_raises(self):
        with pytest.raises(InvalidArgumentError, match="Key cannot be None"):
            self.table.put(None, 1)

    def test_none_key_reads_are_absent(self):
        assert self.table.get(None) is None
        assert self.table.remove(None) is None
        assert not self.table.contains_key(None)

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            self.table.put(None, 1)

    def test_keys_values_items(self):
        pairs = {"a": 1, "b": 2, "c": 3}
        for key, value in pairs.items():
            self.table.put(key, value)

        assert sorted(self.table.keys()) == ["a", "b", "c"]
        assert sorted(self.table.values()) == [1, 2, 3]
        assert dict(self.table.items()) == pairs
        assert sorted(self.table) == ["a", "b", "c"]

    def test_clear(self):
        for i in range(10):
            self.table.put(i, i)
        self.table.clear()

        assert self.table.is_empty()
        assert self.table.get(3) is None

    def test_invalid_capacity_raises(self):
        with pytest.raises(InvalidArgumentError):
            HashTable(0)


class TestHashTableResize:

    def test_resize_doubles_capacity_past_threshold(self):
        table = HashTable(capacity=4)
        for i in range(3):
            table.put(i, i)
        assert table.capacity == 4  # 3/4 == 0.75, not above

        table.put(3, 3)
        assert table.capacity == 8

    def test_all_entries_survive_resizes(self):
        table = HashTable(capacity=2)
        for i in range(500):
            table.put(f"member-{i}", i)

        assert table.size() == 500
        for i in range(500):
            assert table.get(f"member-{i}") == i

    def test_load_factor_bounded_after_every_put(self):
        table = HashTable(capacity=4)
        for i in range(200):
            table.put(i, str(i))
            assert table.load_factor <= 0.75

    def test_resize_logs_at_debug(self, caplog):
        table = HashTable(capacity=2)
        with caplog.at_level(logging.DEBUG, logger="memengine"):
            table.put("a", 1)
            table.put("b", 2)

        assert any("HashTable resized" in record.message for record in caplog.records)


class TestHashTableCollisions:

    def test_colliding_keys_share_a_chain(self):
        table = HashTable(capacity=64)
        keys = [CollidingKey(name) for name in ("x", "y", "z")]
        for i, key in enumerate(keys):
            table.put(key, i)

        assert table.get_average_chain_length() == 3.0
        for i, key in enumerate(keys):
            assert table.get(key) == i

    def test_remove_from_middle_of_chain(self):
        table = HashTable(capacity=64)
        x, y, z = CollidingKey("x"), CollidingKey("y"), CollidingKey("z")
        for key in (x, y, z):
            table.put(key, key.name)

        assert table.remove(y) == "y"
        assert table.get(x) == "x"
        assert table.get(z) == "z"
        assert not table.contains_key(y)

    def test_average_chain_length_empty(self):
        assert HashTable().get_average_chain_length() == 0.0

    def test_repr(self):
        table = HashTable()
        table.put("k", "v")
        assert "HashTable(size=1, capacity=16" in repr(table)
