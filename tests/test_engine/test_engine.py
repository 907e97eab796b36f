"""
Cross-cutting tests: package surface, error taxonomy, configuration,
logging setup and whole-structure pickling.
"""

import logging
import pickle

import pytest

import memengine
from memengine import (
    DEFAULT_CONFIG,
    BPlusTree,
    DoubleLinkedList,
    EmptyCollectionError,
    EngineConfig,
    EngineException,
    Graph,
    HashTable,
    HuffmanCoding,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    KMPAlgorithm,
    LinearProbingHash,
    MinHeap,
    Queue,
    SparseMatrix,
    Stack,
    XORLinkedList,
    configure_logging,
)
from memengine.core.interfaces import IndexStore, NavigableHistory, OrderedContainer
from memengine.utils.logger import LOGGER_NAME, get_logger


class TestExceptionTaxonomy:

    @pytest.mark.parametrize("error,builtin", [
        (InvalidArgumentError, ValueError),
        (EmptyCollectionError, LookupError),
        (IndexOutOfBoundsError, IndexError),
    ])
    def test_hierarchy(self, error, builtin):
        assert issubclass(error, EngineException)
        assert issubclass(error, builtin)

    def test_one_except_clause_catches_all(self):
        failures = 0
        for action in (lambda: HashTable().put(None, 1),
                       lambda: Stack().pop(),
                       lambda: XORLinkedList().get(0)):
            try:
                action()
            except EngineException:
                failures += 1
        assert failures == 3


class TestConfig:

    def test_defaults(self):
        config = EngineConfig()
        assert config.hash_table_capacity == 16
        assert config.hash_table_load_factor == 0.75
        assert config.probing_capacity == 101
        assert config.probing_load_factor == 0.7
        assert config.btree_order == 4
        assert config.stack_capacity == 100

    def test_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_CONFIG.btree_order = 8

    def test_structures_follow_defaults(self):
        assert HashTable().capacity == DEFAULT_CONFIG.hash_table_capacity
        assert LinearProbingHash().capacity == DEFAULT_CONFIG.probing_capacity
        assert BPlusTree().order == DEFAULT_CONFIG.btree_order
        assert Stack().capacity == DEFAULT_CONFIG.stack_capacity

    def test_custom_config_drives_construction(self):
        config = EngineConfig(btree_order=6, stack_capacity=2)
        tree = BPlusTree(order=config.btree_order)
        stack = Stack(capacity=config.stack_capacity)
        assert tree.order == 6
        assert stack.capacity == 2


class TestInterfaces:

    @pytest.mark.parametrize("structure", [HashTable, LinearProbingHash, BPlusTree])
    def test_index_stores(self, structure):
        store = structure()
        assert isinstance(store, IndexStore)
        store.put("k", "v")
        assert store.get("k") == "v"
        assert store.contains_key("k")
        assert store.remove("k") == "v"
        assert store.is_empty()

    @pytest.mark.parametrize("structure,expected", [
        (MinHeap, [1, 2, 3]),
        (Queue, [3, 1, 2]),
        (Stack, [2, 1, 3]),
    ])
    def test_ordered_containers(self, structure, expected):
        container = structure()
        assert isinstance(container, OrderedContainer)
        for item in (3, 1, 2):
            container.insert(item)
        assert [container.remove_next() for _ in range(3)] == expected
        with pytest.raises(EmptyCollectionError):
            container.peek()

    @pytest.mark.parametrize("structure", [DoubleLinkedList, XORLinkedList])
    def test_navigable_histories(self, structure):
        history = structure()
        assert isinstance(history, NavigableHistory)
        for page in ("a", "b"):
            history.add(page)
        assert history.navigate_forward() == "b"
        history.reset_navigation()
        assert history.get_current() == "a"

    def test_interfaces_are_abstract(self):
        with pytest.raises(TypeError):
            IndexStore()


class TestLogging:

    def test_package_logger_has_null_handler(self):
        package_logger = logging.getLogger(LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)

    def test_get_logger_returns_children(self):
        assert get_logger("memengine.index").name == "memengine.index"
        assert get_logger("demo").name == "memengine.demo"

    def test_configure_logging_adds_one_handler(self):
        package_logger = logging.getLogger(LOGGER_NAME)
        before = list(package_logger.handlers)
        level = package_logger.level
        try:
            configure_logging(logging.DEBUG)
            configure_logging(logging.DEBUG)
            added = [h for h in package_logger.handlers if h not in before]
            assert len(added) == 1
            assert package_logger.level == logging.DEBUG
        finally:
            for handler in package_logger.handlers[:]:
                if handler not in before:
                    package_logger.removeHandler(handler)
            package_logger.setLevel(level)


class TestPickleRoundTrip:

    def round_trip(self, structure):
        return pickle.loads(pickle.dumps(structure))

    def test_hash_table(self):
        table = HashTable()
        for i in range(50):
            table.put(f"k{i}", i)
        restored = self.round_trip(table)
        assert dict(restored.items()) == dict(table.items())

    def test_bplus_tree(self):
        tree = BPlusTree()
        for i in range(100):
            tree.insert(i, i * i)
        restored = self.round_trip(tree)
        assert restored.range_search(10, 12) == [100, 121, 144]
        restored.insert(1000, "new")
        assert restored.search(1000) == "new"

    def test_min_heap(self):
        restored = self.round_trip(MinHeap([5, 1, 3]))
        assert restored.extract_min() == 1

    def test_stack(self):
        stack = Stack(capacity=2)
        for item in "abc":
            stack.push(item)
        restored = self.round_trip(stack)
        assert list(restored) == ["c", "b"]
        assert restored.capacity == 2

    def test_lists(self):
        history = DoubleLinkedList()
        xor_list = XORLinkedList()
        for page in ("a", "b", "c"):
            history.add(page)
            xor_list.add(page)
        history.navigate_forward()
        xor_list.navigate_forward()

        restored_history = self.round_trip(history)
        restored_xor = self.round_trip(xor_list)
        assert list(restored_history) == ["a", "b", "c"]
        assert restored_history.get_current() == "b"
        assert restored_xor.traverse_backward() == ["c", "b", "a"]
        assert restored_xor.navigate_forward() == "c"

    def test_graph(self):
        graph = Graph(3)
        graph.add_edge(0, 1)
        graph.add_edge(1, 0)
        restored = self.round_trip(graph)
        assert sorted(sorted(c) for c in restored.find_scc()) == [[0, 1], [2]]

    def test_text_and_grid(self):
        huffman = HuffmanCoding()
        encoded = huffman.encode("abracadabra")
        assert self.round_trip(huffman).decode(encoded) == "abracadabra"

        assert self.round_trip(KMPAlgorithm()).search("abab", "ab") == [0, 2]

        matrix = SparseMatrix(2, 2)
        matrix.set(1, 1, "x")
        assert self.round_trip(matrix).get(1, 1) == "x"


def test_public_surface():
    for name in memengine.__all__:
        assert hasattr(memengine, name)
