"""Tests for adjacency_search/d_ary_heap.py"""

import numpy as np
import pytest

from adjacency_search.d_ary_heap import NOT_IN_HEAP, DAryHeap
from adjacency_search.errors import QueueUnderflowError


def assert_valid_heap(heap: DAryHeap):
    for i, v in enumerate(heap.data):
        assert heap.index_in_heap[v] == i
        if i > 0:
            parent = heap.data[(i - 1) // heap.arity]
            assert heap.key_of(parent) >= heap.key_of(v)


def drain(heap: DAryHeap):
    out = []
    while heap:
        out.append(heap.extract_max())
        assert_valid_heap(heap)
    return out


class TestDAryHeap:
    def test_arity_must_be_at_least_two(self):
        with pytest.raises(ValueError):
            DAryHeap(1)

    @pytest.mark.parametrize("arity", [2, 3, 4, 22])
    def test_extracts_in_key_order(self, arity):
        rng = np.random.default_rng(arity)
        heap = DAryHeap(arity)
        heap.initialize(range(50), 0)
        for v in range(50):
            heap.increase_key(v, int(rng.integers(0, 1000)))
            assert_valid_heap(heap)

        out = drain(heap)
        keys = [heap.key_of(v) for v in out]
        assert sorted(out) == list(range(50))
        assert keys == sorted(keys, reverse=True)

    def test_equal_keys_break_ties_deterministically(self):
        first = DAryHeap(4)
        first.initialize(range(10), 0)
        second = DAryHeap(4)
        second.initialize(range(10), 0)
        assert drain(first) == drain(second)

    def test_last_leaf_moves_to_root_on_ties(self):
        heap = DAryHeap(22)
        heap.initialize(range(8), 0)
        assert heap.extract_max() == 0
        assert heap.extract_max() == 7

    def test_key_survives_extraction(self):
        heap = DAryHeap()
        heap.initialize([0, 1, 2], 0)
        heap.increase_key(2, 5)
        assert heap.extract_max() == 2
        assert not heap.contains(2)
        assert heap.index_in_heap[2] == NOT_IN_HEAP
        assert heap.key_of(2) == 5

    def test_increase_key_not_in_heap(self):
        heap = DAryHeap()
        heap.initialize([0, 1], 0)
        heap.extract_max()
        with pytest.raises(KeyError):
            heap.increase_key(0, 3)
        with pytest.raises(KeyError):
            heap.increase_key(5, 3)

    def test_smaller_key_sinks(self):
        heap = DAryHeap(2)
        heap.initialize(range(6), 0)
        for v in range(6):
            heap.increase_key(v, 10 * (v + 1))
        heap.increase_key(5, -1)
        assert_valid_heap(heap)
        assert drain(heap) == [4, 3, 2, 1, 0, 5]

    def test_underflow(self):
        heap = DAryHeap()
        with pytest.raises(QueueUnderflowError):
            heap.extract_max()
        with pytest.raises(QueueUnderflowError):
            heap.top()

    def test_initialize_resets(self):
        heap = DAryHeap()
        heap.initialize(range(4), 0)
        heap.increase_key(3, 7)
        heap.extract_max()
        heap.initialize(range(4), 0)
        assert len(heap) == 4
        assert all(heap.contains(v) for v in range(4))
        assert all(heap.key_of(v) == 0 for v in range(4))

    def test_sparse_vertex_ids(self):
        heap = DAryHeap(3)
        heap.initialize([1, 4, 6], 0)
        assert not heap.contains(0)
        heap.increase_key(4, 2)
        assert heap.top() == 4
        assert len(heap) == 3
