import numpy as np

from adjacency_search.errors import QueueUnderflowError

NOT_IN_HEAP = -1


# Keyed, updatable max-heap over vertex ids 0..n-1. Keys and heap positions live in
# arrays indexed by vertex id, so lookups and updates never search the heap.
class DAryHeap:
    def __init__(self, arity: int = 4):
        if arity < 2:
            raise ValueError(f"arity must be >= 2, got {arity}")
        self.arity = arity
        self.data = []
        self.keys = []
        self.index_in_heap = np.full(0, NOT_IN_HEAP, dtype=np.intp)

    def __len__(self):
        return len(self.data)

    def __bool__(self):
        return bool(self.data)

    def initialize(self, vertices, initial_key=0):
        """
        Resets the heap for a new traversal: every vertex in `vertices` gets
        `initial_key` and is pushed in the given order.
        """
        vertices = list(vertices)
        size = max(vertices) + 1 if vertices else 0
        self.data = []
        self.keys = [initial_key] * size
        self.index_in_heap = np.full(size, NOT_IN_HEAP, dtype=np.intp)
        for v in vertices:
            self.push(v)

    def push(self, v):
        index = len(self.data)
        self.data.append(v)
        self.index_in_heap[v] = index
        self._sift_up(index)

    def contains(self, v) -> bool:
        return 0 <= v < len(self.index_in_heap) and self.index_in_heap[v] != NOT_IN_HEAP

    def key_of(self, v):
        return self.keys[v]

    def top(self):
        if not self.data:
            raise QueueUnderflowError("top() on an empty heap")
        return self.data[0]

    def increase_key(self, v, new_key):
        if not self.contains(v):
            raise KeyError(v)
        old_key = self.keys[v]
        self.keys[v] = new_key
        index = int(self.index_in_heap[v])
        if new_key < old_key:
            # only reachable with negative edge weights
            self._sift_down(index)
        else:
            self._sift_up(index)

    def extract_max(self):
        if not self.data:
            raise QueueUnderflowError("extract_max() on an empty heap")
        top = self.data[0]
        self.index_in_heap[top] = NOT_IN_HEAP
        last = self.data.pop()
        if self.data:
            # the last leaf replaces the root, then sinks
            self.data[0] = last
            self.index_in_heap[last] = 0
            self._sift_down(0)
        return top

    def _parent(self, index):
        return (index - 1) // self.arity

    def _child(self, index, child_idx):
        return index * self.arity + child_idx + 1

    def _sift_up(self, index):
        if index == 0:
            return
        moving = self.data[index]
        moving_key = self.keys[moving]
        # strictly greater keys pass their parent; equal keys keep insertion order
        while index > 0:
            parent_index = self._parent(index)
            parent_value = self.data[parent_index]
            if moving_key > self.keys[parent_value]:
                self.data[index] = parent_value
                self.index_in_heap[parent_value] = index
                index = parent_index
            else:
                break
        self.data[index] = moving
        self.index_in_heap[moving] = index

    def _sift_down(self, index):
        heap_size = len(self.data)
        moving = self.data[index]
        moving_key = self.keys[moving]
        while True:
            first_child = self._child(index, 0)
            if first_child >= heap_size:
                break
            last_child = min(first_child + self.arity, heap_size)
            best = first_child
            best_key = self.keys[self.data[first_child]]
            for i in range(first_child + 1, last_child):
                i_key = self.keys[self.data[i]]
                if i_key > best_key:
                    best = i
                    best_key = i_key
            if best_key > moving_key:
                best_value = self.data[best]
                self.data[index] = best_value
                self.index_in_heap[best_value] = index
                index = best
            else:
                break
        self.data[index] = moving
        self.index_in_heap[moving] = index
