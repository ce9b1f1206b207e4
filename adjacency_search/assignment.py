from typing import Dict, Hashable, Optional

from adjacency_search.errors import InvalidGraphError


class AssignmentMap:
    """
    Maps a vertex to the vertex it has been merged into. Vertices without an
    entry represent themselves. `storage` may be a caller-owned dict; it is
    read and written in place.
    """
    __slots__ = ['parent']

    def __init__(self, storage: Optional[Dict[Hashable, Hashable]] = None):
        self.parent = {} if storage is None else storage

    def __getitem__(self, v):
        return self.parent.get(v, v)

    def __contains__(self, v):
        return v in self.parent

    def __len__(self):
        return len(self.parent)

    def __iter__(self):
        return iter(self.parent)

    def items(self):
        return self.parent.items()

    def find(self, v):
        root = v
        seen = {v}
        while self.parent.get(root, root) != root:
            root = self.parent[root]
            if root in seen:
                raise InvalidGraphError(f"assignment chain from {v!r} runs into a cycle at {root!r}")
            seen.add(root)
        # no path compression: lookups must not write to the caller's map
        return root

    def merged(self, v) -> bool:
        return self.find(v) != v

    def assign(self, u, v):
        self.parent[u] = v
