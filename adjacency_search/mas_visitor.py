from typing import List


class MASVisitor:
    """
    Event hooks of the maximum adjacency search. Every hook is a no-op here;
    subclasses override the events they care about.
    """

    def initialize_vertex(self, u, graph):
        pass

    def start_vertex(self, u, key, graph):
        """
        Called right after `u` is extracted. `key` is the total weight of the
        edges between `u` and the vertices visited before it.
        """
        pass

    def examine_edge(self, u, v, graph):
        pass

    def finish_vertex(self, u, graph):
        pass


class NullVisitor(MASVisitor):
    pass


class CompositeVisitor(MASVisitor):
    """
    Forwards every event to each visitor, in the order they were given.
    """

    def __init__(self, *visitors: MASVisitor):
        self.visitors = list(visitors)

    def initialize_vertex(self, u, graph):
        for vis in self.visitors:
            vis.initialize_vertex(u, graph)

    def start_vertex(self, u, key, graph):
        for vis in self.visitors:
            vis.start_vertex(u, key, graph)

    def examine_edge(self, u, v, graph):
        for vis in self.visitors:
            vis.examine_edge(u, v, graph)

    def finish_vertex(self, u, graph):
        for vis in self.visitors:
            vis.finish_vertex(u, graph)


class RecordingVisitor(MASVisitor):
    """
    Records the visit order and the key each vertex had when it was visited.
    """

    def __init__(self):
        self.vertex_visit_order: List = []
        self.vertex_weights_when_visited: List = []

    def clear(self):
        self.vertex_visit_order.clear()
        self.vertex_weights_when_visited.clear()

    def start_vertex(self, u, key, graph):
        self.vertex_visit_order.append(u)
        self.vertex_weights_when_visited.append(key)
