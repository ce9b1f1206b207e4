import logging
from typing import List, Tuple

from adjacency_search.assignment import AssignmentMap
from adjacency_search.d_ary_heap import DAryHeap
from adjacency_search.errors import InvalidGraphError, InvalidRootError
from adjacency_search.graph import as_graph
from adjacency_search.mas_visitor import NullVisitor, RecordingVisitor
from adjacency_search.weights import resolve_weight_source

logger = logging.getLogger(__name__)


def _group_members(vertices: list, index: dict, assignments: AssignmentMap) -> Tuple[list, list]:
    """
    Resolves every vertex index to the index of its representative and lists,
    per representative, the vertices merged into it (representative first).
    """
    n = len(vertices)
    rep = [0] * n
    for i, v in enumerate(vertices):
        r = assignments.find(v)
        if r not in index:
            raise InvalidGraphError(f"vertex {v!r} is assigned to {r!r}, which is not in the graph")
        rep[i] = index[r]

    members = [[] for _ in range(n)]
    for i in range(n):
        if rep[i] == i:
            members[i].append(i)
    for i in range(n):
        if rep[i] != i:
            members[rep[i]].append(i)
    return rep, members


def maximum_adjacency_search(graph,
                             weight=None,
                             visitor=None,
                             root=None,
                             assignments=None,
                             queue=None) -> None:
    """
    Visits every vertex of `graph`, always picking next the unvisited vertex
    with the largest total edge weight to the vertices visited so far.

    Args:
        graph: nx.Graph, or an (n x n) symmetric numpy adjacency matrix.
        weight: Weight source; see weights.resolve_weight_source. Defaults to
            the graph's 'weight' edge attribute, which then must be present
            on every edge.
        visitor (MASVisitor): Receives the traversal events. Defaults to a
            no-op visitor.
        root: Vertex visited first. Defaults to the first vertex (in node
            order) that has not been merged into another one.
        assignments (AssignmentMap | dict): Vertex -> representative. Merged
            vertices are searched as part of their representative. If given,
            the second-to-last visited vertex is assigned to the last one.
        queue: Keyed updatable max-priority queue over vertex indices
            (position of the vertex in node order). Defaults to DAryHeap().

    Output is delivered through `visitor` and `assignments` only.
    """
    G = as_graph(graph)
    weight_of = resolve_weight_source(G, weight)
    vis = NullVisitor() if visitor is None else visitor
    if isinstance(assignments, AssignmentMap):
        amap = assignments
    else:
        amap = AssignmentMap(assignments)
    pq = DAryHeap() if queue is None else queue

    vertices = list(G)
    n = len(vertices)
    index = {v: i for i, v in enumerate(vertices)}
    rep, members = _group_members(vertices, index, amap)

    active = [i for i in range(n) if rep[i] == i]
    if len(active) < 2:
        raise InvalidGraphError(
            f"the input graph must have at least two (unmerged) vertices, got {len(active)}")

    if root is None:
        root_idx = active[0]
    else:
        if root not in index:
            raise InvalidRootError(f"root vertex {root!r} is not in the graph")
        root_idx = rep[index[root]]

    logger.debug(f"MAS over {n} vertices ({len(active)} active), root={vertices[root_idx]!r}")

    pq.initialize(active, 0)
    for i in active:
        vis.initialize_vertex(vertices[i], G)

    # n + 1 on top of a zero key wins the first extraction
    pq.increase_key(root_idx, pq.key_of(root_idx) + n + 1)

    previous = None
    for step in range(len(active)):
        u = pq.extract_max()
        vis.start_vertex(vertices[u], pq.key_of(u), G)

        for x in members[u]:
            x_vertex = vertices[x]
            for w, data in G.adj[x_vertex].items():
                vis.examine_edge(x_vertex, w, G)
                target = rep[index[w]]
                if pq.contains(target):
                    pq.increase_key(target, pq.key_of(target) + weight_of(x_vertex, w, data))

        vis.finish_vertex(vertices[u], G)

        if step == len(active) - 1 and assignments is not None:
            amap.assign(vertices[previous], vertices[u])
            logger.debug(f"assigned {vertices[previous]!r} -> {vertices[u]!r}")
        previous = u


def maximum_adjacency_order(graph, weight=None, root=None, assignments=None,
                            queue=None) -> Tuple[List, List]:
    """
    Runs the search with a recording visitor.

    Returns:
        (visit_order, weights_when_visited)
    """
    recorder = RecordingVisitor()
    maximum_adjacency_search(graph, weight=weight, visitor=recorder, root=root,
                             assignments=assignments, queue=queue)
    return recorder.vertex_visit_order, recorder.vertex_weights_when_visited
