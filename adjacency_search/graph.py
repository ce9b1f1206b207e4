from typing import Iterable, Optional, Sequence, Tuple

import networkx as nx
import numpy as np

from adjacency_search.errors import InvalidGraphError
from adjacency_search.weights import DEFAULT_WEIGHT_ATTR


def from_edge_list(edges: Iterable[Tuple[int, int]],
                   weights: Optional[Sequence] = None,
                   vertices_count: Optional[int] = None) -> nx.Graph:
    """
    Builds an undirected graph on vertices 0..n-1 from an edge list.

    Edges are added in the given order, which fixes the neighbour order the
    search relaxes edges in. When `weights` is given, weights[i] is stored in
    the 'weight' attribute of edges[i]; otherwise edges carry no weight.
    """
    edges = list(edges)
    if weights is not None and len(weights) != len(edges):
        raise ValueError(f"got {len(weights)} weights for {len(edges)} edges")

    if vertices_count is None:
        vertices_count = 1 + max((max(u, v) for u, v in edges), default=-1)

    G = nx.Graph()
    G.add_nodes_from(range(vertices_count))
    for i, (u, v) in enumerate(edges):
        if u >= vertices_count or v >= vertices_count or u < 0 or v < 0:
            raise InvalidGraphError(
                f"edge ({u}, {v}) has an endpoint outside 0..{vertices_count - 1}")
        if weights is None:
            G.add_edge(u, v)
        else:
            G.add_edge(u, v, **{DEFAULT_WEIGHT_ATTR: weights[i]})
    return G


def as_graph(graph) -> nx.Graph:
    """
    Accepts a networkx graph or an (n x n) symmetric adjacency matrix and
    returns an undirected simple nx.Graph. Matrix entries become 'weight'.
    """
    if graph is None:
        raise InvalidGraphError("graph is None")

    if isinstance(graph, np.ndarray):
        if graph.ndim != 2 or graph.shape[0] != graph.shape[1]:
            raise InvalidGraphError("graph_matrix must be square")
        if not np.allclose(graph, graph.T):
            raise InvalidGraphError("graph_matrix must be undirected")
        return nx.from_numpy_array(graph, edge_attr=DEFAULT_WEIGHT_ATTR)

    if not isinstance(graph, nx.Graph):
        raise InvalidGraphError(
            f"expected a networkx graph or numpy adjacency matrix, got {type(graph).__name__}")
    if graph.is_directed():
        raise InvalidGraphError("maximum adjacency search needs an undirected graph")
    if graph.is_multigraph():
        raise InvalidGraphError("multigraphs are not supported")
    return graph
