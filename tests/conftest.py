import pytest

from adjacency_search.graph import from_edge_list

# the example from Stoer & Wagner (1997)
STOER_WAGNER_EDGES = [(0, 1), (1, 2), (2, 3), (0, 4), (1, 4), (1, 5),
                      (2, 6), (3, 6), (3, 7), (4, 5), (5, 6), (6, 7)]
STOER_WAGNER_WEIGHTS = [2, 3, 4, 3, 2, 2, 2, 2, 2, 3, 1, 3]


@pytest.fixture
def weighted_graph():
    return from_edge_list(STOER_WAGNER_EDGES, STOER_WAGNER_WEIGHTS, vertices_count=8)


@pytest.fixture
def unweighted_graph():
    return from_edge_list(STOER_WAGNER_EDGES, vertices_count=8)
