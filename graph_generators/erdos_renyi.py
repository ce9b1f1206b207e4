import numpy as np

from graph_generators.weights import assign_random_weights


def generate_er(n: int, p: float, max_weight: int = 10, rng=None) -> np.ndarray:
    """
    Generates a weighted Erdős-Rényi (G(n, p)) random graph.

    Returns:
        np.ndarray: An (n, n) symmetric adjacency matrix; every edge gets an
                    integer weight in [1, max_weight).
    """
    rng = np.random.default_rng(rng)
    matrix = np.zeros((n, n), dtype=int)

    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)

    edges = rng.random(rows.size) < p
    matrix[rows[edges], cols[edges]] = 1

    return assign_random_weights(matrix, max_weight=max_weight, rng=rng)
