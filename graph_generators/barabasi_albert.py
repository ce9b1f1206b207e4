import numpy as np

from graph_generators.weights import assign_random_weights


def generate_ba(n: int, m: int, max_weight: int = 10, rng=None) -> np.ndarray:
    """
    Generates a weighted Barabási-Albert (BA) random graph using preferential attachment.

    Args:
        n (int): Total number of nodes.
        m (int): Number of edges to attach from a new node to existing nodes.
                 The seed graph is a clique on m nodes.
        max_weight (int): Edge weights are drawn from [1, max_weight).
        rng: Seed or np.random.Generator.

    Returns:
        np.ndarray: An (n, n) symmetric adjacency matrix.
    """
    if m < 1:
        raise ValueError("m must be >= 1")
    if n < m:
        raise ValueError("n must be >= m")

    rng = np.random.default_rng(rng)
    matrix = np.zeros((n, n), dtype=int)

    rows, cols = np.triu_indices(m, k=1)
    matrix[rows, cols] = 1
    matrix[cols, rows] = 1

    degrees = np.sum(matrix, axis=1)

    for i in range(m, n):
        current_degrees = degrees[:i]
        total_degree = np.sum(current_degrees)

        if total_degree == 0:
            # seed clique of a single node has no degree yet
            targets = rng.choice(i, size=min(m, i), replace=False)
        else:
            probabilities = current_degrees / total_degree
            support = np.count_nonzero(probabilities)
            targets = rng.choice(i, size=min(m, support), replace=False, p=probabilities)

        matrix[i, targets] = 1
        matrix[targets, i] = 1

        degrees[i] = len(targets)
        degrees[targets] += 1

    return assign_random_weights(np.triu(matrix, k=1), max_weight=max_weight, rng=rng)
