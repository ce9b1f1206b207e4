import numpy as np


def assign_random_weights(upper: np.ndarray, max_weight: int = 10, rng=None) -> np.ndarray:
    """
    Replaces each nonzero entry of the upper triangle by a random integer in
    [1, max_weight) and mirrors the result, giving a symmetric weighted matrix.
    """
    if max_weight < 2:
        raise ValueError("max_weight must be >= 2")
    rng = np.random.default_rng(rng)

    rows, cols = np.nonzero(np.triu(upper, k=1))
    weighted = np.zeros(upper.shape, dtype=int)
    w = rng.integers(1, max_weight, size=rows.size)
    weighted[rows, cols] = w

    # mirror the matrix to make it symmetric (undirected)
    weighted[cols, rows] = w
    return weighted
