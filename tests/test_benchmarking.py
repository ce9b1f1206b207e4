"""Tests for graph_generators/ and benchmarking.py"""

import numpy as np
import pytest

from benchmarking import BenchmarkRunner
from graph_generators.barabasi_albert import generate_ba
from graph_generators.erdos_renyi import generate_er
from graph_generators.weights import assign_random_weights


class TestGenerators:
    @pytest.mark.parametrize("generator, params", [
        (generate_er, {'p': 0.3}),
        (generate_ba, {'m': 2}),
    ])
    def test_symmetric_weighted(self, generator, params):
        matrix = generator(n=20, rng=1, max_weight=5, **params)
        assert matrix.shape == (20, 20)
        assert np.array_equal(matrix, matrix.T)
        assert np.all(np.diag(matrix) == 0)
        weights = matrix[matrix > 0]
        assert weights.size > 0
        assert weights.min() >= 1 and weights.max() < 5

    def test_seeded_generators_repeat(self):
        assert np.array_equal(generate_er(15, 0.4, rng=3), generate_er(15, 0.4, rng=3))
        assert np.array_equal(generate_ba(15, 3, rng=3), generate_ba(15, 3, rng=3))

    def test_ba_edge_count(self):
        matrix = generate_ba(10, 1, rng=0)
        assert np.count_nonzero(np.triu(matrix)) == 9

    def test_ba_rejects_small_n(self):
        with pytest.raises(ValueError):
            generate_ba(2, 3)

    def test_max_weight_validation(self):
        with pytest.raises(ValueError):
            assign_random_weights(np.ones((3, 3)), max_weight=1)


class TestBenchmarkRunner:
    def test_one_row_per_model_size_arity(self):
        runner = BenchmarkRunner({'ER': generate_er, 'BA': generate_ba}, arities=[2, 4], seed=42)
        df = runner.run(models=['ER', 'BA', 'missing'], n_values=[10, 20], trials=2,
                        model_params={'ER': {'p': 0.3}, 'BA': {'m': 2}})
        assert len(df) == 2 * 2 * 2
        assert set(df['arity']) == {2, 4}
        assert (df['mean_time_s'] >= 0).all()
        assert (df['trials'] == 2).all()
