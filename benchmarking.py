import time
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from adjacency_search.d_ary_heap import DAryHeap
from adjacency_search.graph import as_graph
from adjacency_search.mas import maximum_adjacency_search
from adjacency_search.mas_visitor import RecordingVisitor


class BenchmarkRunner:
    """
    Times maximum adjacency search over generated graphs for several heap arities.
    """

    def __init__(self,
                 generators: Dict[str, Callable],
                 arities: List[int],
                 seed: Optional[int] = None):
        """
        Args:
            generators (Dict[str, Callable]):
                Dict of {'model_name': generator_function}
                Each function must accept n, rng and **kwargs and return
                an (n, n) weighted adjacency matrix.

            arities (List[int]):
                Heap branching factors to compare.

            seed (Optional[int]):
                Base seed for reproducibility. If None, randomness is uncontrolled.
        """
        self.generators = generators
        self.arities = arities
        self.base_seed = seed

    def _trial_rng(self, model_name: str, n: int, trial: int):
        if self.base_seed is None:
            return np.random.default_rng()
        # deterministic per (model, n, trial); str hashes are salted per process
        return np.random.default_rng([self.base_seed, sum(map(ord, model_name)), n, trial])

    def run(self,
            models: List[str],
            n_values: List[int],
            trials: int,
            model_params: Dict[str, Dict[str, Any]]) -> pd.DataFrame:
        """
        Runs the full benchmark.

        Args:
            models (List[str]): List of model names (e.g., ['ER', 'BA']).
            n_values (List[int]): List of graph sizes (n).
            trials (int): Number of graphs to generate for each (model, n) pair.
            model_params (Dict): Parameters for each model generator.
                                 e.g., {'ER': {'p': 0.1}, 'BA': {'m': 3}}

        Returns:
            pd.DataFrame: One row per (model, n, arity).
        """
        all_results = []

        for model_name in models:
            if model_name not in self.generators:
                print(f"Warning: Generator '{model_name}' not found. Skipping.")
                continue
            gen_func = self.generators[model_name]
            params = model_params.get(model_name, {})

            for n in n_values:
                trial_results = {arity: {'times': [], 'last_keys': []} for arity in self.arities}

                for i in tqdm(range(trials), desc=f"{model_name}, n={n}", leave=False):
                    graph = as_graph(gen_func(n=n, rng=self._trial_rng(model_name, n, i), **params))

                    for arity in self.arities:
                        visitor = RecordingVisitor()
                        queue = DAryHeap(arity)

                        start_time = time.perf_counter()
                        maximum_adjacency_search(graph, visitor=visitor, queue=queue)
                        end_time = time.perf_counter()

                        trial_results[arity]['times'].append(end_time - start_time)
                        trial_results[arity]['last_keys'].append(visitor.vertex_weights_when_visited[-1])

                for arity, data in trial_results.items():
                    all_results.append({
                        'model': model_name,
                        'n': n,
                        'arity': arity,
                        'trials': trials,
                        'mean_time_s': np.mean(data['times']),
                        'std_time_s': np.std(data['times']),
                        'mean_last_key': np.mean(data['last_keys']),
                    })

        print("--- Benchmark Complete ---")
        return pd.DataFrame(all_results)
