import argparse
import logging

import pandas as pd

from benchmarking import BenchmarkRunner

from graph_generators.erdos_renyi import generate_er
from graph_generators.barabasi_albert import generate_ba

RNG_SEED = 42
DEFAULT_N_VALUES = [50, 100, 200, 400]
DEFAULT_ARITIES = [2, 4, 8, 22]


def main(args):
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    graph_generators = {
        'ER': generate_er,
        'BA': generate_ba,
    }

    model_params = {
        'ER': {'p': args.p},  # G(n, p)
        'BA': {'m': args.m}   # G(n, m), m new edges per node
    }

    runner = BenchmarkRunner(graph_generators, arities=args.arities, seed=args.seed)
    results_df = runner.run(
        models=args.models,
        n_values=args.n_values,
        trials=args.trials,
        model_params=model_params
    )

    pd.set_option('display.width', 1000)
    pd.set_option('display.max_rows', None)

    print("\nBenchmark Results:")
    print(results_df)

    results_df.to_csv(args.output, index=False)
    print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Maximum adjacency search benchmark")

    parser.add_argument("--models", type=str, nargs="+", default=["ER", "BA"],
                        choices=["ER", "BA"],
                        help="Random graph models to generate")

    parser.add_argument("--n_values", type=int, nargs="+", default=DEFAULT_N_VALUES,
                        help="Graph sizes to benchmark")

    parser.add_argument("--arities", type=int, nargs="+", default=DEFAULT_ARITIES,
                        help="Heap branching factors to compare")

    parser.add_argument("--trials", type=int, default=10,
                        help="Number of graphs per (model, n) pair")

    parser.add_argument("--p", type=float, default=0.1,
                        help="Edge probability for ER graphs")

    parser.add_argument("--m", type=int, default=3,
                        help="Edges per new node for BA graphs")

    parser.add_argument("--seed", type=int, default=RNG_SEED,
                        help="Base random seed")

    parser.add_argument("--output", type=str, default="benchmark_results.csv",
                        help="CSV file for the results")

    parser.add_argument("--verbose", action="store_true",
                        help="Log every traversal at DEBUG level")

    main(parser.parse_args())
