"""
Script to run benchmarks and generate comparison reports.
"""
import argparse
import logging
from pathlib import Path
from typing import List
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from .runner import BenchmarkRunner, BenchmarkResult
from ..impl.sa_solver_impl import AnnealingParams

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def results_to_frame(results: List[BenchmarkResult]) -> pd.DataFrame:
    return pd.DataFrame([
        {
            'case': r.case_name,
            'config': r.config_name,
            'runtime': r.runtime_seconds,
            'initial_cost': r.initial_cost,
            'final_cost': r.final_cost,
            'gain': r.gain,
            'batches': r.batches,
            'accept_ratio': r.accept_ratio,
            'overlap': r.overlap_area,
            'score': r.score
        }
        for r in results
    ])


def plot_results(results: List[BenchmarkResult], output_dir: Path):
    """Generate visualization plots of benchmark results."""
    if not results:
        logger.warning("No results to plot!")
        return

    df = results_to_frame(results)

    plots_dir = output_dir / 'plots'
    plots_dir.mkdir(exist_ok=True)

    # Runtime comparison
    plt.figure(figsize=(10, 6))
    sns.boxplot(data=df, x='case', y='runtime', hue='config')
    plt.title('Optimizer Runtime Comparison')
    plt.xticks(rotation=45)
    plt.tight_layout()
    plt.savefig(plots_dir / 'runtime_comparison.png')
    plt.close()

    # Cost reduction
    fig, axes = plt.subplots(1, 2, figsize=(15, 6))
    fig.suptitle('Layout Quality Comparison')

    sns.boxplot(data=df, x='case', y='gain', hue='config', ax=axes[0])
    axes[0].set_title('Relative Cost Change')
    axes[0].tick_params(labelrotation=45)

    sns.boxplot(data=df, x='case', y='score', hue='config', ax=axes[1])
    axes[1].set_title('Layout Score')
    axes[1].tick_params(labelrotation=45)

    plt.tight_layout()
    plt.savefig(plots_dir / 'quality_metrics.png')
    plt.close()

    df.to_csv(output_dir / 'benchmark_results.csv', index=False)

    summary = df.groupby(['case', 'config']).agg({
        'runtime': ['mean', 'std'],
        'final_cost': ['mean', 'std'],
        'gain': 'mean',
        'accept_ratio': 'mean',
        'score': 'mean'
    }).round(3)

    summary.to_csv(output_dir / 'summary_stats.csv')


def main():
    parser = argparse.ArgumentParser(description='Run mind map layout benchmarks')
    parser.add_argument('--output', type=str, default='benchmark_results',
                        help='Output directory for results')
    parser.add_argument('--runs', type=int, default=3,
                        help='Number of runs per case')
    parser.add_argument('--seed', type=int, default=None,
                        help='Base seed; run k uses seed + k')
    args = parser.parse_args()

    output_dir = Path(args.output)
    output_dir.mkdir(exist_ok=True)

    param_configs = [
        {'name': 'default', 'params': AnnealingParams(seed=args.seed)},
        {'name': 'fast', 'params': AnnealingParams(moves_per_cell=20, stuck_limit=3, seed=args.seed)},
        {'name': 'slow_cooling', 'params': AnnealingParams(cooling=0.8, seed=args.seed)},
        {'name': 'cold_start', 'params': AnnealingParams(t0=20.0, seed=args.seed)}
    ]

    runner = BenchmarkRunner()
    results = runner.run_benchmark(param_configs=param_configs, runs_per_case=args.runs)

    plot_results(results, output_dir)

    logger.info(f"Benchmark results saved to {output_dir}")


if __name__ == '__main__':
    main()
