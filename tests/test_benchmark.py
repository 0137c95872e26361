from mindmap_layout.solvers.impl.sa_solver_impl import AnnealingParams
from mindmap_layout.solvers.benchmark import BenchmarkRunner, BENCHMARK_CASES
from mindmap_layout.solvers.benchmark.test_cases import create_path_case, create_star_case
from mindmap_layout.solvers.benchmark.run_benchmarks import results_to_frame


def test_benchmark_cases_are_valid_graphs():
    for case in BENCHMARK_CASES:
        graph = case.get_graph()
        assert graph.num_nodes() == case.num_nodes
        for edge in graph.get_edges():
            assert edge.source in graph and edge.target in graph


def test_runner_collects_results():
    runner = BenchmarkRunner(cases=[create_path_case(5), create_star_case(6)])
    configs = [{'name': 'quick', 'params': AnnealingParams(seed=1, moves_per_cell=5, max_batches_per_level=2)}]

    results = runner.run_benchmark(param_configs=configs, runs_per_case=2)

    assert len(results) == 4
    for r in results:
        assert r.config_name == 'quick'
        assert r.final_cost >= 0
        assert r.overlap_area == 0
        assert 0 <= r.accept_ratio <= 1

    df = results_to_frame(results)
    assert set(df['case']) == {'path_5', 'star_6'}
    assert len(df) == 4


def test_runner_keeps_every_param_field_and_offsets_seed():
    runner = BenchmarkRunner(cases=[create_path_case(4)])
    base = AnnealingParams(seed=5, moves_per_cell=3, max_batches_per_level=1, min_temp=25.0)
    configs = [{'name': 'capped', 'params': base}]

    results = runner.run_benchmark(param_configs=configs, runs_per_case=2)

    assert len(results) == 2
    for r in results:
        # 200 -> 100 -> 50: three levels of one batch each
        assert r.metrics['levels'] == 3
        assert r.batches == 3
    assert base.seed == 5
