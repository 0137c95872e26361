import pytest
from mindmap_layout.solvers.impl.graph_model import MindMapGraph
from mindmap_layout.solvers.impl.grid_layout import LayoutConfig
from mindmap_layout.solvers.impl.sa_solver_impl import AnnealingParams
from mindmap_layout.solvers.impl.extractor import extract_positions
from mindmap_layout.solvers.impl.errors import LayoutIntegrityError, LayoutStateError
from mindmap_layout.solvers.layout_optimizer import LayoutOptimizer, optimize_layout

SQUARE = LayoutConfig(min_node_width=100, min_node_height=100)
FAST = AnnealingParams(seed=7, moves_per_cell=20)


def test_full_pass_sets_every_location():
    graph = MindMapGraph.from_edges(10, [(0, i) for i in range(1, 10)])
    optimizer = LayoutOptimizer(graph, params=FAST)
    optimizer.initialize(1.5, 40.0)
    result = optimizer.optimize()

    # Nothing is written before extract
    assert all(n.location is None for n in graph.get_nodes())

    positions = optimizer.extract()
    assert set(positions) == set(range(10))
    for node in graph.get_nodes():
        assert node.location == pytest.approx(positions[node.index])
    assert result.final_cost >= 0
    assert len(set(positions.values())) == 10


def test_two_nodes_end_in_neighbouring_cells():
    graph = MindMapGraph.from_edges(2, [(0, 1)], width=90, height=90)
    optimizer = LayoutOptimizer(graph, config=SQUARE, params=AnnealingParams(seed=21))
    optimizer.initialize(1.0, 0.0)
    optimizer.optimize()
    assert optimizer.calculate_cost() == pytest.approx(100)
    optimizer.extract()

    (x0, y0), (x1, y1) = graph.get(0).location, graph.get(1).location
    assert abs(x0 - x1) + abs(y0 - y1) == pytest.approx(100)
    # 2x2 grid centered on the origin
    for coord in (x0, y0, x1, y1):
        assert abs(coord) == pytest.approx(50)


def test_full_grid_is_centered_on_origin():
    graph = MindMapGraph.from_edges(4, [(0, 1), (1, 2), (2, 3)], width=90, height=90)
    optimize_layout(graph, aspect_ratio=1.0, min_edge_length=10.0, config=SQUARE, params=FAST)

    xs = sorted(n.location[0] for n in graph.get_nodes())
    ys = sorted(n.location[1] for n in graph.get_nodes())
    assert xs == pytest.approx([-55, -55, 55, 55])
    assert ys == pytest.approx([-55, -55, 55, 55])


def test_extract_adds_edge_length_per_slot():
    # One node, default 200x75 cells: the grid is 2 rows x 1 column
    graph = MindMapGraph.from_edges(1, [])
    optimizer = LayoutOptimizer(graph)
    optimizer.initialize(1.0, 50.0)
    layout = optimizer.layout
    assert (layout.num_rows, layout.num_cols) == (2, 1)
    positions = extract_positions(layout)
    assert list(positions) == [0]
    assert positions[0] == pytest.approx((0.0, -62.5))

    optimizer.optimize()
    optimizer.extract()
    assert graph.get(0).location == pytest.approx((0.0, -62.5))


def test_empty_graph():
    graph = MindMapGraph()
    result = optimize_layout(graph)
    assert result.final_cost == 0
    assert result.batches == 0


def test_bad_edge_fails_in_initialize():
    graph = MindMapGraph.from_edges(3, [(0, 1), (2, 7)])
    optimizer = LayoutOptimizer(graph, params=FAST)
    with pytest.raises(LayoutIntegrityError):
        optimizer.initialize(1.0, 10.0)
    with pytest.raises(LayoutStateError):
        optimizer.optimize()


def test_failed_reinitialize_discards_previous_pass():
    graph = MindMapGraph.from_edges(3, [(0, 1), (1, 2)])
    optimizer = LayoutOptimizer(graph, params=FAST)
    optimizer.initialize(1.0, 10.0)
    optimizer.optimize()

    graph.add_edge(2, 9)
    with pytest.raises(LayoutIntegrityError):
        optimizer.initialize(1.0, 10.0)

    assert optimizer.layout is None
    assert optimizer.result is None
    with pytest.raises(LayoutStateError):
        optimizer.extract()
    assert all(n.location is None for n in graph.get_nodes())


def test_calls_must_follow_contract_order():
    graph = MindMapGraph.from_edges(3, [(0, 1), (1, 2)])
    optimizer = LayoutOptimizer(graph, params=FAST)

    with pytest.raises(LayoutStateError):
        optimizer.optimize()
    with pytest.raises(LayoutStateError):
        optimizer.extract()
    with pytest.raises(LayoutStateError):
        optimizer.calculate_cost()

    optimizer.initialize(1.0, 10.0)
    with pytest.raises(LayoutStateError):
        optimizer.extract()
    optimizer.optimize()
    with pytest.raises(LayoutStateError):
        optimizer.optimize()
    optimizer.extract()
    with pytest.raises(LayoutStateError):
        optimizer.extract()

    # A new pass starts with initialize
    optimizer.initialize(1.0, 10.0)
    optimizer.optimize()
    optimizer.extract()


def test_seeded_layouts_match():
    def run():
        graph = MindMapGraph.from_edges(8, [(0, 1), (0, 2), (2, 3), (2, 4), (4, 5), (5, 6), (6, 7)])
        optimize_layout(graph, 1.0, 25.0, params=AnnealingParams(seed=99, moves_per_cell=10))
        return [n.location for n in graph.get_nodes()]

    assert run() == run()
