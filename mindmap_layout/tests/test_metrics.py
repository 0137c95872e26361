import pytest
import networkx as nx
from mindmap_layout.solvers.impl.graph_model import MindMapGraph
from mindmap_layout.solvers.metrics import (
    compute_total_edge_length, compute_bounding_box, compute_total_overlap,
    compute_aspect_ratio, compute_score, summarize
)


def _placed(locations, edges, width=100, height=50):
    graph = MindMapGraph.from_edges(len(locations), edges, width=width, height=height)
    for i, loc in enumerate(locations):
        graph.set_location(i, loc)
    return graph


def test_edge_length_and_bounds():
    graph = _placed([(0, 0), (150, 0), (150, 100)], [(0, 1), (1, 2)])
    assert compute_total_edge_length(graph) == pytest.approx(250)
    assert compute_bounding_box(graph) == pytest.approx((-50, -25, 200, 125))
    assert compute_aspect_ratio(graph) == pytest.approx(250 / 150)


def test_overlap_area():
    graph = _placed([(0, 0), (50, 0), (500, 500)], [])
    # First two boxes share a 50x50 area
    assert compute_total_overlap(graph) == pytest.approx(2500)

    apart = _placed([(0, 0), (100, 0)], [(0, 1)])
    assert compute_total_overlap(apart) == 0


def test_score_prefers_compact_layouts():
    tight = _placed([(0, 0), (100, 0)], [(0, 1)])
    loose = _placed([(0, 0), (1000, 0)], [(0, 1)])
    stacked = _placed([(0, 0), (0, 0)], [(0, 1)])

    assert compute_score(tight) == pytest.approx(100)
    assert 0 <= compute_score(loose) < compute_score(tight)
    assert compute_score(stacked) < compute_score(tight)
    assert summarize(tight)['score'] == pytest.approx(100)


def test_networkx_round_trip():
    digraph = nx.DiGraph()
    digraph.add_node(0, width=250, height=80, text="root")
    digraph.add_node(1)
    digraph.add_edge(0, 1)

    graph = MindMapGraph.from_networkx(digraph)
    assert graph.get(0).size == (250, 80)
    assert graph.get(0).text == "root"
    assert graph.get(1).size == (200, 75)

    graph.set_location(1, (10, 20))
    exported = graph.to_networkx()
    assert list(exported.edges()) == [(0, 1)]
    assert exported.nodes[1]['location'] == (10.0, 20.0)
