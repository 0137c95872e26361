"""
Helper functions for computing layout metrics and scores on a laid-out graph.
"""
from typing import Dict, Tuple
import numpy as np
from shapely.geometry import box
from .impl.graph_model import MindMapGraph, NodeRef


def node_box(node: NodeRef):
    """Shapely box of a node, centered on its location."""
    x, y = node.location or (0.0, 0.0)
    return box(x - node.width / 2, y - node.height / 2, x + node.width / 2, y + node.height / 2)


def compute_total_edge_length(graph: MindMapGraph) -> float:
    """Sum of Manhattan distances between connected node locations."""
    total = 0.0
    for edge in graph.get_edges():
        a = graph.get(edge.source).location or (0.0, 0.0)
        b = graph.get(edge.target).location or (0.0, 0.0)
        total += abs(a[0] - b[0]) + abs(a[1] - b[1])
    return total


def compute_bounding_box(graph: MindMapGraph) -> Tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y) over all node boxes."""
    nodes = graph.get_nodes()
    if not nodes:
        return (0.0, 0.0, 0.0, 0.0)
    bounds = np.array([node_box(n).bounds for n in nodes])
    return (float(bounds[:, 0].min()), float(bounds[:, 1].min()),
            float(bounds[:, 2].max()), float(bounds[:, 3].max()))


def compute_aspect_ratio(graph: MindMapGraph) -> float:
    min_x, min_y, max_x, max_y = compute_bounding_box(graph)
    height = max_y - min_y
    if height <= 0:
        return 0.0
    return (max_x - min_x) / height


def compute_total_overlap(graph: MindMapGraph) -> float:
    """Total intersection area between all node pairs."""
    boxes = [node_box(n) for n in graph.get_nodes()]
    total = 0.0
    for i, b1 in enumerate(boxes):
        for b2 in boxes[i + 1:]:
            if b1.intersects(b2):
                total += b1.intersection(b2).area
    return total


def compute_score(graph: MindMapGraph, min_edge_length: float = 0.0) -> float:
    """Compute overall layout score (0-100).

    Rewards short edges relative to the node sizes and penalizes overlap.
    """
    nodes = graph.get_nodes()
    edges = graph.get_edges()
    if not nodes:
        return 100.0

    # Edge score: 100 when every edge is as short as two touching nodes
    if edges:
        ideal = np.mean([n.width for n in nodes]) + min_edge_length
        mean_length = compute_total_edge_length(graph) / len(edges)
        edge_score = 100.0 * min(1.0, ideal / mean_length) if mean_length > 0 else 100.0
    else:
        edge_score = 100.0

    total_area = sum(n.width * n.height for n in nodes)
    overlap_ratio = compute_total_overlap(graph) / total_area if total_area > 0 else 0.0
    overlap_score = 100.0 * np.exp(-10.0 * overlap_ratio)

    return float(max(0.0, min(100.0, 0.6 * edge_score + 0.4 * overlap_score)))


def summarize(graph: MindMapGraph, min_edge_length: float = 0.0) -> Dict[str, float]:
    min_x, min_y, max_x, max_y = compute_bounding_box(graph)
    return {
        'edge_length': compute_total_edge_length(graph),
        'overlap': compute_total_overlap(graph),
        'width': max_x - min_x,
        'height': max_y - min_y,
        'aspect_ratio': compute_aspect_ratio(graph),
        'score': compute_score(graph, min_edge_length)
    }
