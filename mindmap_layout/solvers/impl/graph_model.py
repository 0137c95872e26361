"""
Mind map graph owner: nodes with sizes and locations, plus directed edges.

The layout solver only reads sizes and edges from this object and writes
each node's final location once, after optimization.
"""
from typing import Dict, List, Optional, Tuple, Iterable
from dataclasses import dataclass
import logging
import networkx as nx

logger = logging.getLogger(__name__)


@dataclass
class NodeRef:
    index: int
    width: float
    height: float
    location: Optional[Tuple[float, float]] = None
    text: str = ""

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class EdgeRef:
    source: int
    target: int


class MindMapGraph:
    """Directed graph of mind map nodes.

    Node enumeration order is insertion order. ``add_edge`` does not check
    that its endpoints exist; consumers that need a consistent graph must
    verify that themselves.
    """

    def __init__(self):
        self._nodes: Dict[int, NodeRef] = {}
        self._edges: List[EdgeRef] = []
        self._count = 0

    def add_node(self, width: float, height: float, index: Optional[int] = None,
                 text: str = "") -> NodeRef:
        """Add a node and return it. Indices are assigned sequentially unless given."""
        if index is None:
            index = self._count
        if index in self._nodes:
            raise ValueError(f"Node {index} already exists")
        node = NodeRef(index=index, width=width, height=height, text=text)
        self._nodes[index] = node
        self._count = max(self._count, index + 1)
        return node

    def add_edge(self, source: int, target: int) -> EdgeRef:
        edge = EdgeRef(source, target)
        self._edges.append(edge)
        return edge

    def get(self, index: int) -> NodeRef:
        return self._nodes[index]

    def get_nodes(self) -> List[NodeRef]:
        return list(self._nodes.values())

    def get_edges(self) -> List[EdgeRef]:
        return list(self._edges)

    def num_nodes(self) -> int:
        return len(self._nodes)

    def set_location(self, index: int, location: Tuple[float, float]):
        self._nodes[index].location = (float(location[0]), float(location[1]))

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, index: int) -> bool:
        return index in self._nodes

    @classmethod
    def from_networkx(cls, digraph: nx.DiGraph, default_width: float = 200.0,
                      default_height: float = 75.0) -> 'MindMapGraph':
        """Build a graph from a networkx graph.

        Node ids must be integers. Per-node ``width``/``height``/``text``
        attributes are used when present. Undirected graphs contribute one
        edge per connection, oriented as networkx reports it.
        """
        graph = cls()
        for node_id, data in digraph.nodes(data=True):
            graph.add_node(
                width=float(data.get('width', default_width)),
                height=float(data.get('height', default_height)),
                index=int(node_id),
                text=str(data.get('text', ''))
            )
        for source, target in digraph.edges():
            graph.add_edge(int(source), int(target))
        logger.debug("Converted networkx graph: %d nodes, %d edges",
                     graph.num_nodes(), len(graph._edges))
        return graph

    def to_networkx(self) -> nx.DiGraph:
        """Export nodes (with size and location attributes) and edges to networkx."""
        digraph = nx.DiGraph()
        for node in self._nodes.values():
            digraph.add_node(node.index, width=node.width, height=node.height,
                             location=node.location, text=node.text)
        digraph.add_edges_from((e.source, e.target) for e in self._edges)
        return digraph

    @classmethod
    def from_edges(cls, num_nodes: int, edges: Iterable[Tuple[int, int]],
                   width: float = 200.0, height: float = 75.0) -> 'MindMapGraph':
        graph = cls()
        for _ in range(num_nodes):
            graph.add_node(width, height)
        for source, target in edges:
            graph.add_edge(source, target)
        return graph
