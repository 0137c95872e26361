# Automatic mind map layout: grid placement refined by simulated annealing

from typing import Dict, Tuple, Optional, Callable
from enum import Enum
import logging
from .impl.graph_model import MindMapGraph
from .impl.grid_layout import Layout, LayoutConfig, build_layout
from .impl.cost_model import total_cost
from .impl.sa_solver_impl import AnnealingParams, AnnealingEngine, AnnealingResult
from .impl.extractor import extract_positions
from .impl.errors import LayoutStateError

logger = logging.getLogger(__name__)


class _Phase(str, Enum):
    NEW = "new"
    INITIALIZED = "initialized"
    OPTIMIZED = "optimized"
    EXTRACTED = "extracted"


class LayoutOptimizer:
    """Lays out the nodes of a mind map graph.

    One layout pass is ``initialize()`` -> ``optimize()`` -> ``extract()``.
    The graph is only read until ``extract()``, which sets the location of
    every node exactly once.
    """

    def __init__(self, graph: MindMapGraph, config: Optional[LayoutConfig] = None,
                 params: Optional[AnnealingParams] = None,
                 should_stop: Optional[Callable[[], bool]] = None):
        self.graph = graph
        self.config = config or LayoutConfig()
        self.params = params or AnnealingParams()
        self.should_stop = should_stop
        self.result: Optional[AnnealingResult] = None
        self._layout: Optional[Layout] = None
        self._phase = _Phase.NEW

    @property
    def layout(self) -> Optional[Layout]:
        return self._layout

    def initialize(self, aspect_ratio: float, min_edge_length: float):
        logger.info(f"Initializing LayoutOptimizer: aspect_ratio={aspect_ratio}, "
                    f"min_edge_length={min_edge_length}")
        self._layout = None
        self.result = None
        self._phase = _Phase.NEW
        self._layout = build_layout(
            self.graph.get_nodes(),
            self.graph.get_edges(),
            aspect_ratio,
            min_edge_length,
            self.config
        )
        self._phase = _Phase.INITIALIZED

    def calculate_cost(self) -> float:
        if self._layout is None:
            raise LayoutStateError("calculate_cost", "initialize")
        return total_cost(self._layout)

    def optimize(self) -> AnnealingResult:
        if self._phase != _Phase.INITIALIZED:
            raise LayoutStateError("optimize", "initialize")
        engine = AnnealingEngine(self._layout, self.params, self.should_stop)
        self.result = engine.run()
        self._phase = _Phase.OPTIMIZED
        return self.result

    def extract(self) -> Dict[int, Tuple[float, float]]:
        if self._phase != _Phase.OPTIMIZED:
            raise LayoutStateError("extract", "optimize")
        positions = extract_positions(self._layout)
        for index, location in positions.items():
            self.graph.set_location(index, location)
        self._phase = _Phase.EXTRACTED
        self._layout = None
        return positions


def optimize_layout(graph: MindMapGraph, aspect_ratio: Optional[float] = None,
                    min_edge_length: Optional[float] = None,
                    config: Optional[LayoutConfig] = None,
                    params: Optional[AnnealingParams] = None,
                    should_stop: Optional[Callable[[], bool]] = None) -> AnnealingResult:
    """Run a full layout pass over ``graph`` and return the annealing statistics."""
    config = config or LayoutConfig()
    if aspect_ratio is None:
        aspect_ratio = config.default_aspect_ratio
    if min_edge_length is None:
        min_edge_length = config.default_min_edge_length

    optimizer = LayoutOptimizer(graph, config, params, should_stop)
    optimizer.initialize(aspect_ratio, min_edge_length)
    result = optimizer.optimize()
    optimizer.extract()
    return result
