from fastapi import APIRouter, HTTPException
import logging
import time

from mindmap_layout.schemas.graph import LayoutRequest, LayoutResponse, NodePosition
from mindmap_layout.solvers.impl.graph_model import MindMapGraph
from mindmap_layout.solvers.impl.sa_solver_impl import AnnealingParams
from mindmap_layout.solvers.impl.errors import LayoutError
from mindmap_layout.solvers.layout_optimizer import LayoutOptimizer
from mindmap_layout.solvers.metrics import summarize

router = APIRouter()
logger = logging.getLogger(__name__)


def build_graph(request: LayoutRequest) -> MindMapGraph:
    graph = MindMapGraph()
    for node in request.nodes:
        graph.add_node(node.width, node.height, index=node.id, text=node.text or "")
    for edge in request.edges:
        graph.add_edge(edge.source, edge.target)
    return graph


@router.post("/optimize", response_model=LayoutResponse)
def optimize(request: LayoutRequest):
    """Lay out the posted graph and return the new node positions."""
    t0 = time.time()
    logger.info(
        "[optimize] request received: nodes=%d, edges=%d, aspect_ratio=%s, min_edge_length=%s",
        len(request.nodes), len(request.edges), request.aspect_ratio, request.min_edge_length
    )
    graph = build_graph(request)
    try:
        optimizer = LayoutOptimizer(graph, params=AnnealingParams(seed=request.seed))
        optimizer.initialize(request.aspect_ratio, request.min_edge_length)
        result = optimizer.optimize()
        optimizer.extract()
    except LayoutError as e:
        logger.warning("[optimize] rejected: %s", str(e))
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("[optimize] error: %s", str(e))
        raise HTTPException(status_code=500, detail=f"Layout error: {str(e)}")

    nodes = [
        NodePosition(id=n.index, x=n.location[0], y=n.location[1], width=n.width, height=n.height)
        for n in graph.get_nodes()
    ]
    resp = LayoutResponse(
        nodes=nodes,
        success=True,
        message="Layout optimized successfully",
        initial_cost=result.initial_cost,
        final_cost=result.final_cost,
        metrics=summarize(graph, request.min_edge_length)
    )
    logger.info("[optimize] success: nodes=%d, time=%.2fs, cost=%.1f",
                len(nodes), time.time() - t0, result.final_cost)
    return resp
