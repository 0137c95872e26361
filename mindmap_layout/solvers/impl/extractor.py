"""
Conversion of an optimized grid into final node positions.
"""
from typing import Dict, Tuple
import logging
from .grid_layout import Layout

logger = logging.getLogger(__name__)


def extract_positions(layout: Layout) -> Dict[int, Tuple[float, float]]:
    """Return node index -> position for every occupied cell.

    Each slot is pushed right/down by its column/row index times the edge
    length, and the whole grid is centered on the origin. The layout itself
    is left untouched.
    """
    config = layout.config
    margin = layout.min_edge_length
    corners = {}
    max_width = 0.0
    max_height = 0.0
    for j, row in enumerate(layout.rows):
        for i, cell_index in enumerate(row.cells):
            rect = layout.cells[cell_index].rect
            x = rect.x + i * margin
            y = rect.y + j * margin
            corners[cell_index] = (x, y)
            max_width = max(max_width, x + rect.w)
            max_height = max(max_height, y + rect.h)

    positions = {}
    for cell_index in layout.all:
        x, y = corners[cell_index]
        positions[layout.cells[cell_index].node] = (
            config.min_node_width / 2 + x - max_width / 2,
            config.min_node_height / 2 + y - max_height / 2
        )
    logger.debug(f"Extracted {len(positions)} positions, bounding box {max_width:.1f}x{max_height:.1f}")
    return positions
