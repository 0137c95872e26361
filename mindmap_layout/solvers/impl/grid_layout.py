"""
Grid placement model and the initial grid builder.

All cells live in a single arena list (``Layout.cells``). Rows and adjacency
lists refer to cells by their arena index, so relocating a cell during
annealing never invalidates a reference to it.
"""
from typing import List, Optional, Sequence, Dict
from dataclasses import dataclass, field
import logging
import math
from .graph_model import NodeRef, EdgeRef
from .errors import LayoutIntegrityError, InvalidLayoutInput

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    min_node_width: float = 200.0  # cell width
    min_node_height: float = 75.0  # cell height
    default_aspect_ratio: float = 1.0
    default_min_edge_length: float = 50.0

    def __post_init__(self):
        if not (_is_finite(self.min_node_width) and self.min_node_width > 0):
            raise InvalidLayoutInput(f"min_node_width must be positive, got {self.min_node_width}")
        if not (_is_finite(self.min_node_height) and self.min_node_height > 0):
            raise InvalidLayoutInput(f"min_node_height must be positive, got {self.min_node_height}")


@dataclass
class Rect:
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def copy(self) -> 'Rect':
        return Rect(self.x, self.y, self.w, self.h)


@dataclass
class Cell:
    rect: Rect = field(default_factory=Rect)
    stash: Rect = field(default_factory=Rect)
    node: Optional[int] = None  # external node index, None for placeholders
    out: List[int] = field(default_factory=list)
    in_: List[int] = field(default_factory=list)

    @property
    def occupied(self) -> bool:
        return self.node is not None

    def push_rect(self):
        self.stash = self.rect.copy()

    def pop_rect(self):
        self.rect = self.stash.copy()


@dataclass
class Row:
    y: float
    x: float = 0.0
    cells: List[int] = field(default_factory=list)


@dataclass
class Layout:
    config: LayoutConfig
    min_edge_length: float = 0.0
    cells: List[Cell] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)
    all: List[int] = field(default_factory=list)  # occupied cells
    node_to_cell: Dict[int, int] = field(default_factory=dict)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_cols(self) -> int:
        return len(self.rows[0].cells) if self.rows else 0

    def slot_origin(self, row: Row, index: int):
        """Top-left corner of slot ``index`` in ``row``."""
        return (row.x + index * self.config.min_node_width, row.y)


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def validate_inputs(nodes: Sequence[NodeRef], aspect_ratio: float, min_edge_length: float):
    """Reject inputs the grid computation is undefined for."""
    if not _is_finite(aspect_ratio) or aspect_ratio <= 0:
        raise InvalidLayoutInput(f"aspect_ratio must be a positive number, got {aspect_ratio!r}")
    if not _is_finite(min_edge_length) or min_edge_length < 0:
        raise InvalidLayoutInput(f"min_edge_length must be non-negative, got {min_edge_length!r}")
    for node in nodes:
        if not (_is_finite(node.width) and _is_finite(node.height)) or node.width < 0 or node.height < 0:
            raise InvalidLayoutInput(
                f"Node {node.index} has invalid size ({node.width!r}, {node.height!r})")


def grid_dimensions(nodes: Sequence[NodeRef], aspect_ratio: float, min_edge_length: float,
                    config: LayoutConfig):
    """Return (rows, cols) of a grid roughly matching ``aspect_ratio``.

    The target area is the sum of node areas, each grown by the edge length.
    """
    area = 0.0
    for node in nodes:
        area += (node.width + min_edge_length) * (node.height + min_edge_length)

    height = math.sqrt(area / aspect_ratio)
    width = area / height if height > 0 else 0.0

    rows = int(height / (config.min_node_height + min_edge_length)) + 1
    cols = int(width / (config.min_node_width + min_edge_length)) + 1
    return rows, cols


def build_layout(nodes: Sequence[NodeRef], edges: Sequence[EdgeRef], aspect_ratio: float,
                 min_edge_length: float, config: Optional[LayoutConfig] = None) -> Layout:
    """Build the initial grid placement and the cell adjacency.

    Nodes are consumed from the back of ``nodes``, so the last enumerated
    node lands in the top-left cell. Raises LayoutIntegrityError if an edge
    references a node that is not in ``nodes``.
    """
    config = config or LayoutConfig()
    validate_inputs(nodes, aspect_ratio, min_edge_length)

    rows, cols = grid_dimensions(nodes, aspect_ratio, min_edge_length, config)
    logger.info(f"Building {rows}x{cols} grid for {len(nodes)} nodes "
                f"(aspect_ratio={aspect_ratio}, min_edge_length={min_edge_length})")

    layout = Layout(config=config, min_edge_length=min_edge_length)
    pending = list(nodes)
    for j in range(rows):
        row = Row(y=j * config.min_node_height)
        for i in range(cols):
            x, y = layout.slot_origin(row, i)
            cell = Cell(rect=Rect(x, y, config.min_node_width, config.min_node_height))
            cell.push_rect()
            cell_index = len(layout.cells)
            layout.cells.append(cell)
            row.cells.append(cell_index)

            if pending:
                node = pending.pop()
                cell.node = node.index
                layout.all.append(cell_index)
                layout.node_to_cell[node.index] = cell_index
        layout.rows.append(row)

    # Connections
    for edge in edges:
        source = layout.node_to_cell.get(edge.source)
        if source is None:
            raise LayoutIntegrityError(edge.source, edge.target, edge.source)
        target = layout.node_to_cell.get(edge.target)
        if target is None:
            raise LayoutIntegrityError(edge.source, edge.target, edge.target)
        layout.cells[source].out.append(target)
        layout.cells[target].in_.append(source)

    return layout
