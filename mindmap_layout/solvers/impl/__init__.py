"""
Solver implementation package.
"""
from .graph_model import MindMapGraph, NodeRef, EdgeRef
from .grid_layout import LayoutConfig, Layout, Cell, Row, Rect, build_layout
from .cost_model import distance, compound_cost, out_cost, total_cost
from .sa_solver_impl import AnnealingParams, AnnealingEngine, AnnealingResult, run_sa
from .extractor import extract_positions
from .errors import LayoutError, LayoutIntegrityError, InvalidLayoutInput, LayoutStateError

__all__ = [
    'MindMapGraph',
    'NodeRef',
    'EdgeRef',
    'LayoutConfig',
    'Layout',
    'Cell',
    'Row',
    'Rect',
    'build_layout',
    'distance',
    'compound_cost',
    'out_cost',
    'total_cost',
    'AnnealingParams',
    'AnnealingEngine',
    'AnnealingResult',
    'run_sa',
    'extract_positions',
    'LayoutError',
    'LayoutIntegrityError',
    'InvalidLayoutInput',
    'LayoutStateError'
]
