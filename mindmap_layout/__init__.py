"""
Automatic mind map layout.
"""
from .solvers import MindMapGraph, LayoutOptimizer, LayoutConfig, AnnealingParams, optimize_layout

__version__ = "0.1.0"
