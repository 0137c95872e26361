"""
Solvers package.
"""
from .impl import (MindMapGraph, LayoutConfig, AnnealingParams, AnnealingResult,
                   LayoutError, LayoutIntegrityError, InvalidLayoutInput, LayoutStateError)
from .layout_optimizer import LayoutOptimizer, optimize_layout
from .benchmark import BenchmarkRunner, BenchmarkCase, BENCHMARK_CASES

__all__ = [
    'MindMapGraph',
    'LayoutConfig',
    'AnnealingParams',
    'AnnealingResult',
    'LayoutError',
    'LayoutIntegrityError',
    'InvalidLayoutInput',
    'LayoutStateError',
    'LayoutOptimizer',
    'optimize_layout',
    'BenchmarkRunner',
    'BenchmarkCase',
    'BENCHMARK_CASES'
]
