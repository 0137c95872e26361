"""
Exception types raised by the layout solver.
"""
from typing import Optional


class LayoutError(Exception):
    """Base class for all layout solver failures."""


class LayoutIntegrityError(LayoutError):
    """An edge references a node that is not bound to any grid cell.

    The graph owner must only reference nodes it also enumerates. This is
    raised from ``initialize()`` so callers can report corrupt input instead
    of crashing halfway through an optimization run.
    """

    def __init__(self, source: int, target: int, missing: int):
        self.source = source
        self.target = target
        self.missing = missing
        super().__init__(
            f"Edge {source} -> {target} references node {missing} which is not in the graph"
        )


class InvalidLayoutInput(LayoutError, ValueError):
    """Aspect ratio, edge length or node size is outside its valid range."""


class LayoutStateError(LayoutError, RuntimeError):
    """initialize/optimize/extract were called out of order."""

    def __init__(self, operation: str, expected: Optional[str] = None):
        self.operation = operation
        self.expected = expected
        msg = f"Cannot call {operation}() in the current state"
        if expected:
            msg += f"; call {expected}() first"
        super().__init__(msg)
