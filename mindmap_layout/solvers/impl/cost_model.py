"""
Connection cost of a grid placement.

Costs are Manhattan distances between cell centers. The total layout cost
only sums outgoing edges so each connection is counted once; swap deltas use
the compound (in + out) cost because a moved cell changes both.
"""
from typing import List, Sequence
from .grid_layout import Cell, Layout


def distance(a: Cell, b: Cell) -> float:
    """Manhattan distance between the centers of two cells."""
    ra, rb = a.rect, b.rect
    dx = abs(ra.x + ra.w / 2 - rb.x - rb.w / 2)
    dy = abs(ra.y + ra.h / 2 - rb.y - rb.h / 2)
    return dx + dy


def connection_cost(cells: List[Cell], cell: Cell, neighbors: Sequence[int]) -> float:
    cost = 0.0
    for n in neighbors:
        cost += distance(cell, cells[n])
    return cost


def out_cost(cells: List[Cell], index: int) -> float:
    cell = cells[index]
    return connection_cost(cells, cell, cell.out)


def compound_cost(cells: List[Cell], index: int) -> float:
    cell = cells[index]
    return connection_cost(cells, cell, cell.in_) + connection_cost(cells, cell, cell.out)


def total_cost(layout: Layout) -> float:
    """Sum of outgoing connection costs over all occupied cells."""
    cost = 0.0
    for index in layout.all:
        cost += out_cost(layout.cells, index)
    return cost
