"""
Simulated annealing over a grid placement.

Proposals exchange the slots of two cells. The cost delta of an exchange is
computed from the compound costs of the two cells only, and a rejected
proposal is rolled back from the cells' stashed rectangles.
"""
from typing import List, Optional, Callable
from dataclasses import dataclass, field
from enum import Enum
import logging
import math
import numpy as np
from .grid_layout import Layout, _is_finite
from .cost_model import compound_cost, total_cost
from .errors import InvalidLayoutInput

logger = logging.getLogger(__name__)


@dataclass
class AnnealingParams:
    t0: float = 200.0  # initial temperature
    min_temp: float = 0.05  # stop once t drops to this
    cooling: float = 0.5  # t *= cooling after each level
    moves_per_cell: int = 100  # batch size = occupied cells * moves_per_cell
    stuck_limit: int = 5  # low-gain batches in a row before cooling
    gain_threshold: float = 0.1  # relative improvement that resets the stuck counter
    seed: Optional[int] = None
    max_batches_per_level: Optional[int] = None

    def __post_init__(self):
        if not all(_is_finite(t) and t > 0 for t in (self.t0, self.min_temp)):
            raise InvalidLayoutInput(f"Temperatures must be positive numbers, "
                                     f"got t0={self.t0}, min_temp={self.min_temp}")
        if not 0 < self.cooling < 1:
            raise InvalidLayoutInput(f"cooling must be in (0, 1), got {self.cooling}")
        if self.moves_per_cell < 1 or self.stuck_limit < 1:
            raise InvalidLayoutInput("moves_per_cell and stuck_limit must be at least 1")


class ChangeType(str, Enum):
    SWAP = "swap"
    MOVE = "move"  # one side is an empty placeholder cell


@dataclass
class Change:
    kind: ChangeType
    source_row: int
    source_index: int
    source_cell: int
    target_row: int
    target_index: int
    target_cell: int


@dataclass
class BatchStats:
    level: int
    temperature: float
    start_cost: float
    end_cost: float
    accepts: int
    rejects: int

    @property
    def gain(self) -> float:
        if self.start_cost <= 0:
            return 0.0
        return (self.end_cost - self.start_cost) / self.start_cost

    @property
    def accept_ratio(self) -> float:
        return self.accepts / (self.rejects + 1)


@dataclass
class AnnealingResult:
    initial_cost: float = 0.0
    final_cost: float = 0.0
    levels: int = 0
    batches: int = 0
    accepts: int = 0
    rejects: int = 0
    cancelled: bool = False
    history: List[BatchStats] = field(default_factory=list)

    @property
    def gain(self) -> float:
        if self.initial_cost <= 0:
            return 0.0
        return (self.final_cost - self.initial_cost) / self.initial_cost


def do_change(layout: Layout, change: Change):
    """Exchange the slots of the two cells in ``change``."""
    rows, cells = layout.rows, layout.cells
    source_row = rows[change.source_row]
    target_row = rows[change.target_row]
    source_row.cells[change.source_index] = change.target_cell
    target_row.cells[change.target_index] = change.source_cell

    source = cells[change.source_cell]
    source.push_rect()
    source.rect.x, source.rect.y = layout.slot_origin(target_row, change.target_index)

    target = cells[change.target_cell]
    target.push_rect()
    target.rect.x, target.rect.y = layout.slot_origin(source_row, change.source_index)


def undo_change(layout: Layout, change: Change):
    """Revert ``do_change`` for the same change."""
    layout.rows[change.source_row].cells[change.source_index] = change.source_cell
    layout.rows[change.target_row].cells[change.target_index] = change.target_cell
    layout.cells[change.source_cell].pop_rect()
    layout.cells[change.target_cell].pop_rect()


def plan_change(layout: Layout, rng: np.random.Generator) -> Change:
    """Pick two distinct cells, each by a random row and then a random slot in it."""
    num_rows = len(layout.rows)
    while True:
        source_row = int(rng.integers(num_rows))
        row = layout.rows[source_row]
        if not row.cells:
            continue
        source_index = int(rng.integers(len(row.cells)))
        source_cell = row.cells[source_index]

        target_row = int(rng.integers(num_rows))
        row = layout.rows[target_row]
        if not row.cells:
            continue
        target_index = int(rng.integers(len(row.cells)))
        target_cell = row.cells[target_index]

        if source_cell != target_cell:
            break

    both_occupied = layout.cells[source_cell].occupied and layout.cells[target_cell].occupied
    return Change(
        kind=ChangeType.SWAP if both_occupied else ChangeType.MOVE,
        source_row=source_row,
        source_index=source_index,
        source_cell=source_cell,
        target_row=target_row,
        target_index=target_index,
        target_cell=target_cell
    )


class AnnealingEngine:
    """Runs the cooling schedule over a layout, mutating it in place."""

    def __init__(self, layout: Layout, params: Optional[AnnealingParams] = None,
                 should_stop: Optional[Callable[[], bool]] = None):
        self.layout = layout
        self.params = params or AnnealingParams()
        self.should_stop = should_stop
        self.rng = np.random.default_rng(self.params.seed)
        self.cost = 0.0

    def _try_change(self, temperature: float) -> bool:
        """Propose one change and keep or revert it. Returns True if accepted."""
        layout = self.layout
        cells = layout.cells
        change = plan_change(layout, self.rng)

        new_cost = self.cost
        new_cost -= compound_cost(cells, change.source_cell)
        new_cost -= compound_cost(cells, change.target_cell)

        do_change(layout, change)

        new_cost += compound_cost(cells, change.source_cell)
        new_cost += compound_cost(cells, change.target_cell)

        delta = new_cost - self.cost
        if delta <= 0 or self.rng.random() < math.exp(-delta / temperature):
            self.cost = new_cost
            return True

        undo_change(layout, change)
        return False

    def _run_batch(self, level: int, temperature: float) -> BatchStats:
        start_cost = self.cost
        accepts = 0
        rejects = 0
        for _ in range(len(self.layout.all) * self.params.moves_per_cell):
            if self._try_change(temperature):
                accepts += 1
            else:
                rejects += 1
        return BatchStats(level=level, temperature=temperature, start_cost=start_cost,
                          end_cost=self.cost, accepts=accepts, rejects=rejects)

    def run(self) -> AnnealingResult:
        params = self.params
        result = AnnealingResult()
        if len(self.layout.all) < 2:
            logger.info("Fewer than two nodes, nothing to optimize")
            return result

        self.cost = total_cost(self.layout)
        result.initial_cost = self.cost
        logger.info(f"Initial cost: {self.cost:.2f}")

        t = params.t0
        while t > params.min_temp and not result.cancelled:
            stuck = 0
            level_batches = 0
            while stuck < params.stuck_limit:
                stats = self._run_batch(result.levels, t)
                result.history.append(stats)
                result.batches += 1
                result.accepts += stats.accepts
                result.rejects += stats.rejects
                level_batches += 1

                logger.debug(f"Cost: {stats.end_cost:.2f} ({stats.gain * 100:.2f}%) "
                             f"acc: {stats.accept_ratio:.3f} t: {t:.3f}")

                if -stats.gain < params.gain_threshold:
                    stuck += 1
                else:
                    stuck = 0

                if self.should_stop is not None and self.should_stop():
                    logger.info("Optimization cancelled")
                    result.cancelled = True
                    break
                if params.max_batches_per_level and level_batches >= params.max_batches_per_level:
                    break

            result.levels += 1
            t *= params.cooling

        # Recompute to drop accumulated rounding from the incremental updates
        self.cost = total_cost(self.layout)
        result.final_cost = self.cost
        logger.info(f"End cost: {result.final_cost:.2f} ({result.gain * 100:.2f}%)")
        return result


def run_sa(layout: Layout, params: Optional[AnnealingParams] = None,
           should_stop: Optional[Callable[[], bool]] = None) -> AnnealingResult:
    """Anneal ``layout`` in place and return the run statistics."""
    return AnnealingEngine(layout, params, should_stop).run()
