"""
Towers of Hanoi planning entry points.

This module wires the search pieces together:
- Input validation for disk/peg counts and start/target assignments
- Solver: reusable optimal solver for arbitrary start/target states
- solve(): one-shot functional entry point
- check_moves(): replays a candidate move list and compares it to the optimum
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .config import SolverConfig
from .errors import HanoiError, IllegalMoveError, InvalidInputError
from .graph import VertexStore
from .moves import Move, apply_moves
from .search import PathReconstructor, SearchEngine
from .state import State, state_from_pegs, tower_state, validate_counts, validate_state

logger = logging.getLogger(__name__)


@dataclass
class Solution:
    """Result of a successful search."""

    num_disks: int
    num_pegs: int
    start: State
    target: State
    distance: int
    moves: List[Move]
    vertices_explored: int = 0
    adjacency: Dict[int, set] = field(default_factory=dict, repr=False)

    def labelled_moves(self) -> List[Tuple[int, int]]:
        """Moves as 1-based (disk, destination peg) pairs."""
        return [move.labels() for move in self.moves]

    def peg_moves(self) -> List[Tuple[int, int]]:
        """Moves as 1-based (from peg, to peg) pairs."""
        return [move.peg_labels() for move in self.moves]

    def states(self) -> List[State]:
        """Every state along the solution, start and target included."""
        return apply_moves(self.start, self.moves, self.num_pegs)


class Solver:
    """
    Optimal solver for any number of pegs.

    Uses BFS over legal state transitions, so it supports both:
    - Standard tower-to-tower tasks (all disks from one peg to another)
    - Arbitrary start/target assignments

    One VertexStore is kept per solver and reset before every search.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self.store = VertexStore(max_vertices=self.config.max_vertices)
        self.reconstructor = PathReconstructor()

    def solve(
        self,
        num_disks: int,
        num_pegs: int = 3,
        start: Optional[Sequence[int]] = None,
        target: Optional[Sequence[int]] = None,
        source_peg: int = 0,
        goal_peg: Optional[int] = None,
    ) -> Solution:
        """
        Find a shortest move sequence from ``start`` to ``target``.

        When either state is omitted, the standard task is used: every disk
        on ``source_peg`` moving to ``goal_peg`` (default: the last peg).
        """
        validate_counts(num_disks, num_pegs)

        if start is None or target is None:
            if goal_peg is None:
                goal_peg = num_pegs - 1
            start = tower_state(num_disks, source_peg)
            target = tower_state(num_disks, goal_peg)

        start = validate_state(start, num_disks, num_pegs, name="start")
        target = validate_state(target, num_disks, num_pegs, name="target")

        engine = SearchEngine(
            self.store,
            num_pegs,
            record_adjacency=self.config.record_adjacency,
        )
        try:
            target_vtx = engine.shortest_path(start, target)
            moves = self.reconstructor.reconstruct(target_vtx)
            explored = len(self.store)
        finally:
            self.store.reset()

        logger.info(
            "Solved %d disks on %d pegs in %d moves (%d states)",
            num_disks, num_pegs, target_vtx.distance, explored,
        )
        return Solution(
            num_disks=num_disks,
            num_pegs=num_pegs,
            start=start,
            target=target,
            distance=target_vtx.distance,
            moves=moves,
            vertices_explored=explored,
            adjacency=engine.adjacency,
        )

    def solve_pegs(
        self,
        initial_state: List[List[int]],
        goal_state: List[List[int]],
    ) -> Solution:
        """Solve from peg-stack form, e.g. ``[[3, 2, 1], [], []]``."""
        if len(initial_state) != len(goal_state):
            raise InvalidInputError(
                f"Initial state has {len(initial_state)} pegs, goal state has {len(goal_state)}"
            )
        start = state_from_pegs(initial_state)
        target = state_from_pegs(goal_state)
        return self.solve(len(start), len(initial_state), start, target)


def solve(
    num_disks: int,
    num_pegs: int,
    start: Sequence[int],
    target: Sequence[int],
    config: Optional[SolverConfig] = None,
) -> Solution:
    """Shortest move sequence between two peg assignments (0-based peg ids)."""
    return Solver(config).solve(num_disks, num_pegs, start, target)


def check_moves(
    moves: Sequence[Tuple[int, int]],
    num_disks: int,
    num_pegs: int,
    start: Sequence[int],
    target: Sequence[int],
    solver: Optional[Solver] = None,
) -> Dict:
    """
    Replay 0-based (disk, destination) moves and compare against the optimum.

    Replay stops at the first illegal move; the returned dict reports where.
    """
    validate_counts(num_disks, num_pegs)
    start = validate_state(start, num_disks, num_pegs, name="start")
    target = validate_state(target, num_disks, num_pegs, name="target")

    error = None
    try:
        final_state = apply_moves(start, moves, num_pegs)[-1]
    except IllegalMoveError as e:
        error = str(e)
        legal_prefix = list(moves)[:e.step_index] if e.step_index is not None else []
        final_state = apply_moves(start, legal_prefix, num_pegs)[-1]

    solved = error is None and final_state == target

    optimal_moves = None
    try:
        optimal_moves = (solver or Solver()).solve(num_disks, num_pegs, start, target).distance
    except HanoiError as e:
        logger.warning("No optimum available for comparison: %s", e)

    return {
        'num_moves': len(moves),
        'solved': solved,
        'error': error,
        'final_state': final_state,
        'optimal_moves': optimal_moves,
        'is_optimal': solved and optimal_moves is not None and len(moves) == optimal_moves,
        'extra_moves': (len(moves) - optimal_moves) if (solved and optimal_moves is not None) else None,
    }
