"""Shortest-path solver for the Towers of Hanoi with any number of pegs."""

from .config import DrawConfig, SolverConfig
from .errors import (
    BrokenChainError,
    FailureKind,
    HanoiError,
    IllegalMoveError,
    InvalidInputError,
    NoPathError,
    ResourceExhaustedError,
)
from .graph import Vertex, VertexColor, VertexStore
from .moves import Move, apply_moves, is_legal_move, legal_moves
from .planning import Solution, Solver, check_moves, solve
from .search import PathReconstructor, SearchEngine
from .state import State, format_state, pegs_from_state, state_from_label, state_from_pegs, tower_state
