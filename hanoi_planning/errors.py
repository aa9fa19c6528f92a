"""
Failure taxonomy for the Towers of Hanoi solver.

Every failure raised by the package derives from HanoiError and carries a
``kind`` string, so callers that only want a discriminated result can switch
on ``err.kind`` instead of the exception class.
"""

from typing import Optional


class FailureKind:
    """Enumeration of solver failure kinds."""

    NO_PATH = "no_path"
    INVALID_INPUT = "invalid_input"
    BROKEN_CHAIN = "broken_chain"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    ILLEGAL_MOVE = "illegal_move"


class HanoiError(Exception):
    kind: str = "error"


class NoPathError(HanoiError):
    """Target state is not reachable from the start state."""

    kind = FailureKind.NO_PATH

    def __init__(self, start, target, vertices_explored: int):
        self.start = start
        self.target = target
        self.vertices_explored = vertices_explored
        super().__init__(
            f"No path from {list(start)} to {list(target)} "
            f"({vertices_explored} states explored)"
        )


class InvalidInputError(HanoiError, ValueError):
    kind = FailureKind.INVALID_INPUT


class BrokenChainError(HanoiError, RuntimeError):
    """Predecessor links disagree with the recorded distance."""

    kind = FailureKind.BROKEN_CHAIN


class ResourceExhaustedError(HanoiError):
    kind = FailureKind.RESOURCE_EXHAUSTED

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"State space exceeded the limit of {limit} vertices")


class IllegalMoveError(HanoiError, ValueError):
    kind = FailureKind.ILLEGAL_MOVE

    def __init__(self, message: str, step_index: Optional[int] = None):
        self.step_index = step_index
        if step_index is not None:
            message = f"Step {step_index + 1}: {message}"
        super().__init__(message)
