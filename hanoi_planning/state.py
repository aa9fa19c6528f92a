"""
State representation for the generalized Towers of Hanoi.

A state is a tuple with one entry per disk, indexed by disk rank (0 is the
smallest disk); each entry is the 0-based peg that disk sits on. Stacking
order on a peg is implied by rank, so no per-peg stack is stored.

This module also converts between that form and the two other forms used
around the solver:
- peg stacks: ``[[3, 2, 1], [], []]`` with 1-based disk ids, bottom to top
- labels: ``"1113"``, one 1-based peg digit per disk
"""

from typing import List, Sequence, Tuple

from .errors import InvalidInputError

State = Tuple[int, ...]


def tower_state(num_disks: int, peg: int = 0) -> State:
    """All disks stacked on a single peg."""
    return (peg,) * num_disks


def validate_counts(num_disks: int, num_pegs: int) -> None:
    if not isinstance(num_disks, int) or isinstance(num_disks, bool) or num_disks < 0:
        raise InvalidInputError(f"Disk count must be a non-negative integer, got {num_disks!r}")
    if not isinstance(num_pegs, int) or isinstance(num_pegs, bool) or num_pegs < 1:
        raise InvalidInputError(f"Peg count must be a positive integer, got {num_pegs!r}")


def validate_state(state: Sequence[int], num_disks: int, num_pegs: int, name: str = "state") -> State:
    """Check a peg assignment and return it as an immutable State."""
    if isinstance(state, (str, bytes)):
        raise InvalidInputError(f"{name} must be a sequence of peg ids, got {state!r}")
    try:
        pegs = tuple(state)
    except TypeError:
        raise InvalidInputError(f"{name} must be a sequence of peg ids, got {state!r}")

    if len(pegs) != num_disks:
        raise InvalidInputError(
            f"{name} must have exactly {num_disks} entries, got {len(pegs)}"
        )
    for disk, peg in enumerate(pegs):
        if not isinstance(peg, int) or isinstance(peg, bool):
            raise InvalidInputError(f"{name}: peg for disk {disk + 1} is not an integer: {peg!r}")
        if peg < 0 or peg >= num_pegs:
            raise InvalidInputError(
                f"{name}: peg {peg} for disk {disk + 1} is outside 0..{num_pegs - 1}"
            )
    return pegs


def pegs_from_state(state: State, num_pegs: int) -> List[List[int]]:
    """
    Convert a state to peg stacks.

    Disk ids are 1-based (1 = smallest) and each stack is listed bottom to
    top, so ``(0, 0, 0)`` on three pegs becomes ``[[3, 2, 1], [], []]``.
    """
    pegs = [[] for _ in range(num_pegs)]
    for disk in range(len(state) - 1, -1, -1):
        pegs[state[disk]].append(disk + 1)
    return pegs


def state_from_pegs(pegs: Sequence[Sequence[int]]) -> State:
    """Inverse of pegs_from_state; rejects stacks that are not largest-first."""
    assignment = {}
    for peg_idx, peg in enumerate(pegs):
        for i, disk in enumerate(peg):
            if disk in assignment:
                raise InvalidInputError(f"Disk {disk} appears more than once")
            if i > 0 and peg[i - 1] < disk:
                raise InvalidInputError(
                    f"Invalid peg ordering {list(peg)}: larger disks must be below smaller disks"
                )
            assignment[disk] = peg_idx

    num_disks = len(assignment)
    expected = list(range(1, num_disks + 1))
    if sorted(assignment) != expected:
        raise InvalidInputError(
            f"State must contain each disk exactly once (expected {expected}, got {sorted(assignment)})"
        )
    return tuple(assignment[d] for d in expected)


def state_from_label(label: str, num_pegs: int = 3, largest_to_smallest: bool = False) -> State:
    """
    Convert a label like '1113' to a state.

    largest_to_smallest=False means label[0] is disk 1 (the smallest).
    Peg digits are 1-based, so labels only cover up to nine pegs.
    """
    if num_pegs > 9:
        raise InvalidInputError("Labels use one digit per peg and support at most 9 pegs")

    pegs = []
    for ch in label:
        if not ch.isdigit() or not 1 <= int(ch) <= num_pegs:
            raise InvalidInputError(f"Invalid peg digit '{ch}' in label '{label}'")
        pegs.append(int(ch) - 1)

    if largest_to_smallest:
        pegs.reverse()
    return tuple(pegs)


def format_state(state: State, largest_to_smallest: bool = False) -> str:
    """Format a state as a compact label (inverse of state_from_label)."""
    digits = [str(peg + 1) for peg in state]
    if largest_to_smallest:
        digits.reverse()
    return "".join(digits)
