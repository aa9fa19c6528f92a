"""
Move legality for the generalized Towers of Hanoi.

Disk rank encodes the stacking order: a disk is on top of its peg when no
smaller disk shares the peg, and it may land on any other peg that holds no
smaller disk.
"""

from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .errors import IllegalMoveError
from .state import State


class Move(NamedTuple):
    """A single-disk move. All fields are 0-based."""

    disk: int
    source: int
    destination: int

    def labels(self) -> Tuple[int, int]:
        """1-based (disk, destination peg), conventional puzzle notation."""
        return self.disk + 1, self.destination + 1

    def peg_labels(self) -> Tuple[int, int]:
        """1-based (from peg, to peg)."""
        return self.source + 1, self.destination + 1


def _disk_is_on_top(state: State, disk: int) -> bool:
    peg = state[disk]
    for smaller in range(disk - 1, -1, -1):
        if state[smaller] == peg:
            return False
    return True


def _peg_has_smaller_disk(state: State, disk: int, peg: int) -> bool:
    for smaller in range(disk - 1, -1, -1):
        if state[smaller] == peg:
            return True
    return False


def legal_moves(state: State, num_pegs: int) -> Iterator[Tuple[int, int, State]]:
    """
    Yield (disk, destination, resulting state) for every legal move.

    Order is disk rank ascending, then destination peg ascending.
    """
    for disk in range(len(state)):
        if not _disk_is_on_top(state, disk):
            continue
        for peg in range(num_pegs):
            if peg == state[disk] or _peg_has_smaller_disk(state, disk, peg):
                continue
            yield disk, peg, state[:disk] + (peg,) + state[disk + 1:]


def is_legal_move(state: State, disk: int, destination: int, num_pegs: int) -> bool:
    if disk < 0 or disk >= len(state):
        return False
    if destination < 0 or destination >= num_pegs or destination == state[disk]:
        return False
    return _disk_is_on_top(state, disk) and not _peg_has_smaller_disk(state, disk, destination)


def apply_move(state: State, disk: int, destination: int, num_pegs: int, step_index: Optional[int] = None) -> State:
    if disk < 0 or disk >= len(state):
        raise IllegalMoveError(f"invalid disk {disk + 1}, must be 1-{len(state)}", step_index)
    if destination < 0 or destination >= num_pegs:
        raise IllegalMoveError(
            f"invalid destination peg {destination + 1}, must be 1-{num_pegs}", step_index
        )
    if destination == state[disk]:
        raise IllegalMoveError(f"disk {disk + 1} is already on peg {destination + 1}", step_index)
    if not _disk_is_on_top(state, disk):
        raise IllegalMoveError(
            f"disk {disk + 1} is not on top of peg {state[disk] + 1}", step_index
        )
    if _peg_has_smaller_disk(state, disk, destination):
        raise IllegalMoveError(
            f"cannot place disk {disk + 1} on a smaller disk on peg {destination + 1}", step_index
        )
    return state[:disk] + (destination,) + state[disk + 1:]


def apply_moves(state: State, moves: Sequence[Tuple[int, int]], num_pegs: int) -> List[State]:
    """
    Replay (disk, destination) pairs from ``state``.

    Accepts Move objects too (their destination is used, source is checked).
    Returns every visited state, starting with ``state`` itself.
    """
    states = [tuple(state)]
    current = states[0]
    for step, move in enumerate(moves):
        if isinstance(move, Move):
            if 0 <= move.disk < len(current) and current[move.disk] != move.source:
                raise IllegalMoveError(
                    f"disk {move.disk + 1} is on peg {current[move.disk] + 1}, "
                    f"not peg {move.source + 1}",
                    step,
                )
            disk, destination = move.disk, move.destination
        else:
            disk, destination = move
        current = apply_move(current, disk, destination, num_pegs, step_index=step)
        states.append(current)
    return states
