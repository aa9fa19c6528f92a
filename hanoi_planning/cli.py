"""
Command-line front end: read a puzzle, print an optimal move list.

Input is whitespace-separated integers, all pegs 1-based:

    num_disks num_pegs
    start peg of disk 1 .. disk N
    target peg of disk 1 .. disk N

Output is the number of moves followed by one move per line, either
``disk peg`` (default) or ``from to`` with ``--notation pegs``.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from .config import DrawConfig, SolverConfig
from .errors import HanoiError, InvalidInputError
from .planning import Solution, Solver
from .state import format_state

logger = logging.getLogger(__name__)


def read_problem(stream: TextIO) -> Tuple[int, int, List[int], List[int]]:
    """Parse a puzzle, converting pegs to 0-based ids."""
    tokens = stream.read().split()
    try:
        numbers = [int(tok) for tok in tokens]
    except ValueError as e:
        raise InvalidInputError(f"Expected integers only: {e}")

    if len(numbers) < 2:
        raise InvalidInputError("Expected disk and peg counts")

    num_disks, num_pegs = numbers[0], numbers[1]
    if num_disks < 0:
        raise InvalidInputError(f"Disk count must be non-negative, got {num_disks}")

    expected = 2 + 2 * num_disks
    if len(numbers) != expected:
        raise InvalidInputError(
            f"Expected {expected} integers for {num_disks} disks, got {len(numbers)}"
        )

    start = [peg - 1 for peg in numbers[2:2 + num_disks]]
    target = [peg - 1 for peg in numbers[2 + num_disks:]]
    return num_disks, num_pegs, start, target


def format_solution(solution: Solution, notation: str = "disk") -> str:
    pairs = solution.peg_moves() if notation == "pegs" else solution.labelled_moves()
    lines = [str(solution.distance)]
    lines.extend(f"{a} {b}" for a, b in pairs)
    return "\n".join(lines)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Shortest move sequence between two Towers of Hanoi arrangements."
    )
    parser.add_argument(
        "--input",
        default=None,
        help="File to read the puzzle from (default: stdin)",
    )
    parser.add_argument(
        "--notation",
        default="disk",
        choices=["disk", "pegs"],
        help="Print moves as 'disk peg' or as 'from to'.",
    )
    parser.add_argument(
        "--max-vertices",
        type=int,
        default=None,
        help="Give up once the search has created this many states.",
    )
    parser.add_argument(
        "--draw",
        default=None,
        metavar="PREFIX",
        help="Render the state space with the solution to graphs/PREFIX.png",
    )
    parser.add_argument(
        "--output-dir",
        default="graphs",
        help="Directory for --draw output.",
    )
    parser.add_argument("--verbose", action="store_true", default=False)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    config = SolverConfig(max_vertices=args.max_vertices)

    try:
        if args.input:
            with open(args.input) as f:
                num_disks, num_pegs, start, target = read_problem(f)
        else:
            num_disks, num_pegs, start, target = read_problem(sys.stdin)

        solution = Solver(config).solve(num_disks, num_pegs, start, target)
    except HanoiError as e:
        logger.debug("Solver failed with %s", e.kind)
        print(f"error ({e.kind}): {e}", file=sys.stderr)
        return 1

    print(format_solution(solution, args.notation))

    if args.draw:
        # imported lazily so plain solving never loads matplotlib
        from .state_space import build_state_graph, draw_graph

        G = build_state_graph(num_disks, num_pegs)
        draw_graph(
            G=G,
            num_disks=num_disks,
            num_pegs=num_pegs,
            start=solution.start,
            target=solution.target,
            path_states=solution.states(),
            title=(
                f"{num_disks}-disk, {num_pegs}-peg state space: "
                f"{format_state(solution.start)} -> {format_state(solution.target)}"
            ),
            out_prefix=args.draw,
            config=DrawConfig(output_dir=args.output_dir),
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
