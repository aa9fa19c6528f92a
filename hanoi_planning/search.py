"""
Breadth-first search over the implicit Towers of Hanoi state graph.

Vertices are discovered on the fly: each dequeued state is expanded with
legal_moves() and every new neighbor is resolved through the VertexStore.
The first discovery of a vertex fixes its distance and predecessor, which is
what makes plain BFS distances shortest on this unweighted graph.
"""

import logging
from collections import deque
from typing import Dict, List, Optional, Set

from .errors import BrokenChainError, NoPathError
from .graph import Vertex, VertexColor, VertexStore
from .moves import Move, legal_moves
from .state import State

logger = logging.getLogger(__name__)


class SearchEngine:
    """BFS from a start state until the target state has been settled."""

    def __init__(self, store: VertexStore, num_pegs: int, record_adjacency: bool = False):
        self.store = store
        self.num_pegs = num_pegs
        self.record_adjacency = record_adjacency
        # vertex index -> neighbor indices, only filled when record_adjacency is set
        self.adjacency: Dict[int, Set[int]] = {}

    def shortest_path(self, start: State, target: State) -> Vertex:
        """
        Run the search and return the settled target vertex.

        The answer is ``vertex.distance``; follow predecessors (or use
        PathReconstructor) for the moves. Raises NoPathError if the queue
        drains without reaching ``target``.
        """
        self.store.reset()
        self.adjacency = {}
        target = tuple(target)

        logger.debug("BFS from %s to %s on %d pegs", start, target, self.num_pegs)

        start_vtx = self.store.resolve(tuple(start))
        start_vtx.color = VertexColor.FRONTIER
        start_vtx.distance = 0

        queue = deque([start_vtx])
        while queue:
            cur = queue.popleft()

            for disk, peg, new_state in legal_moves(cur.state, self.num_pegs):
                neighbor = self.store.resolve(new_state)

                if self.record_adjacency:
                    self.adjacency.setdefault(cur.index, set()).add(neighbor.index)
                    self.adjacency.setdefault(neighbor.index, set()).add(cur.index)

                if neighbor.color is VertexColor.UNVISITED:
                    neighbor.distance = cur.distance + 1
                    neighbor.predecessor = cur
                    neighbor.last_move = Move(disk, cur.state[disk], peg)
                    neighbor.color = VertexColor.FRONTIER
                    queue.append(neighbor)

            cur.color = VertexColor.SETTLED
            if cur.state == target:
                logger.debug(
                    "Reached target at distance %d after creating %d vertices",
                    cur.distance, len(self.store),
                )
                return cur

        logger.debug("Queue drained after %d vertices without reaching target", len(self.store))
        raise NoPathError(start, target, len(self.store))


class PathReconstructor:
    """Turns the predecessor chain of a vertex into an ordered move list."""

    def reconstruct(self, target_vertex: Vertex) -> List[Move]:
        moves: List[Move] = []
        vtx: Optional[Vertex] = target_vertex

        for step in range(target_vertex.distance):
            if vtx.predecessor is None or vtx.last_move is None:
                raise BrokenChainError(
                    f"Predecessor chain of {target_vertex.state} ends after {step} "
                    f"of {target_vertex.distance} moves"
                )
            moves.append(vtx.last_move)
            vtx = vtx.predecessor

        if vtx.predecessor is not None:
            raise BrokenChainError(
                f"Predecessor chain of {target_vertex.state} is longer than its "
                f"distance {target_vertex.distance}"
            )

        moves.reverse()
        return moves
