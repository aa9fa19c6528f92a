"""
Vertices of the implicit Towers of Hanoi state graph and the store that owns
them.
"""

import enum
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from .errors import ResourceExhaustedError
from .moves import Move
from .state import State


class VertexColor(enum.Enum):
    UNVISITED = "unvisited"
    FRONTIER = "frontier"
    SETTLED = "settled"


@dataclass(eq=False)
class Vertex:
    """
    One discovered state.

    ``distance``, ``predecessor`` and ``last_move`` are written once, when the
    vertex leaves UNVISITED; the start vertex keeps no predecessor or move.
    """

    state: State
    index: int
    color: VertexColor = VertexColor.UNVISITED
    distance: int = 0
    predecessor: Optional["Vertex"] = None
    last_move: Optional[Move] = None

    def __repr__(self) -> str:
        return (
            f"Vertex(index={self.index}, state={self.state}, "
            f"color={self.color.value}, distance={self.distance})"
        )


class VertexStore:
    """Deduplicating registry of vertices, keyed by state."""

    def __init__(self, max_vertices: Optional[int] = None):
        self.max_vertices = max_vertices
        self._vertices: Dict[State, Vertex] = {}

    def resolve(self, state: State) -> Vertex:
        """Return the vertex for ``state``, creating it on first reference."""
        vertex = self._vertices.get(state)
        if vertex is None:
            if self.max_vertices is not None and len(self._vertices) >= self.max_vertices:
                raise ResourceExhaustedError(self.max_vertices)
            vertex = Vertex(state=state, index=len(self._vertices))
            self._vertices[state] = vertex
        return vertex

    def get(self, state: State) -> Optional[Vertex]:
        return self._vertices.get(tuple(state))

    def reset(self) -> None:
        self._vertices.clear()

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, state) -> bool:
        return tuple(state) in self._vertices

    def __iter__(self) -> Iterator[Vertex]:
        # dicts keep insertion order, which is creation order
        return iter(self._vertices.values())
