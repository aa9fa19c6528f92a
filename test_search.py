"""
Tests for the vertex store, BFS engine and path reconstruction.
"""

import itertools

import pytest

from hanoi_planning import (
    BrokenChainError,
    Move,
    NoPathError,
    PathReconstructor,
    ResourceExhaustedError,
    SearchEngine,
    Vertex,
    VertexColor,
    VertexStore,
    apply_moves,
)
from hanoi_planning.state_space import bfs_distances, build_state_graph


def test_store_deduplicates_and_indexes():
    store = VertexStore()
    a = store.resolve((0, 0))
    b = store.resolve((1, 0))
    again = store.resolve((0, 0))

    assert a is again, "Equal states must resolve to the same vertex"
    assert (a.index, b.index) == (0, 1)
    assert a.color is VertexColor.UNVISITED
    assert a.distance == 0 and a.predecessor is None and a.last_move is None
    assert len(store) == 2
    assert (1, 0) in store and [1, 0] in store
    assert store.get((2, 2)) is None
    assert [v.index for v in store] == [0, 1]


def test_store_reset():
    store = VertexStore()
    store.resolve((0,))
    store.resolve((1,))
    store.reset()

    assert len(store) == 0
    assert store.resolve((1,)).index == 0, "Index counter restarts after reset"


def test_store_vertex_limit():
    store = VertexStore(max_vertices=2)
    store.resolve((0,))
    store.resolve((1,))
    store.resolve((0,))
    with pytest.raises(ResourceExhaustedError) as excinfo:
        store.resolve((2,))
    assert excinfo.value.limit == 2


def test_classic_three_disks():
    engine = SearchEngine(VertexStore(), num_pegs=3)
    vertex = engine.shortest_path((0, 0, 0), (2, 2, 2))
    assert vertex.distance == 7
    assert vertex.color is VertexColor.SETTLED


@pytest.mark.parametrize("num_disks", [1, 2, 3, 4, 5])
def test_tower_transfer_matches_closed_form(num_disks):
    engine = SearchEngine(VertexStore(), num_pegs=3)
    vertex = engine.shortest_path((0,) * num_disks, (2,) * num_disks)
    assert vertex.distance == 2 ** num_disks - 1


@pytest.mark.parametrize("num_disks,expected", [(1, 1), (2, 3), (3, 5), (4, 9), (5, 13)])
def test_four_peg_transfer(num_disks, expected):
    engine = SearchEngine(VertexStore(), num_pegs=4)
    vertex = engine.shortest_path((0,) * num_disks, (3,) * num_disks)
    assert vertex.distance == expected, f"{num_disks} disks on 4 pegs"


def test_single_disk_trace():
    """Discovery order follows disk rank, then destination peg."""
    store = VertexStore()
    engine = SearchEngine(store, num_pegs=3)
    vertex = engine.shortest_path((0,), (2,))

    assert [v.state for v in store] == [(0,), (1,), (2,)]
    assert vertex.index == 2
    assert vertex.last_move == Move(disk=0, source=0, destination=2)
    assert PathReconstructor().reconstruct(vertex) == [Move(0, 0, 2)]


def test_start_equals_target():
    engine = SearchEngine(VertexStore(), num_pegs=3)
    vertex = engine.shortest_path((1, 0), (1, 0))
    assert vertex.distance == 0
    assert vertex.predecessor is None
    assert PathReconstructor().reconstruct(vertex) == []


def test_unreachable_target_raises():
    """A target outside the induced graph drains the queue instead of looping."""
    engine = SearchEngine(VertexStore(), num_pegs=2)
    with pytest.raises(NoPathError) as excinfo:
        engine.shortest_path((0,), (5,))
    assert excinfo.value.kind == "no_path"
    assert excinfo.value.vertices_explored == 2

    with pytest.raises(NoPathError):
        engine.shortest_path((0, 0), (1,))


def test_first_discovery_wins():
    """Distances and predecessors form BFS layers and match networkx."""
    store = VertexStore()
    engine = SearchEngine(store, num_pegs=3)
    engine.shortest_path((0, 0, 0), (1, 1, 1))

    expected = bfs_distances(build_state_graph(3, 3), (0, 0, 0))
    for vertex in store:
        assert vertex.color is not VertexColor.UNVISITED
        assert vertex.distance == expected[vertex.state], f"Wrong distance for {vertex}"
        if vertex.predecessor is None:
            assert vertex.state == (0, 0, 0)
        else:
            assert vertex.distance == vertex.predecessor.distance + 1
            assert apply_moves(vertex.predecessor.state, [vertex.last_move], 3)[-1] == vertex.state


def test_adjacency_recording():
    engine = SearchEngine(VertexStore(), num_pegs=3, record_adjacency=True)
    engine.shortest_path((0,), (2,))
    assert engine.adjacency == {0: {1, 2}, 1: {0, 2}, 2: {0, 1}}

    engine = SearchEngine(VertexStore(), num_pegs=3)
    engine.shortest_path((0,), (2,))
    assert engine.adjacency == {}


def test_reconstruction_replays_to_target():
    """Every pair of 2-disk / 3-peg states: path length is optimal and valid."""
    graph = build_state_graph(2, 3)
    states = list(itertools.product(range(3), repeat=2))
    engine = SearchEngine(VertexStore(), num_pegs=3)
    reconstructor = PathReconstructor()

    for start, target in itertools.product(states, states):
        vertex = engine.shortest_path(start, target)
        moves = reconstructor.reconstruct(vertex)
        assert len(moves) == vertex.distance
        assert vertex.distance == bfs_distances(graph, start)[target]
        assert apply_moves(start, moves, 3)[-1] == target


def test_broken_chain_detected():
    start = Vertex(state=(0,), index=0)
    orphan = Vertex(state=(2,), index=1, distance=2, last_move=Move(0, 1, 2))
    with pytest.raises(BrokenChainError):
        PathReconstructor().reconstruct(orphan)

    mid = Vertex(state=(1,), index=2, predecessor=start, last_move=Move(0, 0, 1))
    too_long = Vertex(state=(2,), index=3, distance=1, predecessor=mid, last_move=Move(0, 1, 2))
    with pytest.raises(BrokenChainError):
        PathReconstructor().reconstruct(too_long)
