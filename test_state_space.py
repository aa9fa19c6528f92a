"""
Tests for explicit state-space graphs and rendering.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from hanoi_planning import DrawConfig, solve
from hanoi_planning.state_space import (
    all_states,
    build_state_graph,
    draw_graph,
    path_edges,
    sierpinski_layout,
)


@pytest.mark.parametrize("num_disks", [1, 2, 3])
def test_three_peg_graph_size(num_disks):
    """Hanoi graphs on 3 pegs have 3^n states and 3(3^n - 1)/2 edges."""
    G = build_state_graph(num_disks, 3)
    assert G.number_of_nodes() == 3 ** num_disks
    assert G.number_of_edges() == 3 * (3 ** num_disks - 1) // 2


def test_graph_is_connected():
    import networkx as nx

    for num_pegs in (3, 4):
        G = build_state_graph(3, num_pegs)
        assert len(all_states(3, num_pegs)) == num_pegs ** 3
        assert nx.is_connected(G), f"{num_pegs} pegs"


def test_sierpinski_corners():
    G = build_state_graph(3, 3)
    pos = sierpinski_layout(G, 3)
    top, left, right = pos[(0, 0, 0)], pos[(1, 1, 1)], pos[(2, 2, 2)]
    assert top[1] > left[1] and top[1] > right[1]
    assert left[0] < right[0]


def test_draw_solution(tmp_path):
    solution = solve(3, 3, [0, 0, 0], [2, 2, 2])
    G = build_state_graph(3, 3)
    out = draw_graph(
        G=G,
        num_disks=3,
        num_pegs=3,
        start=solution.start,
        target=solution.target,
        path_states=solution.states(),
        title="3-disk test",
        out_prefix="solution",
        config=DrawConfig(fig_size=(6, 5), dpi=50, output_dir=str(tmp_path)),
    )
    assert out == str(tmp_path / "solution.png")
    assert (tmp_path / "solution.png").exists()


def test_draw_four_pegs(tmp_path):
    solution = solve(2, 4, [0, 0], [3, 3])
    out = draw_graph(
        G=build_state_graph(2, 4),
        num_disks=2,
        num_pegs=4,
        start=solution.start,
        target=solution.target,
        path_states=solution.states(),
        title="4-peg test",
        out_prefix="four",
        config=DrawConfig(fig_size=(6, 5), dpi=50, output_dir=str(tmp_path)),
    )
    assert (tmp_path / "four.png").exists(), out


def test_draw_rejects_non_adjacent_path(tmp_path):
    G = build_state_graph(2, 3)
    with pytest.raises(ValueError):
        draw_graph(
            G, 2, 3, (0, 0), (2, 2), [(0, 0), (2, 2)], "bad", "bad",
            config=DrawConfig(output_dir=str(tmp_path)),
        )
    assert path_edges([(0, 0), (1, 0)]) == [((0, 0), (1, 0))]


def test_two_pegs_disconnected():
    """With two pegs the smallest disk blocks everything beneath it."""
    import networkx as nx

    G = build_state_graph(2, 2)
    assert not nx.is_connected(G)
    assert not nx.has_path(G, (0, 0), (1, 1))
