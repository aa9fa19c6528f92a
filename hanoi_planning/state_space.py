"""
Explicit Towers of Hanoi state spaces as networkx graphs.

The solver itself never stores edges; this module rebuilds them from
legal_moves() when a whole state space is wanted for export, cross-checking
or drawing. For three pegs the states are placed on a Sierpinski triangle.

Edges on the solution path are drawn green.
"""

import itertools
import os
from typing import Dict, Iterable, List, Optional

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from .config import DrawConfig
from .moves import legal_moves
from .state import State, format_state


def all_states(num_disks: int, num_pegs: int) -> List[State]:
    """Every assignment of disks to pegs; each one is a valid arrangement."""
    return list(itertools.product(range(num_pegs), repeat=num_disks))


def build_state_graph(num_disks: int, num_pegs: int) -> nx.Graph:
    G = nx.Graph()
    states = all_states(num_disks, num_pegs)
    G.add_nodes_from(states)

    for s in states:
        for disk, peg, neighbor in legal_moves(s, num_pegs):
            if not G.has_edge(s, neighbor):
                G.add_edge(s, neighbor, disk=disk)

    return G


def graph_from_adjacency(adjacency: Dict[int, Iterable[int]]) -> nx.Graph:
    """Graph over vertex indices from the mapping recorded during a search."""
    G = nx.Graph()
    for index, neighbors in adjacency.items():
        G.add_node(index)
        for other in neighbors:
            G.add_edge(index, other)
    return G


def bfs_distances(G: nx.Graph, source: State) -> Dict[State, int]:
    return nx.single_source_shortest_path_length(G, source)


def sierpinski_layout(G: nx.Graph, num_disks: int) -> Dict[State, np.ndarray]:
    """
    Compute Sierpinski-triangle positions for 3-peg states.

    All disks on peg 1 at top, peg 2 at bottom-left, peg 3 at bottom-right.

    Uses the recursive peg-to-corner mapping: when zooming into a
    sub-triangle, the two pegs NOT anchoring that corner swap their corner
    assignments, so adjacent sub-triangles touch at the right vertices.
    """
    top = np.array([0.5, np.sqrt(3) / 2])
    bl = np.array([0.0, 0.0])
    br = np.array([1.0, 0.0])

    def compute_pos(state):
        cT = top.copy()
        cBL = bl.copy()
        cBR = br.copy()

        peg_at_T = 0
        peg_at_BL = 1
        peg_at_BR = 2

        for disk in range(num_disks - 1, -1, -1):
            peg = state[disk]

            if peg == peg_at_T:
                cBL = (cT + cBL) / 2
                cBR = (cT + cBR) / 2
                peg_at_BL, peg_at_BR = peg_at_BR, peg_at_BL

            elif peg == peg_at_BL:
                cT = (cBL + cT) / 2
                cBR = (cBL + cBR) / 2
                peg_at_T, peg_at_BR = peg_at_BR, peg_at_T

            elif peg == peg_at_BR:
                cT = (cBR + cT) / 2
                cBL = (cBR + cBL) / 2
                peg_at_T, peg_at_BL = peg_at_BL, peg_at_T

        # centroid of the final tiny triangle
        return (cT + cBL + cBR) / 3

    return {node: compute_pos(node) for node in G.nodes()}


def layout(G: nx.Graph, num_disks: int, num_pegs: int) -> Dict[State, np.ndarray]:
    if num_pegs == 3:
        return sierpinski_layout(G, num_disks)
    if G.number_of_nodes() < 500:
        return nx.spring_layout(G, seed=42)
    return nx.circular_layout(G)


def path_edges(states: List[State]) -> List[tuple]:
    return list(zip(states, states[1:]))


def draw_graph(
    G: nx.Graph,
    num_disks: int,
    num_pegs: int,
    start: State,
    target: State,
    path_states: List[State],
    title: str,
    out_prefix: str,
    config: Optional[DrawConfig] = None,
) -> str:
    """
    Draw the state space with ``path_states`` highlighted.

    Returns the path of the written PNG.
    """
    config = config or DrawConfig()
    print(f"State space ({num_disks} disks, {num_pegs} pegs): "
          f"{G.number_of_nodes()} states, {G.number_of_edges()} edges")

    edges = path_edges(path_states)
    for a, b in edges:
        if not G.has_edge(a, b):
            raise ValueError(f"Provided state sequence contains non-adjacent states: {a} -> {b}")

    path_edge_set = {frozenset(e) for e in edges}
    on_path = [e for e in G.edges() if frozenset(e) in path_edge_set]
    off_path = [e for e in G.edges() if frozenset(e) not in path_edge_set]
    visited = set(path_states)
    path_nodes = [n for n in visited if n != start and n != target]
    regular_nodes = [n for n in G.nodes() if n not in visited]

    pos = layout(G, num_disks, num_pegs)

    fig, ax = plt.subplots(1, 1, figsize=config.fig_size)

    nx.draw_networkx_edges(
        G, pos, edgelist=off_path, edge_color='#d8d8d8', width=0.6, alpha=0.35, ax=ax,
    )
    nx.draw_networkx_edges(
        G, pos, edgelist=on_path, edge_color=config.path_color, width=3.0, alpha=0.9, ax=ax,
    )

    nx.draw_networkx_nodes(
        G,
        pos,
        nodelist=regular_nodes,
        node_color='#ececec',
        node_size=config.node_size_regular,
        edgecolors='#999999',
        linewidths=0.4,
        ax=ax,
    )
    nx.draw_networkx_nodes(
        G,
        pos,
        nodelist=path_nodes,
        node_color='#ccffcc',
        node_size=int(config.node_size_regular * 1.35),
        edgecolors=config.path_color,
        linewidths=1.8,
        ax=ax,
    )
    nx.draw_networkx_nodes(
        G,
        pos,
        nodelist=[start],
        node_color='#4444ff',
        node_size=int(config.node_size_regular * 2.0),
        edgecolors='black',
        linewidths=2.2,
        ax=ax,
        node_shape='s',
    )
    nx.draw_networkx_nodes(
        G,
        pos,
        nodelist=[target],
        node_color='gold',
        node_size=int(config.node_size_regular * 2.2),
        edgecolors='black',
        linewidths=2.2,
        ax=ax,
        node_shape='*',
    )

    labels = {
        node: format_state(node, largest_to_smallest=config.labels_largest_to_smallest)
        for node in G.nodes()
    }
    label_pos = {node: p + np.array([0.0, -0.018]) for node, p in pos.items()}
    nx.draw_networkx_labels(
        G,
        label_pos,
        labels=labels,
        font_size=config.label_font_size,
        font_color='#222222',
        font_family='monospace',
        font_weight='bold',
        ax=ax,
    )

    offset = np.array([0.0, 0.028])
    ax.annotate(
        "START", pos[start] + offset, fontsize=9, ha='center', va='bottom',
        fontweight='bold', color='#4444ff',
        bbox=dict(boxstyle='round,pad=0.2', facecolor='white', alpha=0.85),
    )
    ax.annotate(
        "GOAL", pos[target] + offset, fontsize=9, ha='center', va='bottom',
        fontweight='bold', color='#886600',
        bbox=dict(boxstyle='round,pad=0.2', facecolor='white', alpha=0.85),
    )

    legend_elements = [
        mpatches.Patch(
            facecolor=config.path_color,
            edgecolor=config.path_color,
            label=f"{config.path_label} ({len(edges)} moves)",
        ),
    ]
    ax.legend(handles=legend_elements, loc='lower right', fontsize=9, framealpha=0.9, edgecolor='#cccccc')

    ax.set_title(title, fontsize=15, pad=16)
    ax.axis('off')

    os.makedirs(config.output_dir, exist_ok=True)
    out_path = os.path.join(config.output_dir, f'{out_prefix}.png')

    plt.tight_layout()
    plt.savefig(out_path, dpi=config.dpi, bbox_inches='tight', facecolor='white', edgecolor='none')
    print(f"Saved {out_path}")
    plt.close(fig)
    return out_path
