"""
Configuration classes for the Towers of Hanoi solver.

This module contains:
- SolverConfig: Bounds and bookkeeping options for one search
- DrawConfig: Rendering options for state-space figures
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class SolverConfig:
    """Search configuration."""
    # Abort with ResourceExhaustedError once this many states exist (None = unbounded)
    max_vertices: Optional[int] = None

    # Keep an index -> neighbor-index mapping while searching
    record_adjacency: bool = False


@dataclass
class DrawConfig:
    """State-space rendering configuration."""
    fig_size: Tuple[float, float] = (16, 14)
    label_font_size: int = 13
    node_size_regular: int = 350
    dpi: int = 220

    # Label digits ordered diskN..disk1 instead of disk1..diskN
    labels_largest_to_smallest: bool = False

    path_color: str = "#00aa00"
    path_label: str = "Optimal"

    # Output
    output_dir: str = "graphs"
