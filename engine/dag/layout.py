"""
Grid Layout

Assigns canvas positions to nodes on a fixed grid, in graph order.
Edges play no part in placement and pass through untouched.
"""

from dataclasses import replace
from typing import List, Optional, Sequence, Tuple
import logging

from schemas.graph_data import Node, Edge, Position
from ..config.loader import LayoutConfig

logger = logging.getLogger(__name__)


def grid_position(index: int, config: LayoutConfig) -> Position:
    """Position of the index-th node: column index % columns, row index // columns"""
    col = index % config.columns
    row = index // config.columns
    return Position(
        x=col * config.spacing_x + config.origin_x,
        y=row * config.spacing_y + config.origin_y,
    )


def layout(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    config: Optional[LayoutConfig] = None,
) -> Tuple[List[Node], Sequence[Edge]]:
    """
    Lay nodes out on a grid.

    With the default config the i-th node lands at
    x = (i % 3) * 200 + 100, y = (i // 3) * 100 + 50.

    Args:
        nodes: Nodes in graph order (order decides placement)
        edges: Edges, returned as the same object
        config: Grid shape and spacing

    Returns:
        (new node objects with positions assigned, edges)
    """
    config = config or LayoutConfig()

    laid_out = [
        replace(node, position=grid_position(i, config))
        for i, node in enumerate(nodes)
    ]

    logger.debug(f"Laid out {len(laid_out)} nodes on a {config.columns}-column grid")

    return laid_out, edges
