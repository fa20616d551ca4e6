"""
DAG Validator

Decides whether the edited graph is a usable pipeline.
Performs minimum-size, unconnected-node and cycle checks and reports
human-readable issues in a fixed order.
"""

from typing import Dict, Iterator, List, Sequence, Set, Tuple
import logging

from schemas.graph_data import Node, Edge, ValidationResult

logger = logging.getLogger(__name__)

MIN_NODES = 2

MSG_MIN_NODES = "At least 2 nodes required"
MSG_UNCONNECTED = "{count} node(s) not connected"
MSG_CYCLE = "Cycle detected in graph"


def validate(nodes: Sequence[Node], edges: Sequence[Edge]) -> ValidationResult:
    """
    Validate a graph snapshot.

    Checks run in this order and all of them always run:
    1. At least two nodes
    2. Every node is an endpoint of some edge
    3. No directed cycle

    Args:
        nodes: Nodes in graph order
        edges: Edges in graph order

    Returns:
        ValidationResult, valid iff no issue was found
    """
    issues: List[str] = []

    if len(nodes) < MIN_NODES:
        issues.append(MSG_MIN_NODES)

    unconnected = find_unconnected(nodes, edges)
    if unconnected and len(nodes) > 0:
        issues.append(MSG_UNCONNECTED.format(count=len(unconnected)))

    if has_cycle(nodes, edges):
        issues.append(MSG_CYCLE)

    logger.debug(
        f"Validated {len(nodes)} nodes / {len(edges)} edges: "
        f"{issues if issues else 'valid'}"
    )

    return ValidationResult(is_valid=not issues, issues=issues)


def find_unconnected(nodes: Sequence[Node], edges: Sequence[Edge]) -> List[str]:
    """
    Ids of nodes that are neither source nor target of any edge.

    Direction does not matter: a node with only outgoing (or only
    incoming) edges counts as connected.
    """
    touched: Set[str] = set()
    for edge in edges:
        touched.add(edge.source)
        touched.add(edge.target)
    return [n.id for n in nodes if n.id not in touched]


def build_adjacency(nodes: Sequence[Node], edges: Sequence[Edge]) -> Dict[str, List[str]]:
    """
    Adjacency format: {node_id: [target ids in edge order]}

    Edges whose source is not a known node are skipped.
    """
    adjacency: Dict[str, List[str]] = {n.id: [] for n in nodes}
    for edge in edges:
        targets = adjacency.get(edge.source)
        if targets is not None:
            targets.append(edge.target)
    return adjacency


def has_cycle(nodes: Sequence[Node], edges: Sequence[Edge]) -> bool:
    """
    Detect a directed cycle using depth-first search.

    Keeps a visited set and an on-path set; reaching a node that is
    still on the current path is a back edge. The traversal uses an
    explicit stack of (node, neighbour iterator) frames so deep
    pipelines do not hit the recursion limit.
    """
    adjacency = build_adjacency(nodes, edges)
    visited: Set[str] = set()
    on_path: Set[str] = set()

    for root in adjacency:
        if root in visited:
            continue

        visited.add(root)
        on_path.add(root)
        frames: List[Tuple[str, Iterator[str]]] = [(root, iter(adjacency[root]))]

        while frames:
            node_id, neighbors = frames[-1]
            for neighbor in neighbors:
                if neighbor in on_path:
                    logger.debug(f"Back edge {node_id} -> {neighbor}")
                    return True
                if neighbor not in visited:
                    visited.add(neighbor)
                    on_path.add(neighbor)
                    # Unknown targets have no entry and act as leaves
                    frames.append((neighbor, iter(adjacency.get(neighbor, ()))))
                    break
            else:
                # Neighbours exhausted: leave the path, stay visited
                on_path.discard(node_id)
                frames.pop()

    return False
