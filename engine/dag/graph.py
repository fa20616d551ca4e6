"""
Graph Model

Mutable, ordered store of pipeline nodes and directed edges.
Enforces id uniqueness only; connectivity and acyclicity are
validation concerns (see validator.py).
"""

from typing import Dict, Iterable, Iterator, List, Optional, Set
import logging

from schemas.graph_data import Node, Edge, Position
from .errors import DuplicateIdError, UnknownNodeError, UnknownEdgeError

logger = logging.getLogger(__name__)


class GraphModel:
    """
    Ordered collection of nodes and edges keyed by id.

    Insertion order is preserved and is the order handed to the
    validator and the layout assigner.

    Example usage:
        graph = GraphModel()
        graph.add_node(Node(id="node-1", label="ingest", position=Position(0, 0)))
        graph.add_node(Node(id="node-2", label="transform", position=Position(0, 0)))
        graph.add_edge(Edge(id="edge-node-1-node-2-1", source="node-1", target="node-2"))

        print(graph.node_count, graph.edge_count)  # 2 1
    """

    def __init__(self):
        self._nodes: Dict[str, Node] = {}
        self._edges: Dict[str, Edge] = {}

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def iter_nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self._edges.values())

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def has_edge(self, edge_id: str) -> bool:
        return edge_id in self._edges

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self._edges.get(edge_id)

    def add_node(self, node: Node) -> None:
        """
        Insert a node.

        Raises:
            DuplicateIdError: If a node with the same id exists
        """
        if node.id in self._nodes:
            raise DuplicateIdError(f"Node id already in graph: '{node.id}'")
        self._nodes[node.id] = node
        logger.debug(f"Added node '{node.id}' ({node.label!r})")

    def add_edge(self, edge: Edge) -> None:
        """
        Insert an edge.

        Endpoints are not checked here; the controller only connects
        existing nodes and the validator tolerates dangling ids.

        Raises:
            DuplicateIdError: If an edge with the same id exists
        """
        if edge.id in self._edges:
            raise DuplicateIdError(f"Edge id already in graph: '{edge.id}'")
        self._edges[edge.id] = edge
        logger.debug(f"Added edge '{edge.id}': {edge.source} -> {edge.target}")

    def remove_edge(self, edge_id: str) -> Edge:
        """
        Remove a single edge.

        Raises:
            UnknownEdgeError: If the edge does not exist
        """
        try:
            return self._edges.pop(edge_id)
        except KeyError:
            raise UnknownEdgeError(f"Unknown edge: '{edge_id}'") from None

    def remove_edges(self, edge_ids: Iterable[str]) -> List[Edge]:
        """Remove every listed edge that exists; unknown ids are skipped"""
        removed = []
        for edge_id in edge_ids:
            edge = self._edges.pop(edge_id, None)
            if edge is not None:
                removed.append(edge)
        return removed

    def edges_touching(self, node_ids: Set[str]) -> List[str]:
        """Ids of edges whose source or target is in node_ids"""
        return [
            e.id for e in self._edges.values()
            if e.source in node_ids or e.target in node_ids
        ]

    def remove_nodes(self, node_ids: Iterable[str]) -> List[Node]:
        """
        Remove nodes together with every edge that references them.

        Both removals happen in one call so no dangling edge survives.
        """
        node_ids = {nid for nid in node_ids if nid in self._nodes}
        self.remove_edges(self.edges_touching(node_ids))
        return [self._nodes.pop(nid) for nid in list(self._nodes) if nid in node_ids]

    def set_position(self, node_id: str, position: Position) -> None:
        """
        Replace a node's position.

        Raises:
            UnknownNodeError: If the node does not exist
        """
        node = self._nodes.get(node_id)
        if node is None:
            raise UnknownNodeError(f"Unknown node: '{node_id}'")
        node.position = position

    def clear(self) -> None:
        self._nodes.clear()
        self._edges.clear()
