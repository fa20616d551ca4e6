"""
Edit Controller

Owns the graph model and applies every user edit to it.
After each applied edit the graph is re-validated and subscribed
renderers receive a fresh EditorState.
"""

import copy
import logging
import random
import threading
from typing import Callable, List, Optional, TypeVar

from schemas.graph_data import Node, Edge, Position, EditorState
from ..config.loader import EditorConfig
from ..dag.graph import GraphModel
from ..dag.layout import layout
from ..dag.validator import validate
from ..dag.errors import (
    RejectedOperation,
    EmptyLabelError,
    SelfLoopError,
    UnknownNodeError,
    UnknownEdgeError,
    EmptyGraphError,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[EditorState], None]
T = TypeVar("T")

FIRST_NODE_ID = 1


class EditController:
    """
    Serializes edits against a GraphModel and keeps the verdict current.

    Every public operation runs mutate-then-validate under one lock, so
    the validation result always reflects the latest edit. Malformed
    requests (empty label, self-loop, unknown id) are logged and
    reported as rejected instead of raised.

    Example usage:
        controller = EditController()
        controller.subscribe(lambda state: print(state.validation.summary()))

        ingest = controller.add_node("ingest")
        transform = controller.add_node("transform")
        controller.connect(ingest, transform)

        print(controller.validation.is_valid)  # True
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize an empty editor.

        Args:
            config: Editor config (layout grid, spawn region, id prefix)
            rng: Random source for spawn positions; seeded from config if omitted
        """
        self.config = config or EditorConfig()
        self.rng = rng or random.Random(self.config.seed)
        self._graph = GraphModel()

        self._lock = threading.RLock()
        self._listeners: List[StateListener] = []
        self._notifying = False
        self._notify_pending = False
        self._next_node_id = FIRST_NODE_ID
        self._next_edge_seq = 1
        self.validation = validate([], [])

        logger.info("Initialized EditController")

    # ------------------------------------------------------------------
    # Renderer access
    # ------------------------------------------------------------------

    @property
    def state(self) -> EditorState:
        """Detached snapshot of nodes, edges and the current verdict"""
        with self._lock:
            return EditorState(
                nodes=copy.deepcopy(self._graph.nodes),
                edges=copy.deepcopy(self._graph.edges),
                validation=copy.deepcopy(self.validation),
            )

    @property
    def nodes(self) -> List[Node]:
        """Detached copies of the nodes in graph order"""
        with self._lock:
            return copy.deepcopy(self._graph.nodes)

    @property
    def edges(self) -> List[Edge]:
        """Detached copies of the edges in graph order"""
        with self._lock:
            return copy.deepcopy(self._graph.edges)

    @property
    def node_count(self) -> int:
        return self._graph.node_count

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    def get_node(self, node_id: str) -> Optional[Node]:
        with self._lock:
            return copy.deepcopy(self._graph.get_node(node_id))

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        with self._lock:
            return copy.deepcopy(self._graph.get_edge(edge_id))

    def subscribe(self, listener: StateListener) -> None:
        """Register a callable that receives the state after every applied edit"""
        with self._lock:
            self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Edit operations
    # ------------------------------------------------------------------

    def add_node(self, label: str) -> Optional[str]:
        """
        Create a node at a random spot in the spawn region.

        Args:
            label: Display name; must contain a non-space character

        Returns:
            New node id, or None if rejected
        """
        return self._apply("add_node", lambda: self._add_node(label))

    def connect(self, source_id: str, target_id: str) -> Optional[str]:
        """
        Create an edge source -> target with default presentation attributes.

        Returns:
            New edge id, or None if rejected (self-loop or unknown node)
        """
        return self._apply("connect", lambda: self._connect(source_id, target_id))

    def delete_selection(self) -> bool:
        """
        Delete selected edges, selected nodes and every edge touching a
        selected node.
        """
        return self._apply("delete_selection", self._delete_selection) is not None

    def delete_edge(self, edge_id: str) -> bool:
        """Delete exactly one edge"""
        return self._apply("delete_edge", lambda: self._graph.remove_edge(edge_id)) is not None

    def apply_layout(self) -> bool:
        """Reposition all nodes on the layout grid; edges are unchanged"""
        return self._apply("apply_layout", self._apply_layout) is not None

    def clear(self) -> bool:
        """Remove everything and restart node numbering"""
        return self._apply("clear", self._clear) is not None

    def select_node(self, node_id: str, selected: bool = True) -> bool:
        return self._apply("select_node", lambda: self._set_node_selected(node_id, selected)) is not None

    def select_edge(self, edge_id: str, selected: bool = True) -> bool:
        return self._apply("select_edge", lambda: self._set_edge_selected(edge_id, selected)) is not None

    def clear_selection(self) -> bool:
        return self._apply("clear_selection", self._clear_selection) is not None

    def move_node(self, node_id: str, x: float, y: float) -> bool:
        """Store a position set by dragging on the canvas"""
        return self._apply("move_node", lambda: self._move_node(node_id, x, y)) is not None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply(self, operation: str, mutate: Callable[[], T]) -> Optional[T]:
        """
        Run one mutation, then re-validate and notify.

        Returns the mutation's result, or None if it was rejected.
        """
        with self._lock:
            try:
                result = mutate()
            except RejectedOperation as e:
                logger.warning(f"Rejected {operation}: {e}")
                return None

            self.validation = validate(self._graph.nodes, self._graph.edges)
            logger.info(
                f"Applied {operation}: {self._graph.node_count} nodes, "
                f"{self._graph.edge_count} edges, {self.validation.summary()}"
            )
            self._notify()
            return result

    def _notify(self) -> None:
        """
        Deliver the current state to every listener.

        A listener may itself edit the graph. That nested edit only marks
        a newer state as pending; the outer round then restarts with a
        fresh snapshot, so each listener's last delivery is the latest state.
        """
        if self._notifying:
            self._notify_pending = True
            return

        self._notifying = True
        try:
            while True:
                self._notify_pending = False
                state = self.state
                for listener in list(self._listeners):
                    if self._notify_pending:
                        break
                    try:
                        listener(state)
                    except Exception as e:
                        logger.error(f"State listener failed: {e}", exc_info=True)
                if not self._notify_pending:
                    break
        finally:
            self._notifying = False

    def _add_node(self, label: str) -> str:
        if not label or not label.strip():
            raise EmptyLabelError("Node label is empty")

        spawn = self.config.spawn
        node = Node(
            id=f"{self.config.node_id_prefix}-{self._next_node_id}",
            label=label,
            position=Position(
                x=self.rng.random() * spawn.width + spawn.min_x,
                y=self.rng.random() * spawn.height + spawn.min_y,
            ),
        )
        self._graph.add_node(node)
        self._next_node_id += 1
        return node.id

    def _connect(self, source_id: str, target_id: str) -> str:
        if source_id == target_id:
            raise SelfLoopError(f"Cannot connect '{source_id}' to itself")
        for node_id in (source_id, target_id):
            if not self._graph.has_node(node_id):
                raise UnknownNodeError(f"Unknown node: '{node_id}'")

        edge = Edge(
            id=f"edge-{source_id}-{target_id}-{self._next_edge_seq}",
            source=source_id,
            target=target_id,
        )
        self._graph.add_edge(edge)
        self._next_edge_seq += 1
        return edge.id

    def _delete_selection(self) -> List[str]:
        selected_nodes = {n.id for n in self._graph.iter_nodes() if n.selected}
        selected_edges = [e.id for e in self._graph.iter_edges() if e.selected]

        removed_edges = self._graph.remove_edges(selected_edges)
        # Cascades to edges touching the removed nodes
        removed_nodes = self._graph.remove_nodes(selected_nodes)

        logger.debug(
            f"Deleted {len(removed_nodes)} selected nodes and "
            f"{len(removed_edges)} selected edges"
        )
        return [n.id for n in removed_nodes]

    def _apply_layout(self) -> int:
        if self._graph.node_count == 0:
            raise EmptyGraphError("Nothing to lay out")

        laid_out, _ = layout(self._graph.nodes, self._graph.edges, self.config.layout)
        for node in laid_out:
            self._graph.set_position(node.id, node.position)
        return len(laid_out)

    def _clear(self) -> int:
        self._graph.clear()
        self._next_node_id = FIRST_NODE_ID
        self._next_edge_seq = 1
        return 0

    def _set_node_selected(self, node_id: str, selected: bool) -> str:
        node = self._graph.get_node(node_id)
        if node is None:
            raise UnknownNodeError(f"Unknown node: '{node_id}'")
        node.selected = selected
        return node_id

    def _set_edge_selected(self, edge_id: str, selected: bool) -> str:
        edge = self._graph.get_edge(edge_id)
        if edge is None:
            raise UnknownEdgeError(f"Unknown edge: '{edge_id}'")
        edge.selected = selected
        return edge_id

    def _move_node(self, node_id: str, x: float, y: float) -> str:
        self._graph.set_position(node_id, Position(x=x, y=y))
        return node_id

    def _clear_selection(self) -> int:
        for node in self._graph.iter_nodes():
            node.selected = False
        for edge in self._graph.iter_edges():
            edge.selected = False
        return 0
