"""
Editor Schemas

Data types for nodes, edges and validation results.
"""

from schemas.graph_data import (
    Position,
    Node,
    Edge,
    ValidationResult,
    EditorState,
    DEFAULT_MARKER_END,
    DEFAULT_EDGE_STYLE,
)

__all__ = [
    "Position",
    "Node",
    "Edge",
    "ValidationResult",
    "EditorState",
    "DEFAULT_MARKER_END",
    "DEFAULT_EDGE_STYLE",
]
