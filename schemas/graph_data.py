"""
Graph Data Types

Core graph types shared by the editor engine and the HTTP surface.
Renderers receive these as plain dictionaries via to_dict().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List
import json


DEFAULT_MARKER_END = {
    "type": "arrowclosed",
    "width": 20,
    "height": 20,
    "color": "#666",
}

DEFAULT_EDGE_STYLE = {
    "strokeWidth": 2,
    "stroke": "#666",
}


@dataclass
class Position:
    """2-D canvas coordinate"""
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Position":
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass
class Node:
    """A named pipeline step on the canvas"""
    id: str
    label: str
    position: Position
    selected: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "id": self.id,
            "label": self.label,
            "position": self.position.to_dict(),
            "selected": self.selected,
        }

    def to_json(self) -> str:
        """Serialize to JSON string"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        """Create Node from dictionary"""
        return cls(
            id=data["id"],
            label=data["label"],
            position=Position.from_dict(data["position"]),
            selected=data.get("selected", False),
        )


@dataclass
class Edge:
    """
    Directed connection between two nodes.

    The presentation attributes (animated, marker_end, style) are stored
    for the renderer only; nothing in the engine reads them.
    """
    id: str
    source: str
    target: str
    selected: bool = False
    animated: bool = True
    marker_end: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_MARKER_END))
    style: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_EDGE_STYLE))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "selected": self.selected,
            "animated": self.animated,
            "marker_end": dict(self.marker_end),
            "style": dict(self.style),
        }

    def to_json(self) -> str:
        """Serialize to JSON string"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        """Create Edge from dictionary"""
        return cls(
            id=data["id"],
            source=data["source"],
            target=data["target"],
            selected=data.get("selected", False),
            animated=data.get("animated", True),
            marker_end=dict(data.get("marker_end", DEFAULT_MARKER_END)),
            style=dict(data.get("style", DEFAULT_EDGE_STYLE)),
        )


@dataclass
class ValidationResult:
    """Verdict of the validation engine"""
    is_valid: bool
    issues: List[str] = field(default_factory=list)

    def summary(self) -> str:
        """Status badge text"""
        return "Valid DAG" if self.is_valid else "Invalid DAG"

    def issues_text(self) -> str:
        """Issues joined for a single status line"""
        return ", ".join(self.issues)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "issues": list(self.issues),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ValidationResult":
        return cls(is_valid=data["is_valid"], issues=list(data.get("issues", [])))


@dataclass
class EditorState:
    """Snapshot handed to renderers after every change"""
    nodes: List[Node]
    edges: List[Edge]
    validation: ValidationResult

    @property
    def stats(self) -> Dict[str, int]:
        return {"nodes": len(self.nodes), "edges": len(self.edges)}

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
            "validation": self.validation.to_dict(),
            "stats": self.stats,
        }
