"""
DAG Module

Graph model, validation and layout for the pipeline editor.
"""

from .graph import GraphModel
from .validator import validate, has_cycle, find_unconnected
from .layout import layout
from .errors import (
    RejectedOperation,
    EmptyLabelError,
    SelfLoopError,
    UnknownNodeError,
    UnknownEdgeError,
    DuplicateIdError,
    EmptyGraphError,
)

__all__ = [
    "GraphModel",
    "validate",
    "has_cycle",
    "find_unconnected",
    "layout",
    "RejectedOperation",
    "EmptyLabelError",
    "SelfLoopError",
    "UnknownNodeError",
    "UnknownEdgeError",
    "DuplicateIdError",
    "EmptyGraphError",
]
