"""Shared fixtures for editor tests."""

import random

import pytest

from engine.editor.controller import EditController
from schemas.graph_data import Node, Edge, Position


def make_nodes(*ids):
    """Nodes labelled after their ids, all at the origin."""
    return [Node(id=i, label=i, position=Position(0, 0)) for i in ids]


def make_edges(*pairs):
    """Edges from (source, target) pairs with sequential ids."""
    return [
        Edge(id=f"e{n}", source=s, target=t)
        for n, (s, t) in enumerate(pairs, start=1)
    ]


@pytest.fixture
def controller():
    return EditController(rng=random.Random(42))
