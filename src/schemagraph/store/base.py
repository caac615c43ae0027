from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Protocol

from schemagraph.ir.graph import EdgeModel, NodeModel

NodeClickHandler = Callable[[str], None]


class GraphStore(Protocol):
    """Capabilities the import pipeline and the interaction controller need from a live graph."""

    def clear(self) -> None: ...

    def insert_node(self, node: NodeModel) -> str:
        """Add a node and return the id actually used (echoes node.id when it is free)."""
        ...

    def insert_edge(self, edge: EdgeModel) -> str | None:
        """Add an edge; returns None instead of raising when an endpoint is absent."""
        ...

    def remove_node(self, node_id: str) -> bool: ...

    def lookup_node(self, node_id: str) -> NodeModel | None: ...

    def batch(self) -> AbstractContextManager[None]: ...

    def on_node_click(self, handler: NodeClickHandler) -> None: ...
