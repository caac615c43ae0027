from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import replace

from schemagraph.ir.graph import EdgeModel, NodeModel
from schemagraph.store.base import NodeClickHandler
from schemagraph.utils import get_logger

logger = get_logger(__name__)


class InMemoryGraphStore:
    """
    Dict-backed graph store standing in for the rendering engine.
    Node and edge dicts keep insertion order. Change listeners fire once per
    mutation, or once per outermost batch().
    """

    def __init__(self) -> None:
        self._nodes: dict[str, NodeModel] = {}
        self._edges: dict[str, EdgeModel] = {}
        self._ids = itertools.count(1)
        self._batch_depth = 0
        self._dirty = False
        self._listeners: list[Callable[[], None]] = []
        self._click_handlers: list[NodeClickHandler] = []

    # -- queries ---------------------------------------------------------

    @property
    def nodes(self) -> list[NodeModel]:
        return list(self._nodes.values())

    @property
    def edges(self) -> list[EdgeModel]:
        return list(self._edges.values())

    def lookup_node(self, node_id: str) -> NodeModel | None:
        return self._nodes.get(node_id)

    def lookup_edge(self, edge_id: str) -> EdgeModel | None:
        return self._edges.get(edge_id)

    def incident_edges(self, node_id: str) -> list[EdgeModel]:
        return [e for e in self._edges.values() if node_id in (e.source, e.target)]

    # -- mutations -------------------------------------------------------

    def clear(self) -> None:
        self._nodes.clear()
        self._edges.clear()
        self._changed()

    def insert_node(self, node: NodeModel) -> str:
        node_id = node.id if node.id and node.id not in self._nodes else self._next_id("node")
        self._nodes[node_id] = replace(node, id=node_id)
        self._changed()
        return node_id

    def insert_edge(self, edge: EdgeModel) -> str | None:
        missing = [end for end in (edge.source, edge.target) if end not in self._nodes]
        if missing:
            logger.warning("Rejected edge %s -> %s: unknown node(s) %s", edge.source, edge.target, missing)
            return None
        edge_id = edge.id if edge.id and edge.id not in self._edges else self._next_id("edge")
        self._edges[edge_id] = replace(edge, id=edge_id)
        self._changed()
        return edge_id

    def remove_node(self, node_id: str) -> bool:
        if self._nodes.pop(node_id, None) is None:
            return False
        for edge in self.incident_edges(node_id):
            del self._edges[edge.id]
        self._changed()
        return True

    @contextmanager
    def batch(self) -> Iterator[None]:
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._dirty:
                self._notify()

    # -- events ----------------------------------------------------------

    def subscribe(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def on_node_click(self, handler: NodeClickHandler) -> None:
        self._click_handlers.append(handler)

    def click(self, node_id: str) -> None:
        """Deliver a node-click as the renderer would."""
        if node_id not in self._nodes:
            return
        for handler in list(self._click_handlers):
            handler(node_id)

    def _next_id(self, prefix: str) -> str:
        while True:
            candidate = f"{prefix}-{next(self._ids)}"
            if candidate not in self._nodes and candidate not in self._edges:
                return candidate

    def _changed(self) -> None:
        if self._batch_depth:
            self._dirty = True
        else:
            self._notify()

    def _notify(self) -> None:
        self._dirty = False
        for listener in list(self._listeners):
            listener()
