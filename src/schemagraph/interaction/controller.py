from __future__ import annotations

from dataclasses import replace
from enum import Enum

from schemagraph.ir.graph import EdgeModel, EdgeStyle, LineStyle, NodeModel
from schemagraph.store.base import GraphStore
from schemagraph.utils import get_logger

logger = get_logger(__name__)

COPY_OFFSET = (100.0, 100.0)
COPY_EDGE_STYLE = EdgeStyle(stroke="#000", stroke_width=2, dasharray=LineStyle.DASHED.dasharray)


class InteractionState(str, Enum):
    IDLE = "idle"
    SELECTED = "selected"


class DialogAction(str, Enum):
    COPY = "copy"
    DELETE = "delete"
    DISMISS = "dismiss"


class InteractionController:
    """
    Node selection state machine over a live graph store.

    Idle --click--> Selected(node_id) --copy/delete/dismiss--> Idle
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store
        self._selected: str | None = None

    @property
    def state(self) -> InteractionState:
        return InteractionState.IDLE if self._selected is None else InteractionState.SELECTED

    @property
    def selected(self) -> str | None:
        return self._selected

    def attach(self) -> None:
        """Listen to the store's node-click stream."""
        self.store.on_node_click(self.handle_click)

    def handle_click(self, node_id: str) -> bool:
        """Select a clicked node. Returns True when the action dialog should open."""
        if self.store.lookup_node(node_id) is None:
            logger.debug("Ignoring click on unknown node %s", node_id)
            return False
        self._selected = node_id
        return True

    def dispatch(self, action: DialogAction | str) -> None:
        action = DialogAction(action)
        if action is DialogAction.COPY:
            self.copy()
        elif action is DialogAction.DELETE:
            self.delete()
        else:
            self.dismiss()

    def copy(self) -> NodeModel | None:
        """Duplicate the selected node, offset by COPY_OFFSET, linked to it by a dashed edge."""
        node_id, self._selected = self._selected, None
        if node_id is None:
            return None
        original = self.store.lookup_node(node_id)
        if original is None:
            logger.info("Selected node %s no longer exists; nothing to copy", node_id)
            return None

        dx, dy = COPY_OFFSET
        with self.store.batch():
            copy_id = self.store.insert_node(replace(original, id=None, x=original.x + dx, y=original.y + dy))
            self.store.insert_edge(
                EdgeModel(
                    source=node_id,
                    target=copy_id,
                    line_style=LineStyle.DASHED,
                    style=COPY_EDGE_STYLE,
                )
            )
        logger.info("Copied node %s to %s", node_id, copy_id)
        return self.store.lookup_node(copy_id)

    def delete(self) -> bool:
        node_id, self._selected = self._selected, None
        if node_id is None:
            return False
        removed = self.store.remove_node(node_id)
        if removed:
            logger.info("Deleted node %s", node_id)
        return removed

    def dismiss(self) -> None:
        self._selected = None
