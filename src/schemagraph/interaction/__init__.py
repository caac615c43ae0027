"""Click-dispatch and copy/delete operations on the live graph."""

from .controller import COPY_OFFSET, DialogAction, InteractionController, InteractionState

__all__ = ["InteractionController", "InteractionState", "DialogAction", "COPY_OFFSET"]
