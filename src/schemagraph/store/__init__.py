"""Live graph store interface, in-memory implementation, and reconciler."""

from .base import GraphStore, NodeClickHandler
from .memory import InMemoryGraphStore
from .reconciler import GraphReconciler, ReconcileReport

__all__ = [
    "GraphStore",
    "NodeClickHandler",
    "InMemoryGraphStore",
    "GraphReconciler",
    "ReconcileReport",
]
