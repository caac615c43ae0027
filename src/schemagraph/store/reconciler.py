from __future__ import annotations

from dataclasses import dataclass, field, replace

from schemagraph.errors import Diagnostic
from schemagraph.ir.graph import GraphModel
from schemagraph.store.base import GraphStore
from schemagraph.utils import get_logger

logger = get_logger(__name__)


@dataclass
class ReconcileReport:
    node_ids: list[str] = field(default_factory=list)
    edge_ids: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


class GraphReconciler:
    """Replace the contents of a graph store with a built model, nodes before edges."""

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def apply(self, model: GraphModel) -> ReconcileReport:
        report = ReconcileReport()
        with self.store.batch():
            self.store.clear()

            # requested id -> id the store actually used
            assigned: dict[str, str] = {}
            for node in model.nodes:
                node_id = self.store.insert_node(node)
                if node.id is not None:
                    assigned[node.id] = node_id
                report.node_ids.append(node_id)

            for index, edge in enumerate(model.edges, start=1):
                source, target = assigned.get(edge.source), assigned.get(edge.target)
                if source is None or target is None:
                    dangling = edge.source if source is None else edge.target
                    self._skip(
                        report,
                        "EDANGLING_EDGE",
                        f"Skipped edge {edge.source} -> {edge.target}: node '{dangling}' is not defined",
                        index,
                    )
                    continue
                edge_id = self.store.insert_edge(replace(edge, source=source, target=target))
                if edge_id is None:
                    self._skip(report, "EEDGE_REJECTED", f"Store rejected edge {edge.source} -> {edge.target}", index)
                    continue
                report.edge_ids.append(edge_id)

        logger.info(
            "Reconciled store: %d node(s), %d edge(s), %d edge(s) skipped",
            len(report.node_ids),
            len(report.edge_ids),
            len(report.diagnostics),
        )
        return report

    @staticmethod
    def _skip(report: ReconcileReport, code: str, message: str, index: int) -> None:
        diag = Diagnostic(code=code, message=message, index=index)
        logger.warning("%s", diag)
        report.diagnostics.append(diag)
