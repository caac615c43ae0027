from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from prefect import flow, get_run_logger, task

from schemagraph.config import get_settings
from schemagraph.errors import SchemaGraphError
from schemagraph.flows.session import ImportReport, read_text, resolve_kind
from schemagraph.ir import BuildResult, GraphModel, GraphModelBuilder
from schemagraph.parsers import RawGraph
from schemagraph.plugins.registry import global_registry
from schemagraph.store import GraphReconciler, InMemoryGraphStore, ReconcileReport


@task
def read_document(path: str) -> str:
    logger = get_run_logger()
    text = read_text(Path(path), get_settings().encoding)
    logger.info(f"Read {len(text)} characters from {path}")
    return text


@task
def parse_document(text: str, kind: str) -> RawGraph:
    logger = get_run_logger()
    logger.info(f"Parsing {kind} document")
    return global_registry.create("parser", kind).parse(text)


@task
def build_model(raw: RawGraph) -> BuildResult:
    logger = get_run_logger()
    result = GraphModelBuilder().build(raw)
    logger.info(f"Built {len(result.model.nodes)} node(s) and {len(result.model.edges)} edge(s)")
    return result


@task
def reconcile_model(model: GraphModel) -> ReconcileReport:
    """Apply the model to a fresh in-memory store; the run is headless."""
    logger = get_run_logger()
    report = GraphReconciler(InMemoryGraphStore()).apply(model)
    for diag in report.diagnostics:
        logger.warning(str(diag))
    return report


@task
def export_report(output_dir: str, report: dict[str, Any]) -> str:
    out_path = Path(output_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    report_file = out_path / "import_report.json"
    report_file.write_text(json.dumps(report, indent=2))
    return str(report_file)


@flow(name="schemagraph-import")
def diagram_import_flow(path: str, output_dir: str | None = None, media_type: str | None = None) -> dict[str, Any]:
    """
    Orchestrates the import pipeline:
    read → parse → build → reconcile → report
    """
    logger = get_run_logger()
    kind: str | None = None
    try:
        kind = resolve_kind(path, media_type)
        text = read_document(path)
        raw = parse_document(text, kind)
        built = build_model(raw)
        reconciled = reconcile_model(built.model)
        report = ImportReport(
            source_format=kind,
            node_count=len(reconciled.node_ids),
            edge_count=len(reconciled.edge_ids),
            diagnostics=built.diagnostics + reconciled.diagnostics,
        )
    except SchemaGraphError as exc:
        logger.error(f"Import of {path} failed [{exc.code}]: {exc}")
        report = ImportReport(source_format=kind, error=str(exc), error_code=exc.code)

    summary = report.to_dict()
    if output_dir:
        summary["report_path"] = export_report(output_dir, summary)
    return summary
