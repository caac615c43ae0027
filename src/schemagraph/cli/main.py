from __future__ import annotations

import json
from typing import Optional

import typer

from schemagraph.config import get_settings
from schemagraph.flows.pipeline import diagram_import_flow
from schemagraph.flows.session import ImportSession
from schemagraph.store import InMemoryGraphStore
from schemagraph.utils import configure_logging

app = typer.Typer(help="SchemaGraph CLI")


@app.callback()
def main_callback(log_level: Optional[str] = typer.Option(None, help="Override SCHEMAGRAPH_LOG_LEVEL")) -> None:
    configure_logging(log_level or get_settings().log_level)


@app.command()
def inspect(
    path: str = typer.Argument(..., help="XML or CSV diagram document"),
    media_type: Optional[str] = typer.Option(None, "--type", help="Declared media type, e.g. text/csv"),
) -> None:
    """
    Import a document into an in-memory graph and print what was installed.
    """
    store = InMemoryGraphStore()
    session = ImportSession(store)
    report = session.import_file(path, media_type)

    if session.banner:
        typer.echo(session.banner, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"nodes: {len(store.nodes)}")
    for node in store.nodes:
        typer.echo(
            f"  {node.id}  {node.shape.value}  '{node.label}'  at ({node.x:g}, {node.y:g})"
            f"  size {node.width:g}x{node.height:g}  fill {node.style.fill}"
        )
    typer.echo(f"edges: {len(store.edges)}")
    for edge in store.edges:
        typer.echo(f"  {edge.id}  {edge.source} -> {edge.target}  {edge.line_style.value}")
    if report and report.diagnostics:
        typer.echo(f"diagnostics: {len(report.diagnostics)}")
        for diag in report.diagnostics:
            typer.echo(f"  {diag}")


@app.command()
def run(path: str = typer.Argument(..., help="XML or CSV diagram document"),
        output_dir: Optional[str] = typer.Option(None, help="Directory to write import_report.json")) -> None:
    """
    Run the Prefect import flow on a document.
    """
    summary = diagram_import_flow(path=path, output_dir=output_dir)
    typer.echo(json.dumps(summary, indent=2))
    if not summary["ok"]:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
