from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from schemagraph.config import Settings, get_settings
from schemagraph.errors import Diagnostic, MalformedInputError, ReadFailureError, UnsupportedInputError
from schemagraph.flows.events import (
    DialogChoice,
    EventQueue,
    FileLoaded,
    FileReadFailed,
    FileSelected,
    NodeClicked,
)
from schemagraph.interaction.controller import DialogAction, InteractionController, InteractionState
from schemagraph.ir.builder import GraphModelBuilder
from schemagraph.parsers.base import Parser
from schemagraph.plugins.registry import Registry, global_registry
from schemagraph.store.base import GraphStore
from schemagraph.store.reconciler import GraphReconciler
from schemagraph.utils import get_logger

logger = get_logger(__name__)

MARKUP_MEDIA_TYPES = {"text/xml", "application/xml"}
TABULAR_MEDIA_TYPES = {"text/csv"}

MSG_UNSUPPORTED = "Unsupported file type. Please upload XML or CSV files."
MSG_READ_FAILED = "Error reading the file. Please try again."
MSG_MALFORMED = {
    "markup": "Error processing the XML file. Please check the file format and try again.",
    "tabular": 'Invalid CSV format. Please ensure nodes and edges are separated by "---".',
}


@dataclass
class ImportReport:
    source_format: str | None
    node_count: int = 0
    edge_count: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)
    error: str | None = None
    error_code: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_format": self.source_format,
            "ok": self.ok,
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "error": self.error,
            "error_code": self.error_code,
            "diagnostics": [
                {"code": d.code, "message": d.message, "severity": d.severity, "index": d.index}
                for d in self.diagnostics
            ],
        }


def resolve_kind(name: str, media_type: str | None, settings: Settings | None = None) -> str:
    """Pick the parser kind from the declared media type, falling back to the file suffix."""
    settings = settings or get_settings()
    if media_type:
        media_type = media_type.split(";", 1)[0].strip().lower()
        if media_type in MARKUP_MEDIA_TYPES:
            return "markup"
        if media_type in TABULAR_MEDIA_TYPES:
            return "tabular"
    else:
        suffix = Path(name).suffix.lower()
        if suffix in settings.markup_suffixes:
            return "markup"
        if suffix in settings.tabular_suffixes:
            return "tabular"
    raise UnsupportedInputError(f"Unsupported input '{name}' ({media_type or 'no media type'})")


def read_text(path: Path, encoding: str) -> str:
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise ReadFailureError(f"Could not read {path}: {exc}") from exc
    # A byte-order mark survives when the configured encoding is plain utf-8
    return text.removeprefix("\ufeff")


class ImportSession:
    """
    User-facing surface over one live store: file imports, the error banner
    and the node action dialog, all driven through a single event queue.
    """

    def __init__(
        self,
        store: GraphStore,
        settings: Settings | None = None,
        registry: Registry = global_registry,
    ) -> None:
        self.store = store
        self.settings = settings or get_settings()
        self.registry = registry
        self.controller = InteractionController(store)
        self.builder = GraphModelBuilder()
        self.banner: str | None = None
        self.last_report: ImportReport | None = None

        self.queue = EventQueue()
        self.queue.register(FileSelected, self._on_file_selected)
        self.queue.register(FileLoaded, self._on_file_loaded)
        self.queue.register(FileReadFailed, self._on_read_failed)
        self.queue.register(NodeClicked, self._on_node_clicked)
        self.queue.register(DialogChoice, self._on_dialog_choice)
        store.on_node_click(lambda node_id: self.emit(NodeClicked(node_id)))

    @property
    def dialog_open(self) -> bool:
        return self.controller.state is InteractionState.SELECTED

    def post(self, event: Any) -> None:
        self.queue.post(event)

    def process(self) -> int:
        return self.queue.process()

    def emit(self, event: Any) -> None:
        self.post(event)
        self.process()

    # -- convenience entry points ----------------------------------------

    def import_file(self, path: str | Path, media_type: str | None = None) -> ImportReport | None:
        self.emit(FileSelected(Path(path), media_type))
        return self.last_report

    def choose(self, action: DialogAction | str) -> None:
        self.emit(DialogChoice(DialogAction(action)))

    # -- handlers --------------------------------------------------------

    def _on_file_selected(self, event: FileSelected) -> None:
        try:
            content = read_text(event.path, self.settings.encoding)
        except ReadFailureError as exc:
            self.post(FileReadFailed(name=str(event.path), reason=str(exc)))
            return
        self.post(FileLoaded(content=content, name=str(event.path), media_type=event.media_type))

    def _on_read_failed(self, event: FileReadFailed) -> None:
        logger.error("Read failed for %s: %s", event.name, event.reason)
        self._fail(None, MSG_READ_FAILED, "EREAD")

    def _on_file_loaded(self, event: FileLoaded) -> None:
        try:
            kind = resolve_kind(event.name, event.media_type, self.settings)
        except UnsupportedInputError as exc:
            logger.error("%s", exc)
            self._fail(None, MSG_UNSUPPORTED, exc.code)
            return

        parser: Parser = self.registry.create("parser", kind)
        try:
            raw = parser.parse(event.content)
        except MalformedInputError as exc:
            logger.error("Import of %s failed [%s]: %s", event.name or kind, exc.code, exc)
            self._fail(kind, MSG_MALFORMED[kind], exc.code)
            return

        built = self.builder.build(raw)
        # The model is complete; only now is the live store touched
        self.controller.dismiss()
        reconciled = GraphReconciler(self.store).apply(built.model)

        self.banner = None
        self.last_report = ImportReport(
            source_format=kind,
            node_count=len(reconciled.node_ids),
            edge_count=len(reconciled.edge_ids),
            diagnostics=built.diagnostics + reconciled.diagnostics,
        )

    def _on_node_clicked(self, event: NodeClicked) -> None:
        self.controller.handle_click(event.node_id)

    def _on_dialog_choice(self, event: DialogChoice) -> None:
        self.controller.dispatch(event.action)

    def _fail(self, kind: str | None, message: str, code: str) -> None:
        self.banner = message
        self.last_report = ImportReport(source_format=kind, error=message, error_code=code)
