from __future__ import annotations

import csv
import io
import re
from collections.abc import Iterator

from schemagraph.errors import Diagnostic, MalformedInputError
from schemagraph.parsers.base import Parser, RawEdge, RawGraph, RawNode
from schemagraph.utils import coerce_str, get_logger

logger = get_logger(__name__)

SECTION_SEPARATOR = "---"
_SEPARATOR_RE = re.compile(r"^[ \t]*---[ \t]*\r?$", re.MULTILINE)

_NODE_REQUIRED = ("id", "label", "x", "y", "type")
_EDGE_REQUIRED = ("source", "target")


def split_sections(text: str) -> tuple[str, str]:
    """Split the blob on the first separator line into (nodes, edges) sections."""
    match = _SEPARATOR_RE.search(text)
    if match is None:
        raise MalformedInputError(
            f'Invalid CSV format: nodes and edges must be separated by a "{SECTION_SEPARATOR}" line',
            code="ENO_SEPARATOR",
        )
    nodes_text = text[: match.start()].strip()
    edges_text = text[match.end() :].strip()
    if not nodes_text or not edges_text:
        raise MalformedInputError(
            "Invalid CSV format: both the node and the edge section need a header row",
            code="EEMPTY_SECTION",
        )
    return nodes_text, edges_text


def _rows(section: str) -> Iterator[tuple[int, dict[str, str]]]:
    reader = csv.DictReader(io.StringIO(section), skipinitialspace=True)
    if reader.fieldnames:
        reader.fieldnames = [name.strip() for name in reader.fieldnames]
    index = 0
    for row in reader:
        # Cells past the header land under the None key; unknown columns are ignored anyway
        cells = {k: (v or "").strip() for k, v in row.items() if k is not None and isinstance(v, str)}
        if not any(cells.values()):
            continue
        index += 1
        yield index, cells


class TabularParser(Parser):
    """
    Parse a two-section CSV document.
    A row missing a mandatory field is skipped with a diagnostic; only a missing
    section separator fails the whole parse.
    """

    source_format = "tabular"

    def parse(self, text: str) -> RawGraph:
        nodes_text, edges_text = split_sections(text)
        raw = RawGraph(source_format=self.source_format)

        for index, cells in _rows(nodes_text):
            missing = [f for f in _NODE_REQUIRED if not cells.get(f)]
            if missing:
                raw.diagnostics.append(self._missing("node", index, missing))
                continue
            raw.nodes.append(
                RawNode(
                    id=cells["id"],
                    label=cells["label"],
                    x=cells["x"],
                    y=cells["y"],
                    type=cells["type"],
                    fill=cells.get("fill"),
                    stroke=cells.get("stroke"),
                    stroke_width=cells.get("strokeWidth"),
                    width=cells.get("width"),
                    height=cells.get("height"),
                    index=index,
                )
            )

        for index, cells in _rows(edges_text):
            missing = [f for f in _EDGE_REQUIRED if not cells.get(f)]
            if missing:
                raw.diagnostics.append(self._missing("edge", index, missing))
                continue
            raw.edges.append(
                RawEdge(
                    source=cells["source"],
                    target=cells["target"],
                    id=cells.get("id") or None,
                    name=cells.get("name") or None,
                    type=coerce_str(cells.get("type"), "solid"),
                    index=index,
                )
            )

        logger.debug(
            "Parsed %d node(s), %d edge(s), %d skipped row(s) from tabular input",
            len(raw.nodes),
            len(raw.edges),
            len(raw.diagnostics),
        )
        return raw

    @staticmethod
    def _missing(kind: str, index: int, fields: list[str]) -> Diagnostic:
        diag = Diagnostic(
            code="EMISSING_FIELD",
            message=f"Skipped {kind} row {index}: missing {', '.join(fields)}",
            index=index,
        )
        logger.warning("%s", diag)
        return diag
