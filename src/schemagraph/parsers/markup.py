from __future__ import annotations

import xml.etree.ElementTree as ET

from schemagraph.errors import MalformedInputError
from schemagraph.parsers.base import Parser, RawEdge, RawGraph, RawNode
from schemagraph.utils import coerce_str, get_logger

logger = get_logger(__name__)

_NODE_REQUIRED = ("id", "label", "x", "y", "type")
_EDGE_REQUIRED = ("source", "target")


def _local_name(tag: str) -> str:
    # "{namespace}node" -> "node"
    return tag.rsplit("}", 1)[-1]


def _require(elem: ET.Element, names: tuple[str, ...], kind: str, index: int) -> None:
    missing = [n for n in names if not (elem.get(n) or "").strip()]
    if missing:
        raise MalformedInputError(
            f"{kind} element {index} is missing required attribute(s): {', '.join(missing)}",
            code="EMISSING_ATTRIBUTE",
            index=index,
        )


class MarkupParser(Parser):
    """Parse an XML diagram document into raw node and edge records."""

    source_format = "markup"

    def parse(self, text: str) -> RawGraph:
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise MalformedInputError(
                f"Document is not well-formed XML: {exc}", code="EMALFORMED_XML"
            ) from exc

        raw = RawGraph(source_format=self.source_format)
        # root.iter() walks in document order, root included
        for elem in root.iter():
            tag = _local_name(elem.tag) if isinstance(elem.tag, str) else ""
            if tag == "node":
                raw.nodes.append(self._parse_node(elem, len(raw.nodes) + 1))
            elif tag == "edge":
                raw.edges.append(self._parse_edge(elem, len(raw.edges) + 1))

        logger.debug("Parsed %d node(s) and %d edge(s) from markup", len(raw.nodes), len(raw.edges))
        return raw

    def _parse_node(self, elem: ET.Element, index: int) -> RawNode:
        _require(elem, _NODE_REQUIRED, "node", index)
        return RawNode(
            id=elem.get("id", "").strip(),
            label=elem.get("label", ""),
            x=elem.get("x"),
            y=elem.get("y"),
            type=elem.get("type", "").strip(),
            fill=elem.get("fill"),
            stroke=elem.get("stroke"),
            stroke_width=elem.get("strokeWidth"),
            width=elem.get("width"),
            height=elem.get("height"),
            index=index,
        )

    def _parse_edge(self, elem: ET.Element, index: int) -> RawEdge:
        _require(elem, _EDGE_REQUIRED, "edge", index)
        return RawEdge(
            source=elem.get("source", "").strip(),
            target=elem.get("target", "").strip(),
            id=elem.get("id") or None,
            name=elem.get("name") or None,
            type=coerce_str(elem.get("type"), "solid"),
            index=index,
        )
