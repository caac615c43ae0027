from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFAULT_FILL = "#3366cc"
DEFAULT_STROKE = "#000"
DEFAULT_STROKE_WIDTH = 1
DEFAULT_WIDTH = 100.0
DEFAULT_HEIGHT = 100.0
RECTANGLE_HEIGHT = 50.0

EDGE_STROKE_WIDTH = 2
MARKER_COLOR = "purple"
MARKER_SIZE = 8


class ShapeKind(str, Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    POLYGON = "polygon"

    @classmethod
    def parse(cls, value: str) -> ShapeKind | None:
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class LineStyle(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"

    @classmethod
    def parse(cls, value: str | None) -> LineStyle:
        """Unknown or missing edge types render as solid lines."""
        if not value:
            return cls.SOLID
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.SOLID

    @property
    def dasharray(self) -> str | None:
        return _DASHARRAY.get(self)


_DASHARRAY = {LineStyle.DASHED: "5, 5", LineStyle.DOTTED: "2, 2"}


@dataclass(frozen=True)
class NodeStyle:
    fill: str = DEFAULT_FILL
    stroke: str = DEFAULT_STROKE
    stroke_width: int = DEFAULT_STROKE_WIDTH


@dataclass(frozen=True)
class EdgeStyle:
    stroke: str = DEFAULT_STROKE
    stroke_width: int = EDGE_STROKE_WIDTH
    dasharray: str | None = None


@dataclass(frozen=True)
class NodeModel:
    """
    Canonical node. `id` is None only on a node handed to a store to request a
    store-assigned identifier.
    """

    id: str | None
    label: str
    x: float
    y: float
    shape: ShapeKind
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    style: NodeStyle = field(default_factory=NodeStyle)

    def attrs(self) -> dict[str, Any]:
        return {
            "body": {
                "fill": self.style.fill,
                "stroke": self.style.stroke,
                "strokeWidth": self.style.stroke_width,
            },
            "label": {"text": self.label},
        }


def _marker(shape: str) -> dict[str, Any]:
    return {
        "name": "marker",
        "args": {"size": MARKER_SIZE, "fill": MARKER_COLOR, "stroke": MARKER_COLOR, "shape": shape},
    }


@dataclass(frozen=True)
class EdgeModel:
    source: str
    target: str
    id: str | None = None
    label: str | None = None
    line_style: LineStyle = LineStyle.SOLID
    style: EdgeStyle = field(default_factory=EdgeStyle)

    # Marker decoration is fixed by the rendering layer, not read from input
    source_marker = "circle"
    target_marker = "diamond"

    def attrs(self) -> dict[str, Any]:
        line: dict[str, Any] = {"stroke": self.style.stroke, "strokeWidth": self.style.stroke_width}
        if self.style.dasharray:
            line["strokeDasharray"] = self.style.dasharray
        payload: dict[str, Any] = {
            "line": line,
            "sourceMarker": _marker(self.source_marker),
            "targetMarker": _marker(self.target_marker),
        }
        if self.label:
            payload["label"] = {"text": self.label, "fill": "#333", "fontSize": 12}
        return payload


@dataclass
class GraphModel:
    source_format: str
    nodes: list[NodeModel] = field(default_factory=list)
    edges: list[EdgeModel] = field(default_factory=list)

    def node_ids(self) -> set[str]:
        return {n.id for n in self.nodes if n.id is not None}
