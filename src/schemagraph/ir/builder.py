from __future__ import annotations

from dataclasses import dataclass, field

from schemagraph.errors import Diagnostic
from schemagraph.ir.graph import (
    DEFAULT_FILL,
    DEFAULT_HEIGHT,
    DEFAULT_STROKE,
    DEFAULT_STROKE_WIDTH,
    DEFAULT_WIDTH,
    EDGE_STROKE_WIDTH,
    RECTANGLE_HEIGHT,
    EdgeModel,
    EdgeStyle,
    GraphModel,
    LineStyle,
    NodeModel,
    NodeStyle,
    ShapeKind,
)
from schemagraph.parsers.base import RawEdge, RawGraph, RawNode
from schemagraph.utils import coerce_float, coerce_str, coerce_stroke_width, get_logger, parse_float

logger = get_logger(__name__)

# Edge line colour is a convention of the import source, not part of the record
EDGE_STROKE_BY_SOURCE = {
    "markup": "#000",
    "tabular": "purple",
}


@dataclass
class BuildResult:
    model: GraphModel
    diagnostics: list[Diagnostic] = field(default_factory=list)


def _positive(value: object, default: float) -> float:
    number = coerce_float(value, default)
    return number if number > 0 else default


class GraphModelBuilder:
    """Lift raw records into canonical node and edge models."""

    def build(self, raw: RawGraph) -> BuildResult:
        result = BuildResult(model=GraphModel(source_format=raw.source_format))
        result.diagnostics.extend(raw.diagnostics)

        nodes: dict[str, NodeModel] = {}
        for rn in raw.nodes:
            node = self._build_node(rn, result.diagnostics)
            if node is None:
                continue
            if node.id in nodes:
                # Last definition wins; dict keeps the first slot so order stays stable
                diag = Diagnostic(
                    code="EDUP_NODE",
                    message=f"Node '{node.id}' defined more than once; keeping the last definition",
                    severity="warning",
                    index=rn.index,
                )
                logger.warning("%s", diag)
                result.diagnostics.append(diag)
            nodes[node.id] = node
        result.model.nodes = list(nodes.values())

        stroke = EDGE_STROKE_BY_SOURCE.get(raw.source_format, DEFAULT_STROKE)
        result.model.edges = [self._build_edge(edge, stroke) for edge in raw.edges]

        logger.info(
            "Built %s model: %d node(s), %d edge(s), %d diagnostic(s)",
            raw.source_format,
            len(result.model.nodes),
            len(result.model.edges),
            len(result.diagnostics),
        )
        return result

    def _build_node(self, rn: RawNode, diagnostics: list[Diagnostic]) -> NodeModel | None:
        x, y = parse_float(rn.x), parse_float(rn.y)
        if x is None or y is None:
            diagnostics.append(
                self._defect("EINVALID_POSITION", f"Node '{rn.id}' has a non-numeric position ({rn.x!r}, {rn.y!r})", rn)
            )
            return None

        shape = ShapeKind.parse(rn.type)
        if shape is None:
            diagnostics.append(self._defect("EUNKNOWN_SHAPE", f"Node '{rn.id}' has unsupported type '{rn.type}'", rn))
            return None

        height = RECTANGLE_HEIGHT if shape is ShapeKind.RECTANGLE else _positive(rn.height, DEFAULT_HEIGHT)
        return NodeModel(
            id=rn.id,
            label=rn.label,
            x=x,
            y=y,
            shape=shape,
            width=_positive(rn.width, DEFAULT_WIDTH),
            height=height,
            style=NodeStyle(
                fill=coerce_str(rn.fill, DEFAULT_FILL),
                stroke=coerce_str(rn.stroke, DEFAULT_STROKE),
                stroke_width=coerce_stroke_width(rn.stroke_width, DEFAULT_STROKE_WIDTH),
            ),
        )

    def _build_edge(self, edge: RawEdge, stroke: str) -> EdgeModel:
        line_style = LineStyle.parse(edge.type)
        return EdgeModel(
            source=edge.source,
            target=edge.target,
            id=edge.id,
            label=edge.name,
            line_style=line_style,
            style=EdgeStyle(stroke=stroke, stroke_width=EDGE_STROKE_WIDTH, dasharray=line_style.dasharray),
        )

    @staticmethod
    def _defect(code: str, message: str, rn: RawNode) -> Diagnostic:
        diag = Diagnostic(code=code, message=message, index=rn.index)
        logger.warning("%s", diag)
        return diag
