"""Canonical graph model and the builder that produces it."""

from .builder import EDGE_STROKE_BY_SOURCE, BuildResult, GraphModelBuilder
from .graph import (
    DEFAULT_FILL,
    DEFAULT_STROKE,
    DEFAULT_STROKE_WIDTH,
    RECTANGLE_HEIGHT,
    EdgeModel,
    EdgeStyle,
    GraphModel,
    LineStyle,
    NodeModel,
    NodeStyle,
    ShapeKind,
)

__all__ = [
    "NodeModel",
    "EdgeModel",
    "NodeStyle",
    "EdgeStyle",
    "GraphModel",
    "ShapeKind",
    "LineStyle",
    "DEFAULT_FILL",
    "DEFAULT_STROKE",
    "DEFAULT_STROKE_WIDTH",
    "RECTANGLE_HEIGHT",
    "EDGE_STROKE_BY_SOURCE",
    "BuildResult",
    "GraphModelBuilder",
]
