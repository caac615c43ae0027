from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from schemagraph.errors import Diagnostic


@dataclass
class RawNode:
    """A node record as read from the input; values are unvalidated."""

    id: str
    label: str
    x: Any
    y: Any
    type: str
    fill: Any = None
    stroke: Any = None
    stroke_width: Any = None
    width: Any = None
    height: Any = None
    index: int | None = None


@dataclass
class RawEdge:
    source: str
    target: str
    id: str | None = None
    name: str | None = None
    type: str = "solid"
    index: int | None = None


@dataclass
class RawGraph:
    source_format: str
    nodes: list[RawNode] = field(default_factory=list)
    edges: list[RawEdge] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


class Parser(ABC):
    """Parser interface for importing diagram documents into raw records."""

    source_format: str = ""

    @abstractmethod
    def parse(self, text: str) -> RawGraph:
        """Convert the given document text into a RawGraph."""
        raise NotImplementedError
