"""Format parsers turning document text into raw node/edge records."""

from .base import Parser, RawEdge, RawGraph, RawNode
from .markup import MarkupParser
from .tabular import SECTION_SEPARATOR, TabularParser, split_sections

__all__ = [
    "Parser",
    "RawNode",
    "RawEdge",
    "RawGraph",
    "MarkupParser",
    "TabularParser",
    "SECTION_SEPARATOR",
    "split_sections",
]
