"""Utility helpers for logging, configuration, and field coercion."""

from .coerce import coerce_float, coerce_str, coerce_stroke_width, parse_float
from .logger import configure_logging, get_logger

__all__ = [
    "get_logger",
    "configure_logging",
    "coerce_float",
    "coerce_str",
    "coerce_stroke_width",
    "parse_float",
]
