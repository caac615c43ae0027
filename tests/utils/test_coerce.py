from __future__ import annotations

import pytest

from schemagraph.utils import coerce_float, coerce_str, coerce_stroke_width, parse_float


@pytest.mark.parametrize(
    "value, expected",
    [("12", 12.0), (" 3.5 ", 3.5), (7, 7.0), ("-40", -40.0), ("abc", None), ("", None), (None, None), ("nan", None), ("inf", None)],
)
def test_parse_float(value: object, expected: float | None) -> None:
    assert parse_float(value) == expected


def test_coerce_float_falls_back_to_default() -> None:
    assert coerce_float("oops", 100.0) == 100.0
    assert coerce_float(None, 100.0) == 100.0
    assert coerce_float("80", 100.0) == 80.0


def test_coerce_str() -> None:
    assert coerce_str("#fff", "#000") == "#fff"
    assert coerce_str("", "#000") == "#000"
    assert coerce_str("   ", "#000") == "#000"
    assert coerce_str(None, "#000") == "#000"


def test_coerce_stroke_width() -> None:
    assert coerce_stroke_width("3") == 3
    assert coerce_stroke_width("2.7") == 2
    assert coerce_stroke_width("0") == 1
    assert coerce_stroke_width("-2") == 1
    assert coerce_stroke_width("wide") == 1
    assert coerce_stroke_width(None, default=4) == 4
