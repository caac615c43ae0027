from __future__ import annotations

import pytest

from schemagraph.errors import MalformedInputError
from schemagraph.parsers import MarkupParser

DOC = """
<diagram version="2">
  <node id="a" label="Alpha" x="10" y="20" type="rectangle" fill="#fff" extra="ignored"/>
  <group>
    <node id="b" label="Beta" x="30.5" y="40" type="circle" strokeWidth="2" width="60" height="60"/>
  </group>
  <edge source="a" target="b" type="dashed" name="joins"/>
  <edge source="b" target="a"/>
</diagram>
"""


def test_nodes_and_edges_in_document_order() -> None:
    raw = MarkupParser().parse(DOC)
    assert raw.source_format == "markup"
    assert [n.id for n in raw.nodes] == ["a", "b"]
    assert [(e.source, e.target) for e in raw.edges] == [("a", "b"), ("b", "a")]
    assert raw.diagnostics == []


def test_optional_attributes_are_carried_raw() -> None:
    raw = MarkupParser().parse(DOC)
    a, b = raw.nodes
    assert a.fill == "#fff"
    assert a.stroke is None and a.stroke_width is None and a.height is None
    assert b.x == "30.5"
    assert b.stroke_width == "2"
    assert b.width == "60"


def test_edge_type_defaults_to_solid() -> None:
    raw = MarkupParser().parse(DOC)
    assert raw.edges[0].type == "dashed"
    assert raw.edges[0].name == "joins"
    assert raw.edges[1].type == "solid"
    assert raw.edges[1].id is None and raw.edges[1].name is None


def test_not_well_formed_raises() -> None:
    with pytest.raises(MalformedInputError) as exc:
        MarkupParser().parse("<diagram><node id='a'></diagram>")
    assert exc.value.code == "EMALFORMED_XML"


def test_node_missing_mandatory_attribute_raises() -> None:
    doc = '<d><node id="a" label="A" x="0" y="0" type="rectangle"/><node id="b" x="1" y="1" type="circle"/></d>'
    with pytest.raises(MalformedInputError) as exc:
        MarkupParser().parse(doc)
    assert exc.value.code == "EMISSING_ATTRIBUTE"
    assert exc.value.index == 2
    assert "label" in str(exc.value)


def test_edge_missing_target_raises() -> None:
    doc = '<d><node id="a" label="A" x="0" y="0" type="rectangle"/><edge source="a"/></d>'
    with pytest.raises(MalformedInputError) as exc:
        MarkupParser().parse(doc)
    assert exc.value.code == "EMISSING_ATTRIBUTE"


def test_namespaced_elements_are_recognised() -> None:
    doc = '<d xmlns="urn:x"><node id="a" label="A" x="0" y="0" type="circle"/></d>'
    raw = MarkupParser().parse(doc)
    assert [n.id for n in raw.nodes] == ["a"]
