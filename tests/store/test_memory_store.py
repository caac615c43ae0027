from __future__ import annotations

from schemagraph.ir import EdgeModel, NodeModel, ShapeKind
from schemagraph.store import InMemoryGraphStore


def node(node_id: str | None, x: float = 0.0) -> NodeModel:
    return NodeModel(id=node_id, label=str(node_id), x=x, y=0.0, shape=ShapeKind.CIRCLE)


def test_insert_echoes_free_id_and_assigns_otherwise() -> None:
    store = InMemoryGraphStore()
    assert store.insert_node(node("a")) == "a"
    taken = store.insert_node(node("a", x=5))
    fresh = store.insert_node(node(None))
    assert taken not in ("a", fresh)
    assert store.lookup_node(taken).x == 5
    assert store.lookup_node(fresh).id == fresh
    assert len(store.nodes) == 3


def test_insert_edge_rejects_unknown_endpoint() -> None:
    store = InMemoryGraphStore()
    store.insert_node(node("a"))
    assert store.insert_edge(EdgeModel(source="a", target="zzz")) is None
    assert store.edges == []
    edge_id = store.insert_edge(EdgeModel(source="a", target="a", id="loop"))
    assert edge_id == "loop"
    assert store.lookup_edge("loop").source == "a"


def test_remove_node_drops_incident_edges() -> None:
    store = InMemoryGraphStore()
    for name in ("a", "b", "c"):
        store.insert_node(node(name))
    store.insert_edge(EdgeModel(source="a", target="b"))
    store.insert_edge(EdgeModel(source="c", target="a"))
    store.insert_edge(EdgeModel(source="b", target="c"))

    assert store.remove_node("a") is True
    assert store.lookup_node("a") is None
    assert [(e.source, e.target) for e in store.edges] == [("b", "c")]
    assert store.remove_node("a") is False


def test_batch_notifies_once() -> None:
    store = InMemoryGraphStore()
    seen: list[int] = []
    store.subscribe(lambda: seen.append(len(store.nodes)))

    store.insert_node(node("a"))
    assert seen == [1]

    with store.batch():
        store.clear()
        with store.batch():
            store.insert_node(node("b"))
        store.insert_node(node("c"))
        assert seen == [1]
    assert seen == [1, 2]


def test_click_reaches_handlers_for_known_nodes_only() -> None:
    store = InMemoryGraphStore()
    store.insert_node(node("a"))
    clicks: list[str] = []
    store.on_node_click(clicks.append)
    store.click("a")
    store.click("missing")
    assert clicks == ["a"]
