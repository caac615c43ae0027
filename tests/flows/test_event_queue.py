from __future__ import annotations

import pytest

from schemagraph.flows.events import EventQueue, NodeClicked


def test_events_run_in_order_including_follow_ups() -> None:
    queue = EventQueue()
    seen: list[str] = []

    def on_click(event: NodeClicked) -> None:
        seen.append(event.node_id)
        if event.node_id == "a":
            queue.post(NodeClicked("c"))

    queue.register(NodeClicked, on_click)
    queue.post(NodeClicked("a"))
    queue.post(NodeClicked("b"))
    assert len(queue) == 2
    assert queue.process() == 3
    assert seen == ["a", "b", "c"]
    assert len(queue) == 0


def test_unregistered_event_type_raises() -> None:
    queue = EventQueue()
    queue.post(object())
    with pytest.raises(TypeError):
        queue.process()
