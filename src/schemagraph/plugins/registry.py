from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from schemagraph.parsers import MarkupParser, TabularParser


@dataclass
class RegisteredComponent:
    kind: str
    name: str
    factory: Callable[[], Any]


class Registry:
    def __init__(self) -> None:
        self._items: dict[str, RegisteredComponent] = {}

    def register(self, kind: str, name: str, factory: Callable[[], Any]) -> None:
        key = f"{kind}:{name}"
        self._items[key] = RegisteredComponent(kind=kind, name=name, factory=factory)

    def get(self, kind: str, name: str) -> RegisteredComponent | None:
        return self._items.get(f"{kind}:{name}")

    def names(self, kind: str) -> list[str]:
        return [item.name for item in self._items.values() if item.kind == kind]

    def create(self, kind: str, name: str) -> Any:
        item = self.get(kind, name)
        if not item:
            raise KeyError(f"Component not found: {kind}:{name}")
        return item.factory()


def register_default_parsers(registry: Registry) -> Registry:
    registry.register("parser", MarkupParser.source_format, MarkupParser)
    registry.register("parser", TabularParser.source_format, TabularParser)
    return registry


global_registry = register_default_parsers(Registry())
