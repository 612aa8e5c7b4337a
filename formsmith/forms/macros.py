"""
Explicit registry of custom builder methods ("macros").

Applications add their own field kinds (a currency input, a star rating)
without subclassing the builder. Handlers receive the builder as their first
argument.
"""

from __future__ import annotations

from typing import Any, Callable, Dict


class MacroRegistry:
    def __init__(self) -> None:
        self._handlers: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str, handler: Callable[..., Any]) -> None:
        if not callable(handler):
            raise TypeError(f"Macro {name!r} handler must be callable")
        self._handlers[name] = handler

    def has(self, name: str) -> bool:
        return name in self._handlers

    def get(self, name: str) -> Callable[..., Any]:
        try:
            return self._handlers[name]
        except KeyError:
            raise AttributeError(f"Method {name} does not exist.") from None

    def names(self) -> list[str]:
        return list(self._handlers)
