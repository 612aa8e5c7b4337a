"""
Value sources consulted when populating form fields.

Intent:
    Three independent stores feed the value-resolution chain: the previous
    submission (old input), the current request, and a bound model. Each is a
    small object with a narrow interface so framework adapters can supply their
    own backing storage.

Key format:
    Field names use the bracket syntax browsers submit (``user[address][city]``,
    ``tags[]``). Lookups use the dotted form produced by ``transform_key``;
    ``nest_form_items`` builds payloads in exactly that shape, which keeps
    flash-and-repopulate round trips consistent.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Optional, Protocol, Sequence, Tuple


_MISSING = object()
_SEGMENT_RE = re.compile(r"\[([^\]]*)\]")


def transform_key(name: Optional[str]) -> str:
    """Flatten an array-style field name into a dotted lookup key.

    Literal dots become underscores first so they cannot collide with the
    injected separator.

    Example:
        >>> transform_key("user[address][city]")
        'user.address.city'
        >>> transform_key("tags[]")
        'tags'
        >>> transform_key("first.name")
        'first_name'
    """
    key = str(name) if name is not None else ""
    return key.replace(".", "_").replace("[]", "").replace("[", ".").replace("]", "")


def data_get(target: Any, key: Optional[str], default: Any = None) -> Any:
    """Resolve a dotted key against nested mappings, sequences and objects."""
    if key is None or key == "":
        return target
    current = target
    for segment in key.split("."):
        if current is None:
            return default
        if isinstance(current, Mapping):
            if segment not in current:
                return default
            current = current[segment]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError):
                return default
        else:
            value = getattr(current, segment, _MISSING)
            if value is _MISSING:
                return default
            current = value
    return current


def nest_form_items(items: Iterable[Tuple[str, Any]]) -> dict:
    """Parse submitted ``(name, value)`` pairs into a nested payload.

    ``a[b][c]=1`` becomes ``{"a": {"b": {"c": "1"}}}``; ``a[]`` entries
    accumulate into a list in submission order. Dots in the base name become
    underscores, matching ``transform_key``.

    Example:
        >>> nest_form_items([("tags[]", "x"), ("tags[]", "y"), ("user[name]", "Ada")])
        {'tags': ['x', 'y'], 'user': {'name': 'Ada'}}
    """
    payload: dict = {}
    for name, value in items:
        base, _, rest = name.partition("[")
        segments = [base.replace(".", "_")]
        if rest:
            segments.extend(_SEGMENT_RE.findall("[" + rest))
        container: Any = payload
        for index, segment in enumerate(segments):
            last = index == len(segments) - 1
            next_is_list = not last and segments[index + 1] == ""
            if isinstance(container, list):
                if last:
                    container.append(value)
                    break
                child: Any = [] if next_is_list else {}
                container.append(child)
                container = child
                continue
            if last:
                container[segment] = value
                break
            if segment not in container or not isinstance(container[segment], (dict, list)):
                container[segment] = [] if next_is_list else {}
            container = container[segment]
    return payload


class OldInputStore(Protocol):
    """Prior-submission store keyed by transformed field name."""

    def has(self, key: str) -> bool: ...

    def get(self, key: str) -> Any: ...

    def is_empty(self) -> bool: ...


class RequestStore(Protocol):
    """Current-request input store."""

    def get(self, key: str) -> Any: ...


class OldInput:
    """Old input backed by a nested payload (as flashed into a session)."""

    def __init__(self, payload: Optional[Mapping[str, Any]] = None) -> None:
        self.payload = payload or {}

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> Any:
        return data_get(self.payload, key)

    def is_empty(self) -> bool:
        return len(self.payload) == 0

    @classmethod
    def from_items(cls, items: Iterable[Tuple[str, Any]]) -> "OldInput":
        return cls(nest_form_items(items))


class RequestInput:
    """Current request input (query string and form body)."""

    def __init__(self, payload: Optional[Mapping[str, Any]] = None) -> None:
        self.payload = payload or {}

    def get(self, key: str) -> Any:
        return data_get(self.payload, key)

    @classmethod
    def from_items(cls, items: Iterable[Tuple[str, Any]]) -> "RequestInput":
        return cls(nest_form_items(items))


def model_value(model: Any, key: str) -> Any:
    """Read a form value from a bound model.

    Models exposing ``get_form_value(key)`` decide for themselves (e.g. to
    format money or join relations); everything else uses dotted lookup.
    """
    getter = getattr(model, "get_form_value", None)
    if callable(getter):
        return getter(key)
    return data_get(model, key)
