"""
Validation error bag consulted for error styling and ``aria-invalid``.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Protocol

from pydantic import ValidationError


class ErrorSource(Protocol):
    def has(self, key: str) -> bool: ...


class ErrorBag:
    """Messages keyed by dotted field key (``user.email``, ``tags.0``)."""

    def __init__(self, messages: Optional[Mapping[str, Iterable[str]]] = None) -> None:
        self.messages: Dict[str, List[str]] = {}
        for key, values in (messages or {}).items():
            if isinstance(values, str):
                values = [values]
            self.messages[key] = list(values)

    def add(self, key: str, message: str) -> "ErrorBag":
        self.messages.setdefault(key, []).append(message)
        return self

    def has(self, key: str) -> bool:
        return bool(self.messages.get(key))

    def get(self, key: str) -> List[str]:
        return list(self.messages.get(key, []))

    def first(self, key: str) -> Optional[str]:
        values = self.messages.get(key)
        return values[0] if values else None

    def is_empty(self) -> bool:
        return not any(self.messages.values())

    def __len__(self) -> int:
        return sum(len(values) for values in self.messages.values())

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "ErrorBag":
        """Build a bag from a pydantic ``ValidationError``.

        Error locations become dotted keys, so ``("address", "city")`` is
        looked up by a field named ``address[city]``.
        """
        bag = cls()
        for error in exc.errors():
            key = ".".join(str(part) for part in error.get("loc", ()))
            bag.add(key, error.get("msg", "Invalid value"))
        return bag
