"""
Field value resolution.

Intent:
    Decide which value a field displays. Sources are consulted in strict
    order: old input (previous submission), current request (opt-in), the
    declared default, then the bound model.

Why:
    After a failed submission users must see what they typed, not what the
    database holds. A submission that omitted a field counts as "blank on
    purpose", so stale model values never leak back in.

State:
    A resolver lives for one open -> close form lifecycle. Its only memory
    across renders is the per-key cursor over list-valued old input, which
    hands out successive items to repeated ``name[]`` fields.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping
from typing import Any, Deque, Dict, Optional

from .compare import contains_loosely, is_collection, is_truthy, loosely_equal
from .values import OldInputStore, RequestStore, model_value, transform_key


logger = logging.getLogger("formsmith.forms")

METHOD_FIELD = "_method"

# Kinds that read a list-valued old input whole instead of item by item.
WHOLE_LIST_KINDS = ("select", "checkbox")


class ValueResolver:
    def __init__(
        self,
        old_input: Optional[OldInputStore] = None,
        request: Optional[RequestStore] = None,
        *,
        consider_request: bool = False,
    ) -> None:
        self.old_input = old_input
        self.request = request
        self.consider_request = consider_request
        self.model: Any = None
        self._cursors: Dict[str, Deque[Any]] = {}

    def reset(self) -> None:
        """Forget the bound model and all list cursors."""
        self.model = None
        self._cursors.clear()

    # ------------------------------------------------------------------ #
    # Individual sources
    # ------------------------------------------------------------------ #

    def peek(self, name: str) -> Any:
        """Raw old input for ``name`` without advancing any cursor."""
        if self.old_input is None:
            return None
        return self.old_input.get(transform_key(name))

    def old_input_is_empty(self) -> bool:
        return self.old_input is not None and self.old_input.is_empty()

    def old(self, name: str, kind: Optional[str] = None) -> Any:
        """Old input for ``name``; list values are handed out one item per call."""
        if self.old_input is None:
            return None
        key = transform_key(name)
        if kind in WHOLE_LIST_KINDS:
            return self.old_input.get(key)
        if key in self._cursors:
            return self._next_item(key)
        value = self.old_input.get(key)
        if not isinstance(value, (list, tuple)):
            return value
        self._cursors[key] = deque(value)
        return self._next_item(key)

    def _next_item(self, key: str) -> Any:
        cursor = self._cursors[key]
        if not cursor:
            logger.debug("Old input list exhausted for key %s", key)
            return None
        return cursor.popleft()

    def request_value(self, name: str) -> Any:
        if not self.consider_request:
            return None
        if self.request is None:
            logger.debug("consider_request is on but no request store is attached")
            return None
        return self.request.get(transform_key(name))

    def model_value(self, name: str) -> Any:
        if self.model is None:
            return None
        return model_value(self.model, transform_key(name))

    def _cleared_by_submission(self, key: str) -> bool:
        return (
            self.old_input is not None
            and not self.old_input.is_empty()
            and not self.old_input.has(key)
        )

    # ------------------------------------------------------------------ #
    # Resolution
    # ------------------------------------------------------------------ #

    def resolve_value(self, name: Optional[str], value: Any = None, kind: Optional[str] = None) -> Any:
        """Return the value a field named ``name`` should display."""
        if name is None:
            return value

        key = transform_key(name)
        old = self.old(name, kind)
        if name != METHOD_FIELD:
            if old is not None:
                return old
            # A list cursor exists for this key: exhaustion does not fall through.
            if kind not in WHOLE_LIST_KINDS and key in self._cursors:
                return None

        if kind not in WHOLE_LIST_KINDS and self._cleared_by_submission(key):
            logger.debug("Field %s omitted from submitted input; rendering blank", key)
            return None

        request_value = self.request_value(name)
        if request_value is not None and name != METHOD_FIELD:
            return request_value

        if value is not None:
            return value

        if self.model is not None:
            return self.model_value(name)

        return None

    def missing_old_and_model(self, name: str) -> bool:
        missing = self.peek(name) is None and self.model_value(name) is None
        if self.consider_request and missing:
            return self.request_value(name) is None
        return missing

    def resolve_checked(self, kind: str, name: str, value: Any, checked: Optional[bool]) -> bool:
        """Decide whether a checkbox/radio with candidate ``value`` is checked."""
        if kind == "checkbox":
            return self._checkbox_checked(name, value, checked)
        if kind == "radio":
            if self.missing_old_and_model(name):
                return bool(checked)
            return loosely_equal(self.resolve_value(name, kind=kind), value)
        return loosely_equal(self.resolve_value(name, kind=kind), value)

    def _checkbox_checked(self, name: str, value: Any, checked: Optional[bool]) -> bool:
        if self.old_input is not None and not self.old_input.is_empty() and self.peek(name) is None:
            return False

        if self.missing_old_and_model(name):
            return bool(checked)

        posted = self.resolve_value(name, checked, kind="checkbox")
        if isinstance(posted, Mapping):
            return contains_loosely(posted.values(), value)
        if is_collection(posted):
            return contains_loosely(posted, value)
        return is_truthy(posted)
