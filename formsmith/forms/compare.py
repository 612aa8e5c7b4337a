"""
Loose value comparison for checked/selected state.

Submitted values arrive as strings while bound models hold ints, bools or
Decimals. Comparisons therefore follow "type-juggling" equality: ``"1"``
equals ``1`` and ``True``, ``"0"`` equals ``False``. ``None`` equals ``""``
and empty non-string values such as ``0`` or ``[]``, but not ``"0"``.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


IDENTITY_FIELD = "id"


def is_truthy(value: Any) -> bool:
    """Truthiness as form data sees it: ``"0"`` and ``""`` are false."""
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def _as_number(value: Any) -> Optional[Decimal]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip()) if value.strip() else None
        except InvalidOperation:
            return None
    return None


def loosely_equal(left: Any, right: Any) -> bool:
    if left is right:
        return True
    if left is None or right is None:
        other = right if left is None else left
        if isinstance(other, str):
            return other == ""
        return not other
    if isinstance(left, bool) or isinstance(right, bool):
        return is_truthy(left) == is_truthy(right)
    left_num, right_num = _as_number(left), _as_number(right)
    if left_num is not None and right_num is not None:
        return left_num == right_num
    try:
        if left == right:
            return True
    except Exception:  # pragma: no cover - exotic __eq__
        return False
    return str(left) == str(right)


def is_collection(value: Any) -> bool:
    """True for list-like containers; strings and mappings are scalars here."""
    if isinstance(value, (str, bytes, Mapping)):
        return False
    return isinstance(value, (list, tuple, set, frozenset)) or (
        hasattr(value, "__iter__") and hasattr(value, "__contains__")
    )


def identity_of(item: Any, field: str = IDENTITY_FIELD) -> Any:
    """Return the identity field of a model-like item, or the item itself."""
    if isinstance(item, Mapping):
        return item.get(field, item)
    if isinstance(item, (str, bytes, int, float, bool, Decimal)) or item is None:
        return item
    return getattr(item, field, item)


def contains_loosely(collection: Any, value: Any, field: str = IDENTITY_FIELD) -> bool:
    """Membership by loose equality; model-like items compare by identity field."""
    return any(loosely_equal(identity_of(item, field), value) for item in collection)


def contains_strictly(collection: Any, value: Any) -> bool:
    """Membership for explicit selection lists: same value or same string form."""
    for item in collection:
        if type(item) is type(value) and item == value:
            return True
        if isinstance(item, str) and item == str(value):
            return True
    return False
