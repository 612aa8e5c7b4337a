"""
Option, option-group and placeholder rendering for select boxes and datalists.

Option lists may be:
    - a mapping of value -> display (ordered, as dicts are),
    - a plain sequence, where each item is both value and display,
      except nested groups, which are labelled by their position,
    - an ``enum.Enum`` subclass (value -> member name).
A display that is itself a mapping or list renders as a nested ``<optgroup>``.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple

from ..components.base import AttributeRenderer
from .compare import contains_loosely, contains_strictly, is_collection


OptionAttributes = Mapping[Any, Mapping[str, Any]]


def option_items(items: Any) -> List[Tuple[Any, Any]]:
    """Normalise an option list into ordered (value, display) pairs."""
    if isinstance(items, type) and issubclass(items, enum.Enum):
        return enum_items(items)
    if isinstance(items, Mapping):
        return list(items.items())
    return [
        (position, item) if _is_group(item) else (item, item)
        for position, item in enumerate(items)
    ]


def enum_items(enum_cls: type) -> List[Tuple[Any, str]]:
    return [(member.value, member.name) for member in enum_cls]


def _is_group(display: Any) -> bool:
    return isinstance(display, (Mapping, list, tuple))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


def is_selected(value: Any, selected: Any) -> bool:
    """Whether an option with ``value`` is selected by ``selected``."""
    if isinstance(selected, (list, tuple)):
        return contains_strictly(selected, value)
    if is_collection(selected):
        return contains_loosely(selected, value)
    if isinstance(value, int) and not isinstance(value, bool) and isinstance(selected, bool):
        return bool(value) == selected
    return _as_text(value) == _as_text(selected)


class OptionRenderer:
    """Render ``<option>``/``<optgroup>`` markup with selection state."""

    INDENT = "&nbsp;"
    INDENT_STEP = 5

    def __init__(self, renderer: Optional[AttributeRenderer] = None) -> None:
        self.html = renderer or AttributeRenderer()

    def render_list(
        self,
        items: Any,
        selected: Any,
        option_attributes: Optional[OptionAttributes] = None,
        optgroup_attributes: Optional[OptionAttributes] = None,
    ) -> str:
        option_attributes = option_attributes or {}
        optgroup_attributes = optgroup_attributes or {}
        parts = []
        for value, display in option_items(items):
            parts.append(
                self.select_option(
                    display,
                    value,
                    selected,
                    option_attributes.get(value, {}),
                    optgroup_attributes.get(value, {}),
                    option_attributes,
                )
            )
        return "".join(parts)

    def select_option(
        self,
        display: Any,
        value: Any,
        selected: Any,
        option_attrs: Optional[Mapping[str, Any]] = None,
        optgroup_attrs: Optional[Mapping[str, Any]] = None,
        nested_option_attributes: Optional[OptionAttributes] = None,
    ) -> str:
        if _is_group(display):
            return self.option_group(
                display, value, selected, optgroup_attrs or {}, nested_option_attributes or {}
            )
        return self.option(display, value, selected, option_attrs or {})

    def option_group(
        self,
        items: Any,
        label: Any,
        selected: Any,
        attributes: Mapping[str, Any],
        option_attributes: OptionAttributes,
        level: int = 0,
    ) -> str:
        space = self.INDENT * level
        parts = []
        for value, display in option_items(items):
            if _is_group(display):
                parts.append(
                    self.option_group(
                        display, value, selected, attributes, option_attributes, level + self.INDENT_STEP
                    )
                )
            else:
                parts.append(
                    self.option(display, value, selected, option_attributes.get(value, {}), prefix=space)
                )
        attrs = self.html.tag_attributes(attributes)
        label_html = space + self.html.escape(_as_text(label))
        return f'<optgroup label="{label_html}"{attrs}>{"".join(parts)}</optgroup>'

    def option(
        self,
        display: Any,
        value: Any,
        selected: Any,
        attributes: Optional[Mapping[str, Any]] = None,
        *,
        prefix: str = "",
    ) -> str:
        options = {"value": _as_text(value), "selected": is_selected(value, selected)}
        options.update(attributes or {})
        attrs = self.html.tag_attributes(options)
        return f"<option{attrs}>{prefix}{self.html.escape(_as_text(display))}</option>"

    def placeholder(self, display: Any, selected: Any) -> str:
        attrs = self.html.tag_attributes({"selected": is_selected(None, selected), "value": ""})
        return f"<option{attrs}>{self.html.escape(display)}</option>"

    def datalist_options(self, items: Iterable[Any]) -> str:
        if isinstance(items, Mapping):
            pairs = [(str(value), display) for value, display in items.items()]
        else:
            pairs = [(str(value), str(value)) for value in items]
        return "".join(self.option(display, value, None) for value, display in pairs)
