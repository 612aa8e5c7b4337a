"""
Base component helpers for formsmith markup.

This module provides the attribute serialisation every field renderer relies
on. Keeping escaping in one place means callers never concatenate raw values
into tags.
"""

from __future__ import annotations

import html
from typing import Any, Mapping, Optional


def escape(text: Optional[Any]) -> str:
    """Escape HTML entities; ``None`` becomes the empty string."""
    return html.escape(str(text)) if text is not None else ""


def _attribute_element(key: str, value: Any) -> Optional[str]:
    # `value` is data, not a flag: booleans serialise as 1/0.
    if isinstance(value, bool) and key == "value":
        return f'value="{int(value)}"'
    if value is True:
        return key
    if value is False or value is None:
        return None
    if isinstance(value, (list, tuple)):
        joined = " ".join(str(item) for item in value if item is not None and item is not False)
        return f'{key}="{escape(joined)}"'
    return f'{key}="{escape(value)}"'


def render_attributes(attrs: Mapping[str, Any]) -> str:
    """Build an HTML attribute string from an ordered mapping.

    Args:
        attrs: Attribute name -> value. Names are used verbatim, so
            ``aria-required`` or ``wire:model.live`` pass through untouched.

    Returns:
        str: Space separated attributes without a leading space.

    Example:
        >>> render_attributes({"name": "email", "required": True, "id": None})
        'name="email" required'
    """
    parts = []
    for key, value in attrs.items():
        element = _attribute_element(key, value)
        if element is not None:
            parts.append(element)
    return " ".join(parts)


class AttributeRenderer:
    """Injectable renderer used by the form builder.

    Subclass to change serialisation (e.g. XHTML style ``required="required"``)
    without touching the builder.
    """

    def render(self, attrs: Mapping[str, Any]) -> str:
        return render_attributes(attrs)

    def escape(self, text: Optional[Any]) -> str:
        return escape(text)

    def tag_attributes(self, attrs: Mapping[str, Any]) -> str:
        """Attribute string prefixed with a space, or empty when nothing renders."""
        rendered = self.render(attrs)
        return f" {rendered}" if rendered else ""


class Component:
    """Base class for small markup components.

    Benefits:
    - Easy testing with unit tests
    - Automatic HTML escaping for security
    """

    def render(self) -> str:
        raise NotImplementedError("Subclasses must implement render()")

    @staticmethod
    def escape(text: Optional[Any]) -> str:
        return escape(text)

    @staticmethod
    def classes(*args: Optional[str], **conditionals: bool) -> str:
        """Helper to build CSS class strings with conditional classes

        Example:
            >>> Component.classes("btn", None, "btn-primary", disabled=True, active=False)
            'btn btn-primary disabled'
        """
        classes = [c for c in args if c]
        classes.extend(key for key, value in conditionals.items() if value)
        return " ".join(classes)

    @staticmethod
    def attributes(**attrs: Any) -> str:
        """Build HTML attributes from keyword arguments

        Trailing underscores strip reserved names (``class_`` -> ``class``,
        ``for_`` -> ``for``); inner underscores become hyphens
        (``aria_describedby`` -> ``aria-describedby``).
        """
        mapped = {}
        for key, value in attrs.items():
            if key.endswith("_"):
                key = key[:-1]
            else:
                key = key.replace("_", "-")
            mapped[key] = value
        return render_attributes(mapped)
