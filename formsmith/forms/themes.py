"""
CSS theme tables for field rendering.

Why:
    Field renderers should not hardcode framework class names. A registry maps
    (theme, field kind) to the classes injected on render, plus one error class
    per theme. Builders receive a registry at construction, so two builders in
    one process can use different tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional


_TEXT_LIKE = (
    "text",
    "password",
    "email",
    "tel",
    "number",
    "search",
    "url",
    "date",
    "datetime",
    "datetime-local",
    "month",
    "time",
    "week",
    "file",
    "textarea",
)


def _fill(kinds: Iterable[str], css: str) -> Dict[str, str]:
    return {kind: css for kind in kinds}


BOOTSTRAP_CLASSES: Dict[str, str] = {
    **_fill(_TEXT_LIKE, "form-control"),
    "color": "form-control form-control-color",
    "range": "form-range",
    "select": "form-select",
    "checkbox": "form-check-input",
    "radio": "form-check-input",
    "label": "form-label",
    "submit": "btn btn-primary",
    "reset": "btn btn-secondary",
    "button": "btn btn-primary",
}

_TAILWIND_INPUT = (
    "block w-full rounded-md border border-gray-300 px-3 py-2 shadow-sm "
    "focus:border-indigo-500 focus:ring-indigo-500 sm:text-sm"
)

TAILWIND_CLASSES: Dict[str, str] = {
    **_fill(_TEXT_LIKE, _TAILWIND_INPUT),
    "color": "h-10 w-14 rounded-md border border-gray-300",
    "range": "w-full accent-indigo-600",
    "select": _TAILWIND_INPUT,
    "checkbox": "h-4 w-4 rounded border-gray-300 text-indigo-600 focus:ring-indigo-500",
    "radio": "h-4 w-4 border-gray-300 text-indigo-600 focus:ring-indigo-500",
    "label": "block text-sm font-medium text-gray-700",
    "submit": "rounded-md bg-indigo-600 px-4 py-2 text-white hover:bg-indigo-700",
    "reset": "rounded-md bg-gray-200 px-4 py-2 text-gray-800 hover:bg-gray-300",
    "button": "rounded-md bg-indigo-600 px-4 py-2 text-white hover:bg-indigo-700",
}


@dataclass
class ThemeRegistry:
    """Lookup table from theme name to per-kind and error classes."""

    kinds: Dict[str, Dict[str, str]] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "ThemeRegistry":
        registry = cls()
        registry.register("bootstrap", BOOTSTRAP_CLASSES, error_class="is-invalid")
        registry.register("tailwind", TAILWIND_CLASSES, error_class="border-red-500")
        return registry

    def register(self, theme: str, classes: Mapping[str, str], *, error_class: Optional[str] = None) -> None:
        self.kinds[theme] = dict(classes)
        if error_class:
            self.errors[theme] = error_class

    def has_theme(self, theme: str) -> bool:
        return theme in self.kinds

    def themes(self) -> list[str]:
        return list(self.kinds)

    def class_for(self, theme: Optional[str], kind: str) -> Optional[str]:
        if theme is None:
            return None
        return self.kinds.get(theme, {}).get(kind)

    def error_class_for(self, theme: Optional[str]) -> Optional[str]:
        if theme is None:
            return None
        return self.errors.get(theme)


def append_class(options: Dict, css: Optional[str]) -> Dict:
    """Append ``css`` to the ``class`` option, space joined and trimmed."""
    if not css:
        return options
    current = options.get("class") or ""
    if isinstance(current, (list, tuple)):
        current = " ".join(str(c) for c in current if c)
    options["class"] = f"{current} {css}".strip()
    return options
