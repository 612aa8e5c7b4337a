"""
FormBuilder: server-side rendering of HTML form fields.

Intent:
    Render form elements that repopulate themselves from the previous
    submission, the current request or a bound model, and that carry theme
    classes, error styling, accessibility attributes and HTML5 constraints.

Lifecycle:
    One builder serves one in-flight page render. ``open()``/``model()`` start
    a form, ``close()`` resets all per-form state (bound model, labelled names,
    old-input list cursors, staged attributes and rules). Forms must not
    interleave on one builder; give each concurrent render its own instance.

Staging buffer:
    ``rules()``, ``alpine()``, ``wire()`` and friends queue attributes for the
    *next* field only. The next field render takes them and clears the buffer
    before doing anything else, so a render that raises still clears it.

Example:
    >>> form = FormBuilder(csrf_token="abc")
    >>> form.tailwind().rules("required|email").text("email")  # doctest: +SKIP
"""

from __future__ import annotations

import datetime as dt
import functools
import logging
import time
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ..components.base import AttributeRenderer
from ..components.fields import FormGroup
from ..config import FormConfig
from .errors import ErrorSource
from .macros import MacroRegistry
from .resolution import METHOD_FIELD, ValueResolver
from .rules import RuleSpec, translate_rules
from .selects import OptionRenderer
from .themes import ThemeRegistry, append_class
from .urls import StaticUrlResolver, UrlResolver
from .values import OldInputStore, RequestStore, transform_key


logger = logging.getLogger("formsmith.forms")

Options = Optional[Mapping[str, Any]]

_TAILWIND_TOGGLE_TRACK = (
    "relative w-11 h-6 bg-gray-200 peer-focus:outline-none peer-focus:ring-4 "
    "peer-focus:ring-blue-300 rounded-full peer peer-checked:after:translate-x-full "
    "peer-checked:after:border-white after:content-[''] after:absolute after:top-[2px] "
    "after:left-[2px] after:bg-white after:border-gray-300 after:border after:rounded-full "
    "after:h-5 after:w-5 after:transition-all peer-checked:bg-blue-600"
)

_TAILWIND_FLOATING_LABEL = (
    "absolute left-4 -top-6 text-sm text-gray-600 transition-all "
    "peer-placeholder-shown:text-base peer-placeholder-shown:text-gray-400 "
    "peer-placeholder-shown:top-2 peer-focus:-top-6 peer-focus:text-gray-600 peer-focus:text-sm"
)


def _kwarg_attributes(attrs: Mapping[str, Any]) -> Dict[str, Any]:
    """Map keyword arguments to attribute names (``class_`` -> ``class``, ``aria_label`` -> ``aria-label``)."""
    mapped = {}
    for key, value in attrs.items():
        key = key[:-1] if key.endswith("_") else key.replace("_", "-")
        mapped[key] = value
    return mapped


def _merge_options(options: Options, attrs: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(options or {})
    merged.update(_kwarg_attributes(attrs))
    return merged


class FormBuilder:
    """Render form fields with value population, theming and a11y attributes."""

    reserved = ("method", "url", "route", "action", "files")
    spoofed_methods = ("DELETE", "PATCH", "PUT")
    skip_value_types = ("file", "password", "checkbox", "radio")

    date_formats = {
        "date": "%Y-%m-%d",
        "datetime": "%Y-%m-%dT%H:%M",
        "datetime-local": "%Y-%m-%dT%H:%M",
        "month": "%Y-%m",
        "time": "%H:%M",
        "week": "%G-W%V",
    }
    default_date_format = "%Y-%m-%d %H:%M:%S"

    def __init__(
        self,
        urls: Optional[UrlResolver] = None,
        csrf_token: Optional[str] = None,
        *,
        config: Optional[FormConfig] = None,
        themes: Optional[ThemeRegistry] = None,
        renderer: Optional[AttributeRenderer] = None,
        old_input: Optional[OldInputStore] = None,
        request: Optional[RequestStore] = None,
        errors: Optional[ErrorSource] = None,
        macros: Optional[MacroRegistry] = None,
    ) -> None:
        self.config = config or FormConfig()
        self.urls = urls or StaticUrlResolver()
        self.html = renderer or AttributeRenderer()
        self.themes = themes or ThemeRegistry.default()
        self.option_renderer = OptionRenderer(self.html)
        self.resolver = ValueResolver(old_input, request, consider_request=self.config.consider_request)
        self.errors = errors
        self.macros = macros or MacroRegistry()
        self.csrf_token = csrf_token
        self.labels: List[str] = []
        self._pending_attributes: Dict[str, Any] = {}
        self._pending_rules: Optional[RuleSpec] = None
        self._theme: Optional[str] = None
        if self.config.theme:
            self.theme(self.config.theme)

    # ------------------------------------------------------------------ #
    # Macros
    # ------------------------------------------------------------------ #

    def macro(self, name: str, handler: Callable[..., Any]) -> None:
        """Register ``handler(builder, *args, **kwargs)`` as ``builder.<name>``."""
        self.macros.register(name, handler)

    def has_macro(self, name: str) -> bool:
        return self.macros.has(name)

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        return self.macros.get(name)(self, *args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        macros = self.__dict__.get("macros")
        if name.startswith("_") or macros is None or not macros.has(name):
            raise AttributeError(f"Method {name} does not exist.")
        return functools.partial(macros.get(name), self)

    # ------------------------------------------------------------------ #
    # Collaborators and per-form state
    # ------------------------------------------------------------------ #

    def set_session_store(self, old_input: Optional[OldInputStore]) -> "FormBuilder":
        self.resolver.old_input = old_input
        return self

    def get_session_store(self) -> Optional[OldInputStore]:
        return self.resolver.old_input

    def set_request(self, request: Optional[RequestStore]) -> "FormBuilder":
        self.resolver.request = request
        return self

    def consider_request(self, consider: bool = True) -> "FormBuilder":
        self.resolver.consider_request = consider
        return self

    def set_error_bag(self, errors: Optional[ErrorSource]) -> "FormBuilder":
        self.errors = errors
        return self

    def has_error(self, name: Optional[str]) -> bool:
        if name is None or self.errors is None:
            return False
        return self.errors.has(transform_key(name))

    def set_model(self, model: Any) -> None:
        self.resolver.model = model

    def get_model(self) -> Any:
        return self.resolver.model

    def old(self, name: str) -> Any:
        """Old input for ``name`` as submitted (lists are returned whole)."""
        return self.resolver.peek(name)

    def old_input_is_empty(self) -> bool:
        return self.resolver.old_input_is_empty()

    def get_value_attribute(self, name: Optional[str], value: Any = None, kind: Optional[str] = None) -> Any:
        return self.resolver.resolve_value(name, value, kind)

    def get_id_attribute(self, name: Optional[str], attributes: Mapping[str, Any]) -> Optional[str]:
        if "id" in attributes:
            return attributes["id"]
        if name is not None and name in self.labels:
            return name
        return None

    # ------------------------------------------------------------------ #
    # Theme
    # ------------------------------------------------------------------ #

    def theme(self, theme: Optional[str]) -> "FormBuilder":
        if theme is not None and not self.themes.has_theme(theme):
            raise ValueError(f"Unknown theme {theme!r}; registered: {', '.join(self.themes.themes())}")
        if theme != self._theme:
            logger.debug("Form theme switched: %s -> %s", self._theme, theme)
        self._theme = theme
        return self

    def get_theme(self) -> Optional[str]:
        return self._theme

    def bootstrap(self) -> "FormBuilder":
        return self.theme("bootstrap")

    def tailwind(self) -> "FormBuilder":
        return self.theme("tailwind")

    # ------------------------------------------------------------------ #
    # Staging buffer for the next field
    # ------------------------------------------------------------------ #

    def rules(self, rules: RuleSpec) -> "FormBuilder":
        self._pending_rules = rules
        return self

    def with_attributes(self, attributes: Options = None, **attrs: Any) -> "FormBuilder":
        self._pending_attributes.update(_merge_options(attributes, attrs))
        return self

    def alpine(self, attribute: str, expression: str) -> "FormBuilder":
        self._pending_attributes[f"x-{attribute}"] = expression
        return self

    def vue(self, attribute: str, expression: str) -> "FormBuilder":
        self._pending_attributes[f"v-{attribute}"] = expression
        return self

    def wire(self, prop: str) -> "FormBuilder":
        self._pending_attributes["wire:model"] = prop
        return self

    def wire_lazy(self, prop: str) -> "FormBuilder":
        self._pending_attributes["wire:model.lazy"] = prop
        return self

    def wire_defer(self, prop: str) -> "FormBuilder":
        self._pending_attributes["wire:model.defer"] = prop
        return self

    def wire_live(self, prop: str, debounce: Optional[int] = None) -> "FormBuilder":
        modifier = "wire:model.live"
        if debounce is not None:
            modifier += f".debounce.{debounce}ms"
        self._pending_attributes[modifier] = prop
        return self

    def wire_click(self, method: str) -> "FormBuilder":
        self._pending_attributes["wire:click"] = method
        return self

    def wire_submit(self, method: str) -> "FormBuilder":
        self._pending_attributes["wire:submit"] = method
        return self

    def wire_submit_prevent(self, method: str) -> "FormBuilder":
        self._pending_attributes["wire:submit.prevent"] = method
        return self

    def _consume_pending(self) -> Tuple[Dict[str, Any], Optional[RuleSpec]]:
        attributes, rules = self._pending_attributes, self._pending_rules
        self._pending_attributes, self._pending_rules = {}, None
        return attributes, rules

    # ------------------------------------------------------------------ #
    # Attribute pipeline
    # ------------------------------------------------------------------ #

    def build_attributes(
        self,
        kind: str,
        name: Optional[str],
        options: Options,
        *,
        value: Any = None,
        pending: Optional[Mapping[str, Any]] = None,
        rules: Optional[RuleSpec] = None,
        element: str = "input",
    ) -> Dict[str, Any]:
        """Merge name, staged attributes, id, theme/error classes, rules and a11y.

        ``type``, ``value`` and ``id`` are merged last for ``<input>`` elements
        and override same-named options.
        """
        options = dict(options or {})
        if "name" not in options and name is not None:
            options["name"] = name

        if pending:
            options = {**pending, **options}

        field_id = self.get_id_attribute(name, options)

        append_class(options, self.themes.class_for(self._theme, kind))

        has_error = self.has_error(name)
        if has_error:
            append_class(options, self.themes.error_class_for(self._theme))

        if rules is not None:
            if element == "input":
                options = translate_rules(rules, {**options, "type": kind})
            else:
                had_type = "type" in options
                options = translate_rules(rules, options)
                if not had_type:
                    options.pop("type", None)

        if options.get("required") not in (None, False) and "aria-required" not in options:
            options["aria-required"] = "true"
        if has_error and "aria-invalid" not in options:
            options["aria-invalid"] = "true"

        if element == "input":
            options.update({"type": kind, "value": value, "id": field_id})
        else:
            options["id"] = field_id
        return options

    def format_value(self, kind: str, value: Any) -> Any:
        if isinstance(value, (dt.date, dt.time)):
            return value.strftime(self.date_formats.get(kind, self.default_date_format))
        return value

    # ------------------------------------------------------------------ #
    # Form open / close
    # ------------------------------------------------------------------ #

    def open(self, options: Options = None, **attrs: Any) -> str:
        """Open a form. ``url``/``route``/``action`` pick the action URL."""
        options = _merge_options(options, attrs)
        pending, _ = self._consume_pending()
        method = str(options.get("method", "post"))

        attributes: Dict[str, Any] = {
            "method": self._get_method(method),
            "action": self._get_action(options),
            "accept-charset": "UTF-8",
        }
        append = self._get_appendage(method)

        if options.get("files"):
            options["enctype"] = "multipart/form-data"

        attributes.update(pending)
        attributes.update({key: value for key, value in options.items() if key not in self.reserved})
        return f"<form{self.html.tag_attributes(attributes)}>{append}"

    def model(self, model: Any, options: Options = None, **attrs: Any) -> str:
        self.set_model(model)
        return self.open(options, **attrs)

    def close(self) -> str:
        self.labels = []
        self.resolver.reset()
        self._pending_attributes, self._pending_rules = {}, None
        return "</form>"

    def token(self) -> str:
        token = self.csrf_token
        if not token:
            session_token = getattr(self.resolver.old_input, "token", None)
            token = session_token() if callable(session_token) else None
        return self._fixed_hidden("_token", token)

    def _fixed_hidden(self, name: str, value: Any) -> str:
        attributes = {"name": name, "type": "hidden", "value": value}
        return f"<input{self.html.tag_attributes(attributes)}>"

    def _get_method(self, method: str) -> str:
        method = method.upper()
        return method if method == "GET" else "POST"

    def _get_action(self, options: Mapping[str, Any]) -> str:
        if options.get("url") is not None:
            path, params = self._split_target(options["url"])
            return self.urls.to_path(path, params)
        if options.get("route") is not None:
            name, params = self._split_target(options["route"])
            return self.urls.to_route(name, params)
        if options.get("action") is not None:
            action, params = self._split_target(options["action"])
            return self.urls.to_action(action, params)
        return self.urls.current_url()

    @staticmethod
    def _split_target(target: Any) -> Tuple[Any, Any]:
        if isinstance(target, (list, tuple)):
            head, rest = target[0], list(target[1:])
            if len(rest) == 1 and isinstance(rest[0], Mapping):
                return head, rest[0]
            return head, rest
        return target, None

    def _get_appendage(self, method: str) -> str:
        method = method.upper()
        appendage = ""
        if method in self.spoofed_methods:
            appendage += self._fixed_hidden(METHOD_FIELD, method)
        if method != "GET":
            appendage += self.token()
        return appendage

    # ------------------------------------------------------------------ #
    # Labels and inputs
    # ------------------------------------------------------------------ #

    def label(self, name: str, value: Optional[str] = None, options: Options = None, escape_html: bool = True, **attrs: Any) -> str:
        self.labels.append(name)
        options = _merge_options(options, attrs)
        append_class(options, self.themes.class_for(self._theme, "label"))
        text = self.format_label(name, value)
        if escape_html:
            text = self.html.escape(text)
        attributes = self.html.tag_attributes({"for": name, **options})
        return f"<label{attributes}>{text}</label>"

    @staticmethod
    def format_label(name: str, value: Optional[str]) -> str:
        if value:
            return value
        return " ".join(word[:1].upper() + word[1:] for word in name.replace("_", " ").split(" "))

    def input(self, kind: str, name: Optional[str], value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self._input(kind, name, value, _merge_options(options, attrs))

    def _input(self, kind: str, name: Optional[str], value: Any, options: Dict[str, Any], populate: bool = True) -> str:
        pending, rules = self._consume_pending()
        icon = options.pop("icon", None)

        if populate and kind not in self.skip_value_types:
            value = self.resolver.resolve_value(name, value, kind)
        value = self.format_value(kind, value)

        attributes = self.build_attributes(kind, name, options, value=value, pending=pending, rules=rules)
        html = f"<input{self.html.tag_attributes(attributes)}>"
        if icon:
            html = self._wrap_with_icon(html, icon)
        return html

    def _wrap_with_icon(self, html: str, icon: str) -> str:
        if self._theme == "tailwind":
            padded = html.replace('class="', 'class="pl-10 ', 1)
            return (
                '<div class="relative">'
                '<div class="absolute inset-y-0 left-0 pl-3 flex items-center pointer-events-none">'
                f'<span class="text-gray-500 sm:text-sm">{icon}</span>'
                "</div>"
                f"{padded}"
                "</div>"
            )
        if self._theme == "bootstrap":
            return f'<div class="input-group"><span class="input-group-text">{icon}</span>{html}</div>'
        return f'<div class="input-icon">{icon}{html}</div>'

    def text(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("text", name, value, options, **attrs)

    def password(self, name: str, options: Options = None, **attrs: Any) -> str:
        return self.input("password", name, "", options, **attrs)

    def range(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("range", name, value, options, **attrs)

    def hidden(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("hidden", name, value, options, **attrs)

    def search(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("search", name, value, options, **attrs)

    def email(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("email", name, value, options, **attrs)

    def tel(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("tel", name, value, options, **attrs)

    def number(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("number", name, value, options, **attrs)

    def date(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("date", name, value, options, **attrs)

    def datetime(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("datetime", name, value, options, **attrs)

    def datetime_local(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("datetime-local", name, value, options, **attrs)

    def time(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("time", name, value, options, **attrs)

    def url(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("url", name, value, options, **attrs)

    def week(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("week", name, value, options, **attrs)

    def month(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("month", name, value, options, **attrs)

    def color(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.input("color", name, value, options, **attrs)

    def file(self, name: str, options: Options = None, **attrs: Any) -> str:
        return self.input("file", name, None, options, **attrs)

    def submit(self, value: Optional[str] = None, options: Options = None, **attrs: Any) -> str:
        return self.input("submit", None, value, options, **attrs)

    def reset(self, value: Optional[str] = None, options: Options = None, **attrs: Any) -> str:
        return self.input("reset", None, value, options, **attrs)

    def image(self, url: str, name: Optional[str] = None, options: Options = None, **attrs: Any) -> str:
        options = _merge_options(options, attrs)
        options["src"] = self.urls.asset_url(url)
        return self._input("image", name, None, options)

    def button(self, value: Optional[str] = None, options: Options = None, **attrs: Any) -> str:
        """Render a ``<button>``; ``value`` is inserted as markup, unescaped."""
        pending, _ = self._consume_pending()
        options = {**pending, **_merge_options(options, attrs)}
        options.setdefault("type", "button")
        append_class(options, self.themes.class_for(self._theme, "button"))
        return f"<button{self.html.tag_attributes(options)}>{value or ''}</button>"

    # ------------------------------------------------------------------ #
    # Textarea
    # ------------------------------------------------------------------ #

    def textarea(self, name: str, value: Any = None, options: Options = None, **attrs: Any) -> str:
        pending, rules = self._consume_pending()
        options = self._set_textarea_size(_merge_options(options, attrs))
        options.pop("size", None)

        value = self.resolver.resolve_value(name, value, "textarea")
        attributes = self.build_attributes(
            "textarea", name, options, pending=pending, rules=rules, element="textarea"
        )
        body = "" if value is None else str(value)
        return f"<textarea{self.html.tag_attributes(attributes)}>{self.html.escape(body)}</textarea>"

    def _set_textarea_size(self, options: Dict[str, Any]) -> Dict[str, Any]:
        if "size" in options:
            # "COLSxROWS"; a missing segment raises IndexError.
            segments = str(options["size"]).split("x")
            options["cols"], options["rows"] = segments[0], segments[1]
            return options
        options.setdefault("cols", self.config.textarea_cols)
        options.setdefault("rows", self.config.textarea_rows)
        return options

    # ------------------------------------------------------------------ #
    # Select boxes
    # ------------------------------------------------------------------ #

    def select(
        self,
        name: str,
        items: Any = (),
        selected: Any = None,
        select_attributes: Options = None,
        option_attributes: Optional[Mapping[Any, Mapping[str, Any]]] = None,
        optgroup_attributes: Optional[Mapping[Any, Mapping[str, Any]]] = None,
        **attrs: Any,
    ) -> str:
        pending, rules = self._consume_pending()
        selected = self.resolver.resolve_value(name, selected, "select")

        attributes = self.build_attributes(
            "select",
            name,
            _merge_options(select_attributes, attrs),
            pending=pending,
            rules=rules,
            element="select",
        )
        placeholder = attributes.pop("placeholder", None)

        html = []
        if placeholder is not None:
            html.append(self.option_renderer.placeholder(placeholder, selected))
        html.append(
            self.option_renderer.render_list(items, selected, option_attributes, optgroup_attributes)
        )
        return f"<select{self.html.tag_attributes(attributes)}>{''.join(html)}</select>"

    def select_range(self, name: str, begin: int, end: int, selected: Any = None, options: Options = None, **attrs: Any) -> str:
        step = 1 if end >= begin else -1
        values = list(range(begin, end + step, step))
        return self.select(name, {value: value for value in values}, selected, _merge_options(options, attrs))

    def select_year(self, name: str, begin: int, end: int, selected: Any = None, options: Options = None, **attrs: Any) -> str:
        return self.select_range(name, begin, end, selected, options, **attrs)

    def select_month(self, name: str, selected: Any = None, options: Options = None, format: str = "%B", **attrs: Any) -> str:
        months = {month: dt.date(2000, month, 1).strftime(format) for month in range(1, 13)}
        return self.select(name, months, selected, _merge_options(options, attrs))

    def get_select_option(
        self,
        display: Any,
        value: Any,
        selected: Any,
        option_attributes: Options = None,
        optgroup_attributes: Options = None,
    ) -> str:
        return self.option_renderer.select_option(display, value, selected, option_attributes, optgroup_attributes)

    def datalist(self, id: str, items: Iterable[Any] = ()) -> str:
        attributes = self.html.tag_attributes({"id": id})
        return f"<datalist{attributes}>{self.option_renderer.datalist_options(items)}</datalist>"

    # ------------------------------------------------------------------ #
    # Checkboxes and radios
    # ------------------------------------------------------------------ #

    def checkbox(self, name: str, value: Any = 1, checked: Optional[bool] = None, options: Options = None, **attrs: Any) -> str:
        return self.checkable("checkbox", name, value, checked, _merge_options(options, attrs))

    def radio(self, name: str, value: Any = None, checked: Optional[bool] = None, options: Options = None, **attrs: Any) -> str:
        if value is None:
            value = name
        return self.checkable("radio", name, value, checked, _merge_options(options, attrs))

    def checkable(self, kind: str, name: str, value: Any, checked: Optional[bool], options: Options) -> str:
        options = dict(options or {})
        if self.get_checked_state(kind, name, value, checked):
            options["checked"] = True
        return self._input(kind, name, value, options)

    def get_checked_state(self, kind: str, name: str, value: Any, checked: Optional[bool]) -> bool:
        return self.resolver.resolve_checked(kind, name, value, checked)

    def toggle(self, name: str, value: Any = 1, checked: bool = False, options: Options = None, **attrs: Any) -> str:
        """Render a switch-style checkbox; ``label`` option renders beside it."""
        options = _merge_options(options, attrs)
        label = options.pop("label", None)

        if self._theme == "bootstrap":
            options["role"] = "switch"
            if label is not None:
                options.setdefault("id", name)
            html = '<div class="form-check form-switch">'
            html += self.checkbox(name, value, checked, options)
            if label is not None:
                html += self.label(name, label, {"class": "form-check-label"})
            return html + "</div>"

        if self._theme == "tailwind":
            pending, _ = self._consume_pending()
            is_checked = self.get_checked_state("checkbox", name, value, checked)
            attributes = {
                "type": "checkbox",
                "name": name,
                "value": value,
                "id": self.get_id_attribute(name, options),
                "class": "sr-only peer",
                "checked": is_checked,
                **pending,
                **{key: val for key, val in options.items() if key != "id"},
            }
            html = '<label class="inline-flex items-center cursor-pointer">'
            html += f"<input{self.html.tag_attributes(attributes)}>"
            html += f'<div class="{_TAILWIND_TOGGLE_TRACK}"></div>'
            if label is not None:
                html += f'<span class="ml-3 text-sm font-medium text-gray-900">{self.html.escape(label)}</span>'
            return html + "</label>"

        return self.checkbox(name, value, checked, options)

    # ------------------------------------------------------------------ #
    # Composite widgets
    # ------------------------------------------------------------------ #

    def floating(self, kind: str, name: str, value: Any = None, options: Options = None, label: Optional[str] = None, **attrs: Any) -> str:
        """Floating-label group: the label sits inside the control until focus."""
        options = _merge_options(options, attrs)
        label = self.format_label(name, label)

        if self._theme == "bootstrap":
            options.setdefault("placeholder", " ")
            options.setdefault("id", name)
            control = self.input(kind, name, value, options)
            return f'<div class="form-floating mb-3">{control}{self.label(name, label)}</div>'

        if self._theme == "tailwind":
            options.setdefault("placeholder", " ")
            options.setdefault("id", name)
            append_class(options, "peer placeholder-transparent")
            control = self.input(kind, name, value, options)
            label_html = self.label(name, label, {"class": _TAILWIND_FLOATING_LABEL})
            return f'<div class="relative mt-6">{control}{label_html}</div>'

        label_html = self.label(name, label)
        return f"<div>{label_html}{self.input(kind, name, value, options)}</div>"

    def honeypot(self, name: Optional[str] = None, time_name: Optional[str] = None) -> str:
        """Hidden anti-spam fields: a decoy text input and a render timestamp."""
        name = name or self.config.honeypot_name
        time_name = time_name or self.config.honeypot_time_name
        decoy = self._input("text", name, "", {"id": name, "tabindex": -1, "autocomplete": "off"}, populate=False)
        stamp = self._input("hidden", time_name, int(time.time()), {}, populate=False)
        return f'<div style="display:none;">{decoy}{stamp}</div>'

    def group(
        self,
        kind: str,
        name: str,
        value: Any = None,
        *,
        label: Optional[str] = None,
        help_text: Optional[str] = None,
        options: Options = None,
        **attrs: Any,
    ) -> str:
        """Label + control + help text + first error message, ARIA-linked."""
        options = _merge_options(options, attrs)
        field_id = str(options.get("id") or name)
        error_text = None
        if self.has_error(name):
            first = getattr(self.errors, "first", None)
            error_text = first(transform_key(name)) if callable(first) else None

        wrapper = FormGroup(
            field_id,
            self.label(name, label, {"for": field_id} if field_id != name else None),
            required=options.get("required") not in (None, False),
            help_text=help_text,
            error_text=error_text,
        )
        described_by = wrapper.described_by()
        if described_by and "aria-describedby" not in options:
            options["aria-describedby"] = described_by

        if kind == "textarea":
            control = self.textarea(name, value, options)
        else:
            control = self.input(kind, name, value, options)
        return wrapper.render(control)

