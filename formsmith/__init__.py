# formsmith: server-rendered HTML form fields
# Value repopulation, theming and accessibility for plain-Python views

from .config import FormConfig, load_form_config
from .components import AttributeRenderer, Component, FormGroup, render_attributes
from .forms import (
    ErrorBag,
    FormBuilder,
    MacroRegistry,
    OldInput,
    RequestInput,
    StaticUrlResolver,
    ThemeRegistry,
    ValueResolver,
    transform_key,
    translate_rules,
)

__all__ = [
    "FormConfig",
    "load_form_config",
    "AttributeRenderer",
    "Component",
    "FormGroup",
    "render_attributes",
    "ErrorBag",
    "FormBuilder",
    "MacroRegistry",
    "OldInput",
    "RequestInput",
    "StaticUrlResolver",
    "ThemeRegistry",
    "ValueResolver",
    "transform_key",
    "translate_rules",
]
