"""
Form builder and the pieces it is assembled from.
"""

from .builder import FormBuilder
from .errors import ErrorBag
from .macros import MacroRegistry
from .resolution import ValueResolver
from .rules import translate_rules
from .selects import OptionRenderer
from .themes import ThemeRegistry
from .urls import StaticUrlResolver, UrlResolver
from .values import OldInput, RequestInput, data_get, nest_form_items, transform_key

__all__ = [
    "FormBuilder",
    "ErrorBag",
    "MacroRegistry",
    "ValueResolver",
    "translate_rules",
    "OptionRenderer",
    "ThemeRegistry",
    "StaticUrlResolver",
    "UrlResolver",
    "OldInput",
    "RequestInput",
    "data_get",
    "nest_form_items",
    "transform_key",
]
