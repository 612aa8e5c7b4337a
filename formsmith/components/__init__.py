"""
Markup building blocks: attribute serialisation and small wrapper components.
"""

from .base import AttributeRenderer, Component, escape, render_attributes
from .fields import FormGroup

__all__ = [
    "AttributeRenderer",
    "Component",
    "escape",
    "render_attributes",
    "FormGroup",
]
