"""
Form group wrapper component.

Keeps markup consistent across forms: label, control slot, help text and the
first validation error, wired together with ARIA ids.
"""

from typing import Optional

from .base import Component


class FormGroup(Component):
    """Wrapper that renders label, control slot, help, and error text."""

    def __init__(
        self,
        field_id: str,
        label_html: str,
        *,
        required: bool = False,
        help_text: Optional[str] = None,
        error_text: Optional[str] = None,
    ) -> None:
        self.field_id = field_id
        self.label_html = label_html
        self.required = required
        self.help_text = help_text
        self.error_text = error_text

    @property
    def help_id(self) -> str:
        return f"{self.field_id}-help"

    @property
    def error_id(self) -> str:
        return f"{self.field_id}-error"

    def described_by(self) -> Optional[str]:
        """Value for the control's ``aria-describedby``, if any."""
        ids = []
        if self.help_text:
            ids.append(self.help_id)
        if self.error_text:
            ids.append(self.error_id)
        return " ".join(ids) or None

    def render(self, control_html: str) -> str:
        state_class = self.classes("form-group", **{"form-group--error": bool(self.error_text)})
        required_marker = (
            '<span class="form-required" aria-hidden="true">*</span>'
            if self.required
            else ""
        )
        help_html = (
            f'<p class="form-help" id="{self.escape(self.help_id)}">{self.escape(self.help_text)}</p>'
            if self.help_text
            else ""
        )
        error_html = (
            f'<p class="form-error" role="alert" id="{self.escape(self.error_id)}">{self.escape(self.error_text)}</p>'
            if self.error_text
            else ""
        )
        return (
            f'<div class="{state_class}">'
            f"{self.label_html}{required_marker}"
            f"{control_html}"
            f"{help_html}"
            f"{error_html}"
            "</div>"
        )
