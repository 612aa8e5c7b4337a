"""
Web framework adapters (FastAPI / Starlette).
"""

from .starlette import (
    SessionOldInput,
    StarletteUrlResolver,
    ensure_csrf_token,
    flash_old_input,
    form_builder_for,
    get_form_builder,
)

__all__ = [
    "SessionOldInput",
    "StarletteUrlResolver",
    "ensure_csrf_token",
    "flash_old_input",
    "form_builder_for",
    "get_form_builder",
]
