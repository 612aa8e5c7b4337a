"""
Builder configuration parsing and validation.

Intent:
    Provide a single place to read the environment variables that control the
    default theme, honeypot field names, request consideration and textarea
    size. Builders receive a ``FormConfig`` explicitly, so several differently
    configured builders can live in one process.

Why:
    Centralising configuration keeps defaults explicit and lets tests exercise
    config behaviour without constructing a builder.
"""
from __future__ import annotations

from dataclasses import dataclass
import os
import re
from typing import Optional


KNOWN_THEMES = {"bootstrap", "tailwind"}
_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-]*$")
_SIZE_RE = re.compile(r"^(\d+)x(\d+)$")


@dataclass(frozen=True)
class FormConfig:
    theme: Optional[str] = None  # None | "bootstrap" | "tailwind"
    honeypot_name: str = "my_name"
    honeypot_time_name: str = "my_time"
    consider_request: bool = False
    textarea_cols: int = 50
    textarea_rows: int = 10


def _env(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip()


def _bool_env(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    value = raw.lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"{name} must be a boolean flag, got: {raw!r}")


def _field_name_env(name: str, default: str) -> str:
    raw = _env(name)
    if raw is None:
        return default
    if not _NAME_RE.match(raw):
        raise ValueError(f"{name} must be a plain field name, got: {raw!r}")
    return raw


def load_form_config() -> FormConfig:
    """
    Parse and validate form builder configuration from environment variables.

    Behavior:
        - `FORMSMITH_THEME` selects "bootstrap", "tailwind" or "none" (default).
        - `FORMSMITH_HONEYPOT_NAME` / `FORMSMITH_HONEYPOT_TIME_NAME` rename the
          anti-spam fields.
        - `FORMSMITH_CONSIDER_REQUEST` enables current-request repopulation.
        - `FORMSMITH_TEXTAREA_SIZE` sets default textarea size as `COLSxROWS`.
    """
    theme = _env("FORMSMITH_THEME")
    if theme is not None:
        theme = theme.lower()
        if theme == "none":
            theme = None
        elif theme not in KNOWN_THEMES:
            raise ValueError("FORMSMITH_THEME must be 'bootstrap', 'tailwind' or 'none'")

    cols, rows = 50, 10
    size = _env("FORMSMITH_TEXTAREA_SIZE")
    if size is not None:
        m = _SIZE_RE.match(size)
        if not m:
            raise ValueError(f"FORMSMITH_TEXTAREA_SIZE must look like 50x10, got: {size!r}")
        cols, rows = int(m.group(1)), int(m.group(2))

    return FormConfig(
        theme=theme,
        honeypot_name=_field_name_env("FORMSMITH_HONEYPOT_NAME", "my_name"),
        honeypot_time_name=_field_name_env("FORMSMITH_HONEYPOT_TIME_NAME", "my_time"),
        consider_request=_bool_env("FORMSMITH_CONSIDER_REQUEST", False),
        textarea_cols=cols,
        textarea_rows=rows,
    )
