"""
Translate declarative validation rules into HTML5 constraint attributes.

Only a small subset maps cleanly onto browser validation; everything else is
left to the server and ignored here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union


logger = logging.getLogger("formsmith.forms")

RuleSpec = Union[str, Iterable[str]]


def parse_rules(rules: RuleSpec) -> List[Tuple[str, List[str]]]:
    """Split ``"required|min:3"`` (or a list of tokens) into (name, params)."""
    tokens = rules.split("|") if isinstance(rules, str) else list(rules)
    parsed = []
    for token in tokens:
        token = str(token)
        if ":" in token:
            name, raw = token.split(":", 1)
            params = raw.split(",")
        else:
            name, params = token, []
        parsed.append((name.strip(), params))
    return parsed


def _param(raw: str) -> Any:
    raw = raw.strip()
    return int(raw) if raw.lstrip("-").isdigit() else raw


def _is_number(options: Mapping[str, Any]) -> bool:
    return (options.get("type") or "text") == "number"


def translate_rules(rules: RuleSpec, options: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``options`` with constraint attributes merged in.

    Example:
        >>> translate_rules("numeric|min:3|max:10", {})
        {'type': 'number', 'min': 3, 'max': 10}
    """
    result: Dict[str, Any] = dict(options)
    for name, params in parse_rules(rules):
        if name == "required":
            result["required"] = True
        elif name in ("email", "url"):
            result["type"] = result.get("type") or name
        elif name in ("numeric", "integer"):
            result["type"] = result.get("type") or "number"
        elif name in ("min", "max"):
            if params and params[0].strip() != "":
                key = name if _is_number(result) else f"{name}length"
                result[key] = _param(params[0])
        elif name == "between":
            if len(params) >= 2 and _is_number(result):
                result["min"], result["max"] = _param(params[0]), _param(params[1])
        elif name == "regex":
            if params:
                # Patterns may contain commas; rejoin what the split took apart.
                result["pattern"] = ",".join(params).strip("/")
        else:
            logger.debug("Ignoring validation rule without HTML5 counterpart: %s", name)
    return result
