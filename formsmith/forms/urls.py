"""
URL resolution used for form actions and image inputs.

The builder only needs five operations; framework adapters implement them
(see ``formsmith.web.starlette``). ``StaticUrlResolver`` covers scripts and
tests that render forms without a web framework.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, Sequence, Union


Params = Union[Sequence[Any], Mapping[str, Any], None]


class UrlResolver(Protocol):
    def current_url(self) -> str: ...

    def to_path(self, path: str, params: Params = None) -> str: ...

    def to_route(self, name: str, params: Params = None) -> str: ...

    def to_action(self, action: Union[str, Callable[..., Any]], params: Params = None) -> str: ...

    def asset_url(self, path: str) -> str: ...


def join_path(base: str, path: str, params: Params = None) -> str:
    """Join ``base`` and ``path``; positional params become extra segments."""
    if path.startswith(("http://", "https://", "//")):
        url = path
    else:
        url = f"{base.rstrip('/')}/{path.lstrip('/')}"
    if isinstance(params, Mapping):
        params = list(params.values())
    for param in params or ():
        url = f"{url.rstrip('/')}/{param}"
    return url


class StaticUrlResolver:
    """Framework-free resolver with a fixed base URL and route table."""

    def __init__(
        self,
        base_url: str = "",
        current: str = "",
        routes: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.base_url = base_url
        self.current = current or base_url or "/"
        self.routes = dict(routes or {})

    def current_url(self) -> str:
        return self.current

    def to_path(self, path: str, params: Params = None) -> str:
        return join_path(self.base_url, path, params)

    def to_route(self, name: str, params: Params = None) -> str:
        template = self.routes[name]
        if isinstance(params, Mapping):
            return join_path(self.base_url, template.format(**params))
        return join_path(self.base_url, template, params)

    def to_action(self, action: Union[str, Callable[..., Any]], params: Params = None) -> str:
        name = action if isinstance(action, str) else getattr(action, "__name__", str(action))
        return self.to_route(name, params)

    def asset_url(self, path: str) -> str:
        return join_path(self.base_url, path)
