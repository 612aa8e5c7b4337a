"""
FastAPI / Starlette wiring for the form builder.

Intent:
    Give route handlers a ready builder for the current request: URLs resolve
    through the app's router, old input comes from the session (flashed by the
    POST handler before redirecting back), and the CSRF token is shared with
    the session.

Session:
    Any dict-like ``scope["session"]`` works (Starlette's SessionMiddleware or
    a custom middleware). Keys: ``_old_input`` (nested payload) and ``_token``.

Usage (PRG):
    @app.post("/profile")
    async def save(request: Request):
        form = await request.form()
        if not valid:
            flash_old_input(request.scope["session"], form.multi_items())
            return RedirectResponse("/profile", status_code=303)

    @app.get("/profile", response_class=HTMLResponse)
    async def edit(form: FormBuilder = Depends(get_form_builder)):
        return form.open({"route": "save"}) + form.text("name") + form.close()
"""

from __future__ import annotations

import logging
import secrets
from typing import Any, Callable, Iterable, Mapping, MutableMapping, Optional, Tuple, Union

from starlette.requests import Request
from starlette.routing import NoMatchFound

from ..config import FormConfig, load_form_config
from ..forms.builder import FormBuilder
from ..forms.errors import ErrorSource
from ..forms.themes import ThemeRegistry
from ..forms.urls import Params, join_path
from ..forms.values import OldInput, RequestInput, nest_form_items


logger = logging.getLogger("formsmith.web")

OLD_INPUT_KEY = "_old_input"
TOKEN_KEY = "_token"
NEVER_FLASH = ("password", "password_confirmation", "_token")


class StarletteUrlResolver:
    """UrlResolver backed by the request's router."""

    def __init__(self, request: Request) -> None:
        self.request = request

    def current_url(self) -> str:
        return str(self.request.url.replace(query=""))

    def to_path(self, path: str, params: Params = None) -> str:
        return join_path(str(self.request.base_url), path, params)

    def to_route(self, name: str, params: Params = None) -> str:
        if isinstance(params, Mapping):
            return str(self.request.url_for(name, **params))
        return join_path(str(self.request.url_for(name)), "", params).rstrip("/")

    def to_action(self, action: Union[str, Callable[..., Any]], params: Params = None) -> str:
        for route in getattr(self.request.app, "routes", []):
            endpoint = getattr(route, "endpoint", None)
            if endpoint is None:
                continue
            if endpoint is action or getattr(endpoint, "__name__", None) == action:
                return self.to_route(route.name, params)
        raise NoMatchFound(str(getattr(action, "__name__", action)), {})

    def asset_url(self, path: str) -> str:
        try:
            return str(self.request.url_for("static", path=path.lstrip("/")))
        except NoMatchFound:
            return join_path(str(self.request.base_url), path)


class SessionOldInput(OldInput):
    """Old input flashed into the session by the previous request."""

    def __init__(self, payload: Optional[Mapping[str, Any]] = None, token: Optional[str] = None) -> None:
        super().__init__(payload)
        self._token = token

    def token(self) -> Optional[str]:
        return self._token

    @classmethod
    def from_session(cls, session: MutableMapping[str, Any]) -> "SessionOldInput":
        """Take (and remove) the flashed payload: old input lives for one render."""
        payload = session.pop(OLD_INPUT_KEY, None) or {}
        return cls(payload, session.get(TOKEN_KEY))


def ensure_csrf_token(session: MutableMapping[str, Any]) -> str:
    token = session.get(TOKEN_KEY)
    if not token:
        token = secrets.token_urlsafe(24)
        session[TOKEN_KEY] = token
    return token


def flash_old_input(
    session: MutableMapping[str, Any],
    items: Iterable[Tuple[str, Any]],
    exclude: Iterable[str] = NEVER_FLASH,
) -> None:
    """Store submitted form items for repopulating the next render.

    Secrets (passwords, the CSRF token) are never flashed. Uploaded files are
    skipped; browsers cannot prefill file inputs anyway.
    """
    skipped = set(exclude)
    kept = [
        (name, value)
        for name, value in items
        if name not in skipped and isinstance(value, (str, int, float))
    ]
    session[OLD_INPUT_KEY] = nest_form_items(kept)


def form_builder_for(
    request: Request,
    *,
    config: Optional[FormConfig] = None,
    form_items: Optional[Iterable[Tuple[str, Any]]] = None,
    errors: Optional[ErrorSource] = None,
    themes: Optional[ThemeRegistry] = None,
) -> FormBuilder:
    """Build a FormBuilder wired to ``request``.

    ``form_items`` are the already-parsed body fields (``await request.form()``
    is async, so the caller reads it); they join the query string as the
    current-request store.
    """
    session = request.scope.get("session")
    old_input = None
    token = None
    if session is None:
        logger.warning("No session in request scope; old input and session CSRF token disabled")
    else:
        token = ensure_csrf_token(session)
        old_input = SessionOldInput.from_session(session)

    items = list(request.query_params.multi_items())
    items.extend(form_items or [])

    return FormBuilder(
        StarletteUrlResolver(request),
        token,
        config=config or load_form_config(),
        themes=themes,
        old_input=old_input,
        request=RequestInput.from_items(items),
        errors=errors,
    )


async def get_form_builder(request: Request) -> FormBuilder:
    """FastAPI dependency: ``form: FormBuilder = Depends(get_form_builder)``."""
    form_items = None
    if request.method in ("POST", "PUT", "PATCH"):
        form_items = (await request.form()).multi_items()
    return form_builder_for(request, form_items=form_items)
