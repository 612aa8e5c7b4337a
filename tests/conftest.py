"""
Pytest configuration for formsmith tests.

Why: Force AnyIO to use the asyncio backend for the web adapter tests and give
every test a fresh builder (builders hold per-form state).
"""
import pytest

from formsmith.config import FormConfig
from formsmith.forms.builder import FormBuilder
from formsmith.forms.urls import StaticUrlResolver


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def urls() -> StaticUrlResolver:
    return StaticUrlResolver(
        base_url="http://localhost",
        current="http://localhost/profile",
        routes={"profile.update": "/profile/{id}", "courses.index": "/courses"},
    )


@pytest.fixture
def form(urls: StaticUrlResolver) -> FormBuilder:
    return FormBuilder(urls, "abc", config=FormConfig())
