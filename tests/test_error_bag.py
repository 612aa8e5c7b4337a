"""
ErrorBag construction from pydantic validation errors.
"""

from __future__ import annotations

import pytest
from pydantic import BaseModel, Field, ValidationError

from formsmith.forms.builder import FormBuilder
from formsmith.forms.errors import ErrorBag


class Address(BaseModel):
    city: str = Field(min_length=2)


class Signup(BaseModel):
    email: str
    address: Address


def _validation_error() -> ValidationError:
    with pytest.raises(ValidationError) as info:
        Signup.model_validate({"address": {"city": "B"}})
    return info.value


def test_from_validation_error_uses_dotted_locations() -> None:
    bag = ErrorBag.from_validation_error(_validation_error())
    assert bag.has("email")
    assert bag.has("address.city")
    assert not bag.has("address")
    assert bag.first("email")
    assert len(bag) == 2


def test_bracket_field_names_find_nested_errors() -> None:
    form = FormBuilder(errors=ErrorBag.from_validation_error(_validation_error()))
    form.bootstrap()
    html = form.text("address[city]")
    assert "is-invalid" in html
    assert 'aria-invalid="true"' in html


def test_manual_bag() -> None:
    bag = ErrorBag({"name": "Required"}).add("name", "Too short")
    assert bag.get("name") == ["Required", "Too short"]
    assert bag.first("missing") is None
    assert ErrorBag().is_empty()
