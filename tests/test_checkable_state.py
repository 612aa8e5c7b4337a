"""
Checked state for checkboxes and radios.
"""

from __future__ import annotations

from types import SimpleNamespace

from formsmith.forms.resolution import ValueResolver
from formsmith.forms.values import OldInput


def test_checkbox_unchecked_when_submission_omitted_it() -> None:
    resolver = ValueResolver(OldInput({"other": "x"}))
    resolver.model = {"newsletter": True}
    assert resolver.resolve_checked("checkbox", "newsletter", 1, True) is False


def test_checkbox_uses_explicit_state_without_old_or_model_data() -> None:
    resolver = ValueResolver()
    assert resolver.resolve_checked("checkbox", "newsletter", 1, True) is True
    assert resolver.resolve_checked("checkbox", "newsletter", 1, False) is False
    assert resolver.resolve_checked("checkbox", "newsletter", 1, None) is False


def test_checkbox_list_membership_is_loose() -> None:
    resolver = ValueResolver(OldInput({"roles": ["1", "3"]}))
    assert resolver.resolve_checked("checkbox", "roles[]", 1, None) is True
    assert resolver.resolve_checked("checkbox", "roles[]", 2, None) is False


def test_checkbox_model_collection_matches_by_id() -> None:
    resolver = ValueResolver()
    resolver.model = SimpleNamespace(roles=[SimpleNamespace(id=7, name="admin"), {"id": 9}])
    assert resolver.resolve_checked("checkbox", "roles[]", 7, None) is True
    assert resolver.resolve_checked("checkbox", "roles[]", "9", None) is True
    assert resolver.resolve_checked("checkbox", "roles[]", 8, None) is False


def test_checkbox_scalar_is_truthiness() -> None:
    resolver = ValueResolver()
    resolver.model = {"active": "0", "verified": 1}
    assert resolver.resolve_checked("checkbox", "active", 1, None) is False
    assert resolver.resolve_checked("checkbox", "verified", 1, None) is True


def test_radio_explicit_state_without_data() -> None:
    resolver = ValueResolver()
    assert resolver.resolve_checked("radio", "size", "L", True) is True


def test_radio_loose_comparison_against_model_and_old_input() -> None:
    resolver = ValueResolver()
    resolver.model = {"level": 2, "flag": True}
    assert resolver.resolve_checked("radio", "level", "2", None) is True
    assert resolver.resolve_checked("radio", "level", "3", None) is False
    assert resolver.resolve_checked("radio", "flag", 1, None) is True

    resolver = ValueResolver(OldInput({"level": "3"}))
    assert resolver.resolve_checked("radio", "level", 3, True) is True


def test_other_kinds_compare_loosely() -> None:
    resolver = ValueResolver(OldInput({"plan": "10"}))
    assert resolver.resolve_checked("switch", "plan", 10.0, None) is True


def test_no_radio_stays_unchecked_when_submission_omitted_the_group() -> None:
    resolver = ValueResolver(OldInput({"other": "x"}))
    resolver.model = {"agree": "1"}
    assert resolver.resolve_checked("radio", "agree", "0", None) is False
    assert resolver.resolve_checked("radio", "agree", "1", None) is False
