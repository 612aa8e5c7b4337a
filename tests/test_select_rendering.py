"""
Select boxes: option ordering, optgroups, selection tests, placeholders.
"""

from __future__ import annotations

import enum

from formsmith.forms.builder import FormBuilder
from formsmith.forms.selects import OptionRenderer, is_selected
from formsmith.forms.values import OldInput


class Size(enum.Enum):
    SMALL = "s"
    LARGE = "l"


def test_basic_select_marks_selected(form: FormBuilder) -> None:
    html = form.select("size", {"L": "Large", "S": "Small"}, "S")
    assert html == (
        '<select name="size">'
        '<option value="L">Large</option>'
        '<option value="S" selected>Small</option>'
        "</select>"
    )


def test_optgroup_wraps_nested_entries_preserving_order(form: FormBuilder) -> None:
    html = form.select("pick", {"A": {"x": "X", "y": "Y"}, "B": "plain"})
    assert html.count("<optgroup") == 1
    assert html.count("<option") == 3
    assert html.index('label="A"') < html.index('value="x"') < html.index('value="y"') < html.index('value="B"')
    assert html.index("</optgroup>") < html.index('<option value="B">plain</option>')


def test_nested_list_in_plain_sequence_is_labelled_by_position(form: FormBuilder) -> None:
    html = form.select("pick", [["x", "y"], "plain"])
    assert html == (
        '<select name="pick">'
        '<optgroup label="0"><option value="x">x</option><option value="y">y</option></optgroup>'
        '<option value="plain">plain</option>'
        "</select>"
    )


def test_nested_optgroups_indent_labels() -> None:
    renderer = OptionRenderer()
    html = renderer.render_list({"Outer": {"Inner": {"v": "Deep"}}}, None)
    assert '<optgroup label="Outer">' in html
    assert '<optgroup label="&nbsp;&nbsp;&nbsp;&nbsp;&nbsp;Inner">' in html
    assert '<option value="v">&nbsp;&nbsp;&nbsp;&nbsp;&nbsp;Deep</option>' in html


def test_placeholder_option_is_selected_when_nothing_is(form: FormBuilder) -> None:
    html = form.select("size", {"L": "Large"}, None, {"placeholder": "Pick a size"})
    assert html.startswith('<select name="size"><option selected value="">Pick a size</option>')
    assert "placeholder=" not in html


def test_multiple_selection_from_list(form: FormBuilder) -> None:
    html = form.select("tags[]", {1: "One", 2: "Two", 3: "Three"}, [1, "3"], {"multiple": True})
    assert '<option value="1" selected>One</option>' in html
    assert '<option value="2">Two</option>' in html
    assert '<option value="3" selected>Three</option>' in html


def test_selection_from_old_input_list_is_read_whole() -> None:
    form = FormBuilder(old_input=OldInput({"tags": ["a", "c"]}))
    html = form.select("tags[]", ["a", "b", "c"], None, {"multiple": True})
    assert '<option value="a" selected>a</option>' in html
    assert '<option value="c" selected>c</option>' in html
    assert '<option value="b">b</option>' in html


def test_selection_from_model(form: FormBuilder) -> None:
    form.model({"size": "L"})
    assert '<option value="L" selected>Large</option>' in form.select("size", {"L": "Large", "S": "Small"})


def test_selection_rules() -> None:
    assert is_selected(1, [1, 2])
    assert is_selected(1, ["1"])
    assert not is_selected("1", [1])
    assert is_selected("2", {2, 3})
    assert is_selected(1, True)
    assert is_selected(0, False)
    assert is_selected(2, "2")
    assert not is_selected("a", None)


def test_enum_options(form: FormBuilder) -> None:
    html = form.select("size", Size, "l")
    assert '<option value="s">SMALL</option>' in html
    assert '<option value="l" selected>LARGE</option>' in html


def test_option_and_optgroup_attributes(form: FormBuilder) -> None:
    html = form.select(
        "pick",
        {"A": {"x": "X"}, "B": "plain"},
        None,
        None,
        {"B": {"disabled": True}, "x": {"data-k": "1"}},
        {"A": {"class": "grp"}},
    )
    assert '<optgroup label="A" class="grp">' in html
    assert '<option value="x" data-k="1">X</option>' in html
    assert '<option value="B" disabled>plain</option>' in html


def test_select_range_and_year(form: FormBuilder) -> None:
    html = form.select_range("n", 3, 1, 2)
    assert html.index('value="3"') < html.index('value="2"') < html.index('value="1"')
    assert '<option value="2" selected>2</option>' in html
    assert form.select_year("y", 2020, 2022).count("<option") == 3


def test_select_month_uses_format(form: FormBuilder) -> None:
    html = form.select_month("m", 3, None, "%m")
    assert html.count("<option") == 12
    assert '<option value="3" selected>03</option>' in html


def test_datalist_sequence_and_mapping(form: FormBuilder) -> None:
    assert form.datalist("cities", ["Berlin", "Paris"]) == (
        '<datalist id="cities"><option value="Berlin">Berlin</option>'
        '<option value="Paris">Paris</option></datalist>'
    )
    html = form.datalist("codes", {"de": "Germany"})
    assert '<option value="de">Germany</option>' in html


def test_options_are_escaped(form: FormBuilder) -> None:
    html = form.select("x", {"<a>": "<b>"})
    assert '<option value="&lt;a&gt;">&lt;b&gt;</option>' in html
