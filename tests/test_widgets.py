"""
Field kinds beyond plain inputs: textarea, checkable inputs, buttons,
toggles, floating labels, honeypot, icons and form groups.
"""

from __future__ import annotations

import pytest

from formsmith.config import FormConfig
from formsmith.forms.builder import FormBuilder
from formsmith.forms.errors import ErrorBag
from formsmith.forms.values import OldInput


def test_textarea_defaults_and_escaping(form: FormBuilder) -> None:
    html = form.textarea("bio", "<hi>")
    assert html == '<textarea cols="50" rows="10" name="bio">&lt;hi&gt;</textarea>'


def test_textarea_size_shorthand(form: FormBuilder) -> None:
    html = form.textarea("bio", None, {"size": "30x5"})
    assert 'cols="30"' in html and 'rows="5"' in html
    assert "size=" not in html


def test_textarea_size_without_rows_fails_loudly(form: FormBuilder) -> None:
    with pytest.raises(IndexError):
        form.textarea("bio", None, {"size": "30"})


def test_textarea_default_size_from_config() -> None:
    form = FormBuilder(config=FormConfig(textarea_cols=20, textarea_rows=3))
    html = form.textarea("bio")
    assert 'cols="20"' in html and 'rows="3"' in html


def test_password_and_file_are_never_repopulated() -> None:
    form = FormBuilder(old_input=OldInput({"secret": "hunter2", "upload": "a.pdf"}))
    assert form.password("secret") == '<input name="secret" type="password" value="">'
    assert "value=" not in form.file("upload")


def test_checkbox_checked_from_explicit_state(form: FormBuilder) -> None:
    assert form.checkbox("agree", 1, True) == '<input checked name="agree" type="checkbox" value="1">'
    assert "checked" not in form.checkbox("agree")


def test_checkbox_unchecked_when_submission_omitted_it() -> None:
    form = FormBuilder(old_input=OldInput({"name": "x"}))
    assert "checked" not in form.checkbox("agree", 1, True)


def test_checkbox_array_from_old_input() -> None:
    form = FormBuilder(old_input=OldInput({"roles": ["2"]}))
    assert "checked" not in form.checkbox("roles[]", 1)
    assert "checked" in form.checkbox("roles[]", 2)


def test_radio_value_defaults_to_name(form: FormBuilder) -> None:
    assert form.radio("yes") == '<input name="yes" type="radio" value="yes">'


def test_radio_checked_from_model(form: FormBuilder) -> None:
    form.model({"size": "L"})
    assert "checked" in form.radio("size", "L")
    assert "checked" not in form.radio("size", "S")


def test_submit_reset_and_button(form: FormBuilder) -> None:
    assert form.submit("Save") == '<input type="submit" value="Save">'
    assert form.reset("Clear") == '<input type="reset" value="Clear">'
    assert form.button("<i>Go</i>") == '<button type="button"><i>Go</i></button>'
    assert form.button("Go", {"type": "submit"}) == '<button type="submit">Go</button>'


def test_submit_ignores_old_input_blanking() -> None:
    form = FormBuilder(old_input=OldInput({"name": "x"}))
    assert 'value="Save"' in form.submit("Save")


def test_button_takes_staged_attributes(form: FormBuilder) -> None:
    html = form.wire_click("save").button("Go")
    assert 'wire:click="save"' in html


def test_image_uses_asset_url(form: FormBuilder) -> None:
    html = form.image("img/send.png", "send")
    assert 'src="http://localhost/img/send.png"' in html
    assert 'type="image"' in html


def test_bootstrap_toggle(form: FormBuilder) -> None:
    form.bootstrap()
    html = form.toggle("notify", 1, True, {"label": "Notify me"})
    assert html.startswith('<div class="form-check form-switch">')
    assert 'role="switch"' in html
    assert "checked" in html
    assert 'id="notify"' in html
    assert '<label for="notify" class="form-check-label form-label">Notify me</label>' in html
    assert 'label="' not in html


def test_tailwind_toggle(form: FormBuilder) -> None:
    form.tailwind()
    html = form.toggle("notify", 1, False, {"label": "Notify"})
    assert html.startswith('<label class="inline-flex items-center cursor-pointer">')
    assert 'class="sr-only peer"' in html
    assert " checked" not in html
    assert '<span class="ml-3 text-sm font-medium text-gray-900">Notify</span>' in html


def test_unthemed_toggle_is_a_checkbox(form: FormBuilder) -> None:
    assert form.toggle("notify") == '<input name="notify" type="checkbox" value="1">'


def test_floating_label_variants(form: FormBuilder) -> None:
    plain = form.floating("email", "email_address")
    assert plain.startswith('<div><label for="email_address">Email Address</label>')
    assert 'id="email_address"' in plain

    form.bootstrap()
    boot = form.floating("email", "email", None, None, "Your mail")
    assert boot.startswith('<div class="form-floating mb-3"><input')
    assert 'placeholder=" "' in boot
    assert 'id="email"' in boot

    form.tailwind()
    tail = form.floating("text", "city")
    assert tail.startswith('<div class="relative mt-6">')
    assert "peer placeholder-transparent" in tail


def test_honeypot_uses_config_names_and_ignores_old_input() -> None:
    form = FormBuilder(
        config=FormConfig(honeypot_name="hp", honeypot_time_name="hp_t"),
        old_input=OldInput({"name": "x"}),
    )
    html = form.honeypot()
    assert html.startswith('<div style="display:none;">')
    assert 'name="hp"' in html and 'id="hp"' in html and 'tabindex="-1"' in html
    assert 'autocomplete="off"' in html
    assert 'name="hp_t" type="hidden" value="' in html


def test_icon_wrapping_per_theme(form: FormBuilder) -> None:
    assert form.text("q", None, {"icon": "@"}).startswith('<div class="input-icon">@<input')
    form.bootstrap()
    assert '<span class="input-group-text">@</span>' in form.text("q", None, {"icon": "@"})
    form.tailwind()
    assert 'class="pl-10 ' in form.text("q", None, {"icon": "@"})
    assert "icon=" not in form.text("q", None, {"icon": "@"})


def test_group_wires_label_help_and_error(form: FormBuilder) -> None:
    form.set_error_bag(ErrorBag({"email": ["Please enter an email."]}))
    html = form.group("email", "email", label="E-Mail", help_text="We never share it.", required=True)
    assert '<label for="email">E-Mail</label>' in html
    assert 'id="email"' in html
    assert 'aria-describedby="email-help email-error"' in html
    assert '<p class="form-help" id="email-help">We never share it.</p>' in html
    assert '<p class="form-error" role="alert" id="email-error">Please enter an email.</p>' in html
    assert 'aria-required="true"' in html
    assert 'class="form-group form-group--error"' in html


def test_group_textarea(form: FormBuilder) -> None:
    html = form.group("textarea", "bio", "Hello")
    assert "<textarea" in html and ">Hello</textarea>" in html


def test_zero_valued_radio_not_checked_after_partial_submission() -> None:
    form = FormBuilder(old_input=OldInput({"other": "x"}))
    form.model({"agree": "1"})
    assert form.radio("agree", "0") == '<input name="agree" type="radio" value="0">'
