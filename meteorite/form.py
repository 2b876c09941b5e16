"""Basic form controls: groups, labels, inputs, selects, checkboxes and errors."""

from __future__ import annotations

from html import escape
from typing import Optional

__all__ = [
    "form_group",
    "form_label",
    "form_input",
    "form_textarea",
    "form_select",
    "form_checkbox",
    "form_error",
]

_ERROR_CLASS = "met-form-input-error"


def _attr(value: object) -> str:
    return escape(str(value), quote=True)


def _text(value: object) -> str:
    return escape(str(value), quote=False)


def _flag(name: str, on: bool) -> str:
    return f" {name}" if on else ""


def _id(element_id: Optional[str]) -> str:
    return f' id="{_attr(element_id)}"' if element_id is not None else ""


def form_group(children: str = "", css_class: str = "") -> str:
    """Wrap related form elements."""
    return f'<div class="{_attr(f"met-form-group {css_class}")}">{children}</div>'


def form_label(
    text: str,
    required: bool = False,
    for_id: Optional[str] = None,
    css_class: str = "",
) -> str:
    """Label, marked when the field is required."""
    req = "met-form-label-required" if required else ""
    target = f' for="{_attr(for_id)}"' if for_id is not None else ""
    return (
        f'<label class="{_attr(f"met-form-label {req} {css_class}")}"{target}>'
        f"{_text(text)}</label>"
    )


def form_input(
    value: str,
    input_type: str = "text",
    placeholder: str = "",
    disabled: bool = False,
    required: bool = False,
    size_class: str = "",
    error: bool = False,
    element_id: Optional[str] = None,
    css_class: str = "",
) -> str:
    """Single input element of the given type."""
    err = _ERROR_CLASS if error else ""
    classes = f"met-form-input {size_class} {err} {css_class}"
    return (
        f'<input class="{_attr(classes)}" type="{_attr(input_type)}" '
        f'value="{_attr(value)}" placeholder="{_attr(placeholder)}"'
        f'{_flag("disabled", disabled)}{_flag("required", required)}{_id(element_id)}>'
    )


def form_textarea(
    value: str,
    placeholder: str = "",
    rows: int = 3,
    disabled: bool = False,
    error: bool = False,
    element_id: Optional[str] = None,
    css_class: str = "",
) -> str:
    """Multi-line text area."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    err = _ERROR_CLASS if error else ""
    classes = f"met-form-textarea {err} {css_class}"
    return (
        f'<textarea class="{_attr(classes)}" placeholder="{_attr(placeholder)}" '
        f'rows="{rows}"{_flag("disabled", disabled)}{_id(element_id)}>'
        f"{_text(value)}</textarea>"
    )


def form_select(
    value: str,
    children: str = "",
    disabled: bool = False,
    size_class: str = "",
    error: bool = False,
    element_id: Optional[str] = None,
    css_class: str = "",
) -> str:
    """Select element holding the given option markup."""
    err = _ERROR_CLASS if error else ""
    classes = f"met-form-select {size_class} {err} {css_class}"
    return (
        f'<select class="{_attr(classes)}" value="{_attr(value)}"'
        f'{_flag("disabled", disabled)}{_id(element_id)}>{children}</select>'
    )


def form_checkbox(
    checked: bool, label: str, disabled: bool = False, css_class: str = ""
) -> str:
    """Checkbox with a label beside it."""
    return (
        f'<label class="{_attr(f"met-form-checkbox {css_class}")}">'
        f'<input type="checkbox"{_flag("checked", checked)}{_flag("disabled", disabled)}>'
        f"{_text(label)}</label>"
    )


def form_error(message: str, css_class: str = "") -> str:
    """Error message shown beneath a field."""
    return f'<div class="{_attr(f"met-form-error {css_class}")}">{_text(message)}</div>'