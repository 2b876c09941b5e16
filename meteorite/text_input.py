"""Single-line text input and multi-line text area."""

from __future__ import annotations

from html import escape

__all__ = ["render_text_input", "render_textarea"]


def _attr(value: str) -> str:
    return escape(value, quote=True)


def _flag(name: str, on: bool) -> str:
    return f" {name}" if on else ""


def render_text_input(
    value: str,
    placeholder: str = "",
    size_class: str = "",
    disabled: bool = False,
    css_class: str = "",
) -> str:
    """Render a text input."""
    classes = f"met-input {size_class} {css_class}"
    return (
        f'<input type="text" class="{_attr(classes)}" value="{_attr(value)}" '
        f'placeholder="{_attr(placeholder)}"{_flag("disabled", disabled)}>'
    )


def render_textarea(
    value: str = "",
    placeholder: str = "",
    rows: int = 4,
    size_class: str = "",
    disabled: bool = False,
    readonly: bool = False,
    required: bool = False,
    css_class: str = "",
) -> str:
    """Render a multi-line text area."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    disabled_class = " met-textarea--disabled" if disabled else ""
    readonly_class = " met-textarea--readonly" if readonly else ""
    classes = f"met-textarea {size_class}{disabled_class}{readonly_class} {css_class}"
    flags = _flag("disabled", disabled) + _flag("readonly", readonly) + _flag("required", required)
    return (
        f'<textarea class="{_attr(classes)}" placeholder="{_attr(placeholder)}" '
        f'rows="{rows}"{flags}>{escape(value, quote=False)}</textarea>'
    )