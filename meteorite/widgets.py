"""Basic widgets: alert, badge, button, card and divider."""

from __future__ import annotations

from enum import Enum
from html import escape
from typing import Optional

__all__ = [
    "DividerStyle",
    "render_alert",
    "render_badge",
    "render_button",
    "render_card",
    "render_card_header",
    "render_card_body",
    "render_card_footer",
    "render_divider",
]


def _attr(value: object) -> str:
    return escape(str(value), quote=True)


def _text(value: object) -> str:
    return escape(str(value), quote=False)


class DividerStyle(Enum):
    """Line style of a divider."""

    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"

    def css_class(self) -> str:
        return f"met-divider-{self.value}"


_ALERT_ICONS = {"success": "✓", "danger": "✕", "warning": "⚠"}


def render_alert(
    children: str = "",
    variant: Optional[str] = None,
    variant_class: str = "",
    title: Optional[str] = None,
    dismissible: bool = False,
    css_class: str = "",
) -> str:
    """Alert box; ``variant`` names the variant (success, danger, warning, ...)."""
    icon = _ALERT_ICONS.get((variant or "").lower(), "ℹ")
    title_html = (
        f'<div class="met-alert-title">{_text(title)}</div>' if title is not None else ""
    )
    dismiss = (
        '<button class="met-alert-dismiss" aria-label="Dismiss">✕</button>'
        if dismissible
        else ""
    )
    return (
        f'<div class="{_attr(f"met-alert {variant_class} {css_class}")}" role="alert">'
        f'<span class="met-alert-icon">{icon}</span>'
        f'<div class="met-alert-content">{title_html}'
        f'<div class="met-alert-body">{children}</div></div>'
        f"{dismiss}</div>"
    )


def render_badge(children: str = "", variant_class: str = "", css_class: str = "") -> str:
    """Small inline label."""
    return f'<span class="{_attr(f"met-badge {variant_class} {css_class}")}">{children}</span>'


def render_button(
    children: str = "",
    variant_class: str = "",
    size_class: str = "",
    disabled: bool = False,
    loading: bool = False,
    css_class: str = "",
) -> str:
    """Button; a loading button is disabled and shows a spinner."""
    classes = f"met-btn {variant_class} {size_class} {css_class}"
    flag = " disabled" if disabled or loading else ""
    spinner = '<span class="met-btn-spinner"></span>' if loading else ""
    return f'<button class="{_attr(classes)}"{flag}>{spinner}{children}</button>'


def render_card(
    children: str = "",
    variant_class: str = "",
    padding_class: str = "",
    hoverable: bool = False,
    clickable: bool = False,
    css_class: str = "",
) -> str:
    """Card container; clickable cards get the hover effect too."""
    hover = "met-card-hoverable" if hoverable or clickable else ""
    classes = f"met-card {variant_class} {padding_class} {hover} {css_class}"
    return f'<div class="{_attr(classes)}">{children}</div>'


def render_card_header(children: str = "", css_class: str = "") -> str:
    """Header section of a card."""
    return f'<div class="{_attr(f"met-card-header {css_class}")}">{children}</div>'


def render_card_body(children: str = "", css_class: str = "") -> str:
    """Body section of a card."""
    return f'<div class="{_attr(f"met-card-body {css_class}")}">{children}</div>'


def render_card_footer(children: str = "", css_class: str = "") -> str:
    """Footer section of a card."""
    return f'<div class="{_attr(f"met-card-footer {css_class}")}">{children}</div>'


def _separator(horizontal: bool, css_class: Optional[str] = None) -> str:
    orientation = "horizontal" if horizontal else "vertical"
    cls = f' class="{_attr(css_class)}"' if css_class is not None else ""
    return f'<div{cls} role="none" data-orientation="{orientation}"></div>'


def render_divider(
    horizontal: bool = True,
    style: DividerStyle = DividerStyle.SOLID,
    text: Optional[str] = None,
    css_class: str = "",
) -> str:
    """Decorative separator line, optionally with a label in the middle."""
    classes = f"met-divider {style.css_class()} {css_class}"
    if text is None:
        return _separator(horizontal, classes)
    return (
        f'<div class="{_attr(f"met-divider-with-text {classes}")}">'
        f"{_separator(horizontal)}"
        f'<span class="met-divider-text">{_text(text)}</span>'
        f"{_separator(horizontal)}</div>"
    )