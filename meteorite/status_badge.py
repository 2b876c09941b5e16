"""Status badge showing an icon and a label for a status."""

from __future__ import annotations

from enum import Enum
from html import escape

__all__ = ["StatusVariant", "render_status_badge"]


class StatusVariant(Enum):
    """Status shown by a badge."""

    IDLE = "idle"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    CACHED = "cached"

    def icon(self) -> str:
        """Emoji for the status."""
        return _ICONS[self]

    def label(self) -> str:
        """Default label text."""
        return self.value.capitalize()

    def css_class(self) -> str:
        """CSS class for the status."""
        return f"met-status--{self.value}"


_ICONS = {
    StatusVariant.IDLE: "⚪",
    StatusVariant.PROCESSING: "🔄",
    StatusVariant.SUCCESS: "✅",
    StatusVariant.ERROR: "❌",
    StatusVariant.WARNING: "\u26a0\ufe0f",
    StatusVariant.CACHED: "💾",
}


def render_status_badge(
    variant: StatusVariant,
    text: str = "",
    animated: bool = False,
    css_class: str = "",
) -> str:
    """Render a badge; ``text`` overrides the label, animation applies to processing only."""
    label = text or variant.label()
    animated_class = (
        " met-status--animated" if animated and variant is StatusVariant.PROCESSING else ""
    )
    classes = f"met-status-badge {variant.css_class()}{animated_class} {css_class}"
    return (
        f'<div class="{escape(classes, quote=True)}">'
        f'<span class="met-status-icon">{variant.icon()}</span>'
        f'<span class="met-status-text">{escape(label, quote=False)}</span>'
        "</div>"
    )