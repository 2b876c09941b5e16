"""Layout primitives: container, grid, sidebar, split pane and stacks."""

from __future__ import annotations

import math
from enum import Enum
from html import escape

__all__ = [
    "SplitDirection",
    "container",
    "grid",
    "sidebar",
    "split",
    "vstack",
    "hstack",
]


def _attr(value: object) -> str:
    return escape(str(value), quote=True)


def _div(css_class: str, style: str, children: str) -> str:
    return f'<div class="{_attr(css_class)}" style="{_attr(style)}">{children}</div>'


class SplitDirection(Enum):
    """Orientation of a split pane."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def css_class(self) -> str:
        return f"met-split-{self.value}"


def container(children: str = "", max_width: str = "1200px", css_class: str = "") -> str:
    """Centered container with a maximum width."""
    return _div(f"met-container {css_class}", f"max-width: {max_width};", children)


def grid(
    children: str = "",
    columns: int = 12,
    gap: str = "var(--met-space-md)",
    css_class: str = "",
) -> str:
    """Grid of equal-width columns."""
    if columns < 0:
        raise ValueError("columns must not be negative")
    style = f"grid-template-columns: repeat({columns}, 1fr); gap: {gap};"
    return _div(f"met-grid {css_class}", style, children)


def sidebar(
    children: str = "",
    width: str = "250px",
    collapsed: bool = False,
    css_class: str = "",
) -> str:
    """Sidebar that shrinks to zero width when collapsed."""
    state = "met-sidebar-collapsed" if collapsed else ""
    shown_width = "0px" if collapsed else width
    return (
        f'<aside class="{_attr(f"met-sidebar {state} {css_class}")}" '
        f'style="{_attr(f"width: {shown_width};")}">{children}</aside>'
    )


def _percent(ratio: float) -> int:
    if math.isnan(ratio):
        return 0
    return int(min(max(ratio, 0.0), 1.0) * 100.0)


def split(
    direction: SplitDirection = SplitDirection.HORIZONTAL,
    ratio: float = 0.5,
    css_class: str = "",
) -> str:
    """Two panes separated by a handle, sized by ``ratio`` (clamped to 0..1)."""
    pct = _percent(ratio)
    rest = 100 - pct
    return (
        f'<div class="{_attr(f"met-split {direction.css_class} {css_class}")}">'
        f'<div class="met-split-pane" style="flex: {pct};"></div>'
        '<div class="met-split-handle"></div>'
        f'<div class="met-split-pane" style="flex: {rest};"></div>'
        "</div>"
    )


def vstack(children: str = "", gap: str = "var(--met-space-sm)", css_class: str = "") -> str:
    """Vertical stack layout."""
    return _div(f"met-vstack {css_class}", f"gap: {gap};", children)


def hstack(children: str = "", gap: str = "var(--met-space-sm)", css_class: str = "") -> str:
    """Horizontal stack layout."""
    return _div(f"met-hstack {css_class}", f"gap: {gap};", children)