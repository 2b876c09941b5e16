"""Loading indicators: animated loaders, skeletons, spinners and overlays."""

from __future__ import annotations

from enum import Enum
from html import escape
from typing import Optional

__all__ = [
    "LoaderType",
    "LOADING_OVERLAY_SIZE_CLASS",
    "render_loader",
    "render_skeleton",
    "render_content_loader",
    "render_spinner",
    "render_loading_overlay",
]

MAX_LOADER_ITEMS = 10
MAX_SKELETON_LINES = 20
# Size class given to the spinner of a loading overlay.
LOADING_OVERLAY_SIZE_CLASS = "met-size-lg"

_SPINNER_ARC = (
    "M4 12a8 8 0 018-8V0C5.373 0 0 5.373 0 12h4zm2 5.291A7.962 7.962 0 014 12H0"
    "c0 3.042 1.135 5.824 3 7.938l3-2.647z"
)


def _attr(value: str) -> str:
    return escape(value, quote=True)


class LoaderType(Enum):
    """Visual style of a loader animation."""

    DOTS = "dots"
    BARS = "bars"
    PULSE = "pulse"
    SKELETON = "skeleton"


def _staggered(kind: str, count: int) -> str:
    return "".join(
        f'<span class="met-loader-{kind}" style="animation-delay: {i * 150}ms"></span>'
        for i in range(count)
    )


def render_loader(
    loader_type: LoaderType = LoaderType.DOTS, count: int = 3, css_class: str = ""
) -> str:
    """Render a loader; ``count`` dots or bars, at most ten."""
    shown = max(0, min(count, MAX_LOADER_ITEMS))
    if loader_type is LoaderType.SKELETON:
        return render_skeleton(css_class=css_class)
    if loader_type is LoaderType.PULSE:
        rings = '<div class="met-pulse-ring"></div>' * 3
        return f'<div class="{_attr(f"met-loader met-loader-pulse {css_class}")}">{rings}</div>'
    kind = "dot" if loader_type is LoaderType.DOTS else "bar"
    return (
        f'<div class="{_attr(f"met-loader met-loader-{kind}s {css_class}")}">'
        f"{_staggered(kind, shown)}</div>"
    )


def render_skeleton(lines: int = 3, show_avatar: bool = False, css_class: str = "") -> str:
    """Placeholder lines (at most twenty), the last one shortened."""
    shown = max(0, min(lines, MAX_SKELETON_LINES))
    avatar = '<div class="met-skeleton-avatar"></div>' if show_avatar else ""
    body = "".join(
        '<div class="met-skeleton-line" style="{}"></div>'.format(
            "width: 80%" if i == shown - 1 else ""
        )
        for i in range(shown)
    )
    return (
        f'<div class="{_attr(f"met-skeleton {css_class}")}">{avatar}'
        f'<div class="met-skeleton-content">{body}</div></div>'
    )


def render_content_loader(
    loading: bool,
    children: str = "",
    loader: Optional[str] = None,
    css_class: str = "",
) -> str:
    """Show ``children``, or a loader while ``loading`` is true."""
    if loading:
        inner = loader if loader is not None else render_loader()
    else:
        inner = children
    return f'<div class="{_attr(f"met-content-loader {css_class}")}">{inner}</div>'


def render_spinner(
    size_class: str = "",
    variant_class: str = "",
    label: Optional[str] = None,
    centered: bool = False,
    css_class: str = "",
) -> str:
    """Spinning arc with an optional label."""
    center = "met-spinner-centered" if centered else ""
    classes = f"met-spinner {size_class} {variant_class} {center} {css_class}"
    label_html = (
        f'<span class="met-spinner-label">{escape(label, quote=False)}</span>'
        if label is not None
        else ""
    )
    return (
        f'<div class="{_attr(classes)}" role="status">'
        '<svg class="met-spinner-svg" xmlns="http://www.w3.org/2000/svg" fill="none" '
        'viewBox="0 0 24 24">'
        '<circle class="met-spinner-track" cx="12" cy="12" r="10" stroke="currentColor" '
        'stroke-width="4"></circle>'
        f'<path class="met-spinner-arc" fill="currentColor" d="{_SPINNER_ARC}"></path>'
        f"</svg>{label_html}</div>"
    )


def render_loading_overlay(
    visible: bool, message: str = "Loading...", css_class: str = ""
) -> str:
    """Full-screen overlay with a large centered spinner; empty when hidden."""
    if not visible:
        return ""
    spinner = render_spinner(size_class=LOADING_OVERLAY_SIZE_CLASS, label=message, centered=True)
    return f'<div class="{_attr(f"met-loading-overlay {css_class}")}">{spinner}</div>'