"""Keyboard shortcuts overlay grouped by section."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from html import escape
from typing import Optional

__all__ = ["Shortcut", "ShortcutSection", "default_sections", "render_shortcuts_overlay"]


@dataclass(frozen=True)
class Shortcut:
    """A key combination and what it does."""

    key: str
    description: str


@dataclass(frozen=True)
class ShortcutSection:
    """A titled group of related shortcuts."""

    title: str
    shortcuts: tuple[Shortcut, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "shortcuts", tuple(self.shortcuts))


def default_sections() -> list[ShortcutSection]:
    """Generic editing shortcuts."""
    return [
        ShortcutSection(
            "Navigation",
            (
                Shortcut("Arrow Keys", "Move selection"),
                Shortcut("Home / End", "Start / end of row"),
                Shortcut("Page Up / Down", "Jump 10 rows"),
                Shortcut("Ctrl+Home / End", "First / last cell"),
            ),
        ),
        ShortcutSection(
            "Selection",
            (
                Shortcut("Enter", "Select"),
                Shortcut("Escape", "Cancel / clear"),
                Shortcut("Ctrl+A", "Select all"),
            ),
        ),
        ShortcutSection(
            "Clipboard",
            (
                Shortcut("Ctrl+C", "Copy"),
                Shortcut("Ctrl+V", "Paste"),
                Shortcut("Ctrl+X", "Cut"),
            ),
        ),
        ShortcutSection(
            "Search",
            (
                Shortcut("Ctrl+F", "Open search"),
                Shortcut("F3", "Next result"),
                Shortcut("Shift+F3", "Previous result"),
            ),
        ),
    ]


def _render_section(section: ShortcutSection) -> str:
    rows = "".join(
        '<div class="met-shortcuts-row">'
        f'<span class="met-shortcuts-key">{escape(s.key, quote=False)}</span>'
        f'<span class="met-shortcuts-desc">{escape(s.description, quote=False)}</span>'
        "</div>"
        for s in section.shortcuts
    )
    return (
        '<div class="met-shortcuts-section">'
        f"<h5>{escape(section.title, quote=False)}</h5>{rows}</div>"
    )


def render_shortcuts_overlay(
    visible: bool,
    sections: Optional[Sequence[ShortcutSection]] = None,
    title: str = "Keyboard Shortcuts",
    css_class: str = "",
) -> str:
    """Render the overlay, or an empty string when it is hidden."""
    if not visible:
        return ""
    shown = default_sections() if sections is None else sections
    body = "".join(_render_section(section) for section in shown)
    return (
        f'<div class="{escape(f"met-shortcuts-backdrop {css_class}", quote=True)}">'
        '<div class="met-shortcuts-panel">'
        '<div class="met-shortcuts-header">'
        f"<h4>{escape(title, quote=False)}</h4>"
        '<button class="met-shortcuts-close">×</button>'
        "</div>"
        f'<div class="met-shortcuts-body">{body}</div>'
        "</div></div>"
    )