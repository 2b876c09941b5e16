"""Select with a text field that filters its options."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from html import escape
from typing import Optional

__all__ = ["filter_options", "SearchableSelect"]


def filter_options(options: Sequence[str], term: str) -> list[str]:
    """Options containing ``term``, ignoring case; all of them when ``term`` is empty."""
    if not term:
        return list(options)
    lower = term.lower()
    return [option for option in options if lower in option.lower()]


@dataclass
class SearchableSelect:
    """Filterable dropdown state and events; ``render`` produces its HTML.

    Typing filters the list, Enter picks the exact match or the first match,
    Escape cancels and restores the current value.
    """

    value: str
    options: Sequence[str]
    on_change: Optional[Callable[[str], None]] = None
    placeholder: str = "Select…"
    disabled: bool = False
    size_class: str = ""
    css_class: str = ""
    is_open: bool = field(default=False, init=False)
    search_term: str = field(default="", init=False)

    def __post_init__(self) -> None:
        self.options = list(self.options)
        self.search_term = self.value

    def _close(self) -> None:
        self.is_open = False
        self.search_term = self.value

    # ── Events ──────────────────────────────────────────────────────

    def focus(self) -> None:
        """Focusing the field opens the dropdown."""
        if not self.disabled:
            self.is_open = True

    def blur(self) -> None:
        """Leaving the field closes the dropdown and restores the value."""
        self._close()

    def type_text(self, text: str) -> None:
        """Replace the search text and open the dropdown."""
        if self.disabled:
            return
        self.search_term = text
        self.is_open = True

    def choose(self, option: str) -> None:
        """Pick ``option``, report it to ``on_change`` and close."""
        if option not in self.options:
            raise ValueError(f"unknown option: {option!r}")
        if self.on_change is not None:
            self.on_change(option)
        self.value = option
        self._close()

    def key(self, key: str) -> bool:
        """Handle a key press; returns True when the default action is suppressed."""
        if self.disabled:
            return False
        if key == "Escape":
            self._close()
            return False
        if key == "Enter":
            matches = self.filtered()
            if matches:
                pick = self.search_term if self.search_term in matches else matches[0]
                self.choose(pick)
            return True
        if key == "ArrowDown":
            self.is_open = True
            return True
        return False

    def filtered(self) -> list[str]:
        """Options matching the current search text."""
        return filter_options(self.options, self.search_term)

    # ── Rendering ───────────────────────────────────────────────────

    def _render_dropdown(self) -> str:
        matches = self.filtered()
        if not matches:
            inner = '<div class="met-searchable-select-empty">No options found</div>'
        else:
            inner = "".join(
                f'<div class="met-searchable-select-option">{escape(o, quote=False)}</div>'
                for o in matches
            )
        return f'<div class="met-searchable-select-dropdown">{inner}</div>'

    def render(self) -> str:
        """Render the select as HTML."""
        classes = f"met-searchable-select {self.size_class} {self.css_class}"
        disabled = " disabled" if self.disabled else ""
        dropdown = self._render_dropdown() if self.is_open and not self.disabled else ""
        return (
            f'<div class="{escape(classes, quote=True)}">'
            '<input class="met-searchable-select-input" type="text" '
            f'value="{escape(self.search_term, quote=True)}" '
            f'placeholder="{escape(self.placeholder, quote=True)}" '
            f'autocomplete="off"{disabled}>'
            f"{dropdown}</div>"
        )