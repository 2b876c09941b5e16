"""Tree view with expand/collapse, keyboard navigation and guide lines."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from collections.abc import Set as AbstractSet
from dataclasses import dataclass, field
from html import escape
from typing import Optional

from .tree_model import TreeItem, VisibleRow, compute_visible_rows

__all__ = ["Tree"]


def _attr(value: object) -> str:
    return escape(str(value), quote=True)


def _text(value: object) -> str:
    return escape(str(value), quote=False)


def _number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


@dataclass
class Tree:
    """Tree view state and events; ``render`` produces its HTML.

    When ``expanded`` is given the caller controls the open nodes and must
    update it from ``on_toggle``; otherwise the tree keeps its own set.
    """

    items: Sequence[TreeItem]
    on_select: Optional[Callable[[str], None]] = None
    on_toggle: Optional[Callable[[frozenset[str]], None]] = None
    expanded: Optional[AbstractSet[str]] = None
    show_guides: bool = True
    css_class: str = ""
    _internal: frozenset[str] = field(default_factory=frozenset, init=False, repr=False)

    @property
    def current_expanded(self) -> frozenset[str]:
        """The set of open node ids in effect."""
        if self.expanded is not None:
            return frozenset(self.expanded)
        return self._internal

    def visible_rows(self) -> list[VisibleRow]:
        """Rows currently shown."""
        return compute_visible_rows(self.items, self.current_expanded)

    def _row(self, node_id: str) -> VisibleRow:
        for row in self.visible_rows():
            if row.id == node_id:
                return row
        raise KeyError(node_id)

    def _commit(self, new_expanded: frozenset[str]) -> frozenset[str]:
        if self.expanded is None:
            self._internal = new_expanded
        if self.on_toggle is not None:
            self.on_toggle(new_expanded)
        return new_expanded

    # ── Events ──────────────────────────────────────────────────────

    def toggle(self, node_id: str) -> frozenset[str]:
        """Open or close a visible node; returns the resulting expanded set."""
        row = self._row(node_id)
        current = self.current_expanded
        if not row.has_children:
            return current
        return self._commit(current ^ {node_id})

    def select(self, node_id: str) -> None:
        """Select a visible node."""
        self._row(node_id)
        if self.on_select is not None:
            self.on_select(node_id)

    def key(self, node_id: str, key: str) -> bool:
        """Handle a key pressed on a row; returns True when the key was consumed."""
        row = self._row(node_id)
        current = self.current_expanded
        if key == "Enter":
            if row.has_children:
                self._commit(current ^ {node_id})
            if self.on_select is not None:
                self.on_select(node_id)
            return True
        if key == " ":
            if row.has_children:
                self._commit(current ^ {node_id})
            return True
        if key == "ArrowRight" and row.has_children and not row.is_expanded:
            self._commit(current | {node_id})
            return True
        if key == "ArrowLeft" and row.has_children and row.is_expanded:
            self._commit(current - {node_id})
            return True
        return False

    # ── Rendering ───────────────────────────────────────────────────

    @staticmethod
    def _render_guides(row: VisibleRow) -> str:
        parts = []
        for ancestor_last in row.ancestors_last:
            if ancestor_last:
                parts.append('<span class="met-tree-guide met-tree-guide-blank">  </span>')
            else:
                parts.append('<span class="met-tree-guide met-tree-guide-pipe">│ </span>')
        if row.depth > 0:
            if row.is_last_sibling:
                parts.append('<span class="met-tree-guide met-tree-guide-corner">└ </span>')
            else:
                parts.append('<span class="met-tree-guide met-tree-guide-tee">├ </span>')
        return f'<span class="met-tree-guides">{"".join(parts)}</span>'

    def _render_row(self, row: VisibleRow) -> str:
        if row.has_children:
            aria = "true" if row.is_expanded else "false"
            chevron = "▾" if row.is_expanded else "▸"
            toggle = f'<span class="met-tree-toggle">{chevron}</span>'
        else:
            aria = ""
            toggle = '<span class="met-tree-toggle met-tree-toggle-leaf"> </span>'
        guides = self._render_guides(row) if self.show_guides else ""
        icon = f'<span class="met-tree-icon">{_text(row.icon)}</span>' if row.icon is not None else ""
        style = f"padding-left: {_number(row.depth * 1.25)}rem;"
        return (
            f'<li class="met-tree-row" role="treeitem" aria-expanded="{aria}" '
            f'style="{style}" tabindex="0">'
            f"{guides}{toggle}{icon}"
            f'<span class="met-tree-label">{_text(row.label)}</span></li>'
        )

    def render(self) -> str:
        """Render the tree as HTML."""
        body = "".join(self._render_row(row) for row in self.visible_rows())
        return f'<ul class="{_attr(f"met-tree {self.css_class}")}" role="tree">{body}</ul>'