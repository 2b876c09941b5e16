"""Tree data model: items with parent pointers flattened into visible rows."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

__all__ = ["TreeItem", "VisibleRow", "compute_visible_rows"]


@dataclass(frozen=True)
class TreeItem:
    """A single node in the tree, linked to its parent by id."""

    id: str
    label: str
    parent_id: Optional[str] = None
    icon: Optional[str] = None


@dataclass(frozen=True)
class VisibleRow:
    """A row produced by walking the expanded nodes of the tree."""

    id: str
    label: str
    icon: Optional[str]
    depth: int
    has_children: bool
    is_expanded: bool
    is_last_sibling: bool
    # One flag per ancestor, root first: True when that ancestor is the last
    # sibling at its level, so its guide column stays blank.
    ancestors_last: tuple[bool, ...]


def compute_visible_rows(
    items: Sequence[TreeItem], expanded: Iterable[str]
) -> list[VisibleRow]:
    """Flatten ``items`` into the rows shown when the ids in ``expanded`` are open.

    Items whose parent id is unknown are treated as roots. Siblings keep the
    order in which they appear in ``items``.
    """
    items = list(items)
    index_of = {item.id: i for i, item in enumerate(items)}

    roots: list[int] = []
    children: defaultdict[int, list[int]] = defaultdict(list)
    for i, item in enumerate(items):
        parent = index_of.get(item.parent_id) if item.parent_id is not None else None
        if parent is None:
            roots.append(i)
        else:
            children[parent].append(i)

    expanded_idx = {index_of[node_id] for node_id in expanded if node_id in index_of}

    def level(nodes: list[int], depth: int, ancestors: tuple[bool, ...]):
        last = len(nodes) - 1
        return [(node, depth, pos == last, ancestors) for pos, node in enumerate(nodes)]

    rows: list[VisibleRow] = []
    stack = list(reversed(level(roots, 0, ())))
    while stack:
        node, depth, is_last, ancestors = stack.pop()
        kids = children.get(node, [])
        is_open = bool(kids) and node in expanded_idx
        item = items[node]
        rows.append(
            VisibleRow(
                id=item.id,
                label=item.label,
                icon=item.icon,
                depth=depth,
                has_children=bool(kids),
                is_expanded=is_open,
                is_last_sibling=is_last,
                ancestors_last=ancestors,
            )
        )
        if is_open:
            stack.extend(reversed(level(kids, depth + 1, ancestors + (is_last,))))
    return rows