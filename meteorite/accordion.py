"""Accordion of collapsible sections."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from html import escape
from typing import Optional

__all__ = ["AccordionSection", "Accordion"]


def _attr(value: object) -> str:
    return escape(str(value), quote=True)


def _text(value: object) -> str:
    return escape(str(value), quote=False)


@dataclass(frozen=True)
class AccordionSection:
    """A section with a title and HTML content."""

    id: str
    title: str
    content: str = ""
    icon: Optional[str] = None
    disabled: bool = False


@dataclass
class Accordion:
    """Accordion state and events; ``render`` produces its HTML.

    Only one section is open at a time unless ``allow_multiple`` is set.
    When ``collapsible`` is false the last open section cannot be closed.
    """

    items: Sequence[AccordionSection]
    allow_multiple: bool = False
    default_open: Iterable[str] = ()
    collapsible: bool = True
    css_class: str = ""
    _open: set[str] = field(default_factory=set, init=False, repr=False)

    def __post_init__(self) -> None:
        self.items = list(self.items)
        wanted = set(self.default_open)
        opened = [item.id for item in self.items if item.id in wanted]
        if not self.allow_multiple:
            opened = opened[:1]
        self._open = set(opened)

    def _section(self, section_id: str) -> AccordionSection:
        for item in self.items:
            if item.id == section_id:
                return item
        raise KeyError(section_id)

    def is_open(self, section_id: str) -> bool:
        """Whether the section is open."""
        self._section(section_id)
        return section_id in self._open

    def toggle(self, section_id: str) -> bool:
        """Open or close a section; returns whether it is open afterwards."""
        section = self._section(section_id)
        if section.disabled:
            return section_id in self._open
        if section_id in self._open:
            if not self.collapsible and len(self._open) == 1:
                return True
            self._open.discard(section_id)
            return False
        if self.allow_multiple:
            self._open.add(section_id)
        else:
            self._open = {section_id}
        return True

    def _render_section(self, index: int, section: AccordionSection) -> str:
        is_open = section.id in self._open
        state = "open" if is_open else "closed"
        flag = " disabled" if section.disabled else ""
        icon = (
            f'<span class="met-accordion-icon">{_text(section.icon)}</span>'
            if section.icon is not None
            else ""
        )
        hidden = "" if is_open else " hidden"
        return (
            f'<div class="met-accordion-item" data-index="{index}" data-state="{state}">'
            f'<button class="met-accordion-trigger" type="button" '
            f'aria-expanded="{str(is_open).lower()}"{flag}>'
            '<div class="met-accordion-trigger-content">'
            '<span class="met-accordion-chevron">▶</span>'
            f"{icon}"
            f'<span class="met-accordion-title">{_text(section.title)}</span>'
            "</div></button>"
            f'<div class="met-accordion-content"{hidden}>{section.content}</div>'
            "</div>"
        )

    def render(self) -> str:
        """Render the accordion as HTML."""
        body = "".join(
            self._render_section(index, item) for index, item in enumerate(self.items)
        )
        return f'<div class="{_attr(f"met-accordion {self.css_class}")}">{body}</div>'