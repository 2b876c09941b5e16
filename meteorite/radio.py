"""Radio button group."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from html import escape
from typing import Optional

__all__ = ["RadioOrientation", "RadioOption", "RadioGroup"]


def _attr(value: object) -> str:
    return escape(str(value), quote=True)


def _text(value: object) -> str:
    return escape(str(value), quote=False)


class RadioOrientation(Enum):
    """Layout direction of a radio group."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def css_class(self) -> str:
        return f"met-radio--{self.value}"


@dataclass(frozen=True)
class RadioOption:
    """One choice of a radio group."""

    value: str
    label: str
    disabled: bool = False


@dataclass
class RadioGroup:
    """Radio group state and events; ``render`` produces its HTML."""

    value: str
    options: Sequence[RadioOption]
    orientation: RadioOrientation = RadioOrientation.VERTICAL
    size_class: str = ""
    disabled: bool = False
    on_change: Optional[Callable[[str], None]] = None
    css_class: str = ""

    def __post_init__(self) -> None:
        self.options = list(self.options)

    def _option(self, value: str) -> RadioOption:
        for option in self.options:
            if option.value == value:
                return option
        raise ValueError(f"unknown option: {value!r}")

    def _is_disabled(self, option: RadioOption) -> bool:
        return option.disabled or self.disabled

    def select(self, value: str) -> bool:
        """Choose the option with ``value``; returns False when it is disabled."""
        option = self._option(value)
        if self._is_disabled(option):
            return False
        self.value = value
        if self.on_change is not None:
            self.on_change(value)
        return True

    def _render_option(self, option: RadioOption) -> str:
        disabled = self._is_disabled(option)
        label_class = (
            "met-radio-label met-radio-label--disabled" if disabled else "met-radio-label"
        )
        checked = option.value == self.value
        state = "checked" if checked else "unchecked"
        flag = " disabled" if disabled else ""
        return (
            f'<label class="{label_class}">'
            f'<button class="met-radio-item" type="button" role="radio" '
            f'value="{_attr(option.value)}" aria-checked="{str(checked).lower()}" '
            f'data-state="{state}"{flag}>'
            '<span class="met-radio-circle"><span class="met-radio-dot"></span></span>'
            "</button>"
            f'<span class="met-radio-text">{_text(option.label)}</span>'
            "</label>"
        )

    def render(self) -> str:
        """Render the group as HTML."""
        classes = (
            f"met-radio {self.orientation.css_class} {self.size_class} {self.css_class}"
        )
        flag = " aria-disabled=\"true\"" if self.disabled else ""
        body = "".join(self._render_option(option) for option in self.options)
        return (
            f'<div class="{_attr(classes)}" role="radiogroup" '
            f'data-orientation="{self.orientation.value}"{flag}>{body}</div>'
        )