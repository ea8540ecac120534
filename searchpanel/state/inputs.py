"""User-facing input holders: the boolean filter and the keyword box."""

from __future__ import annotations

from typing import Any

from searchpanel.domain.models import FilterValue, InputValue
from searchpanel.utils.signals import Signal


class FilterState:
    """Holds the filter value and fires a search trigger on every change."""

    def __init__(self, value: FilterValue | None = None) -> None:
        self._value = value.model_copy() if value is not None else FilterValue()
        self.search = Signal()
        self.changed = Signal()

    def get_value(self) -> FilterValue:
        return self._value.model_copy()

    def set_field(self, key: str, value: Any) -> None:
        # Unknown keys and wrong types are rejected by FilterValue validation.
        setattr(self._value, key, value)
        self.changed.emit()
        self.search.emit()


class InputSearchState:
    """Keyword input plus the derived visibility of the result panel.

    Typing a non-empty keyword opens the panel and fires a search. Clearing
    the box closes it without searching. Submitting always opens the panel
    and searches again, even for an unchanged keyword.
    """

    def __init__(self) -> None:
        self._keyword = ""
        self._visible = False
        self.search = Signal()
        self.changed = Signal()
        self.visibility_changed = Signal()

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def visible(self) -> bool:
        return self._visible

    def get_value(self) -> InputValue:
        return InputValue(keyword=self._keyword, visible=self._visible)

    def on_input(self, value: str) -> None:
        if value == self._keyword:
            return
        self._keyword = value
        self._set_visible(bool(value))
        self.changed.emit()
        if value:
            self.search.emit()

    def on_submit(self) -> None:
        self._set_visible(True)
        self.changed.emit()
        self.search.emit()

    def on_hide(self) -> None:
        self._set_visible(False)
        self.changed.emit()

    def _set_visible(self, visible: bool) -> None:
        if visible == self._visible:
            return
        self._visible = visible
        self.visibility_changed.emit()


__all__ = ["FilterState", "InputSearchState"]
