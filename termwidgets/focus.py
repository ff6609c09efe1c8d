"""Keyboard focus management across a sequence of elements."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable


class Transformation(enum.Enum):
    """A movement of the focus."""

    FIRST_ITEM = enum.auto()
    LAST_ITEM = enum.auto()
    PREVIOUS_ITEM = enum.auto()
    NEXT_ITEM = enum.auto()


@dataclass
class _Entry:
    primitive: Any
    disabled: bool = False


class FocusManager:
    """Moves focus through an ordered list of elements.

    ``set_focus`` is called with the element that should receive focus.
    """

    def __init__(self, set_focus: Callable[[Any], None]) -> None:
        self._set_focus = set_focus
        self._entries: list[_Entry] = []
        self._focused = 0
        self.wrap_around = False

    def add(self, *primitives: Any) -> None:
        """Append elements to the focus order."""
        self._entries.extend(_Entry(p) for p in primitives)

    def add_at(self, index: int, primitive: Any) -> None:
        """Insert an element at ``index``; raises IndexError when out of range."""
        if not 0 <= index <= len(self._entries):
            raise IndexError("index out of range")
        self._entries.insert(index, _Entry(primitive))

    def _current(self) -> Any:
        if not 0 <= self._focused < len(self._entries):
            raise IndexError("no element to focus")
        return self._entries[self._focused].primitive

    def _apply(self) -> None:
        self._set_focus(self._current())

    def focus(self, primitive: Any) -> None:
        """Focus ``primitive``; an unknown element refocuses the current one."""
        for index, entry in enumerate(self._entries):
            if entry.primitive is primitive and not entry.disabled:
                self._focused = index
                break
        self._apply()

    def focus_previous(self) -> None:
        """Focus the previous element."""
        self._focused -= 1
        self._update_index(decreasing=True)
        self._apply()

    def focus_next(self) -> None:
        """Focus the next element."""
        self._focused += 1
        self._update_index(decreasing=False)
        self._apply()

    def focus_at(self, index: int) -> None:
        """Focus the element at ``index``; raises IndexError when out of range."""
        if not 0 <= index < len(self._entries):
            raise IndexError("index out of range")
        self._focused = index
        self._apply()

    @property
    def focus_index(self) -> int:
        """Index of the focused element."""
        return self._focused

    def set_focus_index(self, index: int) -> None:
        """Set the focused index without notifying; raises IndexError when out of range."""
        if not 0 <= index < len(self._entries):
            raise IndexError("index out of range")
        self._focused = index

    @property
    def focused_primitive(self) -> Any:
        """The focused element."""
        return self._current()

    def _update_index(self, decreasing: bool) -> None:
        count = len(self._entries)
        for _ in range(count):
            if self._focused < 0:
                self._focused = count - 1 if self.wrap_around else 0
            elif self._focused >= count:
                self._focused = 0 if self.wrap_around else count - 1
            if not self._entries[self._focused].disabled:
                break
            self._focused += -1 if decreasing else 1

    def transform(self, transformation: Transformation) -> None:
        """Move the focus index without notifying."""
        decreasing = False
        if transformation is Transformation.FIRST_ITEM:
            self._focused = 0
            decreasing = True
        elif transformation is Transformation.LAST_ITEM:
            self._focused = len(self._entries) - 1
        elif transformation is Transformation.PREVIOUS_ITEM:
            self._focused -= 1
            decreasing = True
        elif transformation is Transformation.NEXT_ITEM:
            self._focused += 1
        self._update_index(decreasing)

    def reset(self) -> None:
        """Remove all elements."""
        self._focused = 0
        self._entries = []