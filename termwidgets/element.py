"""Base element: a rectangle on the screen that can hold focus."""

from __future__ import annotations

from typing import Callable

Delegate = Callable[["Element"], None]


class Element:
    """A rectangular screen area with optional border and padding.

    Containers place elements by assigning their rectangle. An element
    receives focus through :meth:`focus` and loses it through :meth:`blur`.
    """

    def __init__(self, x: int = 0, y: int = 0, width: int = 15, height: int = 10) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.visible = True
        self.border = False
        # top, bottom, left, right
        self.padding: tuple[int, int, int, int] = (0, 0, 0, 0)
        self.background_transparent = False
        self._has_focus = False

    @property
    def rect(self) -> tuple[int, int, int, int]:
        """The outer rectangle as (x, y, width, height)."""
        return self.x, self.y, self.width, self.height

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        """Place the element at the given position with the given size."""
        self.x, self.y, self.width, self.height = x, y, width, height

    @property
    def inner_rect(self) -> tuple[int, int, int, int]:
        """The area inside border and padding as (x, y, width, height)."""
        top, bottom, left, right = self.padding
        edge = 1 if self.border else 0
        return (
            self.x + left + edge,
            self.y + top + edge,
            max(0, self.width - left - right - 2 * edge),
            max(0, self.height - top - bottom - 2 * edge),
        )

    def in_rect(self, x: int, y: int) -> bool:
        """Whether the screen cell (x, y) lies within the element."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    @property
    def has_focus(self) -> bool:
        """Whether the element currently holds focus."""
        return self._has_focus

    def focus(self, delegate: Delegate) -> None:
        """Take focus. Containers pass it on through ``delegate`` instead."""
        self._has_focus = True

    def blur(self) -> None:
        """Give up focus."""
        self._has_focus = False