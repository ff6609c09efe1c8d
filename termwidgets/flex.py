"""Flexbox layout: children arranged in one row or one column."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .element import Delegate, Element


class Direction(enum.Enum):
    """The axis along which a Flex distributes its items."""

    ROW = 0
    COLUMN = 1


@dataclass
class FlexItem:
    """One item of a Flex and its layout options."""

    item: Element | None
    fixed_size: int = 0
    proportion: int = 1
    focus: bool = False


def _div_trunc(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class Flex(Element):
    """Arranges items horizontally (COLUMN) or vertically (ROW).

    Items have either a fixed size or a share of the remaining space in
    proportion to their ``proportion``.
    """

    def __init__(self, direction: Direction = Direction.COLUMN) -> None:
        super().__init__()
        self.direction = direction
        self.full_screen = False
        self.items: list[FlexItem] = []
        self.background_transparent = True

    def add_item(
        self, item: Element | None, fixed_size: int, proportion: int, focus: bool
    ) -> None:
        """Append an item; ``None`` stands for empty space."""
        if item is None:
            item = Element()
            item.visible = False
        self.items.append(FlexItem(item, fixed_size, proportion, focus))

    def add_item_at(
        self, index: int, item: Element | None, fixed_size: int, proportion: int, focus: bool
    ) -> None:
        """Insert an item at ``index``; raises IndexError when out of range."""
        if not 0 <= index <= len(self.items):
            raise IndexError("index out of range")
        self.items.insert(index, FlexItem(item, fixed_size, proportion, focus))

    def remove_item(self, item: Element) -> None:
        """Remove every entry holding ``item``, keeping the others in order."""
        self.items = [entry for entry in self.items if entry.item is not item]

    def resize_item(self, item: Element, fixed_size: int, proportion: int) -> None:
        """Give every entry holding ``item`` a new size."""
        for entry in self.items:
            if entry.item is item:
                entry.fixed_size = fixed_size
                entry.proportion = proportion

    def layout(self, screen_size: tuple[int, int] | None = None) -> list[Element]:
        """Place the items and return the visible ones in drawing order.

        Focused items come last so they are drawn on top. With ``full_screen``
        set, the flex first takes the whole ``screen_size``.
        """
        if not self.visible:
            return []
        if self.full_screen and screen_size is not None:
            self.set_rect(0, 0, *screen_size)

        x, y, width, height = self.inner_rect
        rows = self.direction is Direction.ROW
        remaining = height if rows else width
        proportion_sum = 0
        for entry in self.items:
            if entry.fixed_size > 0:
                remaining -= entry.fixed_size
            else:
                proportion_sum += entry.proportion

        position = y if rows else x
        order: list[Element] = []
        focused: list[Element] = []
        for entry in self.items:
            size = entry.fixed_size
            if size <= 0:
                if proportion_sum > 0:
                    size = _div_trunc(remaining * entry.proportion, proportion_sum)
                    remaining -= size
                    proportion_sum -= entry.proportion
                else:
                    size = 0
            child = entry.item
            if child is not None:
                if rows:
                    child.set_rect(x, position, width, size)
                else:
                    child.set_rect(position, y, size, height)
            position += size
            if child is not None and child.visible:
                (focused if child.has_focus else order).append(child)
        order.extend(reversed(focused))
        return order

    def focus(self, delegate: Delegate) -> None:
        """Pass focus to the first item marked to receive it."""
        for entry in self.items:
            if entry.item is not None and entry.focus:
                delegate(entry.item)
                return

    @property
    def has_focus(self) -> bool:
        """Whether any item holds focus."""
        return any(entry.item is not None and entry.item.has_focus for entry in self.items)