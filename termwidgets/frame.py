"""A frame: spacing around one element, with header and footer text."""

from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass
from typing import Any

from .element import Delegate, Element


class Align(enum.IntEnum):
    """Horizontal alignment of a line of text."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


@dataclass
class FrameText:
    """One line of text shown in a frame's header or footer."""

    text: str
    header: bool
    align: Align
    color: Any


class Frame(Element):
    """Wraps an element with border spacing and optional header/footer lines.

    Header lines are stacked top to bottom, footer lines bottom to top. Lines
    with different alignments share rows.
    """

    def __init__(self, primitive: Element) -> None:
        super().__init__()
        self.primitive = primitive
        self.texts: list[FrameText] = []
        # top, bottom, header, footer, left, right
        self.spacing: tuple[int, int, int, int, int, int] = (1, 1, 1, 1, 1, 1)

    def add_text(self, text: str, header: bool, align: Align, color: Any) -> None:
        """Add a line to the header (``header`` true) or the footer."""
        self.texts.append(FrameText(text, header, Align(align), color))

    def clear(self) -> None:
        """Remove all header and footer text."""
        self.texts = []

    def set_borders(
        self, top: int, bottom: int, header: int, footer: int, left: int, right: int
    ) -> None:
        """Set the border widths and the gaps between text and the element."""
        self.spacing = (top, bottom, header, footer, left, right)

    def layout(self) -> list[tuple[FrameText, int, int, int]]:
        """Place the wrapped element and return the text lines to draw.

        Each placement is ``(text, x, y, width)``. Lines that do not fit are
        left out. The element keeps its rectangle when no space is left for it.
        """
        if not self.visible:
            return []
        space_top, space_bottom, space_header, space_footer, left, right = self.spacing
        x, top, width, height = self.inner_rect
        bottom = top + height - 1
        x += left
        top += space_top
        bottom -= space_bottom
        width -= left + right
        if width <= 0 or top >= bottom:
            return []

        rows: Counter[tuple[bool, Align]] = Counter()
        top_max = top
        bottom_min = bottom
        placements: list[tuple[FrameText, int, int, int]] = []
        for line in self.texts:
            slot = (line.header, line.align)
            if line.header:
                y = top + rows[slot]
                rows[slot] += 1
                if y >= bottom_min:
                    continue
                top_max = max(top_max, y + 1)
            else:
                y = bottom - rows[slot]
                rows[slot] += 1
                if y <= top_max:
                    continue
                bottom_min = min(bottom_min, y - 1)
            placements.append((line, x, y, width))

        if top_max > top:
            top = top_max + space_header
        if bottom_min < bottom:
            bottom = bottom_min - space_footer
        if top <= bottom:
            self.primitive.set_rect(x, top, width, bottom + 1 - top)
        return placements

    def focus(self, delegate: Delegate) -> None:
        """Pass focus to the wrapped element."""
        delegate(self.primitive)

    @property
    def has_focus(self) -> bool:
        """Whether the wrapped element holds focus."""
        return bool(getattr(self.primitive, "has_focus", False))