"""Grid layout: elements placed on rows and columns of a table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .element import Delegate, Element
from .gridtracks import distribute_tracks, track_positions
from .keys import KEYS, KeyEvent, hit_shortcut

_MAX_OFFSET = 2**31 - 1


@dataclass(eq=False)
class _GridItem:
    item: Element
    row: int
    column: int
    height: int
    width: int
    min_grid_height: int
    min_grid_width: int
    focus: bool
    visible: bool = False
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def _visible_range(positions: Sequence[int], offset: int, extent: int) -> tuple[int, int]:
    first = last = 0
    for index, position in enumerate(positions):
        if position - offset < 0:
            first = index + 1
        if position - offset < extent:
            last = index
    return first, last


class Grid(Element):
    """Places elements into cells of a grid of rows and columns.

    Row and column sizes are absolute when positive and proportional shares
    of the free space otherwise. When the grid exceeds its area, the row and
    column offsets scroll it in steps of whole rows and columns.
    """

    def __init__(self) -> None:
        super().__init__()
        self.items: list[_GridItem] = []
        self.rows: list[int] = []
        self.columns: list[int] = []
        self.min_width = 0
        self.min_height = 0
        self.gap_rows = 0
        self.gap_columns = 0
        self.row_offset = 0
        self.column_offset = 0
        self.borders = False
        self.borders_color: Any = None
        self.background_transparent = True

    def set_columns(self, *columns: int) -> None:
        """Define the column sizes, leftmost first."""
        self.columns = list(columns)

    def set_rows(self, *rows: int) -> None:
        """Define the row sizes, topmost first."""
        self.rows = list(rows)

    def set_size(self, num_rows: int, num_columns: int, row_size: int, column_size: int) -> None:
        """Define ``num_rows`` rows and ``num_columns`` columns of equal size."""
        self.rows = [row_size] * num_rows
        self.columns = [column_size] * num_columns

    def set_min_size(self, row: int, column: int) -> None:
        """Set the minimum row height and column width; raises ValueError if negative."""
        if row < 0 or column < 0:
            raise ValueError("Invalid minimum row/column size")
        self.min_height, self.min_width = row, column

    def set_gap(self, row: int, column: int) -> None:
        """Set the gaps between rows and columns; raises ValueError if negative."""
        if row < 0 or column < 0:
            raise ValueError("Invalid gap size")
        self.gap_rows, self.gap_columns = row, column

    @property
    def offset(self) -> tuple[int, int]:
        """The (row, column) scroll offset."""
        return self.row_offset, self.column_offset

    @offset.setter
    def offset(self, value: tuple[int, int]) -> None:
        self.row_offset, self.column_offset = value

    def add_item(
        self,
        item: Element,
        row: int,
        column: int,
        row_span: int,
        col_span: int,
        min_grid_height: int,
        min_grid_width: int,
        focus: bool,
    ) -> None:
        """Place ``item`` at (row, column) spanning the given rows and columns.

        The placement applies only when the grid is at least
        ``min_grid_height`` high and ``min_grid_width`` wide.
        """
        self.items.append(
            _GridItem(item, row, column, row_span, col_span, min_grid_height, min_grid_width, focus)
        )

    def update_item(
        self,
        item: Element,
        row: int,
        column: int,
        row_span: int,
        col_span: int,
        min_grid_height: int,
        min_grid_width: int,
        focus: bool,
    ) -> None:
        """Change the first placement of ``item`` and add the new placement too."""
        for entry in self.items:
            if entry.item is item:
                entry.row = row
                entry.column = column
                entry.height = row_span
                entry.width = col_span
                entry.min_grid_height = min_grid_height
                entry.min_grid_width = min_grid_width
                entry.focus = focus
                break
        self.add_item(item, row, column, row_span, col_span, min_grid_height, min_grid_width, focus)

    def remove_item(self, item: Element) -> None:
        """Remove every placement of ``item``, keeping the others in order."""
        self.items = [entry for entry in self.items if entry.item is not item]

    def clear(self) -> None:
        """Remove all items."""
        self.items = []

    def focus(self, delegate: Delegate) -> None:
        """Pass focus to the first item marked to receive it, or keep it."""
        for entry in self.items:
            if entry.focus:
                delegate(entry.item)
                return
        self._has_focus = True

    @property
    def has_focus(self) -> bool:
        """Whether the grid or a visible item holds focus."""
        if any(entry.visible and entry.item.has_focus for entry in self.items):
            return True
        return self._has_focus

    def handle_key(self, event: KeyEvent) -> bool:
        """Scroll the grid for navigation keys; return whether the key was used."""
        if hit_shortcut(event, KEYS.move_first, KEYS.move_first2):
            self.row_offset, self.column_offset = 0, 0
        elif hit_shortcut(event, KEYS.move_last, KEYS.move_last2):
            self.row_offset = _MAX_OFFSET
        elif hit_shortcut(event, KEYS.move_up, KEYS.move_up2, KEYS.move_previous_field):
            self.row_offset -= 1
        elif hit_shortcut(event, KEYS.move_down, KEYS.move_down2, KEYS.move_next_field):
            self.row_offset += 1
        elif hit_shortcut(event, KEYS.move_left, KEYS.move_left2):
            self.column_offset -= 1
        elif hit_shortcut(event, KEYS.move_right, KEYS.move_right2):
            self.column_offset += 1
        else:
            return False
        return True

    def _applicable(self, width: int, height: int) -> dict[Element, _GridItem]:
        chosen: dict[Element, _GridItem] = {}
        for entry in self.items:
            entry.visible = False
            if (
                entry.width <= 0
                or entry.height <= 0
                or width < entry.min_grid_width
                or height < entry.min_grid_height
            ):
                continue
            previous = chosen.get(entry.item)
            if (
                previous is not None
                and entry.min_grid_width < previous.min_grid_width
                and entry.min_grid_height < previous.min_grid_height
            ):
                continue
            chosen[entry.item] = entry
        return chosen

    def layout(self) -> list[Element]:
        """Place the items and return the visible ones in drawing order.

        The focused item comes last. Row and column offsets are adjusted so
        that the grid stays on screen and the focused item remains visible.
        """
        if not self.visible:
            return []
        x, y, width, height = self.inner_rect
        chosen = self._applicable(width, height)

        rows = max([len(self.rows), *(e.row + e.height for e in chosen.values())])
        columns = max([len(self.columns), *(e.column + e.width for e in chosen.values())])
        if rows == 0 or columns == 0:
            return []

        row_heights = distribute_tracks(
            self.rows, rows, height, self.min_height, self.gap_rows, self.borders
        )
        column_widths = distribute_tracks(
            self.columns, columns, width, self.min_width, self.gap_columns, self.borders
        )
        row_pos = track_positions(row_heights, self.gap_rows, self.borders)
        column_pos = track_positions(column_widths, self.gap_columns, self.borders)

        focused: _GridItem | None = None
        for primitive, entry in chosen.items():
            pw = sum(column_widths[entry.column:entry.column + entry.width])
            ph = sum(row_heights[entry.row:entry.row + entry.height])
            if self.borders:
                pw += entry.width - 1
                ph += entry.height - 1
            else:
                pw += (entry.width - 1) * self.gap_columns
                ph += (entry.height - 1) * self.gap_rows
            entry.x, entry.y = column_pos[entry.column], row_pos[entry.row]
            entry.w, entry.h = pw, ph
            entry.visible = True
            if primitive.has_focus:
                focused = entry

        row_step = 1 if self.borders else self.gap_rows
        column_step = 1 if self.borders else self.gap_columns
        offset_y = sum(h + row_step for h in row_heights[: max(self.row_offset, 0)])
        offset_x = sum(w + column_step for w in column_widths[: max(self.column_offset, 0)])

        border = 1 if self.borders else 0
        if row_pos[-1] + row_heights[-1] + border - offset_y < height:
            offset_y = row_pos[-1] - height + row_heights[-1] + border
        if column_pos[-1] + column_widths[-1] + border - offset_x < width:
            offset_x = column_pos[-1] - width + column_widths[-1] + border

        if focused is not None:
            if focused.y + focused.h - offset_y >= height:
                offset_y = focused.y - height + focused.h
            if focused.y - offset_y < 0:
                offset_y = focused.y
            if focused.x + focused.w - offset_x >= width:
                offset_x = focused.x - width + focused.w
            if focused.x - offset_x < 0:
                offset_x = focused.x

        first, last = _visible_range(row_pos, offset_y, height)
        self.row_offset = min(max(self.row_offset, first), last)
        first, last = _visible_range(column_pos, offset_x, width)
        self.column_offset = min(max(self.column_offset, first), last)

        order: list[Element] = []
        on_top: list[Element] = []
        for primitive, entry in chosen.items():
            entry.x -= offset_x
            entry.y -= offset_y
            if (
                entry.x >= width
                or entry.x + entry.w <= 0
                or entry.y >= height
                or entry.y + entry.h <= 0
            ):
                entry.visible = False
                continue
            entry.w = min(entry.w, width - entry.x)
            entry.h = min(entry.h, height - entry.y)
            if entry.x < 0:
                entry.w += entry.x
                entry.x = 0
            if entry.y < 0:
                entry.h += entry.y
                entry.y = 0
            if entry.w <= 0 or entry.h <= 0:
                entry.visible = False
                continue
            entry.x += x
            entry.y += y
            primitive.set_rect(entry.x, entry.y, entry.w, entry.h)
            (on_top if entry is focused else order).append(primitive)
        return order + on_top