"""A single line of editable text with a cursor."""

from __future__ import annotations

import re
from typing import Callable, Iterator

from wcwidth import wcwidth

_RIGHT_WORD = re.compile(r"(\w*|\W)\Z", re.ASCII)
_LEFT_WORD = re.compile(r"^(\W|\w*)", re.ASCII)

Accept = Callable[[str, str], bool]


def _clusters(text: str) -> Iterator[tuple[int, int, int, int]]:
    """Yield (start, length, screen_position, screen_width) per character cluster.

    A cluster is a character followed by its zero-width combining marks.
    """
    bounds: list[list[int]] = []
    for index, char in enumerate(text):
        if bounds and wcwidth(char) == 0:
            bounds[-1][1] += 1
        else:
            bounds.append([index, 1])
    screen = 0
    for start, length in bounds:
        width = max(0, wcwidth(text[start]))
        yield start, length, screen, width
        screen += width


class LineEditor:
    """Text and a cursor position, with the editing moves of an input line.

    The cursor is an index into ``text``.
    """

    def __init__(self, text: str = "", cursor: int | None = None) -> None:
        self.text = text
        self.cursor = len(text) if cursor is None else cursor

    def insert(self, char: str, accept: Accept | None = None) -> bool:
        """Insert ``char`` at the cursor unless ``accept`` rejects the result."""
        new_text = self.text[: self.cursor] + char + self.text[self.cursor:]
        if accept is not None and not accept(new_text, char):
            return False
        self.text = new_text
        self.cursor += len(char)
        return True

    def delete_backward(self) -> None:
        """Delete the character before the cursor."""
        before = list(_clusters(self.text[: self.cursor]))
        if before:
            start, length, _, _ = before[-1]
            self.text = self.text[:start] + self.text[start + length:]
            self.cursor -= length

    def delete_forward(self) -> None:
        """Delete the character after the cursor."""
        first = next(_clusters(self.text[self.cursor:]), None)
        if first is not None:
            length = first[1]
            self.text = self.text[: self.cursor] + self.text[self.cursor + length:]

    def delete_word(self) -> None:
        """Delete the word (or the non-word character) before the cursor."""
        before = _RIGHT_WORD.sub("", self.text[: self.cursor], count=1)
        new_text = before + self.text[self.cursor:]
        self.cursor -= len(self.text) - len(new_text)
        self.text = new_text

    def delete_to_end(self) -> None:
        """Delete everything from the cursor to the end of the line."""
        self.text = self.text[: self.cursor]

    def clear(self) -> None:
        """Delete the whole line."""
        self.text = ""
        self.cursor = 0

    def move_left(self) -> None:
        """Move the cursor one character left."""
        before = list(_clusters(self.text[: self.cursor]))
        if before:
            self.cursor -= before[-1][1]

    def move_right(self) -> None:
        """Move the cursor one character right."""
        first = next(_clusters(self.text[self.cursor:]), None)
        if first is not None:
            self.cursor += first[1]

    def move_word_left(self) -> None:
        """Move the cursor to the start of the previous word."""
        self.cursor = len(_RIGHT_WORD.sub("", self.text[: self.cursor], count=1))

    def move_word_right(self) -> None:
        """Move the cursor past the next word."""
        rest = _LEFT_WORD.sub("", self.text[self.cursor:], count=1)
        self.cursor = len(self.text) - len(rest)

    def home(self) -> None:
        """Move the cursor to the start of the line."""
        self.cursor = 0

    def end(self) -> None:
        """Move the cursor to the end of the line."""
        self.cursor = len(self.text)

    @property
    def cursor_column(self) -> int:
        """Screen column of the cursor, counted from the start of the text."""
        column = 0
        for start, _, _, width in _clusters(self.text):
            if start >= self.cursor:
                break
            column += width
        return column

    def cursor_from_column(self, column: int) -> int:
        """Place the cursor at the character under screen ``column`` and return it."""
        for start, _, screen, width in _clusters(self.text):
            if column < screen + width:
                self.cursor = start
                return start
        self.cursor = len(self.text)
        return self.cursor