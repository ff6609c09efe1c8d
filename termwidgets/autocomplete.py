"""Autocomplete suggestions offered below an input line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass
class Suggestion:
    """One autocomplete entry.

    ``main`` is shown in the list. When ``secondary`` is set it is the value
    that a selection puts into the input; otherwise ``main`` is.
    """

    main: str
    secondary: str = ""
    reference: Any = None


class SuggestionList:
    """A non-empty list of suggestions with one of them selected.

    The entry whose main text equals the current input text is selected at
    first; without such an entry the first one is.
    """

    def __init__(self, entries: Sequence[Suggestion], text: str) -> None:
        if not entries:
            raise ValueError("a suggestion list needs at least one entry")
        self.entries: list[Suggestion] = list(entries)
        self.index = next(
            (index for index, entry in enumerate(self.entries) if entry.main == text),
            0,
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def select_next(self) -> Suggestion:
        """Select the next entry, wrapping to the first; return it."""
        self.index = (self.index + 1) % len(self.entries)
        return self.current()

    def select_previous(self) -> Suggestion:
        """Select the previous entry, wrapping to the last; return it."""
        self.index = (self.index - 1) % len(self.entries)
        return self.current()

    def current(self) -> Suggestion:
        """The selected entry."""
        return self.entries[self.index]

    def completion_for(self, text: str) -> str:
        """The part of the selected entry that would complete ``text``.

        The selection value is preferred to the main text; an empty string
        means there is nothing to add.
        """
        entry = self.current()
        if len(text) < len(entry.secondary):
            return entry.secondary[len(text):]
        if len(text) < len(entry.main):
            return entry.main[len(text):]
        return ""

    def selection_text(self) -> str:
        """The text that selecting the current entry puts into the input."""
        entry = self.current()
        return entry.secondary or entry.main