"""A one-line text input with optional masking, validation and autocomplete."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from wcwidth import wcwidth

from .autocomplete import Suggestion, SuggestionList
from .element import Element
from .keys import Key, KeyEvent, Modifier
from .lineedit import Accept, LineEditor

ChangedHandler = Callable[[str], None]
KeyHandler = Callable[[Key], None]
AutocompleteFunc = Callable[[str], Sequence["Suggestion | str"]]

_EDITS: dict[Key, Callable[[LineEditor], None]] = {
    Key.CTRL_U: LineEditor.clear,
    Key.CTRL_K: LineEditor.delete_to_end,
    Key.CTRL_W: LineEditor.delete_word,
    Key.BACKSPACE: LineEditor.delete_backward,
    Key.BACKSPACE2: LineEditor.delete_backward,
    Key.DELETE: LineEditor.delete_forward,
    Key.HOME: LineEditor.home,
    Key.CTRL_A: LineEditor.home,
    Key.END: LineEditor.end,
    Key.CTRL_E: LineEditor.end,
}

_ALT_RUNES: dict[str, Callable[[LineEditor], None]] = {
    "a": LineEditor.home,
    "e": LineEditor.end,
    "b": LineEditor.move_word_left,
    "f": LineEditor.move_word_right,
}

_NEXT_KEYS = (Key.DOWN, Key.TAB)
_PREVIOUS_KEYS = (Key.UP, Key.BACKTAB)


def _display_width(text: str) -> int:
    return sum(max(0, wcwidth(char)) for char in text)


class InputField(Element):
    """A single line where the user enters text.

    ``accept`` may reject an entered character, ``changed`` hears about every
    change of the text, and ``done``/``finished`` are told which key ended
    the input (Enter, Escape, Tab or Backtab). ``autocomplete_func`` returns
    the suggestions for the current text.
    """

    def __init__(
        self,
        label: str = "",
        text: str = "",
        field_width: int = 0,
        accept: Accept | None = None,
        changed: ChangedHandler | None = None,
    ) -> None:
        super().__init__()
        self.label = label
        self.label_width = 0
        self.placeholder = ""
        self.field_width = field_width
        self.field_note = ""
        self.mask_character = ""
        self.accept = accept
        self.changed = changed
        self.done: KeyHandler | None = None
        self.finished: KeyHandler | None = None
        self.autocomplete_func: AutocompleteFunc | None = None
        self.suggestions: SuggestionList | None = None
        self.suggestion = ""
        self.colors: dict[str, Any] = {}
        self._editor = LineEditor(text)

    @property
    def text(self) -> str:
        """The entered text."""
        return self._editor.text

    @property
    def cursor(self) -> int:
        """The cursor position as an index into the text."""
        return self._editor.cursor

    @cursor.setter
    def cursor(self, position: int) -> None:
        self._editor.cursor = position

    @property
    def display_text(self) -> str:
        """The text as shown on screen: masked when a mask character is set."""
        if self.mask_character:
            return self.mask_character * len(self.text)
        return self.text

    @property
    def field_x(self) -> int:
        """Screen column where the input area starts, right after the label."""
        x, _, width, _ = self.inner_rect
        if self.label_width > 0:
            return x + min(self.label_width, width)
        return x + min(_display_width(self.label), width)

    def set_text(self, text: str) -> None:
        """Replace the text, put the cursor at its end and report the change."""
        self._editor = LineEditor(text)
        if self.changed is not None:
            self.changed(text)

    def field_height(self) -> int:
        """Rows the field takes: one, or two when a note is shown below it."""
        return 2 if self.field_note else 1

    def autocomplete(self) -> None:
        """Ask ``autocomplete_func`` for suggestions for the current text."""
        if self.autocomplete_func is None:
            return
        entries = [
            entry if isinstance(entry, Suggestion) else Suggestion(entry)
            for entry in self.autocomplete_func(self.text)
        ]
        if not entries:
            self.suggestions = None
            self.suggestion = ""
            return
        self.suggestions = SuggestionList(entries, self.text)
        self._refresh_suggestion()

    def _refresh_suggestion(self) -> None:
        if self.suggestions is None:
            self.suggestion = ""
        else:
            self.suggestion = self.suggestions.completion_for(self.text)

    def _close_suggestions(self) -> None:
        self.suggestions = None
        self.suggestion = ""

    def _finish(self, key: Key) -> None:
        if self.done is not None:
            self.done(key)
        if self.finished is not None:
            self.finished(key)

    def handle_key(self, event: KeyEvent) -> None:
        """Edit the text or move the cursor according to ``event``.

        When the text changed, suggestions are refreshed and ``changed`` is
        called with the new text.
        """
        before = self.text
        self._process(event)
        if self.text != before:
            self.autocomplete()
            if self.changed is not None:
                self.changed(self.text)

    def _process(self, event: KeyEvent) -> None:
        key = event.key
        alt = bool(event.modifiers & Modifier.ALT)
        editor = self._editor
        if key is Key.RUNE:
            move = _ALT_RUNES.get(event.rune) if alt else None
            if move is not None:
                move(editor)
            else:
                editor.insert(event.rune, self.accept)
            return
        edit = _EDITS.get(key)
        if edit is not None:
            edit(editor)
        elif key is Key.LEFT:
            editor.move_word_left() if alt else editor.move_left()
        elif key is Key.RIGHT:
            editor.move_word_right() if alt else editor.move_right()
        elif key is Key.ENTER:
            if self.suggestions is not None:
                selection = self.suggestions.selection_text()
                self.set_text(selection)
                self._close_suggestions()
            else:
                self._finish(key)
        elif key is Key.ESCAPE:
            if self.suggestions is not None:
                self._close_suggestions()
            else:
                self._finish(key)
        elif key in _NEXT_KEYS:
            if self.suggestions is not None:
                self.suggestions.select_next()
                self._refresh_suggestion()
            else:
                self._finish(key)
        elif key in _PREVIOUS_KEYS:
            if self.suggestions is not None:
                self.suggestions.select_previous()
                self._refresh_suggestion()
            else:
                self._finish(key)

    def handle_click(self, x: int) -> None:
        """Place the cursor under screen column ``x`` and take focus."""
        if x >= self.field_x:
            self._editor.cursor_from_column(x - self.field_x)
        self._has_focus = True