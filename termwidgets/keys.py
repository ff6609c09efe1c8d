"""Key events, their textual encoding and the default keyboard shortcuts."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

_CTRL_PREFIX = "Ctrl+"


class Key(enum.Enum):
    """Keys a terminal can report; the value is the key's name."""

    RUNE = "Rune"
    ENTER = "Enter"
    ESCAPE = "Escape"
    TAB = "Tab"
    BACKTAB = "Backtab"
    BACKSPACE = "Backspace"
    BACKSPACE2 = "Backspace2"
    DELETE = "Delete"
    INSERT = "Insert"
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    CTRL_A = "Ctrl+A"
    CTRL_B = "Ctrl+B"
    CTRL_E = "Ctrl+E"
    CTRL_F = "Ctrl+F"
    CTRL_J = "Ctrl+J"
    CTRL_K = "Ctrl+K"
    CTRL_U = "Ctrl+U"
    CTRL_W = "Ctrl+W"


class Modifier(enum.IntFlag):
    """Modifier keys held down with a key."""

    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4
    META = 8


@dataclass(frozen=True)
class KeyEvent:
    """A key press. ``rune`` holds the character when ``key`` is RUNE."""

    key: Key
    rune: str = ""
    modifiers: Modifier = Modifier.NONE


_MODIFIER_LABELS = (
    (Modifier.CTRL, "Ctrl"),
    (Modifier.ALT, "Alt"),
    (Modifier.META, "Meta"),
    (Modifier.SHIFT, "Shift"),
)


def encode_key(event: KeyEvent) -> str:
    """Return the shortcut notation of ``event``, such as ``"Alt+Enter"``.

    Raises ValueError for a character event that holds no single character.
    """
    modifiers = event.modifiers
    if event.key is Key.RUNE:
        if len(event.rune) != 1:
            raise ValueError(f"cannot encode character event {event.rune!r}")
        name = "Space" if event.rune == " " else event.rune
    elif event.key.value.startswith(_CTRL_PREFIX):
        modifiers |= Modifier.CTRL
        name = event.key.value[len(_CTRL_PREFIX):]
    else:
        name = event.key.value
    labels = [label for flag, label in _MODIFIER_LABELS if modifiers & flag]
    return "+".join([*labels, name])


@dataclass(frozen=True)
class KeyBindings:
    """Keyboard shortcuts. Secondary shortcuts apply outside text input."""

    cancel: tuple[str, ...] = ("Escape",)
    select: tuple[str, ...] = ("Enter", "Ctrl+J")  # Ctrl+J is keypad enter
    select2: tuple[str, ...] = ("Space",)
    move_up: tuple[str, ...] = ("Up",)
    move_up2: tuple[str, ...] = ("k",)
    move_down: tuple[str, ...] = ("Down",)
    move_down2: tuple[str, ...] = ("j",)
    move_left: tuple[str, ...] = ("Left",)
    move_left2: tuple[str, ...] = ("h",)
    move_right: tuple[str, ...] = ("Right",)
    move_right2: tuple[str, ...] = ("l",)
    move_first: tuple[str, ...] = ("Home", "Ctrl+A")
    move_first2: tuple[str, ...] = ("g",)
    move_last: tuple[str, ...] = ("End", "Ctrl+E")
    move_last2: tuple[str, ...] = ("G",)
    move_previous_field: tuple[str, ...] = ("Backtab",)
    move_next_field: tuple[str, ...] = ("Tab",)
    move_previous_page: tuple[str, ...] = ("PageUp", "Ctrl+B")
    move_next_page: tuple[str, ...] = ("PageDown", "Ctrl+F")
    show_context_menu: tuple[str, ...] = ("Alt+Enter",)


KEYS = KeyBindings()


def hit_shortcut(event: KeyEvent, *bindings: Iterable[str]) -> bool:
    """Whether ``event`` matches a shortcut in any of the given sets."""
    try:
        encoded = encode_key(event)
    except ValueError:
        return False
    return any(encoded in binds for binds in bindings)