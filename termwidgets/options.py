"""Options of a drop-down list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from wcwidth import wcwidth

SelectedHandler = Callable[[int, Optional["DropDownOption"]], None]


def _display_width(text: str) -> int:
    return sum(max(0, wcwidth(char)) for char in text)


@dataclass(eq=False)
class DropDownOption:
    """One selectable option: its text, an optional handler and a reference."""

    text: str
    selected: SelectedHandler | None = None
    reference: Any = None


class OptionList:
    """The ordered options of a drop-down."""

    def __init__(self, *options: DropDownOption | str) -> None:
        self._options: list[DropDownOption] = []
        self.add(*options)

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[DropDownOption]:
        return iter(self._options)

    def __getitem__(self, index: int) -> DropDownOption:
        return self._options[index]

    def add(self, *options: DropDownOption | str) -> list[DropDownOption]:
        """Append options; plain strings become options. Return those added."""
        added = [
            option if isinstance(option, DropDownOption) else DropDownOption(option)
            for option in options
        ]
        self._options.extend(added)
        return added

    def clear(self) -> None:
        """Remove all options."""
        self._options = []

    def match_prefix(self, prefix: str) -> int | None:
        """Index of the first option whose lower-cased text starts with ``prefix``.

        Returns None for an empty prefix or when nothing matches.
        """
        if not prefix:
            return None
        return next(
            (
                index
                for index, option in enumerate(self._options)
                if option.text.lower().startswith(prefix)
            ),
            None,
        )

    def display_texts(self, prefix: str, suffix: str) -> list[str]:
        """The option texts wrapped in ``prefix`` and ``suffix``."""
        return [prefix + option.text + suffix for option in self._options]

    def field_width(
        self, prefix: str, suffix: str, current_prefix: str, current_suffix: str
    ) -> int:
        """Screen width a closed drop-down needs to show any of the options.

        The widest option plus all wrapping strings, a space on either side of
        the text and room for the drop-down symbol.
        """
        widest = max((_display_width(option.text) for option in self._options), default=0)
        return (
            widest
            + len(prefix)
            + len(suffix)
            + len(current_prefix)
            + len(current_suffix)
            + 4
        )