# termwidgets

Building blocks for terminal user interfaces. There are layout containers
that work out where each child goes, a focus manager for moving between
elements, and a one-line input field with editing, masking, validation and
autocompletion. None of it depends on a particular screen library: the
containers compute rectangles, and the input field works on key events.

## Installation

```
pip install termwidgets
```

To run the test suite:

```
pip install "termwidgets[test]"
pytest
```

## What is inside

- `termwidgets.element.Element`: the base for everything that occupies a
  rectangle on screen. It has `set_rect`, `in_rect`, `focus` and `blur`,
  the `rect` and `inner_rect` properties (the latter inside `border` and
  `padding`), and `has_focus`.
- `termwidgets.keys`: `Key`, `Modifier` and `KeyEvent` describe a key press.
  `encode_key` turns an event into a name such as `"Ctrl+A"`, `"Alt+Enter"`
  or `"Space"`. `hit_shortcut(event, *bindings)` checks an event against sets
  of those names. `KeyBindings` holds a shortcut set and `KEYS` the default
  one.
- `termwidgets.focus.FocusManager`: keeps an ordered set of elements and
  moves focus forwards (`focus_next`), backwards (`focus_previous`), to an
  element (`focus`) or to an index (`focus_at`), wrapping around when
  `wrap_around` is set. `transform` takes a `Transformation` and moves the
  index without notifying.
- `termwidgets.flex.Flex`: arranges children along a `Direction` (`ROW`
  stacks them vertically, `COLUMN` side by side), each with a fixed size or
  a share of the free space. `layout` places them and returns the visible
  ones in drawing order, focused ones last.
- `termwidgets.frame.Frame`: puts border spacing and header or footer lines
  (`FrameText`, aligned with `Align`) around one child. `layout` places the
  child and returns where each line of text goes.
- `termwidgets.grid.Grid`: places children on a grid of rows and columns,
  with gaps, optional borders, minimum sizes, scroll offsets (moved by
  `handle_key`) and placements that apply only above a given grid size.
  `termwidgets.gridtracks` holds the row and column arithmetic:
  `distribute_tracks` and `track_positions`.
- `termwidgets.lineedit.LineEditor`: the text and cursor of a one-line
  editor, with character and word movement, deletion, and mapping between
  screen columns and cursor positions.
- `termwidgets.autocomplete`: `Suggestion` entries and a `SuggestionList`
  that cycles through them and supplies the completion for the current text.
- `termwidgets.inputfield.InputField`: a labelled input field built on the
  editor and the suggestion list. `handle_key` edits the text and calls
  `changed`; Enter, Escape, Tab and Backtab are reported to `done` and
  `finished` when no suggestions are open.
- `termwidgets.options`: `DropDownOption` and `OptionList`, with
  type-to-select prefix matching (`match_prefix`) and the width a closed
  selector needs (`field_width`).

## Examples

A column with a one-line header above a body that takes the rest:

```python
from termwidgets.element import Element
from termwidgets.flex import Direction, Flex

column = Flex(Direction.ROW)
header, body = Element(), Element()
column.add_item(header, 1, 0, False)
column.add_item(body, 0, 1, True)
column.set_rect(0, 0, 80, 24)
column.layout((80, 24))
```

After `layout`, `header.rect` is `(0, 0, 80, 1)` and `body.rect` is
`(0, 1, 80, 23)`.

Column widths of a grid 100 cells wide:

```python
from termwidgets.gridtracks import distribute_tracks

distribute_tracks([30, 10, -1, -1, -2], 5, 100, 0, 0, False)
# [30, 10, 15, 15, 30]
```

Typing into an input field:

```python
from termwidgets.inputfield import InputField
from termwidgets.keys import Key, KeyEvent

field = InputField(label="Name: ")
for char in "hello":
    field.handle_key(KeyEvent(Key.RUNE, char))
field.handle_key(KeyEvent(Key.BACKSPACE))
field.text  # "hell"
```

Moving focus:

```python
from termwidgets.element import Element
from termwidgets.focus import FocusManager

focused = []
manager = FocusManager(focused.append)
first, second = Element(), Element()
manager.add(first, second)
manager.focus_next()
# focused == [second], manager.focus_index == 1
```

## What the package does not do

- It draws nothing. Containers and widgets compute positions, sizes, text
  and cursor placement; putting characters on a terminal is left to the
  application and its screen library.
- It has no event loop and reads no input; the application hands key events
  to `handle_key` and clicks to `handle_click`.
- `OptionList` holds the options of a drop-down selector and their prefix
  matching, but the package has no widget that opens, closes and draws such
  a list.