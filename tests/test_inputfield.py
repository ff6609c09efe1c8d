import pytest

from termwidgets.autocomplete import Suggestion
from termwidgets.inputfield import InputField
from termwidgets.keys import Key, KeyEvent, Modifier


def press(field, key, rune="", modifiers=Modifier.NONE):
    field.handle_key(KeyEvent(key, rune, modifiers))


def type_text(field, text):
    for char in text:
        press(field, Key.RUNE, char)


def test_typing_appends_and_moves_cursor():
    field = InputField()
    type_text(field, "hello")
    assert field.text == "hello"
    assert field.cursor == len("hello")


def test_set_text_moves_cursor_to_end_and_reports():
    seen = []
    field = InputField(changed=seen.append)
    field.set_text("abc")
    assert field.cursor == 3
    assert seen == ["abc"]


def test_changed_called_after_each_edit():
    seen = []
    field = InputField(changed=seen.append)
    type_text(field, "ab")
    assert seen == ["a", "ab"]


def test_accept_rejects_character():
    field = InputField(accept=lambda text, char: char.isdigit())
    type_text(field, "1a2")
    assert field.text == "12"


def test_accept_receives_text_after_insertion():
    calls = []

    def accept(text, char):
        calls.append((text, char))
        return True

    field = InputField(text="ac", accept=accept)
    field.cursor = 1
    press(field, Key.RUNE, "b")
    assert calls == [("abc", "b")]
    assert field.text == "abc"


def test_insert_in_middle():
    field = InputField(text="ad")
    press(field, Key.LEFT)
    type_text(field, "bc")
    assert field.text == "abcd"
    assert field.cursor == 3


def test_alt_runes_move_cursor():
    field = InputField(text="one two")
    press(field, Key.RUNE, "a", Modifier.ALT)
    assert field.cursor == 0
    press(field, Key.RUNE, "e", Modifier.ALT)
    assert field.cursor == len("one two")
    press(field, Key.RUNE, "b", Modifier.ALT)
    assert field.cursor == len("one ")
    assert field.text == "one two"


def test_alt_other_rune_inserts():
    field = InputField()
    press(field, Key.RUNE, "x", Modifier.ALT)
    assert field.text == "x"


def test_ctrl_u_clears():
    field = InputField(text="something")
    press(field, Key.CTRL_U)
    assert field.text == ""
    assert field.cursor == 0


def test_ctrl_k_deletes_to_end():
    field = InputField(text="hello world")
    press(field, Key.HOME)
    for _ in range(len("hello")):
        press(field, Key.RIGHT)
    press(field, Key.CTRL_K)
    assert field.text == "hello"


def test_ctrl_w_deletes_last_word():
    field = InputField(text="hello world")
    press(field, Key.CTRL_W)
    assert field.text == "hello "
    assert field.cursor == len("hello ")


def test_backspace_and_delete():
    field = InputField(text="abc")
    press(field, Key.BACKSPACE)
    assert field.text == "ab"
    press(field, Key.HOME)
    press(field, Key.DELETE)
    assert field.text == "b"
    assert field.cursor == 0


def test_home_end_keys():
    field = InputField(text="xyz")
    press(field, Key.CTRL_A)
    assert field.cursor == 0
    press(field, Key.CTRL_E)
    assert field.cursor == 3


def test_alt_arrows_move_by_word():
    field = InputField(text="foo bar")
    press(field, Key.LEFT, modifiers=Modifier.ALT)
    assert field.cursor == len("foo ")
    press(field, Key.HOME)
    press(field, Key.RIGHT, modifiers=Modifier.ALT)
    assert field.cursor == len("foo")


@pytest.mark.parametrize("key", [Key.ENTER, Key.ESCAPE, Key.TAB, Key.BACKTAB, Key.DOWN, Key.UP])
def test_finishing_keys_call_done_and_finished(key):
    done, finished = [], []
    field = InputField()
    field.done = done.append
    field.finished = finished.append
    press(field, key)
    assert done == [key]
    assert finished == [key]


def test_movement_does_not_report_change():
    seen = []
    field = InputField(text="abc", changed=seen.append)
    press(field, Key.LEFT)
    press(field, Key.HOME)
    assert seen == []


def _fruit(text):
    fruits = ["apple", "apricot", "banana"]
    if not text or text in fruits:
        return []
    return [Suggestion(name) for name in fruits if name.startswith(text)]


def test_autocomplete_offers_completion():
    field = InputField()
    field.autocomplete_func = _fruit
    type_text(field, "ap")
    assert field.suggestions is not None
    assert [entry.main for entry in field.suggestions] == ["apple", "apricot"]
    assert field.suggestion == "ple"


def test_autocomplete_navigation_and_enter():
    seen = []
    field = InputField(changed=seen.append)
    field.autocomplete_func = _fruit
    type_text(field, "ap")
    press(field, Key.DOWN)
    assert field.suggestion == "ricot"
    press(field, Key.UP)
    assert field.suggestion == "ple"
    press(field, Key.BACKTAB)
    press(field, Key.ENTER)
    assert field.text == "apricot"
    assert field.suggestions is None
    assert seen[-1] == "apricot"


def test_escape_closes_suggestions_without_finishing():
    done = []
    field = InputField()
    field.done = done.append
    field.autocomplete_func = _fruit
    type_text(field, "b")
    assert field.suggestions is not None
    press(field, Key.ESCAPE)
    assert field.suggestions is None
    assert field.suggestion == ""
    assert done == []


def test_autocomplete_selects_exact_match_and_uses_secondary():
    field = InputField(text="cat")
    field.autocomplete_func = lambda text: [Suggestion("dog"), Suggestion("cat", "category")]
    field.autocomplete()
    assert field.suggestions.current().main == "cat"
    assert field.suggestion == "egory"
    press(field, Key.ENTER)
    assert field.text == "category"


def test_autocomplete_accepts_plain_strings():
    field = InputField(text="x")
    field.autocomplete_func = lambda text: ["xylophone"]
    field.autocomplete()
    assert field.suggestions.current().main == "xylophone"


def test_autocomplete_without_entries_clears_list():
    field = InputField(text="a")
    field.autocomplete_func = lambda text: ["alpha"]
    field.autocomplete()
    field.autocomplete_func = lambda text: []
    field.autocomplete()
    assert field.suggestions is None
    assert field.suggestion == ""


def test_field_height_depends_on_note():
    field = InputField()
    assert field.field_height() == 1
    field.field_note = "invalid"
    assert field.field_height() == 2


def test_display_text_is_masked():
    field = InputField(text="secret")
    field.mask_character = "*"
    assert field.display_text == "*" * len("secret")
    assert field.text == "secret"


def test_click_places_cursor_after_label():
    field = InputField(label="Name: ", text="abcdef")
    field.set_rect(0, 0, 40, 1)
    assert field.field_x == len("Name: ")
    field.handle_click(field.field_x + 2)
    assert field.cursor == 2
    assert field.has_focus


def test_click_beyond_text_moves_to_end():
    field = InputField(text="abc")
    field.set_rect(0, 0, 40, 1)
    field.label_width = 5
    field.cursor = 0
    field.handle_click(30)
    assert field.cursor == 3


def test_click_on_label_keeps_cursor():
    field = InputField(label="Label", text="abc")
    field.set_rect(0, 0, 40, 1)
    field.cursor = 1
    field.handle_click(0)
    assert field.cursor == 1
    assert field.has_focus