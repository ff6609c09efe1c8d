import pytest

from termwidgets.element import Element
from termwidgets.focus import FocusManager, Transformation


@pytest.fixture
def setup():
    calls = []
    manager = FocusManager(calls.append)
    elements = [Element(), Element(), Element()]
    manager.add(*elements)
    return manager, elements, calls


def test_focus_next_moves_forward(setup):
    manager, elements, calls = setup
    manager.focus_next()
    assert manager.focus_index == 1
    assert calls == [elements[1]]
    assert manager.focused_primitive is elements[1]


def test_focus_next_stops_at_end_without_wrap(setup):
    manager, elements, calls = setup
    manager.focus_at(2)
    manager.focus_next()
    assert manager.focus_index == 2
    assert calls[-1] is elements[2]


def test_focus_next_wraps_around(setup):
    manager, elements, calls = setup
    manager.wrap_around = True
    manager.focus_at(2)
    manager.focus_next()
    assert manager.focus_index == 0
    assert calls[-1] is elements[0]


def test_focus_previous_stops_at_start_without_wrap(setup):
    manager, elements, calls = setup
    manager.focus_previous()
    assert manager.focus_index == 0
    assert calls == [elements[0]]


def test_focus_previous_wraps_to_last(setup):
    manager, elements, calls = setup
    manager.wrap_around = True
    manager.focus_previous()
    assert manager.focus_index == 2
    assert calls == [elements[2]]


def test_focus_on_element(setup):
    manager, elements, calls = setup
    manager.focus(elements[2])
    assert manager.focus_index == 2
    assert calls == [elements[2]]


def test_focus_on_unknown_element_keeps_current(setup):
    manager, elements, calls = setup
    manager.focus_at(1)
    manager.focus(Element())
    assert manager.focus_index == 1
    assert calls == [elements[1], elements[1]]


def test_add_at_inserts(setup):
    manager, elements, calls = setup
    extra = Element()
    manager.add_at(1, extra)
    manager.focus_at(1)
    assert calls == [extra]
    manager.focus_next()
    assert calls[-1] is elements[1]


def test_add_at_end_appends(setup):
    manager, elements, calls = setup
    extra = Element()
    manager.add_at(3, extra)
    manager.focus_at(3)
    assert manager.focused_primitive is extra


@pytest.mark.parametrize("index", [-1, 4])
def test_add_at_out_of_range(setup, index):
    manager, _, _ = setup
    with pytest.raises(IndexError):
        manager.add_at(index, Element())


@pytest.mark.parametrize("index", [-1, 3])
def test_set_focus_index_out_of_range(setup, index):
    manager, _, _ = setup
    with pytest.raises(IndexError):
        manager.set_focus_index(index)
    assert manager.focus_index == 0


def test_set_focus_index_does_not_notify(setup):
    manager, elements, calls = setup
    manager.set_focus_index(2)
    assert manager.focus_index == 2
    assert calls == []
    assert manager.focused_primitive is elements[2]


def test_focus_at_out_of_range(setup):
    manager, _, calls = setup
    with pytest.raises(IndexError):
        manager.focus_at(5)
    assert calls == []


def test_transform(setup):
    manager, _, calls = setup
    manager.transform(Transformation.LAST_ITEM)
    assert manager.focus_index == 2
    manager.transform(Transformation.PREVIOUS_ITEM)
    assert manager.focus_index == 1
    manager.transform(Transformation.NEXT_ITEM)
    assert manager.focus_index == 2
    manager.transform(Transformation.NEXT_ITEM)
    assert manager.focus_index == 2
    manager.transform(Transformation.FIRST_ITEM)
    assert manager.focus_index == 0
    assert calls == []


def test_reset_empties_manager(setup):
    manager, _, _ = setup
    manager.focus_at(2)
    manager.reset()
    assert manager.focus_index == 0
    with pytest.raises(IndexError):
        manager.focus_next()