import curses

import pytest

from field_editor import FieldEditor
from screen_info import ScreenInfo
from virtual_window import VirtualScreen
from window_errors import ConfigurationError
from yielders import StringYielder

ENTER = 10
ESC = 27
TAB = 9
UP = curses.KEY_UP
DOWN = curses.KEY_DOWN


def _editor(fields=("Name", "Email"), keys=(), info=ScreenInfo(10, 30, 0, 0)):
    screen = VirtualScreen(keys)
    editor = FieldEditor("Edit", list(fields), info, newwin=screen.newwin)
    return screen, editor


def _type(text):
    return [ord(ch) for ch in text]


def test_labels_are_padded_to_longest_plus_two():
    screen, editor = _editor()
    assert editor.fields == ["Name   ", "Email  "]
    main = screen.windows[1]
    assert main.row_text(0).startswith("Name")
    assert "[ OK ]" in main.row_text(main.height - 1)


def test_enter_on_ok_commits_typed_values():
    keys = _type("Al") + [DOWN] + _type("a@b") + [DOWN, ENTER]
    screen, editor = _editor(keys=keys)
    name, email = StringYielder(), StringYielder()
    assert editor.run([name, email]) is True
    assert (name.value, email.value) == ("Al", "a@b")
    main = screen.windows[1]
    assert main.row_text(0).rstrip() == "Name     Al"
    assert main.row_text(1).rstrip() == "Email    a@b"


def test_escape_cancels():
    _, editor = _editor(keys=_type("x") + [ESC])
    name = StringYielder()
    assert editor.run([name, StringYielder()]) is False
    assert editor.escape


def test_backspace_on_empty_field_leaves_it_empty():
    _, editor = _editor(keys=[curses.KEY_BACKSPACE, ESC])
    name = StringYielder()
    editor.run([name, StringYielder()])
    assert name.content() == ""


def test_tab_from_ok_wraps_to_first_field():
    _, editor = _editor()
    yielders = [StringYielder(), StringYielder()]
    editor.handle_key(TAB, yielders)
    editor.handle_key(TAB, yielders)
    assert editor.field == 2
    editor.handle_key(TAB, yielders)
    assert editor.field == 0


def test_up_and_down_do_not_wrap():
    _, editor = _editor()
    yielders = [StringYielder(), StringYielder()]
    editor.handle_key(UP, yielders)
    assert editor.field == 0
    for _ in range(5):
        editor.handle_key(DOWN, yielders)
    assert editor.field == 2


def test_enter_on_field_does_not_commit():
    _, editor = _editor()
    editor.handle_key(ENTER, [StringYielder(), StringYielder()])
    assert not editor.quit
    assert editor.field == 0


def test_ok_is_highlighted_when_focused():
    screen, editor = _editor()
    main = screen.windows[1]
    yielders = [StringYielder(), StringYielder()]
    editor.handle_key(DOWN, yielders)
    editor.handle_key(DOWN, yielders)
    row = main.height - 1
    col = main.row_text(row).index("[ OK ]")
    assert main.attr_at(row, col) & curses.A_REVERSE
    editor.handle_key(UP, yielders)
    assert not main.attr_at(row, col) & curses.A_REVERSE


def test_long_content_scrolls_to_keep_end_visible():
    screen, editor = _editor()
    main = screen.windows[1]
    name = StringYielder()
    yielders = [name, StringYielder()]
    text = "abcdefghijklmnopqrstuvwxyz"
    for ch in text:
        editor.handle_key(ord(ch), yielders)

    # 28 content columns - 7 label - 3
    room = 18
    shown = main.row_text(0)[len("Name     "):].rstrip()
    assert shown == text[-room:]
    assert name.content() == text
    assert main.cursor == (0, len("Name     ") + room)
    assert editor.cursor_column(0, yielders) < main.width


def test_cursor_follows_short_content():
    screen, editor = _editor()
    yielders = [StringYielder("hey"), StringYielder()]
    editor.handle_key(DOWN, yielders)
    editor.handle_key(UP, yielders)
    assert screen.windows[1].cursor == (0, len("Name     hey"))


@pytest.mark.parametrize(
    "fields, info",
    [
        ([], ScreenInfo(10, 30)),
        (["a", "b", "c", "d", "e"], ScreenInfo(10, 30)),
        (["x" * 23], ScreenInfo(10, 30)),
        (["a"], ScreenInfo(10, 9)),
    ],
)
def test_construction_misuse_is_reported(fields, info):
    screen = VirtualScreen()
    with pytest.raises(ConfigurationError):
        FieldEditor("t", fields, info, newwin=screen.newwin)
    assert screen.windows == []


def test_run_needs_one_yielder_per_field():
    _, editor = _editor()
    with pytest.raises(ConfigurationError):
        editor.run([StringYielder()])


def _written_rows(screen, win):
    return {e[2] for e in screen.events if e[0] == "write" and e[1] is win}


def test_edit_redraws_only_the_edited_line():
    screen, editor = _editor()
    main = screen.windows[1]
    yielders = [StringYielder(), StringYielder("kept")]
    editor.handle_key(ord("a"), yielders)
    screen.events.clear()

    editor.handle_key(ord("b"), yielders)

    assert _written_rows(screen, main) == {0}
    assert main.row_text(0).rstrip() == "Name     ab"


def test_unhandled_key_redraws_nothing():
    screen, editor = _editor()
    main = screen.windows[1]
    yielders = [StringYielder("x"), StringYielder()]
    editor.handle_key(ord("y"), yielders)
    screen.events.clear()

    editor.handle_key(curses.KEY_LEFT, yielders)

    assert _written_rows(screen, main) == set()
    assert yielders[0].content() == "xy"
