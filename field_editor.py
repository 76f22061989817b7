import curses
import logging
from typing import Sequence

from layered_window import OK_LABEL, LayeredWindow, WindowOwner, print_ok
from screen_info import DECORATION_HEIGHT, LayerKind, ScreenInfo
from surface import disable_echo, set_cursor_visible
from window_errors import ConfigurationError
from yielders import Change, Yielder

log = logging.getLogger(__name__)


class FieldEditor(WindowOwner):
    """Decorated window with one labeled input line per field and an OK control.

    Each field is edited through its own yielder. Content wider than the
    field scrolls so that its end (and the cursor) stays visible.
    """

    def __init__(self, title: str, fields: Sequence[str], info: ScreenInfo, newwin=None):
        self.fields = self._pad_fields(fields, info)
        self.window = LayeredWindow(info, LayerKind.DECORATED, title, newwin)

        self.field = 0
        self.quit = False
        self.escape = False

        for line, label in enumerate(self.fields):
            self.window.write_at(line, 0, f"{label} ")
        self.ok_highlighted = False
        print_ok(self.window, False)

    @staticmethod
    def _pad_fields(fields, info):
        if not fields:
            raise ConfigurationError("field editor needs at least one field")
        if info.width < len(OK_LABEL) + 4:
            raise ConfigurationError(f"field editor must be at least {len(OK_LABEL) + 4} columns wide")

        rows = info.height - DECORATION_HEIGHT - 1
        if len(fields) > rows:
            raise ConfigurationError(f"{len(fields)} fields do not fit in {rows} rows")

        width = max(len(f) for f in fields) + 2
        if width > info.width - 6:
            raise ConfigurationError(
                f"field labels leave no room for input in a window {info.width} columns wide"
            )
        return [f.ljust(width) for f in fields]

    # ---------- display ----------
    def visible_content(self, field: int, content: str) -> str:
        room = self.window.main.info.width - len(self.fields[field]) - 3
        if len(content) > room:
            return content[len(content) - room:]
        return content

    def _update_field(self, field: int, yielders: Sequence[Yielder]):
        text = self.visible_content(field, yielders[field].content())
        self.window.move(field, 0)
        self.window.clear_to_eol()
        self.window.write_at(field, 0, f"{self.fields[field]}  {text}")

    def cursor_column(self, field: int, yielders: Sequence[Yielder]) -> int:
        text = self.visible_content(field, yielders[field].content())
        return len(self.fields[field]) + 2 + len(text)

    def _place_cursor(self, yielders):
        self.window.move(self.field, self.cursor_column(self.field, yielders))

    # ---------- input ----------
    def _check_movement_input(self, ch: int) -> bool:
        ok = len(self.fields)
        if ch == curses.KEY_UP:
            if self.field > 0:
                self.field -= 1
        elif ch == curses.KEY_DOWN:
            if self.field < ok:
                self.field += 1
        elif ch in (10, 13):  # Enter
            if self.field == ok:
                self.quit = True
        elif ch == 9:  # Tab
            self.field = 0 if self.field == ok else self.field + 1
        elif ch == 27:  # Esc
            self.escape = True
            self.quit = True
        else:
            return False
        return True

    def _show_ok(self, highlight: bool, force: bool = False):
        if force or highlight != self.ok_highlighted:
            print_ok(self.window, highlight)
        self.ok_highlighted = highlight

    def handle_key(self, ch: int, yielders: Sequence[Yielder]):
        moved = self._check_movement_input(ch)
        if self.quit:
            return

        if self.field >= len(self.fields):
            set_cursor_visible(False)
            self._show_ok(True)
            return

        set_cursor_visible(True)
        self._show_ok(False)

        if not moved and yielders[self.field].process(ch) is not Change.NONE:
            self._update_field(self.field, yielders)
        self._place_cursor(yielders)

    def run(self, yielders: Sequence[Yielder]) -> bool:
        """Edit fields until OK is confirmed (True) or Esc is pressed (False)."""
        if len(yielders) != len(self.fields):
            raise ConfigurationError(
                f"{len(yielders)} yielders given for {len(self.fields)} fields"
            )
        self.field = 0
        self.quit = False
        self.escape = False

        self.window.set_keypad(True)
        disable_echo()

        self._show_ok(False, force=True)
        for i in range(len(self.fields)):
            self._update_field(i, yielders)
        self._place_cursor(yielders)
        set_cursor_visible(True)

        while not self.quit:
            self.handle_key(self.window.getch(), yielders)

        set_cursor_visible(False)
        log.debug("field editor finished, committed=%s", not self.escape)
        return not self.escape
