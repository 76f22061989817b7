import curses
import logging
from dataclasses import dataclass
from typing import Optional

from layered_window import OK_LABEL, LayeredWindow, WindowOwner, print_ok
from screen_info import DECORATION_HEIGHT, LayerKind, ScreenInfo
from surface import disable_echo, set_cursor_visible
from window_errors import ConfigurationError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionOption:
    centered: bool = False
    multi: bool = False


class HighlightCursor:
    """Hover position clamped to ``0..upper``."""

    def __init__(self, upper: int):
        self.upper = upper
        self.index = 0

    def move(self, step: int):
        self.index = max(0, min(self.index + step, self.upper))


class SelectionWindow(WindowOwner):
    """Decorated window listing options to pick from with the arrow keys.

    In single mode Enter picks the hovered option and ends the loop. In
    multi mode Enter toggles the hovered option, and an extra OK stop below
    the list ends the loop. Escape ends the loop in both modes and keeps
    whatever was already toggled.
    """

    def __init__(
        self,
        title: str,
        info: ScreenInfo,
        options: list[str],
        option: SelectionOption = SelectionOption(),
        newwin=None,
    ):
        self.option = option
        self.options = self._layout_options(options, info, option)
        self.window = LayeredWindow(info, LayerKind.DECORATED, title, newwin)

        n = len(self.options)
        self.cursor = HighlightCursor(n if option.multi else n - 1)
        self.selected: set[int] = set()
        self.terminated = False

    @staticmethod
    def _layout_options(options, info, option):
        if not options:
            raise ConfigurationError("selection window needs at least one option")
        if info.width < len(OK_LABEL) + 4:
            raise ConfigurationError(f"selection window must be at least {len(OK_LABEL) + 4} columns wide")

        width = info.width - 4
        for label in options:
            if len(label) > width:
                raise ConfigurationError(f"option '{label}' is wider than {width} columns")

        rows = info.height - DECORATION_HEIGHT - (1 if option.multi else 0)
        if len(options) > rows:
            raise ConfigurationError(f"{len(options)} options do not fit in {rows} rows")

        if not option.centered:
            return list(options)

        padded = []
        for label in options:
            pad_left = (width - len(label)) // 2
            pad_right = width - len(label) - pad_left
            padded.append(" " * pad_left + label + " " * pad_right)
        return padded

    @property
    def highlight_index(self) -> int:
        return self.cursor.index

    # ---------- input ----------
    def handle_key(self, ch: int):
        if ch == curses.KEY_UP:
            self.cursor.move(-1)
        elif ch == curses.KEY_DOWN:
            self.cursor.move(1)
        elif ch == 27:  # Esc
            # TODO: roll back toggles made during this run when Esc is pressed
            self.terminated = True
        elif ch in (10, 13):  # Enter
            self._choose()

    def _choose(self):
        index = self.cursor.index
        if not self.option.multi:
            self.selected.add(index)
            self.terminated = True
        elif index == len(self.options):
            self.terminated = True
        elif index in self.selected:
            self.selected.discard(index)
        else:
            self.selected.add(index)

    # ---------- rendering ----------
    def draw(self):
        for i, label in enumerate(self.options):
            if i in self.selected or i == self.cursor.index:
                self.window.attribute_on(curses.A_REVERSE)
            self.window.write_at(i, 1, label)
            self.window.attribute_set(curses.A_NORMAL)

        if self.option.multi:
            print_ok(self.window, self.cursor.index == len(self.options))

    def run(self, selected: Optional[set[int]] = None) -> tuple[set[int], bool]:
        """Block on key reads until the user finishes; returns (indices, success)."""
        if selected is not None:
            self.selected = selected
        self.terminated = False

        disable_echo()
        set_cursor_visible(False)
        self.window.set_keypad(True)

        while not self.terminated:
            self.draw()
            self.handle_key(self.window.getch())
            self.window.refresh()

        log.debug("selection finished with %s", sorted(self.selected))
        return self.selected, len(self.selected) > 0
