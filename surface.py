import curses
import logging

from screen_info import ScreenInfo, screen_limits
from window_errors import SurfaceError

log = logging.getLogger(__name__)

# ACS_* constants only exist once initscr() has run
_ASCII_GLYPHS = {
    "ULCORNER": "+",
    "URCORNER": "+",
    "LLCORNER": "+",
    "LRCORNER": "+",
    "LTEE": "+",
    "RTEE": "+",
    "TTEE": "+",
    "BTEE": "+",
    "PLUS": "+",
    "HLINE": "-",
    "VLINE": "|",
}


def glyph(name):
    return getattr(curses, f"ACS_{name}", _ASCII_GLYPHS[name])


def set_cursor_visible(visible: bool) -> None:
    try:
        curses.curs_set(1 if visible else 0)
    except curses.error:
        pass


def disable_echo() -> None:
    try:
        curses.noecho()
    except curses.error:
        pass


def _check_on_screen(info: ScreenInfo) -> None:
    max_h, max_w = screen_limits()
    if info.y + info.height > max_h or info.x + info.width > max_w:
        raise SurfaceError(
            f"terminal is {max_h}x{max_w}, too small for a {info.height}x{info.width} "
            f"window at ({info.y}, {info.x})"
        )


class Surface:
    """A curses window owned by exactly one layer.

    Every drawing call flushes immediately. ``newwin`` replaces
    ``curses.newwin``; tests hand in a virtual screen.
    """

    def __init__(self, info: ScreenInfo, newwin=None):
        if newwin is None:
            _check_on_screen(info)
            newwin = curses.newwin
        self.info = info
        try:
            self.win = newwin(info.height, info.width, info.y, info.x)
        except curses.error as exc:
            raise SurfaceError(
                f"cannot create {info.height}x{info.width} window at ({info.y}, {info.x}): {exc}"
            ) from exc
        self.destroyed = False

    def _draw(self, fn, *args):
        try:
            fn(*args)
        except curses.error:
            # writing the bottom-right cell moves the cursor off the window
            log.debug("ignored curses error from %s%r", getattr(fn, "__name__", fn), args)

    # ---------- drawing ----------
    def write_at(self, y: int, x: int, text: str):
        self._draw(self.win.addstr, y, x, text)
        self.refresh()

    def write(self, text: str):
        self._draw(self.win.addstr, text)
        self.refresh()

    def add_char_at(self, y: int, x: int, ch):
        self._draw(self.win.addch, y, x, ch)
        self.refresh()

    def add_char(self, ch):
        self._draw(self.win.addch, ch)
        self.refresh()

    def border(self):
        self.win.box()
        self.refresh()

    def clear(self):
        self.win.clear()

    def erase(self):
        self.win.erase()

    def clear_to_eol(self):
        self.win.clrtoeol()

    def refresh(self):
        self.win.refresh()

    # ---------- geometry ----------
    def resize(self, height: int, width: int):
        try:
            self.win.resize(height, width)
        except curses.error as exc:
            raise SurfaceError(f"cannot resize window to {height}x{width}: {exc}") from exc
        self.info = self.info.resized(height, width)

    def relocate(self, y: int, x: int):
        self.win.mvwin(y, x)
        self.info = self.info.moved(y, x)

    def move(self, y: int, x: int):
        self.win.move(y, x)

    # ---------- input ----------
    def getch(self) -> int:
        return self.win.getch()

    def set_keypad(self, flag: bool):
        self.win.keypad(flag)

    # ---------- attributes ----------
    def attribute_on(self, attr: int):
        self.win.attron(attr)

    def attribute_off(self, attr: int):
        self.win.attroff(attr)

    def attribute_set(self, attr: int):
        self.win.attrset(attr)

    def destroy(self):
        if self.destroyed:
            return
        self.win.erase()
        self.win.refresh()
        self.win = None
        self.destroyed = True
