import curses
import logging

from screen_info import (
    LayerKind,
    ScreenInfo,
    check_geometry,
    derive_content,
    derive_title,
)
from surface import Surface
from window_errors import ConfigurationError

log = logging.getLogger(__name__)

OK_LABEL = "[ OK ]"


class LayeredWindow:
    """One to three nested surfaces: content, an optional border box and an
    optional title band.

    The ``kind`` tag decides how the content surface is inset inside
    ``info`` and which decoration surfaces exist. Content drawing calls are
    forwarded to ``main``.
    """

    def __init__(self, info: ScreenInfo, kind: LayerKind = LayerKind.PLAIN, title: str = "", newwin=None):
        check_geometry(info, kind, title)
        self.info = info
        self.kind = kind
        self.title = title
        self.box = None
        self.main = None
        self.title_surface = None
        self.destroyed = False

        try:
            if kind is not LayerKind.PLAIN:
                self.box = Surface(info, newwin)
                self.box.border()
            self.main = Surface(derive_content(info, kind), newwin)
            if kind is LayerKind.DECORATED:
                self.title_surface = Surface(derive_title(info), newwin)
                self._draw_title()
        except Exception:
            self.destroy()
            raise

        log.debug("created %s window %r", kind.value, info)

    # ---------- lifetime ----------
    def destroy(self):
        if self.destroyed:
            return
        self.destroyed = True
        for surface in (self.title_surface, self.box, self.main):
            if surface is not None:
                surface.destroy()
        log.debug("destroyed %s window %r", self.kind.value, self.info)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.destroy()
        return False

    def refresh(self):
        for surface in (self.main, self.box, self.title_surface):
            if surface is not None:
                surface.refresh()

    def resize(self, height: int, width: int):
        info = self.info.resized(height, width)
        check_geometry(info, self.kind, self.title)

        if self.box is not None:
            self.box.erase()
            self.box.resize(height, width)
        content = derive_content(info, self.kind)
        self.main.resize(content.height, content.width)
        if self.title_surface is not None:
            band = derive_title(info)
            self.title_surface.erase()
            self.title_surface.resize(band.height, band.width)

        self.info = info
        if self.box is not None:
            self.box.border()
        if self.title_surface is not None:
            self._draw_title()
        log.debug("resized %s window to %dx%d", self.kind.value, height, width)

    # ---------- title ----------
    def _draw_title(self, attr=None):
        surface = self.title_surface
        surface.border()
        col = (self.info.width - 2 - len(self.title)) // 2
        if attr is not None:
            surface.attribute_on(attr)
        surface.write_at(1, col, self.title)
        if attr is not None:
            surface.attribute_off(attr)
        surface.refresh()

    def set_title_attribute(self, attr: int):
        if self.title_surface is None:
            raise ConfigurationError("only decorated windows have a title")
        self._draw_title(attr)

    # ---------- forwarded to the content surface ----------
    def write_at(self, y, x, text):
        self.main.write_at(y, x, text)

    def write(self, text):
        self.main.write(text)

    def add_char_at(self, y, x, ch):
        self.main.add_char_at(y, x, ch)

    def add_char(self, ch):
        self.main.add_char(ch)

    def clear(self):
        self.main.clear()

    def erase(self):
        self.main.erase()

    def clear_to_eol(self):
        self.main.clear_to_eol()

    def move(self, y, x):
        self.main.move(y, x)

    def getch(self):
        return self.main.getch()

    def set_keypad(self, flag):
        self.main.set_keypad(flag)

    def attribute_on(self, attr):
        self.main.attribute_on(attr)

    def attribute_off(self, attr):
        self.main.attribute_off(attr)

    def attribute_set(self, attr):
        self.main.attribute_set(attr)


class WindowOwner:
    """Lifetime plumbing for widgets that own a ``LayeredWindow``."""

    window: LayeredWindow

    def refresh(self):
        self.window.refresh()

    def destroy(self):
        self.window.destroy()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.destroy()
        return False


def print_ok(window: LayeredWindow, highlight: bool):
    """Draw the OK control on the last content row, centered under the title."""
    if highlight:
        window.attribute_set(curses.A_REVERSE)
    window.write_at(window.main.info.height - 1, window.info.width // 2 - 4, OK_LABEL)
    if highlight:
        window.attribute_set(curses.A_NORMAL)
