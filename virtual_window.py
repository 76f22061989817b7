"""In-memory stand-in for curses windows, used by the test suite."""
import curses
from collections import deque


class VirtualWindow:
    def __init__(self, screen, height, width, y, x):
        self.screen = screen
        self.height = height
        self.width = width
        self.y = y
        self.x = x
        self.cells = {}
        self.attr = curses.A_NORMAL
        self.cursor = (0, 0)
        self.boxed = False
        self.keypad_enabled = False
        self.refresh_count = 0

    # ---------- drawing ----------
    def _put(self, y, x, ch):
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise curses.error(f"({y}, {x}) outside {self.height}x{self.width} window")
        self.cells[(y, x)] = (ch, self.attr)
        self.screen.events.append(("write", self, y))

    def addstr(self, *args):
        if len(args) == 1:
            (y, x), text = self.cursor, args[0]
        else:
            y, x, text = args[:3]
        for i, ch in enumerate(text):
            self._put(y, x + i, ch)
        self.cursor = (y, x + len(text))

    def addch(self, *args):
        if len(args) == 1:
            (y, x), ch = self.cursor, args[0]
        else:
            y, x, ch = args[:3]
        if isinstance(ch, int):
            ch = chr(ch)
        self._put(y, x, ch)
        self.cursor = (y, x + 1)

    def box(self):
        self.boxed = True
        for x in range(self.width):
            self.cells[(0, x)] = ("-", curses.A_NORMAL)
            self.cells[(self.height - 1, x)] = ("-", curses.A_NORMAL)
        for y in range(self.height):
            self.cells[(y, 0)] = ("|", curses.A_NORMAL)
            self.cells[(y, self.width - 1)] = ("|", curses.A_NORMAL)

    def erase(self):
        self.cells.clear()
        self.boxed = False
        self.screen.events.append(("erase", self))

    def clear(self):
        self.erase()

    def clrtoeol(self):
        y, x = self.cursor
        for key in [k for k in self.cells if k[0] == y and k[1] >= x]:
            del self.cells[key]

    def refresh(self):
        self.refresh_count += 1
        self.screen.events.append(("refresh", self))

    # ---------- geometry ----------
    def resize(self, height, width):
        if self.screen.refuse_resize:
            raise curses.error("wresize() returned ERR")
        self.height = height
        self.width = width
        self.cells = {k: v for k, v in self.cells.items() if k[0] < height and k[1] < width}

    def mvwin(self, y, x):
        self.y = y
        self.x = x

    def move(self, y, x):
        self.cursor = (y, x)

    def getmaxyx(self):
        return self.height, self.width

    # ---------- input / attributes ----------
    def getch(self):
        return self.screen.next_key()

    def keypad(self, flag):
        self.keypad_enabled = flag

    def attron(self, attr):
        self.attr |= attr

    def attroff(self, attr):
        self.attr &= ~attr

    def attrset(self, attr):
        self.attr = attr

    # ---------- inspection ----------
    def row_text(self, y):
        return "".join(self.cells.get((y, x), (" ", 0))[0] for x in range(self.width))

    def attr_at(self, y, x):
        return self.cells.get((y, x), (" ", curses.A_NORMAL))[1]


class VirtualScreen:
    """Factory with the ``curses.newwin`` signature; all windows share one key queue."""

    def __init__(self, keys=(), refuse_resize=False):
        self.refuse_resize = refuse_resize
        self.windows = []
        self.events = []
        self.keys = deque(keys)

    def newwin(self, height, width, y, x):
        win = VirtualWindow(self, height, width, y, x)
        self.windows.append(win)
        self.events.append(("newwin", win))
        return win

    def feed(self, *keys):
        self.keys.extend(keys)

    def next_key(self):
        if not self.keys:
            raise AssertionError("key queue exhausted")
        return self.keys.popleft()
