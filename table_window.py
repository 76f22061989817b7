import curses
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

import pandas as pd

from cell_coercion import format_cell
from layered_window import LayeredWindow, WindowOwner
from screen_info import LayerKind, ScreenInfo
from surface import glyph
from window_errors import ConfigurationError

log = logging.getLogger(__name__)

T = TypeVar("T")
Generator = Callable[[Any, int], str]


def dataframe_cell(row: tuple, col: int) -> str:
    return format_cell(row[col])


@dataclass
class TableSource(Generic[T]):
    headers: list[str]
    generator: Generator
    data: list = field(default_factory=list)
    lengths: list[int] = field(default_factory=list)
    auto_resize: bool = False

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, lengths=None, auto_resize=False) -> "TableSource[tuple]":
        return cls(
            headers=[str(col) for col in df.columns],
            generator=dataframe_cell,
            data=list(df.itertuples(index=False, name=None)),
            lengths=list(lengths or []),
            auto_resize=auto_resize,
        )


def column_widths(headers: Sequence[str], data: Sequence, generator: Generator) -> list[int]:
    widths = [len(h) for h in headers]
    for row in data:
        for i in range(len(headers)):
            widths[i] = max(widths[i], len(generator(row, i)))
    return widths


def table_size(lengths: Sequence[int], rows: int) -> tuple[int, int]:
    """(height, width) a table with these column widths occupies."""
    return rows + 4, 1 + sum(w + 3 for w in lengths)


def fit_cell(text: str, width: int) -> str:
    return text[:width].ljust(width)


class Table(WindowOwner, Generic[T]):
    """Renders rows of ``data`` into a plain window as a boxed grid.

    Cell text comes from ``generator(row, column)``. Every mutator repaints
    the whole table.
    """

    def __init__(self, source: TableSource[T], info: ScreenInfo, newwin=None):
        if not source.headers:
            raise ConfigurationError("table needs at least one header")

        self.headers = list(source.headers)
        self.data = list(source.data)
        self.generator = source.generator
        self.fixed_lengths = bool(source.lengths)
        if self.fixed_lengths:
            self._check_lengths(source.lengths)
            self.lengths = list(source.lengths)
        else:
            self.lengths = column_widths(self.headers, self.data, self.generator)
        self.highlight: Optional[int] = None

        self.window = LayeredWindow(info, LayerKind.PLAIN, newwin=newwin)
        try:
            self._redraw(source.auto_resize)
        except Exception:
            self.window.destroy()
            raise

    def _check_lengths(self, lengths):
        if len(lengths) != len(self.headers):
            raise ConfigurationError(
                f"{len(lengths)} column widths given for {len(self.headers)} headers"
            )
        if any(w < 0 for w in lengths):
            raise ConfigurationError(f"column widths must not be negative: {list(lengths)}")

    @property
    def size(self) -> tuple[int, int]:
        return table_size(self.lengths, len(self.data))

    # ---------- mutators ----------
    _STATE = ("headers", "data", "generator", "lengths", "fixed_lengths", "highlight")

    def _update(self, auto_resize=False, **changes):
        """Apply ``changes`` and repaint; a rejected table leaves the old state and drawing."""
        saved = {name: getattr(self, name) for name in self._STATE}
        for name, value in changes.items():
            setattr(self, name, value)
        if not self.fixed_lengths:
            self.lengths = column_widths(self.headers, self.data, self.generator)
        try:
            self._redraw(auto_resize)
        except Exception:
            for name, value in saved.items():
                setattr(self, name, value)
            raise

    def set_data(self, data, auto_resize=False):
        if auto_resize:
            self._update(auto_resize, data=list(data), fixed_lengths=False)
        else:
            self._update(data=list(data))

    def set_lengths(self, lengths):
        self._check_lengths(lengths)
        self._update(lengths=list(lengths), fixed_lengths=True)

    def set_generator(self, generator: Generator):
        self._update(generator=generator)

    def set_dataframe(self, df: pd.DataFrame, auto_resize=False):
        source = TableSource.from_dataframe(df)
        if not source.headers:
            raise ConfigurationError("table needs at least one header")
        self._update(
            auto_resize,
            headers=source.headers,
            data=source.data,
            generator=source.generator,
            fixed_lengths=False,
        )

    def highlight_row(self, row: Optional[int]):
        self._update(highlight=row)

    # ---------- rendering ----------
    def _redraw(self, auto_resize=False):
        height, width = self.size
        if auto_resize:
            self.window.resize(height, width)
            log.debug("table resized to %dx%d", height, width)
        elif height > self.window.info.height or width > self.window.info.width:
            raise ConfigurationError(
                f"table needs {height}x{width} but its window is "
                f"{self.window.info.height}x{self.window.info.width}"
            )
        self.window.erase()
        self._write_table()
        self.window.refresh()

    def _write_bar(self, line, left, tee, right):
        last = len(self.lengths) - 1
        x = 0
        self.window.add_char_at(line, 0, glyph(left))
        for i, width in enumerate(self.lengths):
            for j in range(width + 2):
                self.window.add_char_at(line, x + j + 1, glyph("HLINE"))
            x += width + 3
            self.window.add_char_at(line, x, glyph(tee if i != last else right))

    def _write_cells(self, line, cells, attr=None):
        x = 1
        for text, width in zip(cells, self.lengths):
            if attr is not None:
                self.window.attribute_set(attr)
            self.window.write_at(line, x, f" {text} ")
            if attr is not None:
                self.window.attribute_set(curses.A_NORMAL)
            x += width + 3
            self.window.add_char_at(line, x - 1, glyph("VLINE"))
        self.window.add_char_at(line, 0, glyph("VLINE"))

    def _write_table(self):
        line = 0
        self._write_bar(line, "ULCORNER", "TTEE", "URCORNER")
        line += 1

        headers = [h[:w].center(w) for h, w in zip(self.headers, self.lengths)]
        self._write_cells(line, headers)
        line += 1

        self._write_bar(line, "LTEE", "PLUS", "RTEE")
        line += 1

        for n, row in enumerate(self.data):
            cells = [fit_cell(self.generator(row, i), w) for i, w in enumerate(self.lengths)]
            self._write_cells(line, cells, curses.A_REVERSE if n == self.highlight else None)
            line += 1

        self._write_bar(line, "LLCORNER", "BTEE", "LRCORNER")
