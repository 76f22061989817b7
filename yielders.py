"""Edit strategies for FieldEditor fields.

A yielder turns key codes into edits of one field's content. FieldEditor
only relies on ``process(ch)`` and ``content()``; the concrete backing type
stays with the yielder.
"""
import curses
import datetime
import enum
from typing import Protocol

import pandas as pd

from cell_coercion import coerce_text, format_cell

BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
NUMERIC_CHARS = set("0123456789+-.eE")


class Change(enum.Enum):
    NONE = "none"
    APPENDED = "appended"
    DELETED = "deleted"


class Yielder(Protocol):
    def process(self, ch: int) -> Change: ...

    def content(self) -> str: ...


def edit_text(text: str, ch: int, allowed=None) -> tuple[str, Change]:
    if ch in BACKSPACE_KEYS:
        if not text:
            return text, Change.NONE
        return text[:-1], Change.DELETED

    if 32 <= ch <= 126 and (allowed is None or chr(ch) in allowed):
        return text + chr(ch), Change.APPENDED

    return text, Change.NONE


class StringYielder:
    def __init__(self, value: str = ""):
        self.value = value

    def process(self, ch: int) -> Change:
        self.value, change = edit_text(self.value, ch)
        return change

    def content(self) -> str:
        return self.value


class DtypeYielder:
    """Text field whose ``value`` is coerced to a pandas dtype.

    Numeric dtypes only accept characters that can appear in a number.
    ``value`` raises ValueError while the text does not parse.
    """

    def __init__(self, dtype, initial=None):
        self.dtype = pd.api.types.pandas_dtype(dtype)
        self.text = format_cell(initial)
        numeric = pd.api.types.is_numeric_dtype(self.dtype) and not pd.api.types.is_bool_dtype(self.dtype)
        self.allowed = NUMERIC_CHARS if numeric else None

    def process(self, ch: int) -> Change:
        self.text, change = edit_text(self.text, ch, self.allowed)
        return change

    def content(self) -> str:
        return self.text

    @property
    def value(self):
        return coerce_text(self.text, self.dtype)

    def is_valid(self) -> bool:
        try:
            self.value
        except ValueError:
            return False
        return True


def yielder(value) -> Yielder:
    """Pick the edit strategy for ``value`` by its type."""
    if isinstance(value, str):
        return StringYielder(value)
    if isinstance(value, bool):
        return DtypeYielder("boolean", value)
    if isinstance(value, int):
        return DtypeYielder("Int64", value)
    if isinstance(value, float):
        return DtypeYielder("float64", value)
    if isinstance(value, (datetime.datetime, datetime.date)):
        return DtypeYielder("datetime64[ns]", value)
    raise TypeError(f"no edit strategy for {type(value).__name__}")
