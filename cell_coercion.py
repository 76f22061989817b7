import pandas as pd

_TRUE_WORDS = {"1", "true", "t", "yes", "y", "on"}
_FALSE_WORDS = {"0", "false", "f", "no", "n", "off"}


def format_cell(value) -> str:
    if value is None:
        return ""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""
    return str(value)


def coerce_text(text, dtype):
    """Convert field text to a value of ``dtype``; blank text gives the dtype's missing value."""
    text = "" if text is None else str(text)
    dtype = pd.api.types.pandas_dtype(dtype)

    stripped = text.strip()
    if pd.api.types.is_bool_dtype(dtype):
        if stripped == "":
            return pd.NA
        lowered = stripped.lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        raise ValueError(f"Cannot coerce '{text}' to boolean")

    if pd.api.types.is_integer_dtype(dtype):
        if stripped == "":
            return pd.NA
        return int(stripped)

    if pd.api.types.is_float_dtype(dtype):
        if stripped == "":
            return float("nan")
        return float(stripped)

    if pd.api.types.is_datetime64_any_dtype(dtype):
        if stripped == "":
            return pd.NaT
        return pd.to_datetime(stripped, errors="raise")

    return text
