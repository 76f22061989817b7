class TuiError(Exception):
    """Base class for errors raised by tuiwin."""


class ConfigurationError(TuiError, ValueError):
    """A window or widget was constructed with arguments it cannot lay out."""


class SurfaceError(TuiError, RuntimeError):
    """The terminal refused to provide a drawable surface."""
