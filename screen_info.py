import curses
import enum
from dataclasses import dataclass, replace

from window_errors import ConfigurationError, SurfaceError

# Rows taken by a decorated window's top border and title band (and bottom border).
DECORATION_HEIGHT = 5
TITLE_HEIGHT = 3


class LayerKind(enum.Enum):
    PLAIN = "plain"
    BOXED = "boxed"
    DECORATED = "decorated"


@dataclass(frozen=True)
class ScreenInfo:
    height: int
    width: int
    y: int = 0
    x: int = 0

    def resized(self, height: int, width: int) -> "ScreenInfo":
        return replace(self, height=height, width=width)

    def moved(self, y: int, x: int) -> "ScreenInfo":
        return replace(self, y=y, x=x)


def screen_limits() -> tuple[int, int]:
    """Return (max_height, max_width) of the whole terminal."""
    try:
        return curses.LINES, curses.COLS
    except AttributeError:
        raise SurfaceError("curses has not been initialized") from None


def derive_content(info: ScreenInfo, kind: LayerKind) -> ScreenInfo:
    """Geometry of the content surface inside a layer of the given kind."""
    if kind is LayerKind.PLAIN:
        return info
    if kind is LayerKind.BOXED:
        return ScreenInfo(info.height - 2, info.width - 2, info.y + 1, info.x + 1)
    return ScreenInfo(
        info.height - DECORATION_HEIGHT,
        info.width - 2,
        info.y + TITLE_HEIGHT + 1,
        info.x + 1,
    )


def derive_title(info: ScreenInfo) -> ScreenInfo:
    return ScreenInfo(TITLE_HEIGHT, info.width - 2, info.y + 1, info.x + 1)


def check_geometry(info: ScreenInfo, kind: LayerKind, title: str = "") -> None:
    if info.height < 1 or info.width < 1:
        raise ConfigurationError(f"window must be at least 1x1, got {info.height}x{info.width}")
    if info.y < 0 or info.x < 0:
        raise ConfigurationError(f"window origin must not be negative, got ({info.y}, {info.x})")

    if kind is LayerKind.BOXED and (info.height < 3 or info.width < 3):
        raise ConfigurationError(
            f"boxed window needs at least 3x3, got {info.height}x{info.width}"
        )

    if kind is LayerKind.DECORATED:
        if info.height < DECORATION_HEIGHT + 1 or info.width < 3:
            raise ConfigurationError(
                f"decorated window needs at least {DECORATION_HEIGHT + 1}x3, "
                f"got {info.height}x{info.width}"
            )
        if len(title) > info.width - 4:
            raise ConfigurationError(
                f"title '{title}' does not fit in a window {info.width} columns wide"
            )
