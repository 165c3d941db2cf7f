"""Terminal style functions.

Each function wraps text in an SGR open/close pair and returns the new
string. Layout code treats the result as opaque and measures it with
table_lib.visible_width, so styles never affect alignment.

Color is a process-wide switch. The CLI turns it off for --no-color;
when off, every style function returns its input unchanged.
"""

_color_enabled = True


def set_color_enabled(enabled: bool) -> None:
    """Turn styling on or off for every style function."""
    global _color_enabled
    _color_enabled = bool(enabled)


def get_color_enabled() -> bool:
    """Return whether style functions currently emit escapes."""
    return _color_enabled


def _style(text: str, open_code: int, close_code: int) -> str:
    if not _color_enabled:
        return text
    return f"\x1b[{open_code}m{text}\x1b[{close_code}m"


# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
def bold(text: str) -> str:
    return _style(text, 1, 22)


def dim(text: str) -> str:
    return _style(text, 2, 22)


def italic(text: str) -> str:
    return _style(text, 3, 23)


def underline(text: str) -> str:
    return _style(text, 4, 24)


def red(text: str) -> str:
    return _style(text, 31, 39)


def green(text: str) -> str:
    return _style(text, 32, 39)


def yellow(text: str) -> str:
    return _style(text, 33, 39)


def blue(text: str) -> str:
    return _style(text, 34, 39)


def magenta(text: str) -> str:
    return _style(text, 35, 39)


def cyan(text: str) -> str:
    return _style(text, 36, 39)


def gray(text: str) -> str:
    return _style(text, 90, 39)


# ---------------------------------------------------------------------------
# Semantic tones used by the help renderer
# ---------------------------------------------------------------------------
def heading(text: str) -> str:
    """Section labels and header keys."""
    return bold(text)


def flag(text: str) -> str:
    """Option flags, command names and environment variable names."""
    return blue(text)


def info(text: str) -> str:
    """Informational values such as defaults."""
    return blue(text)


def warning(text: str) -> str:
    """Requirements the user must satisfy."""
    return yellow(text)


def danger(text: str) -> str:
    """Dependency and conflict annotations, and the description bullet."""
    return red(text)
