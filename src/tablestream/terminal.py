"""Terminal width detection."""

import shutil

DEFAULT_TERMINAL_WIDTH = 80


def detect_terminal_width(default: int = DEFAULT_TERMINAL_WIDTH) -> int:
    """
    Return the number of columns available on the controlling terminal.

    The ``COLUMNS`` environment variable takes precedence. When neither it
    nor the terminal reports a usable size (e.g. output is piped), returns
    ``default``.
    """
    columns = shutil.get_terminal_size(fallback=(default, 24)).columns
    return columns if columns > 0 else default
