"""Configuration for streamed tables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ValidationError
from .terminal import detect_terminal_width

# Rows buffered before column widths are frozen
DEFAULT_THRESHOLD = 100

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class TableConfig:
    """Layout and buffering options for a TableStream.

    Attributes:
        threshold: Number of rows buffered before widths are inferred and
            output starts. Bounds memory use to this many rows.
        max_width: Width the table should fit in. ``None`` queries the
            terminal when the table flushes.
        borders: Draw outer ``|`` borders and ``+`` rule junctions
        padding: Put a space on each side of the column dividers
    """

    threshold: int = DEFAULT_THRESHOLD
    max_width: int | None = None
    borders: bool = True
    padding: bool = True

    def __post_init__(self) -> None:
        if self.threshold < 1:
            raise ValidationError("threshold", self.threshold, "must be >= 1")
        if self.max_width is not None and self.max_width < 1:
            raise ValidationError("max_width", self.max_width, "must be >= 1")

    @classmethod
    def from_environment(cls) -> TableConfig:
        """Create TableConfig from TABLESTREAM_* environment variables.

        A TABLESTREAM_MAX_WIDTH of 0 (or unset) means "use the terminal width".
        """
        return cls(
            threshold=_env_int("TABLESTREAM_THRESHOLD", DEFAULT_THRESHOLD),
            max_width=_env_int("TABLESTREAM_MAX_WIDTH", 0) or None,
            borders=_env_bool("TABLESTREAM_BORDERS", True),
            padding=_env_bool("TABLESTREAM_PADDING", True),
        )

    def resolve_width(self) -> int:
        """Width to fit the table in, querying the terminal if unset."""
        if self.max_width is not None:
            return self.max_width
        return detect_terminal_width()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(name, raw, "must be an integer") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValidationError(name, raw, "must be a boolean (true/false)")
