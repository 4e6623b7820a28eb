"""Column models for tablestream."""

import logging
import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

# Cells are rendered on a single line
_SINGLE_LINE = str.maketrans({"\n": " ", "\r": " ", "\t": " "})


@dataclass(frozen=True)
class Column:
    """
    Display configuration for one table column.

    A column knows its header label and how to turn a row value into the
    text of its cell. Row shape is up to the caller: supply a ``formatter``
    that extracts the cell from whatever object is pushed. Without a
    formatter the row must be a sequence holding one value per column, and
    the value at this column's position is used.

    Attributes:
        header: Header label, fixed for the table's lifetime
        formatter: Callable mapping a row to the cell value (any object; it
            is converted with ``str()``). ``None`` for positional access.
        width: Fixed display width, or ``None`` to infer it from data
        min_width: Narrowest width this column is shrunk to when the table
            does not fit the terminal
        fallback: Text shown when ``formatter`` raises
    """

    header: str = ""
    formatter: Callable[[Any], Any] | None = None
    width: int | None = None
    min_width: int = 1
    fallback: str = "?"

    def __post_init__(self) -> None:
        if self.width is not None and self.width < 0:
            raise ValidationError("width", self.width, "must be >= 0")
        if self.min_width < 0:
            raise ValidationError("min_width", self.min_width, "must be >= 0")

    @classmethod
    def attr(
        cls,
        name: str,
        fmt: str | None = None,
        header: str | None = None,
        width: int | None = None,
        min_width: int = 1,
    ) -> "Column":
        """
        Create a column that reads an attribute from each row.

        Example:
            Column.attr("population", fmt="{:,}", header="Population")
        """
        return cls(
            header=name if header is None else header,
            formatter=_with_format(operator.attrgetter(name), fmt),
            width=width,
            min_width=min_width,
        )

    @classmethod
    def key(
        cls,
        key: Any,
        fmt: str | None = None,
        header: str | None = None,
        width: int | None = None,
        min_width: int = 1,
    ) -> "Column":
        """Create a column that reads a mapping key or sequence index from each row."""
        return cls(
            header=str(key) if header is None else header,
            formatter=_with_format(operator.itemgetter(key), fmt),
            width=width,
            min_width=min_width,
        )

    @property
    def fixed(self) -> bool:
        """True when the width is declared rather than inferred."""
        return self.width is not None

    def format(self, row: Any, index: int) -> str:
        """
        Produce the single-line cell text for ``row``.

        Args:
            row: The row value pushed by the caller
            index: This column's position, used for positional access

        Returns:
            Cell text with line breaks and tabs replaced by spaces
        """
        value = row[index] if self.formatter is None else None
        try:
            if self.formatter is not None:
                value = self.formatter(row)
            return str(value).translate(_SINGLE_LINE)
        except Exception:
            logger.warning(
                "Formatting column %r failed; using fallback %r",
                self.header,
                self.fallback,
                exc_info=True,
            )
            return self.fallback.translate(_SINGLE_LINE)


def _with_format(getter: Callable[[Any], Any], fmt: str | None) -> Callable[[Any], Any]:
    if fmt is None:
        return getter

    def formatter(row: Any) -> str:
        return fmt.format(getter(row))

    return formatter


def header_texts(columns: Sequence[Column]) -> tuple[str, ...]:
    """Header labels of ``columns`` as single-line cell texts."""
    return tuple(c.header.translate(_SINGLE_LINE) for c in columns)
