"""
tablestream: Stream rows to the terminal as an ASCII table.

Rows are pushed one at a time. The first window of rows is buffered to
pick column widths that fit the terminal; after that, widths are frozen and
rows are written as they arrive, so memory use stays bounded no matter how
long the stream is.

Example:
    import sys
    from tablestream import Column, TableStream

    columns = [
        Column(header="id", formatter=lambda r: r["id"], width=4),
        Column.key("name"),
    ]
    table = TableStream(sys.stdout, columns)
    for record in records:
        table.push(record)
    table.finish()
"""

from .config import DEFAULT_THRESHOLD, TableConfig
from .exceptions import (
    ConfigurationError,
    RowShapeError,
    TableFinishedError,
    TableStreamError,
    UsageError,
    ValidationError,
)
from .models import Column
from .render import RowRenderer
from .stream import TableStream
from .terminal import DEFAULT_TERMINAL_WIDTH, detect_terminal_width
from .widths import infer_widths

__version__ = "0.1.0"

__all__ = [
    # Main API
    "TableStream",
    "Column",
    "TableConfig",
    "RowRenderer",
    "infer_widths",
    "detect_terminal_width",
    "DEFAULT_THRESHOLD",
    "DEFAULT_TERMINAL_WIDTH",
    # Exceptions
    "TableStreamError",
    "ConfigurationError",
    "UsageError",
    "ValidationError",
    "TableFinishedError",
    "RowShapeError",
]
