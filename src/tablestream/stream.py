"""
Streaming table writer.

TableStream prints rows as an ASCII table without holding the whole data
set in memory. The first ``threshold`` rows are buffered so column widths
can be chosen from real data; after that the widths are frozen and every
further row is written as soon as it arrives.

Example:
    import sys
    from tablestream import Column, TableConfig, TableStream

    columns = [
        Column.attr("name", header="City"),
        Column.attr("population", fmt="{:,}", header="Population"),
    ]
    with TableStream(sys.stdout, columns, TableConfig(threshold=50)) as table:
        for city in cities:
            table.push(city)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence, Sized
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any

from .config import TableConfig
from .exceptions import ConfigurationError, RowShapeError, TableFinishedError
from .models import Column, header_texts
from .render import RowRenderer, TextSink
from .widths import infer_widths

logger = logging.getLogger(__name__)


@dataclass
class _Buffering:
    """Rows held until widths are inferred. Only cell text is kept."""

    rows: list[tuple[str, ...]] = field(default_factory=list)


@dataclass(frozen=True)
class _Streaming:
    """Widths are frozen; rows go straight to the sink."""

    renderer: RowRenderer


class TableStream:
    """
    Write rows to a text sink as a bordered table.

    Rows are pushed one at a time with :meth:`push`. Output starts once
    ``config.threshold`` rows have been buffered, or when :meth:`finish`
    is called, whichever comes first. :meth:`finish` must be called to
    terminate the table; the instance is unusable afterwards.

    A table instance is meant to be driven by a single caller; it does no
    locking. Errors raised by the sink (e.g. ``BrokenPipeError``) propagate
    unchanged from whichever call triggered the write, and leave the table
    in an unspecified state.
    """

    def __init__(
        self,
        sink: TextSink,
        columns: Sequence[Column],
        config: TableConfig | None = None,
        *,
        title: str | None = None,
    ) -> None:
        """Initialize the table.

        Args:
            sink: Text stream the table is written to
            columns: Column definitions, in display order
            config: Buffering and layout options (defaults to TableConfig())
            title: Optional line printed above the header

        Raises:
            ConfigurationError: If no columns are given
        """
        if not columns:
            raise ConfigurationError("A table needs at least one column")

        self._sink = sink
        self._columns = tuple(columns)
        self._config = config if config is not None else TableConfig()
        self._title = title
        self._positional = any(c.formatter is None for c in self._columns)

        self._state: _Buffering | _Streaming = _Buffering()
        self._finished = False
        self._rows_written = 0

    def __enter__(self) -> TableStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        # Only a clean exit finishes the table
        if exc_type is None and not self._finished:
            self.finish()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def columns(self) -> tuple[Column, ...]:
        """Column definitions, in display order."""
        return self._columns

    @property
    def config(self) -> TableConfig:
        """Buffering and layout options."""
        return self._config

    @property
    def streaming(self) -> bool:
        """True once widths have been frozen and the header written."""
        return isinstance(self._state, _Streaming)

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def widths(self) -> tuple[int, ...] | None:
        """Frozen column widths, or None while still buffering."""
        if isinstance(self._state, _Streaming):
            return self._state.renderer.widths
        return None

    @property
    def buffered(self) -> int:
        """Number of rows currently held in memory."""
        if isinstance(self._state, _Buffering):
            return len(self._state.rows)
        return 0

    @property
    def rows_written(self) -> int:
        """Number of data rows written to the sink so far."""
        return self._rows_written

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def push(self, row: Any) -> None:
        """
        Add one row to the table.

        While buffering, the row's cell texts are computed and held; the
        row that fills the buffer triggers the header and all buffered rows
        to be written. Once streaming, the row is written immediately.

        Raises:
            TableFinishedError: If finish() has already been called
            RowShapeError: If positional columns are used and the row is
                not a sequence with one value per column
        """
        if self._finished:
            raise TableFinishedError("push")

        cells = self._cells(row)
        state = self._state
        if isinstance(state, _Streaming):
            state.renderer.write_row(self._sink, cells)
            self._rows_written += 1
            return

        state.rows.append(cells)
        if len(state.rows) >= self._config.threshold:
            self._flush(state)

    def push_many(self, rows: Iterable[Any]) -> None:
        """Push every row from ``rows`` in order."""
        for row in rows:
            self.push(row)

    def finish(self, footer: str | None = None) -> None:
        """
        Terminate the table.

        Writes any rows still buffered (with header, even if there are no
        rows at all), an optional footer line, and the closing rule.

        Args:
            footer: Optional line printed below the last row

        Raises:
            TableFinishedError: If the table was already finished
        """
        if self._finished:
            raise TableFinishedError("finish")

        state = self._state
        if isinstance(state, _Buffering):
            state = self._flush(state)

        renderer = state.renderer
        if footer is not None:
            renderer.write_rule(self._sink)
            renderer.write_banner(self._sink, footer)
        renderer.write_rule(self._sink)
        self._finished = True

        flush = getattr(self._sink, "flush", None)
        if callable(flush):
            flush()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _cells(self, row: Any) -> tuple[str, ...]:
        if self._positional:
            if not isinstance(row, Sequence):
                actual = len(row) if isinstance(row, Sized) else 1
                raise RowShapeError(len(self._columns), actual)
            actual = len(row)
            if actual != len(self._columns):
                raise RowShapeError(len(self._columns), actual)
        return tuple(column.format(row, i) for i, column in enumerate(self._columns))

    def _flush(self, state: _Buffering) -> _Streaming:
        config = self._config
        overhead = RowRenderer.overhead(len(self._columns), config.borders, config.padding)
        available = config.resolve_width()
        widths = infer_widths(self._columns, state.rows, available, overhead)
        logger.debug(
            "Inferred column widths %s from %d buffered rows (available width %d)",
            widths,
            len(state.rows),
            available,
        )

        renderer = RowRenderer(widths, borders=config.borders, padding=config.padding)
        streaming = _Streaming(renderer)
        self._state = streaming

        sink = self._sink
        renderer.write_rule(sink)
        if self._title is not None:
            renderer.write_banner(sink, self._title)
            renderer.write_rule(sink)
        renderer.write_row(sink, header_texts(self._columns))
        renderer.write_rule(sink)

        rows, state.rows = state.rows, []
        for cells in rows:
            renderer.write_row(sink, cells)
            self._rows_written += 1
        return streaming
