"""Column width inference from a window of buffered rows."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .models import Column

logger = logging.getLogger(__name__)


def ideal_widths(columns: Sequence[Column], rows: Sequence[Sequence[str]]) -> list[int]:
    """
    Width each column would need to show all of its sampled text.

    Fixed columns report their declared width. Auto columns report the
    longest of their header, every buffered cell and their ``min_width``.
    """
    widths = []
    for i, column in enumerate(columns):
        if column.fixed:
            widths.append(column.width or 0)
            continue
        width = max(len(column.header), column.min_width)
        for row in rows:
            width = max(width, len(row[i]))
        widths.append(width)
    return widths


def infer_widths(
    columns: Sequence[Column],
    rows: Sequence[Sequence[str]],
    available_width: int,
    overhead: int = 0,
) -> tuple[int, ...]:
    """
    Compute the final display width of every column.

    Columns first get their ideal width. If the resulting line (plus
    ``overhead`` border characters) does not fit ``available_width``, only
    auto-sized columns are narrowed, widest first: a common cap is lowered
    until the line fits, so terse columns keep their full width while
    verbose ones absorb the loss. No column goes below its ``min_width``;
    if the minimums alone do not fit, they are used anyway and the line
    overflows.

    The result depends only on the arguments, so repeated calls with the
    same buffer give the same widths.

    Args:
        columns: Column definitions, in display order
        rows: Buffered cell texts, one sequence per row (may be empty)
        available_width: Terminal width to fit into
        overhead: Characters per line used by borders and dividers

    Returns:
        One width per column
    """
    widths = ideal_widths(columns, rows)
    if sum(widths) + overhead <= available_width:
        return tuple(widths)

    auto = [i for i, column in enumerate(columns) if not column.fixed]
    fixed_total = sum(widths[i] for i in range(len(columns)) if i not in auto)
    budget = available_width - overhead - fixed_total
    floors = {i: min(columns[i].min_width, widths[i]) for i in auto}

    if sum(floors.values()) >= budget:
        logger.debug(
            "Columns need at least %d characters but only %d are available; "
            "table will overflow",
            sum(floors.values()) + fixed_total + overhead,
            available_width,
        )
        for i in auto:
            widths[i] = floors[i]
        return tuple(widths)

    ideal = {i: widths[i] for i in auto}

    def capped_total(cap: int) -> int:
        return sum(max(floors[i], min(ideal[i], cap)) for i in auto)

    # Largest cap that still fits the budget
    low, high = 0, max(ideal.values())
    while low < high:
        mid = (low + high + 1) // 2
        if capped_total(mid) <= budget:
            low = mid
        else:
            high = mid - 1
    cap = low

    for i in auto:
        widths[i] = max(floors[i], min(ideal[i], cap))

    # Hand out what is left under the cap, narrowest ideal first
    leftover = budget - capped_total(cap)
    capped = sorted(
        (i for i in auto if ideal[i] > cap and floors[i] <= cap),
        key=lambda i: (ideal[i], i),
    )
    for i in capped[:leftover]:
        widths[i] += 1

    logger.debug("Shrunk columns to cap %d to fit %d characters", cap, available_width)
    return tuple(widths)
