"""
Index resolution over a sparse price-index table.

A query date is resolved against the populated rows of an
:class:`InflationTable`:

- on an observed date, the observed index is returned as is;
- between two observations, the index is interpolated linearly on elapsed time;
- after the last observation, the index is compounded forward at ``growth_rate``;
- before the first observation, the index is discounted backward at ``growth_rate``.
"""

import math
import logging
from typing import Any, Optional, Tuple

from .types import InflationTable, TimeSeriesPoint, as_table, to_timestamp
from ..utils.validation import InvalidInputError, InvalidRangeError

logger = logging.getLogger(__name__)

DEFAULT_GROWTH_RATE = 0.02
DAYS_PER_YEAR = 365.25
SECONDS_PER_DAY = 86400.0


def check_growth_rate(growth_rate: Any) -> float:
    """Return the growth rate as float, rejecting anything below -100%."""
    if isinstance(growth_rate, bool):
        raise InvalidInputError(f"growth rate must be a number, got {growth_rate!r}")
    try:
        rate = float(growth_rate)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"growth rate must be a number, got {growth_rate!r}") from e
    if math.isnan(rate) or rate < -1:
        raise InvalidInputError(f"growth rate must be >= -1, got {growth_rate!r}")
    return rate


def bracket(date, table: InflationTable) -> Tuple[Optional[TimeSeriesPoint], Optional[TimeSeriesPoint]]:
    """
    Find the rows around ``date``.

    Returns:
        Tuple of the last row dated on or before ``date`` and the row that
        follows it. Either side is None when the date lies outside the table.
    """
    previous = None
    following = None
    for point in table:
        if point.date > date:
            following = point
            break
        previous = point
    return previous, following


def _elapsed_days(start, end) -> float:
    return (end - start).total_seconds() / SECONDS_PER_DAY


def resolve_index(date: Any, table: Any, growth_rate: float = DEFAULT_GROWTH_RATE) -> float:
    """
    Resolve the index value for an arbitrary date.

    Args:
        date: Query date
        table: InflationTable, DataFrame, Series or two-column rows
        growth_rate: Annual growth rate used only outside the table's range

    Returns:
        The observed, interpolated or extrapolated index value

    Raises:
        InvalidTableError: If the table has no populated row
        InvalidRangeError: If no row anchors the query date
        InvalidInputError: If the date or growth rate is invalid
    """
    table = as_table(table)
    date = to_timestamp(date)
    rate = check_growth_rate(growth_rate)

    previous, following = bracket(date, table)

    if previous is not None and previous.date == date:
        logger.debug(f"{date:%Y-%m-%d}: exact match {previous.index}")
        return previous.index

    if previous is not None and following is not None:
        fraction = _elapsed_days(previous.date, date) / _elapsed_days(previous.date, following.date)
        index = previous.index + (following.index - previous.index) * fraction
        logger.debug(f"{date:%Y-%m-%d}: interpolated {index} (fraction {fraction:.6f})")
        return index

    if previous is not None:
        days = math.ceil(_elapsed_days(previous.date, date))
        index = previous.index * (1 + rate) ** (days / DAYS_PER_YEAR)
        logger.debug(f"{date:%Y-%m-%d}: extrapolated forward {days} days to {index}")
        return index

    if following is not None:
        days = math.ceil(_elapsed_days(date, following.date))
        factor = (1 + rate) ** (days / DAYS_PER_YEAR)
        if factor == 0:
            raise InvalidRangeError(
                f"Cannot extrapolate back to {date:%Y-%m-%d} with a growth rate of {rate}"
            )
        index = following.index / factor
        logger.debug(f"{date:%Y-%m-%d}: extrapolated backward {days} days to {index}")
        return index

    raise InvalidRangeError(f"No table row to resolve {date:%Y-%m-%d} against")
