"""
Apply price adjustment over scalars, ranges and grids.

The date and price arguments are each tagged once as a scalar, a sequence or a
grid, and the combination picks one of the evaluation loops below. Results
mirror the shape of the range that drove the loop. A blank cell ends its scan:
it and every later position come back as None and are never computed.
"""

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .types import ABSENT, Shape, as_table, classify_shape, grid_rows, is_absent
from .index_resolver import DEFAULT_GROWTH_RATE, check_growth_rate
from .price_adjuster import adjust_price
from ..utils.validation import InvalidInputError

logger = logging.getLogger(__name__)


def _date_argument(value: Any, name: str) -> Tuple[Shape, Any]:
    """Classify a date argument, flattening single-row and single-column grids."""
    shape = classify_shape(value)
    if shape is Shape.SCALAR:
        return shape, value
    if shape is Shape.SEQUENCE:
        return shape, list(value)

    rows = grid_rows(value)
    if all(len(row) <= 1 for row in rows):
        return Shape.SEQUENCE, [row[0] if row else ABSENT for row in rows]
    if len(rows) == 1:
        return Shape.SEQUENCE, rows[0]
    raise InvalidInputError(f"{name} must be a single date or a single row or column of dates")


def _price_argument(value: Any) -> Tuple[Shape, Any]:
    shape = classify_shape(value)
    if shape is Shape.GRID:
        return shape, grid_rows(value)
    if shape is Shape.SEQUENCE:
        return shape, list(value)
    return shape, value


def _scan(cells: Sequence[Any], convert: Callable[[Any], Any]) -> List[Optional[float]]:
    """Convert cells up to the first blank one and pad the rest with None."""
    result = []
    for cell in cells:
        if is_absent(cell):
            break
        result.append(convert(cell))
    result.extend([ABSENT] * (len(cells) - len(result)))
    return result


def _scan_grid(row_dates: Optional[Sequence[Any]], rows: List[List[Any]],
               convert: Callable[[Any, Any], Any]) -> List[List[Optional[float]]]:
    """
    Convert a price grid row by row.

    ``row_dates`` holds one date per row. When it is None every row shares the
    scalar dates bound into ``convert``. Rows past the first blank date (or
    past the end of ``row_dates``) are left blank.
    """
    result = []
    exhausted = False
    for i, row in enumerate(rows):
        row_date = None
        if row_dates is not None and not exhausted:
            exhausted = i >= len(row_dates) or is_absent(row_dates[i])
            if not exhausted:
                row_date = row_dates[i]
        if exhausted:
            result.append([ABSENT] * len(row))
            continue
        result.append(_scan(row, lambda price, row_date=row_date: convert(row_date, price)))
    return result


def _scan_pairs(dates: List[Any], prices: List[Any],
                convert: Callable[[Any, Any], Any]) -> List[Optional[float]]:
    if len(dates) != len(prices):
        raise InvalidInputError(
            f"Date and price ranges must have the same length, got {len(dates)} and {len(prices)}"
        )
    result = []
    for date, price in zip(dates, prices):
        if is_absent(date) or is_absent(price):
            break
        result.append(convert(date, price))
    result.extend([ABSENT] * (len(dates) - len(result)))
    return result


def evaluate(original_date: Any, original_price: Any, target_date: Any,
             table: Any, growth_rate: float = DEFAULT_GROWTH_RATE) -> Any:
    """
    Adjust prices for inflation, broadcasting over range-shaped arguments.

    At most one of ``original_date`` and ``target_date`` may be a range. The
    ranged date pairs row-wise with the prices: a scalar price is reused for
    every date, a sequence of prices pairs element-wise and a grid of prices
    pairs each row with one date. With both dates scalar, the price argument
    alone decides the shape of the result.

    Args:
        original_date: Date (or range of dates) the prices were recorded at
        original_price: Price, sequence of prices, grid of prices or a blank cell
        target_date: Date (or range of dates) to restate the prices at
        table: Inflation table (see :func:`resolve_index`)
        growth_rate: Annual growth rate for dates outside the table

    Returns:
        A float, a list of floats or a list of float rows, with None in blank
        positions. A blank top-level price returns None.

    Raises:
        InvalidInputError: If both dates are ranges or an argument is malformed
        InvalidTableError: If the table has no populated row
        InvalidRangeError: If a date cannot be resolved
    """
    if is_absent(original_price):
        return ABSENT

    original_shape, original_date = _date_argument(original_date, "original date")
    target_shape, target_date = _date_argument(target_date, "target date")
    if original_shape is Shape.SEQUENCE and target_shape is Shape.SEQUENCE:
        raise InvalidInputError("original date and target date cannot both be ranges")
    price_shape, prices = _price_argument(original_price)

    table = as_table(table)
    growth_rate = check_growth_rate(growth_rate)

    def from_original(date, price):
        return adjust_price(date, price, target_date, table, growth_rate)

    def to_target(date, price):
        return adjust_price(original_date, price, date, table, growth_rate)

    def fixed_dates(_, price):
        return adjust_price(original_date, price, target_date, table, growth_rate)

    logger.debug(f"Evaluating original={original_shape.value} target={target_shape.value} "
                 f"price={price_shape.value}")

    match (original_shape, target_shape, price_shape):
        case (Shape.SEQUENCE, _, Shape.GRID):
            return _scan_grid(original_date, prices, from_original)
        case (Shape.SEQUENCE, _, Shape.SEQUENCE):
            return _scan_pairs(original_date, prices, from_original)
        case (Shape.SEQUENCE, _, _):
            return _scan(original_date, lambda date: from_original(date, prices))
        case (_, Shape.SEQUENCE, Shape.GRID):
            return _scan_grid(target_date, prices, to_target)
        case (_, Shape.SEQUENCE, Shape.SEQUENCE):
            return _scan_pairs(target_date, prices, to_target)
        case (_, Shape.SEQUENCE, _):
            return _scan(target_date, lambda date: to_target(date, prices))
        case (_, _, Shape.GRID):
            return _scan_grid(None, prices, fixed_dates)
        case (_, _, Shape.SEQUENCE):
            return _scan(prices, lambda price: fixed_dates(None, price))
        case _:
            return adjust_price(original_date, prices, target_date, table, growth_rate)
