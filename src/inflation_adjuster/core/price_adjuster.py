"""
Restate a price from one date's money into another's.
"""

import logging
from typing import Any, Optional

from .types import ABSENT, as_table, is_absent, to_price, to_timestamp
from .index_resolver import DEFAULT_GROWTH_RATE, check_growth_rate, resolve_index
from ..utils.validation import InvalidRangeError

logger = logging.getLogger(__name__)


def adjust_price(original_date: Any, original_price: Any, target_date: Any,
                 table: Any, growth_rate: float = DEFAULT_GROWTH_RATE) -> Optional[float]:
    """
    Scale ``original_price`` by the ratio of the target and original indices.

    A blank price passes through as None without touching the table.

    Args:
        original_date: Date the price was recorded at
        original_price: Price in ``original_date`` money, or a blank cell
        target_date: Date to restate the price at
        table: Inflation table (see :func:`resolve_index`)
        growth_rate: Annual growth rate for dates outside the table

    Returns:
        The restated price, or None for a blank price
    """
    if is_absent(original_price):
        return ABSENT

    price = to_price(original_price, name="original price")

    # same date needs no index, but the table and rate must still be usable
    if to_timestamp(original_date, name="original date") == to_timestamp(target_date, name="target date"):
        as_table(table)
        check_growth_rate(growth_rate)
        return price

    original_index = resolve_index(original_date, table, growth_rate)
    target_index = resolve_index(target_date, table, growth_rate)

    if target_index == original_index:
        return price
    if original_index == 0:
        raise InvalidRangeError(f"Index at original date {original_date!r} resolved to zero")

    return price * target_index / original_index
