"""
Inflation adjustment of prices over a sparse price-index table.

This package restates monetary amounts recorded at one date into the money of
another date, interpolating and extrapolating a price index (such as CPI) as
needed. It also provides a FRED client for fetching index series.
"""

from .api import ConversionSettings, inflation_adjust
from .core.broadcast import evaluate
from .core.index_resolver import DEFAULT_GROWTH_RATE, resolve_index
from .core.price_adjuster import adjust_price
from .core.types import InflationTable, Shape, TimeSeriesPoint
from .utils.validation import (
    ValidationError,
    InvalidInputError,
    InvalidTableError,
    InvalidRangeError,
)

__all__ = [
    'ConversionSettings',
    'inflation_adjust',
    'evaluate',
    'adjust_price',
    'resolve_index',
    'DEFAULT_GROWTH_RATE',
    'InflationTable',
    'TimeSeriesPoint',
    'Shape',
    'ValidationError',
    'InvalidInputError',
    'InvalidTableError',
    'InvalidRangeError',
]
