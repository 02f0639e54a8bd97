"""
Host-facing entry point.

Spreadsheet hosts leave optional arguments blank. This adapter fills those
blanks from configuration and the caller's notion of today, then hands fully
specified arguments to :func:`evaluate`.
"""

import datetime
import logging
from dataclasses import dataclass
from typing import Any, Optional

from .core.broadcast import evaluate
from .core.index_resolver import DEFAULT_GROWTH_RATE
from .core.types import is_absent
from .utils.config import Config
from .utils.validation import InvalidTableError

logger = logging.getLogger(__name__)


@dataclass
class ConversionSettings:
    """Defaults applied to blank arguments."""
    growth_rate: float = DEFAULT_GROWTH_RATE
    series_id: str = "CPIAUCSL"

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> 'ConversionSettings':
        config = config or Config()
        return cls(
            growth_rate=config.get('conversion.growth_rate', DEFAULT_GROWTH_RATE),
            series_id=config.get('conversion.series_id', "CPIAUCSL"),
        )


def _filled(value: Any, default: Any) -> Any:
    # ranges are never blank as a whole
    if isinstance(value, (list, tuple)) or not is_absent(value):
        return value
    return default


def inflation_adjust(original_price: Any, original_date: Any = None, target_date: Any = None,
                     inflation_table: Any = None, growth_rate: Any = None, *,
                     today: Optional[datetime.date] = None,
                     settings: Optional[ConversionSettings] = None) -> Any:
    """
    Restate prices into another date's money.

    Args:
        original_price: Price, range of prices or a blank cell
        original_date: Date (or range) of the prices. Blank means today.
        target_date: Date (or range) to restate at. Blank means today.
        inflation_table: Two-column range of (date, index) rows
        growth_rate: Annual growth rate outside the table. Blank uses the
            configured default.
        today: Date used for blank dates, defaults to the local date
        settings: Defaults to apply, read from configuration when omitted

    Returns:
        Result of :func:`evaluate`
    """
    if is_absent(original_price):
        return None
    if inflation_table is None:
        raise InvalidTableError("Inflation table is missing")

    settings = settings or ConversionSettings.from_config()
    today = today or datetime.date.today()

    return evaluate(
        _filled(original_date, today),
        original_price,
        _filled(target_date, today),
        inflation_table,
        _filled(growth_rate, settings.growth_rate),
    )
