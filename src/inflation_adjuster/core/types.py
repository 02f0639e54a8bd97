"""
Value types shared by the index resolver, the price adjuster and the
broadcast evaluator.

Spreadsheet hosts hand over blank cells as empty strings and ranges as nested
lists. Everything here normalises those inputs once: blanks become ``None``
(the absent marker), dates become ``pandas.Timestamp`` and ranges are tagged
with a :class:`Shape`.
"""

import numbers
import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

import numpy as np
import pandas as pd

from ..utils.validation import InvalidInputError, InvalidTableError

logger = logging.getLogger(__name__)

ABSENT = None

# Day zero of the 1900 spreadsheet date system (includes the 1900 leap-year bug)
SPREADSHEET_EPOCH = pd.Timestamp("1899-12-30")

_ARRAY_TYPES = (list, tuple, np.ndarray, pd.Series, pd.DataFrame)


class Shape(Enum):
    """Shape of a date or price argument."""
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    GRID = "grid"


def is_absent(value: Any) -> bool:
    """Return True for blank cells: None, empty strings, NaN and NaT."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, _ARRAY_TYPES):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def classify_shape(value: Any) -> Shape:
    """Tag an argument as a scalar, a one-dimensional range or a grid."""
    if isinstance(value, pd.DataFrame):
        return Shape.GRID
    if isinstance(value, pd.Series):
        return Shape.SEQUENCE
    if isinstance(value, np.ndarray):
        if value.ndim == 0:
            return Shape.SCALAR
        return Shape.SEQUENCE if value.ndim == 1 else Shape.GRID
    if isinstance(value, (list, tuple)):
        if any(isinstance(item, (list, tuple, np.ndarray, pd.Series)) for item in value):
            return Shape.GRID
        return Shape.SEQUENCE
    return Shape.SCALAR


def grid_rows(value: Any) -> List[List[Any]]:
    """Return a grid-shaped argument as a list of row lists."""
    if isinstance(value, pd.DataFrame):
        return [list(row) for row in value.itertuples(index=False)]
    rows = []
    for row in value:
        if isinstance(row, _ARRAY_TYPES):
            rows.append(list(row))
        else:
            # a lone scalar inside a grid is a one-cell row
            rows.append([row])
    return rows


def to_timestamp(value: Any, name: str = "date") -> pd.Timestamp:
    """
    Coerce a calendar date to a timezone-naive ``pandas.Timestamp``.

    Accepts date/datetime objects, numpy datetimes, ISO strings and
    spreadsheet serial day numbers.

    Raises:
        InvalidInputError: If the value is blank or cannot be parsed
    """
    if is_absent(value):
        raise InvalidInputError(f"{name} is missing")
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a date, got {value!r}")
    if isinstance(value, numbers.Real):
        return SPREADSHEET_EPOCH + pd.to_timedelta(float(value), unit="D")
    try:
        timestamp = pd.Timestamp(value)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"{name} is not a valid date: {value!r}") from e
    if pd.isna(timestamp):
        raise InvalidInputError(f"{name} is not a valid date: {value!r}")
    if timestamp.tzinfo is not None:
        timestamp = timestamp.tz_convert(None)
    return timestamp


def to_price(value: Any, name: str = "price") -> float:
    """Coerce a price or index cell to float."""
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.replace(",", ""))
        except ValueError as e:
            raise InvalidInputError(f"{name} is not a number: {value!r}") from e
    raise InvalidInputError(f"{name} must be a number, got {type(value).__name__}")


@dataclass(frozen=True)
class TimeSeriesPoint:
    """One observed index value."""
    date: pd.Timestamp
    index: float


@dataclass
class InflationTable:
    """
    Price-index observations in ascending date order.

    Construct it with one of the ``from_*`` class methods to get the sentinel
    truncation and validation rules. Dates are not checked for monotonicity.

    Attributes:
        points: Populated rows of the table
    """
    points: List[TimeSeriesPoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[TimeSeriesPoint]:
        return iter(self.points)

    @property
    def first(self) -> Optional[TimeSeriesPoint]:
        return self.points[0] if self.points else None

    @property
    def last(self) -> Optional[TimeSeriesPoint]:
        return self.points[-1] if self.points else None

    @classmethod
    def from_rows(cls, rows: Any) -> 'InflationTable':
        """
        Build a table from a two-column grid of (date, index) rows.

        Reading stops at the first row whose date or index cell is blank, so a
        fixed-size range padded with empty rows yields only its populated part.

        Args:
            rows: List of rows, 2-D numpy array or DataFrame

        Returns:
            InflationTable with the populated rows

        Raises:
            InvalidTableError: If no populated row can be read
        """
        if rows is None or classify_shape(rows) is not Shape.GRID:
            raise InvalidTableError("Inflation table must be a two-column range")

        points = []
        for position, row in enumerate(grid_rows(rows)):
            if not row or is_absent(row[0]):
                break
            if len(row) < 2:
                raise InvalidTableError(
                    f"Inflation table row {position} has {len(row)} column, expected two"
                )
            if is_absent(row[1]):
                break
            try:
                date = to_timestamp(row[0], name=f"table date in row {position}")
                index = to_price(row[1], name=f"table index in row {position}")
            except InvalidInputError as e:
                raise InvalidTableError(str(e)) from e
            if index <= 0:
                raise InvalidTableError(
                    f"Index values must be positive, row {position} has {index}"
                )
            points.append(TimeSeriesPoint(date, index))

        if not points:
            raise InvalidTableError("Inflation table has no populated rows")

        logger.debug(f"Read {len(points)} table rows ({points[0].date:%Y-%m-%d} to {points[-1].date:%Y-%m-%d})")
        return cls(points)

    @classmethod
    def from_frame(cls, df: pd.DataFrame, date_column: Optional[str] = None,
                   value_column: Optional[str] = None) -> 'InflationTable':
        """Build a table from a DataFrame, using its first two columns by default."""
        if df.shape[1] < 2 and not (date_column and value_column):
            raise InvalidTableError(
                f"Inflation table needs a date and an index column, got {df.shape[1]} column(s)"
            )
        date_column = date_column or df.columns[0]
        value_column = value_column or df.columns[1]
        return cls.from_rows(df[[date_column, value_column]])

    @classmethod
    def from_series(cls, series: pd.Series) -> 'InflationTable':
        """Build a table from a Series of index values indexed by date."""
        return cls.from_rows(list(zip(series.index, series.values)))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            'date': [point.date for point in self.points],
            'value': [point.index for point in self.points],
        })


def as_table(value: Any) -> InflationTable:
    """Coerce a table argument to an InflationTable."""
    if isinstance(value, InflationTable):
        return value
    if isinstance(value, pd.DataFrame):
        return InflationTable.from_frame(value)
    if isinstance(value, pd.Series):
        return InflationTable.from_series(value)
    return InflationTable.from_rows(value)
