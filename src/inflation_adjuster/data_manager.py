import pandas as pd
from typing import Optional, Union
from pathlib import Path
import logging

from .core.broadcast import evaluate
from .core.index_resolver import DEFAULT_GROWTH_RATE
from .core.types import InflationTable
from .utils.validation import InvalidInputError, validate_table_frame


# Set up logging
logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xls", ".xlsm"}


def read_frame(path: Union[str, Path], sheet_name: Union[str, int] = 0) -> pd.DataFrame:
    """Read a CSV or Excel file into a DataFrame."""
    path = Path(path)
    if path.suffix.lower() in EXCEL_SUFFIXES:
        return pd.read_excel(path, sheet_name=sheet_name)
    return pd.read_csv(path)


def write_frame(df: pd.DataFrame, path: Union[str, Path]) -> Path:
    """Write a DataFrame to CSV or Excel depending on the file suffix."""
    path = Path(path)
    path.parent.mkdir(exist_ok=True, parents=True)
    if path.suffix.lower() in EXCEL_SUFFIXES:
        df.to_excel(path, index=False)
    else:
        df.to_csv(path, index=False)
    logger.info(f"Saved {len(df)} rows to {path}")
    return path


class DataManager:
    """
    Manages data files for inflation adjustment.

    This class loads the inflation table and batches of prices from CSV or
    Excel files and writes adjusted prices back out.
    """

    def __init__(self, table_path: Union[str, Path] = "data/inflation_table.csv",
                 date_column: Optional[str] = None, value_column: Optional[str] = None):
        self.__table = None
        self.table_path = Path(table_path)
        self.date_column = date_column
        self.value_column = value_column

    @property
    def inflation_table(self) -> InflationTable:
        """
        Load the inflation table from disk if not already loaded.

        Returns:
            InflationTable built from the configured columns, or the first two
            columns of the file when none are configured
        """
        if self.__table is None:
            df = read_frame(self.table_path)
            required = [self.date_column, self.value_column] if self.date_column and self.value_column else None
            validate_table_frame(df, required_columns=required)
            self.__table = InflationTable.from_frame(df, self.date_column, self.value_column)
            logger.info(f"Loaded {len(self.__table)} index observations from {self.table_path}")
        return self.__table

    def load_prices(self, path: Union[str, Path], date_column: str = "date",
                    price_column: str = "price") -> pd.DataFrame:
        """Load a batch of prices with the dates they were recorded at."""
        df = read_frame(path)
        missing = {date_column, price_column} - set(df.columns)
        if missing:
            raise InvalidInputError(f"Missing required columns in {path}: {missing}")
        logger.info(f"Loaded {len(df)} prices from {path}")
        return df

    def adjust_prices(self, prices: pd.DataFrame, target_date, date_column: str = "date",
                      price_column: str = "price", growth_rate: float = DEFAULT_GROWTH_RATE,
                      result_column: str = "adjusted_price") -> pd.DataFrame:
        """
        Restate a batch of prices at ``target_date``.

        Each row pairs its date with its price. Blank rows end the batch, as
        they would in a spreadsheet range.

        Returns:
            Copy of ``prices`` with the adjusted prices in ``result_column``
        """
        adjusted = evaluate(
            prices[date_column].tolist(),
            prices[price_column].tolist(),
            target_date,
            self.inflation_table,
            growth_rate,
        )
        result = prices.copy()
        result[result_column] = adjusted
        return result
