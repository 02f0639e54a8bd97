"""
Core FRED client implementation.
"""
import os
import re
import logging
import pandas as pd
from typing import List, Optional, Tuple
from fredapi import Fred

from inflation_adjuster.aws_manager.s3 import S3
from inflation_adjuster.core.types import InflationTable
from inflation_adjuster.utils.config import Config

logger = logging.getLogger(__name__)

DEFAULT_SERIES_ID = "CPIAUCSL"
API_KEY_ENV_VAR = "FRED_API_KEY"

_API_KEY_PATTERN = re.compile(r"[a-fA-F0-9]+")
_SERIES_ID_PATTERN = re.compile(r"[a-zA-Z0-9]+")


def check_api_key(api_key) -> str:
    if not isinstance(api_key, str) or not _API_KEY_PATTERN.fullmatch(api_key):
        raise ValueError("FRED API key must be a hexadecimal string")
    return api_key


def check_series_id(series_id) -> str:
    if not isinstance(series_id, str) or not _SERIES_ID_PATTERN.fullmatch(series_id):
        raise ValueError(f"Invalid FRED series id: {series_id!r}")
    return series_id


class FREDClient:
    """Client for interacting with FRED API."""

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize FRED client.

        The API key is taken from the argument, then the FRED_API_KEY
        environment variable, then AWS Secrets Manager.
        """
        api_key = api_key or os.environ.get(API_KEY_ENV_VAR) or self._key_from_secrets()
        if not api_key:
            raise ValueError("Could not retrieve valid FRED API key")

        self.client = Fred(api_key=check_api_key(api_key.strip()))
        logger.info("Successfully initialized FRED client")

    @staticmethod
    def _key_from_secrets() -> Optional[str]:
        config = Config()
        secret_name = config.get('fred.secret_name', API_KEY_ENV_VAR)
        logger.debug(f"Looking up FRED API key in secret {secret_name}")
        return S3.get_secret(secret_name, key=config.get('fred.secret_key', 'api_key'))

    def get_series(self, series_id: str = DEFAULT_SERIES_ID, start_date=None, end_date=None) -> pd.DataFrame:
        """Fetch a FRED series as an ascending date/value DataFrame."""
        check_series_id(series_id)
        try:
            series = self.client.get_series(series_id, start_date, end_date)
            if series is None or series.empty:
                raise ValueError(f"No data found for series {series_id}")

            info = self.client.get_series_info(series_id)

            df = series.dropna().rename('value').rename_axis('date').reset_index()
            df['date'] = pd.to_datetime(df['date'])
            df = df.sort_values('date').reset_index(drop=True)

            df.attrs['series_id'] = series_id
            if info is not None:
                df.attrs['title'] = info.get('title', '')
                df.attrs['units'] = info.get('units', '')
                df.attrs['frequency'] = info.get('frequency_short', 'M')

            logger.info(f"Fetched {len(df)} observations of {series_id}")
            return df

        except Exception as e:
            logger.error(f"Error fetching series {series_id}: {str(e)}")
            raise

    def fetch_table(self, series_id: str = DEFAULT_SERIES_ID, start_date=None, end_date=None) -> InflationTable:
        """Fetch a FRED series as an InflationTable."""
        return InflationTable.from_frame(self.get_series(series_id, start_date, end_date), 'date', 'value')


def fetch_series(api_key: str, series_id: str = DEFAULT_SERIES_ID) -> List[Tuple[pd.Timestamp, float]]:
    """
    Fetch an index series once from FRED.

    Args:
        api_key: FRED API key (hexadecimal)
        series_id: FRED series id, consumer prices by default

    Returns:
        Ascending list of (date, index) pairs
    """
    check_api_key(api_key)
    check_series_id(series_id)
    table = FREDClient(api_key).fetch_table(series_id)
    return [(point.date, point.index) for point in table]
