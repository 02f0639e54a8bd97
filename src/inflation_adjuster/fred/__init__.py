"""
FRED (Federal Reserve Economic Data) package.
This module contains all functionality related to fetching price-index series from the FRED API.
"""

from .core.fred_client import FREDClient, fetch_series, DEFAULT_SERIES_ID

__all__ = ['FREDClient', 'fetch_series', 'DEFAULT_SERIES_ID']
