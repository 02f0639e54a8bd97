"""
Data validation module for inflation adjustment.
"""

import pandas as pd
from typing import Optional, List, Dict, Any
import numbers
import logging

logger = logging.getLogger(__name__)

class ValidationError(Exception):
    """Base class for validation errors."""
    pass

class InvalidInputError(ValidationError):
    """Raised when the date or price arguments cannot be combined or parsed."""
    pass

class InvalidTableError(ValidationError):
    """Raised when the inflation table cannot yield any populated row."""
    pass

class InvalidRangeError(ValidationError):
    """Raised when a query date has no table row to anchor against."""
    pass

class ConfigValidationError(ValidationError):
    """Raised when configuration validation fails."""
    pass

def validate_table_frame(
    df: pd.DataFrame,
    required_columns: Optional[List[str]] = None
) -> None:
    """
    Validate a DataFrame loaded as an inflation table.

    Args:
        df: DataFrame to validate
        required_columns: Columns that must be present. When omitted the frame
            only needs at least two columns.

    Raises:
        InvalidTableError: If validation fails
    """
    if df.empty:
        raise InvalidTableError("Inflation table is empty")

    if required_columns:
        missing_cols = set(required_columns) - set(df.columns)
        if missing_cols:
            raise InvalidTableError(f"Missing required columns: {missing_cols}")
    elif df.shape[1] < 2:
        raise InvalidTableError(
            f"Inflation table needs a date and an index column, got {df.shape[1]} column(s)"
        )

    # Monotonicity is not enforced, only reported
    date_column = required_columns[0] if required_columns else df.columns[0]
    dates = pd.to_datetime(df[date_column], errors='coerce').dropna()
    if not dates.is_monotonic_increasing:
        logger.warning(f"Dates in column '{date_column}' are not ascending")

    logger.debug(f"Inflation table validation passed: {df.shape}")

def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    required_sections = ['conversion', 'data', 'fred', 'logging']

    try:
        missing_sections = set(required_sections) - set(config.keys())
        if missing_sections:
            raise ConfigValidationError(f"Missing required config sections: {missing_sections}")

        # Validate conversion section
        growth_rate = config['conversion'].get('growth_rate')
        if isinstance(growth_rate, bool) or not isinstance(growth_rate, numbers.Real):
            raise ConfigValidationError("growth_rate must be a number")
        if growth_rate < -1:
            raise ConfigValidationError(f"growth_rate must be >= -1, got {growth_rate}")
        if not config['conversion'].get('series_id'):
            raise ConfigValidationError("Missing series_id in conversion configuration")

        # Validate fred section
        if 'secret_name' not in config['fred']:
            raise ConfigValidationError("Missing secret_name in fred configuration")

        # Validate logging section
        if 'level' not in config['logging']:
            raise ConfigValidationError("Missing logging level configuration")
        if 'format' not in config['logging']:
            raise ConfigValidationError("Missing logging format configuration")

        logger.debug("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Unexpected error during config validation: {str(e)}")
