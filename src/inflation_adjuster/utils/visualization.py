"""
Visualization of resolved index values.
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd
from pathlib import Path
import logging
from typing import Optional, Dict, Any, Union

from .config import Config
from ..core.index_resolver import DEFAULT_GROWTH_RATE, resolve_index
from ..core.types import InflationTable, to_timestamp

logger = logging.getLogger(__name__)


def resolved_index_frame(table: InflationTable, start=None, end=None,
                         growth_rate: float = DEFAULT_GROWTH_RATE, freq: str = "D") -> pd.DataFrame:
    """
    Sample the resolved index over a date range.

    The range defaults to one year either side of the table.
    """
    start = to_timestamp(start) if start is not None else table.first.date - pd.DateOffset(years=1)
    end = to_timestamp(end) if end is not None else table.last.date + pd.DateOffset(years=1)
    dates = pd.date_range(start, end, freq=freq)
    return pd.DataFrame({
        'date': dates,
        'index': [resolve_index(date, table, growth_rate) for date in dates],
    })


def plot_resolved_index(table: InflationTable, output_path: Union[str, Path], start=None, end=None,
                        growth_rate: float = DEFAULT_GROWTH_RATE,
                        config: Optional[Dict[str, Any]] = None) -> Path:
    """
    Plot observed index points over the interpolated and extrapolated curve.

    Args:
        table: Inflation table to plot
        output_path: Where to save the figure
        start: First date of the curve
        end: Last date of the curve
        growth_rate: Annual growth rate outside the table
        config: Optional visualization configuration. If not provided, uses default config.

    Returns:
        Path of the saved figure
    """
    config = config or Config().get('visualization', {})
    output_path = Path(output_path)
    output_path.parent.mkdir(exist_ok=True, parents=True)

    curve = resolved_index_frame(table, start, end, growth_rate)
    observed = table.to_frame()

    sns.set_style(config.get('seaborn_style', 'whitegrid'))
    fig, ax = plt.subplots(figsize=tuple(config.get('figure_size', [12, 6])))
    try:
        ax.plot(curve['date'], curve['index'], label='Resolved index', linewidth=1.5)
        ax.scatter(observed['date'], observed['value'], label='Observed', s=12, color='black', zorder=3)
        ax.axvspan(observed['date'].iloc[0], observed['date'].iloc[-1], alpha=0.08, color='grey')
        ax.set_xlabel('Date')
        ax.set_ylabel('Index')
        ax.set_title(f'Resolved index (growth rate {growth_rate:.2%} outside observed range)')
        ax.legend()
        fig.tight_layout()
        fig.savefig(output_path, dpi=config.get('dpi', 300))
    finally:
        plt.close(fig)

    logger.info(f"Saved index plot to {output_path}")
    return output_path
