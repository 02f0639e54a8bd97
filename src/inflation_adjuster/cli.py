"""
Command-line interface for inflation adjustment.
"""

import sys
import logging
import argparse
import datetime
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .api import ConversionSettings, inflation_adjust
from .data_manager import DataManager, write_frame
from .fred import FREDClient
from .utils.config import Config
from .utils.validation import ValidationError, validate_config


# Set up logging
logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    config = Config()
    parser = argparse.ArgumentParser(
        description='Restate prices between dates using a price index'
    )
    parser.add_argument(
        '--debug', '-d',
        action='store_true',
        help='Enable debug output'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write log output to this file'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    table_help = f"CSV or Excel file with date and index columns (default: {config.get('data.table_file')})"

    convert = subparsers.add_parser('convert', help='Restate a single price')
    convert.add_argument('--price', '-p', type=float, required=True, help='Price to restate')
    convert.add_argument('--from', dest='original_date', default=None,
                         help='Date the price was recorded at (default: today)')
    convert.add_argument('--to', dest='target_date', default=None,
                         help='Date to restate the price at (default: today)')
    convert.add_argument('--table', '-t', default=None, help=table_help)
    convert.add_argument('--growth-rate', '-g', type=float, default=None,
                         help='Annual growth rate outside the table (default: from configuration)')

    batch = subparsers.add_parser('batch', help='Restate a file of prices')
    batch.add_argument('--input', '-i', required=True, help='CSV or Excel file with dates and prices')
    batch.add_argument('--output', '-o', default=None,
                       help=f"Output file (default: {config.get('data.output_file')})")
    batch.add_argument('--table', '-t', default=None, help=table_help)
    batch.add_argument('--date-column', default='date', help='Column holding the price dates')
    batch.add_argument('--price-column', default='price', help='Column holding the prices')
    batch.add_argument('--to', dest='target_date', default=None,
                       help='Date to restate the prices at (default: today)')
    batch.add_argument('--growth-rate', '-g', type=float, default=None,
                       help='Annual growth rate outside the table (default: from configuration)')

    fetch = subparsers.add_parser('fetch', help='Download an index series from FRED')
    fetch.add_argument('--series', '-s', default=config.get('conversion.series_id'),
                       help='FRED series id (default: %(default)s)')
    fetch.add_argument('--api-key', default=None,
                       help='FRED API key (default: FRED_API_KEY or AWS Secrets Manager)')
    fetch.add_argument('--output', '-o', default=config.get('data.table_file'),
                       help='Where to write the table (default: %(default)s)')

    plot = subparsers.add_parser('plot', help='Plot the resolved index curve')
    plot.add_argument('--table', '-t', default=None, help=table_help)
    plot.add_argument('--start', default=None, help='First date of the curve')
    plot.add_argument('--end', default=None, help='Last date of the curve')
    plot.add_argument('--growth-rate', '-g', type=float, default=None,
                      help='Annual growth rate outside the table (default: from configuration)')
    plot.add_argument('--output', '-o', default=config.get('visualization.output_file'),
                      help='Image file to write (default: %(default)s)')

    return parser.parse_args(argv)


def configure_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging based on debug flag."""
    config = Config()
    log_config = config.get('logging', {})

    level = logging.DEBUG if debug else getattr(logging, log_config.get('level', 'INFO'))
    format_str = log_config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # Reset the root logger
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=format_str, handlers=handlers)

    logging.getLogger('matplotlib').setLevel(logging.INFO)
    logging.getLogger('matplotlib.font_manager').setLevel(logging.INFO)
    logging.getLogger('PIL').setLevel(logging.INFO)
    logging.getLogger('botocore').setLevel(logging.WARNING)


def initialize_data_manager(table: Optional[str]) -> DataManager:
    """Initialize the DataManager with configuration."""
    config = Config()
    data_config = config.get('data', {})

    table_file = table or data_config.get('table_file')
    if not table_file:
        raise ValueError("Inflation table path not provided in arguments or configuration")

    return DataManager(
        table_path=table_file,
        date_column=data_config.get('date_column') if table is None else None,
        value_column=data_config.get('value_column') if table is None else None,
    )


def growth_rate_or_default(args: argparse.Namespace) -> float:
    if args.growth_rate is not None:
        return args.growth_rate
    return ConversionSettings.from_config().growth_rate


def run_convert(args: argparse.Namespace) -> None:
    data_manager = initialize_data_manager(args.table)
    result = inflation_adjust(
        args.price,
        args.original_date,
        args.target_date,
        data_manager.inflation_table,
        growth_rate_or_default(args),
    )
    logger.info(f"{args.price} at {args.original_date or 'today'} is {result} at {args.target_date or 'today'}")
    print(f"{result:.2f}")


def run_batch(args: argparse.Namespace) -> None:
    config = Config()
    output_file = args.output or config.get('data.output_file')
    target_date = args.target_date or datetime.date.today()

    with tqdm(total=4, desc="Processing") as pbar:
        data_manager = initialize_data_manager(args.table)
        table = data_manager.inflation_table
        pbar.update(1)

        prices = data_manager.load_prices(args.input, args.date_column, args.price_column)
        pbar.update(1)

        result = data_manager.adjust_prices(
            prices, target_date,
            date_column=args.date_column,
            price_column=args.price_column,
            growth_rate=growth_rate_or_default(args),
        )
        pbar.update(1)

        write_frame(result, output_file)
        pbar.update(1)

    logger.info(f"Restated {result['adjusted_price'].notna().sum()} prices against {len(table)} index rows")
    print(f"Adjusted prices saved to {output_file}")


def run_fetch(args: argparse.Namespace) -> None:
    client = FREDClient(api_key=args.api_key)
    table = client.fetch_table(args.series)
    path = write_frame(table.to_frame(), args.output)
    print(f"Saved {len(table)} observations of {args.series} to {path}")


def run_plot(args: argparse.Namespace) -> None:
    from .utils.visualization import plot_resolved_index

    data_manager = initialize_data_manager(args.table)
    path = plot_resolved_index(
        data_manager.inflation_table,
        Path(args.output),
        start=args.start,
        end=args.end,
        growth_rate=growth_rate_or_default(args),
    )
    print(f"Plot saved to {path}")


COMMANDS = {
    'convert': run_convert,
    'batch': run_batch,
    'fetch': run_fetch,
    'plot': run_plot,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for the inflation-adjust command."""
    try:
        args = parse_arguments(argv)
        configure_logging(args.debug, args.log_file)
        validate_config(Config().as_dict())

        logger.debug(f"Running {args.command}")
        COMMANDS[args.command](args)
        return 0

    except (ValidationError, ValueError) as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
