"""Tests for loading tables and price batches from files."""

import tempfile
import unittest
from pathlib import Path

import pandas as pd

from inflation_adjuster.data_manager import DataManager, read_frame, write_frame
from inflation_adjuster.utils.validation import InvalidInputError, InvalidTableError


class TestDataManager(unittest.TestCase):
    """Test cases for DataManager."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.dir = Path(self.tmp.name)

        self.table_path = self.dir / "cpi.csv"
        pd.DataFrame({
            'date': ['2020-01-01', '2021-01-01'],
            'value': [100.0, 110.0],
        }).to_csv(self.table_path, index=False)

        self.prices_path = self.dir / "prices.csv"
        pd.DataFrame({
            'date': ['2020-01-01', '2021-01-01', None],
            'price': [50.0, 20.0, 30.0],
        }).to_csv(self.prices_path, index=False)

    def test_loads_table_lazily(self):
        data_manager = DataManager(self.table_path)
        table = data_manager.inflation_table
        self.assertEqual(len(table), 2)
        self.assertIs(data_manager.inflation_table, table)

    def test_named_columns(self):
        path = self.dir / "named.csv"
        pd.DataFrame({
            'notes': ['a', 'b'],
            'observation_date': ['2020-01-01', '2021-01-01'],
            'CPIAUCSL': [100.0, 110.0],
        }).to_csv(path, index=False)

        table = DataManager(path, 'observation_date', 'CPIAUCSL').inflation_table
        self.assertEqual(table.last.index, 110.0)

    def test_missing_named_columns(self):
        with self.assertRaises(InvalidTableError):
            DataManager(self.table_path, 'observation_date', 'CPIAUCSL').inflation_table

    def test_adjust_prices_stops_at_blank_row(self):
        data_manager = DataManager(self.table_path)
        prices = data_manager.load_prices(self.prices_path)

        result = data_manager.adjust_prices(prices, '2021-01-01')

        self.assertEqual(result['adjusted_price'].iloc[0], 55.0)
        self.assertEqual(result['adjusted_price'].iloc[1], 20.0)
        self.assertTrue(pd.isna(result['adjusted_price'].iloc[2]))
        self.assertNotIn('adjusted_price', prices.columns)

    def test_load_prices_missing_column(self):
        data_manager = DataManager(self.table_path)
        with self.assertRaises(InvalidInputError):
            data_manager.load_prices(self.prices_path, price_column='amount')

    def test_excel_round_trip(self):
        path = self.dir / "out" / "table.xlsx"
        df = pd.DataFrame({'date': pd.to_datetime(['2020-01-01']), 'value': [100.0]})
        write_frame(df, path)
        loaded = read_frame(path)
        self.assertEqual(loaded['value'].tolist(), [100.0])


if __name__ == '__main__':
    unittest.main()
