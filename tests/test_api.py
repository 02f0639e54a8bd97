"""Tests for the host-facing adapter."""

import unittest
from datetime import date
from unittest.mock import patch

from inflation_adjuster.api import ConversionSettings, inflation_adjust
from inflation_adjuster.utils.validation import InvalidTableError


class TestInflationAdjust(unittest.TestCase):

    def setUp(self):
        self.table = [[date(2020, 1, 1), 100.0], [date(2021, 1, 1), 110.0]]
        self.settings = ConversionSettings(growth_rate=0.05)

    def test_explicit_arguments(self):
        result = inflation_adjust(50, date(2020, 1, 1), date(2021, 1, 1), self.table, 0.02,
                                  settings=self.settings)
        self.assertEqual(result, 55.0)

    def test_blank_dates_default_to_today(self):
        result = inflation_adjust(50, "", None, self.table, today=date(2020, 7, 2), settings=self.settings)
        self.assertEqual(result, 50.0)

        result = inflation_adjust(50, date(2020, 1, 1), "", self.table, today=date(2021, 1, 1),
                                  settings=self.settings)
        self.assertEqual(result, 55.0)

    def test_blank_growth_rate_uses_settings(self):
        result = inflation_adjust(100, date(2021, 1, 1), date(2022, 1, 1), self.table, "",
                                  settings=self.settings)
        self.assertAlmostEqual(result, 100.0 * 1.05 ** (365 / 365.25))

    def test_ranges_pass_through(self):
        result = inflation_adjust(50, [date(2020, 1, 1), date(2021, 1, 1)], "", self.table,
                                  today=date(2021, 1, 1), settings=self.settings)
        self.assertEqual(result, [55.0, 50.0])

    def test_blank_price_returns_none(self):
        self.assertIsNone(inflation_adjust("", "garbage", "garbage", None))

    def test_missing_table_raises(self):
        with self.assertRaises(InvalidTableError):
            inflation_adjust(50, date(2020, 1, 1), date(2021, 1, 1), None, settings=self.settings)

    @patch('inflation_adjuster.api.Config')
    def test_settings_from_config(self, mock_config):
        values = {'conversion.growth_rate': 0.03, 'conversion.series_id': 'CPILFESL'}
        mock_config.return_value.get.side_effect = lambda key, default=None: values.get(key, default)

        settings = ConversionSettings.from_config()

        self.assertEqual(settings.growth_rate, 0.03)
        self.assertEqual(settings.series_id, 'CPILFESL')


if __name__ == '__main__':
    unittest.main()
