"""Tests for the FRED client."""

import os
import unittest
from unittest.mock import patch, MagicMock

import numpy as np
import pandas as pd

from inflation_adjuster.fred.core.fred_client import FREDClient, fetch_series
from inflation_adjuster.utils.config import Config, CONFIG_ENV_VAR


class TestFREDClient(unittest.TestCase):
    """
    Test cases for the FRED client.
    """

    def setUp(self):
        """
        Set up test fixtures.
        """
        env = patch.dict(os.environ, {CONFIG_ENV_VAR: '/nonexistent/config.yaml'})
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop('FRED_API_KEY', None)
        Config.reset()
        self.addCleanup(Config.reset)

        self.sample_series = pd.Series(
            [258.687, np.nan, 259.050],
            index=pd.to_datetime(['2020-01-01', '2020-02-01', '2020-03-01'])
        )
        self.sample_info = pd.Series({
            'title': 'Consumer Price Index for All Urban Consumers',
            'units': 'Index 1982-1984=100',
            'frequency_short': 'M',
        })

    @patch('inflation_adjuster.fred.core.fred_client.Fred')
    def test_get_series(self, mock_fred):
        """
        Test fetching a series into a date/value frame.
        """
        mock_fred.return_value.get_series.return_value = self.sample_series
        mock_fred.return_value.get_series_info.return_value = self.sample_info

        client = FREDClient(api_key='abcdef0123456789')
        result = client.get_series('CPIAUCSL')

        mock_fred.assert_called_once_with(api_key='abcdef0123456789')
        self.assertEqual(list(result.columns), ['date', 'value'])
        self.assertEqual(len(result), 2)
        self.assertEqual(result.attrs['series_id'], 'CPIAUCSL')
        self.assertEqual(result.attrs['units'], 'Index 1982-1984=100')

    @patch('inflation_adjuster.fred.core.fred_client.Fred')
    def test_fetch_series_returns_pairs(self, mock_fred):
        mock_fred.return_value.get_series.return_value = self.sample_series
        mock_fred.return_value.get_series_info.return_value = self.sample_info

        result = fetch_series('ABCDEF0123456789')

        mock_fred.return_value.get_series.assert_called_once_with('CPIAUCSL', None, None)
        self.assertEqual(result, [
            (pd.Timestamp('2020-01-01'), 258.687),
            (pd.Timestamp('2020-03-01'), 259.050),
        ])

    @patch('inflation_adjuster.fred.core.fred_client.Fred')
    def test_invalid_credentials_rejected_before_request(self, mock_fred):
        with self.assertRaises(ValueError):
            fetch_series('not-a-key')
        with self.assertRaises(ValueError):
            fetch_series('abc123', 'CPI-U')
        mock_fred.assert_not_called()

    @patch('inflation_adjuster.fred.core.fred_client.Fred')
    def test_empty_series_raises(self, mock_fred):
        mock_fred.return_value.get_series.return_value = pd.Series(dtype=float)

        client = FREDClient(api_key='abc123')
        with self.assertRaises(ValueError):
            client.get_series('CPIAUCSL')

    @patch('inflation_adjuster.fred.core.fred_client.Fred')
    def test_api_errors_propagate(self, mock_fred):
        mock_fred.return_value.get_series.side_effect = ValueError("Bad Request. The series does not exist.")

        client = FREDClient(api_key='abc123')
        with self.assertRaises(ValueError):
            client.fetch_table('NOSUCHSERIES')

    @patch('inflation_adjuster.fred.core.fred_client.S3')
    @patch('inflation_adjuster.fred.core.fred_client.Fred')
    def test_key_from_environment(self, mock_fred, mock_s3):
        with patch.dict(os.environ, {'FRED_API_KEY': 'feed'}):
            FREDClient()
        mock_fred.assert_called_once_with(api_key='feed')
        mock_s3.get_secret.assert_not_called()

    @patch('inflation_adjuster.fred.core.fred_client.S3')
    @patch('inflation_adjuster.fred.core.fred_client.Fred')
    def test_key_from_secrets_manager(self, mock_fred, mock_s3):
        mock_s3.get_secret.return_value = 'deadbeef'

        FREDClient()

        mock_s3.get_secret.assert_called_once_with('FRED_API_KEY', key='api_key')
        mock_fred.assert_called_once_with(api_key='deadbeef')

    @patch('inflation_adjuster.fred.core.fred_client.S3')
    @patch('inflation_adjuster.fred.core.fred_client.Fred')
    def test_missing_key_raises(self, mock_fred, mock_s3):
        mock_s3.get_secret.return_value = None

        with self.assertRaises(ValueError):
            FREDClient()
        mock_fred.assert_not_called()


class TestS3Secrets(unittest.TestCase):
    """
    Test cases for reading secrets.
    """

    @patch('inflation_adjuster.aws_manager.s3.boto3')
    def test_get_secret_json_key(self, mock_boto3):
        from inflation_adjuster.aws_manager.s3 import S3

        client = MagicMock()
        client.get_secret_value.return_value = {'SecretString': '{"api_key": "abc123"}'}
        mock_boto3.client.return_value = client

        self.assertEqual(S3.get_secret('FRED_API_KEY', key='api_key'), 'abc123')
        mock_boto3.client.assert_called_once_with('secretsmanager')

    @patch('inflation_adjuster.aws_manager.s3.boto3')
    def test_get_secret_plain_string(self, mock_boto3):
        from inflation_adjuster.aws_manager.s3 import S3

        client = MagicMock()
        client.get_secret_value.return_value = {'SecretString': 'abc123'}
        mock_boto3.client.return_value = client

        self.assertEqual(S3.get_secret('FRED_API_KEY', key='api_key'), 'abc123')


if __name__ == '__main__':
    unittest.main()
