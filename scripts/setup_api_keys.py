#!/usr/bin/env python
"""
Script to store the FRED API key in AWS Secrets Manager.
"""
import sys
import argparse

from inflation_adjuster.aws_manager.s3 import S3
from inflation_adjuster.fred.core.fred_client import check_api_key
from inflation_adjuster.utils.config import Config

def setup_api_keys(fred_key):
    """Store the FRED API key under the configured secret name."""
    secret_name = Config().get('fred.secret_name', 'FRED_API_KEY')
    print(f"Setting up FRED API key in {secret_name}...")
    return S3.store_secret(secret_name, 'fred', check_api_key(fred_key))

def main():
    parser = argparse.ArgumentParser(description="Store the FRED API key in AWS Secrets Manager")
    parser.add_argument('--fred-key', help='FRED API key')
    args = parser.parse_args()

    if not args.fred_key:
        print("Please provide a FRED API key")
        parser.print_help()
        return 1

    setup_api_keys(args.fred_key)
    return 0

if __name__ == '__main__':
    sys.exit(main())
