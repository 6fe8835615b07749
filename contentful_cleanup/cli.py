#!/usr/bin/env python3
"""
Contentful Cleanup CLI

Helps find Contentful assets that nothing uses any more.

Usage:
    contentful-cleanup get-assets -o assets.json
    contentful-cleanup get-asset-details -i assets.json -o details.csv [-m 50] [-a]
    contentful-cleanup find-orphaned-assets -i assets.json -o orphaned.csv

Configuration is read from the environment (and a .env file if present):
    CONTENTFUL_SPACE_ID, CONTENTFUL_ENVIRONMENT_ID,
    CONTENTFUL_CMA_TOKEN, CONTENTFUL_CDA_TOKEN,
    CONTENTFUL_BASE_URL_CMA, CONTENTFUL_BASE_URL_CDA
"""

import argparse
import sys
from typing import List, Optional

import requests

from . import __version__, commands
from .client import ContentfulClient
from .config import load_config
from .errors import CleanupError
from .log import CleanupLogger
from .output import print_banner, print_error, print_info, print_warning

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='contentful-cleanup',
        description='CLI to help manage Contentful Assets.'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s v{__version__}')
    parser.add_argument('--env-file', default='.env', help='dotenv file to load configuration from (default: .env)')

    subparsers = parser.add_subparsers(dest='command', metavar='<command>')
    subparsers.required = True

    get_assets = subparsers.add_parser(
        'get-assets', aliases=['ga'],
        help='Get list of assets from Contentful space'
    )
    get_assets.add_argument('-o', '--output-file', required=True,
                            help='(Required) Output file you want to write data to (JSON format)')
    get_assets.set_defaults(handler=run_get_assets)

    details = subparsers.add_parser(
        'get-asset-details', aliases=['gad'],
        help='Get detailed information about assets'
    )
    details.add_argument('-o', '--output-file', required=True,
                         help='(Required) Output file you want to write data to (CSV format)')
    details.add_argument('-i', '--input-file',
                         help='Input file you want to read data from (JSON format)')
    details.add_argument('-m', '--max', type=int, dest='max_count',
                         help='Maximum number of assets to analyze')
    details.add_argument('-a', '--with-author', action='store_true',
                         help="Add a column with the name of the user who created each asset")
    details.set_defaults(handler=run_get_asset_details)

    orphans = subparsers.add_parser(
        'find-orphaned-assets', aliases=['foa'],
        help='Find assets that are not linked to by any entry'
    )
    orphans.add_argument('-o', '--output-file', required=True,
                         help='(Required) Output file you want to write data to (CSV format)')
    orphans.add_argument('-i', '--input-file',
                         help='Input file you want to read data from (JSON format)')
    orphans.add_argument('-m', '--max', type=int, dest='max_count',
                         help='Maximum number of assets to analyze')
    orphans.set_defaults(handler=run_find_orphaned)

    return parser

# ============================================
# HANDLERS
# ============================================

def run_get_assets(args, client, config, logger):
    commands.get_assets(client, config, logger, args.output_file)


def run_get_asset_details(args, client, config, logger):
    commands.get_asset_details(client, config, logger, args.output_file,
                               input_file=args.input_file, max_count=args.max_count,
                               with_author=args.with_author)


def run_find_orphaned(args, client, config, logger):
    commands.find_orphaned(client, config, logger, args.output_file,
                           input_file=args.input_file, max_count=args.max_count)

# ============================================
# MAIN
# ============================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.env_file)

    print_banner("CONTENTFUL CLEANUP", f"{args.command}")
    print_info(f"Space: {config.space_id or '(not set)'}  Environment: {config.environment_id}")

    try:
        logger = CleanupLogger(config.log_file, args.command)
    except CleanupError as e:
        print_error(str(e))
        return EXIT_FAILED

    client = ContentfulClient(config, requests.Session())

    try:
        args.handler(args, client, config, logger)
        return EXIT_OK
    except KeyboardInterrupt:
        print_warning("\n\nInterrupted by user")
        logger.log("Interrupted by user")
        return EXIT_INTERRUPTED
    except CleanupError as e:
        print()
        print_error(f"{args.command} failed: {e}")
        logger.log(f"{args.command} failed: {e}")
        return EXIT_FAILED
    finally:
        client.close()
        logger.close()


if __name__ == "__main__":
    sys.exit(main())
