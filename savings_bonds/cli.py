#!/usr/bin/env python3
"""
EE Savings Bond Values

Reports the value of each bond in a holdings file as of the current month,
or with -a for every month from issue to the current month.

Usage:
    ee-values holdings.txt
    ee-values -a holdings.txt -o history.csv
"""

import argparse
import logging
import sys
from typing import List, Optional

from savings_bonds.calculator_client import TreasuryCalculatorClient
from savings_bonds.config import load_settings
from savings_bonds.errors import FetchError, HoldingsInputError
from savings_bonds.holdings import load_holdings
from savings_bonds.models import Holding, WalkMode
from savings_bonds.report import ReportWriter
from savings_bonds.walker import walk_holding

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_HOLDING_FAILED = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ee-values',
        description="Compute Series EE savings bond values with the TreasuryDirect calculator"
    )
    parser.add_argument(
        'holdings',
        help='Holdings file: one "<series> <YYYY-MM-DD> <serial> <face value>" per line'
    )
    parser.add_argument(
        '-a', '--all',
        action='store_true',
        help='Report every month from issue (or 01/1996) to the current month'
    )
    parser.add_argument(
        '-o', '--output',
        help='Write CSV to this file instead of stdout'
    )
    parser.add_argument(
        '--header',
        action='store_true',
        help='Write a CSV header line first'
    )
    parser.add_argument(
        '--delay',
        type=float,
        help='Seconds to wait between calculator requests (overrides EE_REQUEST_DELAY)'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        help='Calculator request timeout in seconds (overrides EE_REQUEST_TIMEOUT)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log each calculator request'
    )
    return parser


def run(holdings: List[Holding], mode: WalkMode, client: TreasuryCalculatorClient,
        writer: ReportWriter) -> int:
    """Walk every holding, isolating per-holding failures. Returns the number of failed holdings."""
    failed = 0
    for holding in holdings:
        try:
            count = writer.write_all(
                walk_holding(holding, mode, client.fetch_redemption_record)
            )
            logger.info(f"{holding.serial_number}: {count} rows")
        except FetchError as e:
            failed += 1
            logger.error(f"Failed to value {holding.serial_number}: {e}")

    if failed:
        logger.warning(f"{failed} of {len(holdings)} holdings failed")
    return failed


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    settings = load_settings()
    if args.delay is not None:
        settings.request_delay = args.delay
    if args.timeout is not None:
        settings.request_timeout = args.timeout
    client = TreasuryCalculatorClient.from_settings(settings)

    mode = WalkMode.FULL_HISTORY if args.all else WalkMode.CURRENT_MONTH

    # validate input before touching the output file
    try:
        holdings = load_holdings(args.holdings)
    except HoldingsInputError as e:
        logger.error(f"Invalid holdings: {e}")
        return EXIT_INPUT_ERROR

    try:
        output = open(args.output, 'w', newline='', encoding='utf-8') if args.output else sys.stdout
    except OSError as e:
        logger.error(f"Cannot open output file {args.output}: {e}")
        return EXIT_INPUT_ERROR

    try:
        writer = ReportWriter(output, header=args.header)
        failed = run(holdings, mode, client, writer)
    finally:
        if output is not sys.stdout:
            output.close()

    return EXIT_HOLDING_FAILED if failed else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
