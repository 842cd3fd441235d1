#!/usr/bin/env python3
"""
Redemption Record Extractor

Reduces a savings bond calculator results page to a RedemptionRecord.

The page lists the bond in a table that follows a "Serial #" heading, and the
totals in a table that follows a "Total Price" heading. Cells are read in
document order after each anchor and selected by position. The positions
mirror the calculator's current column layout; a layout change upstream will
yield wrong values rather than an error.
"""

import logging
from typing import List

from bs4 import BeautifulSoup

from savings_bonds.errors import ExtractionError
from savings_bonds.models import RedemptionRecord

logger = logging.getLogger(__name__)

SERIAL_MARKER = 'Serial #'
TOTALS_MARKER = 'Total Price'
SERIAL_CELL_COUNT = 9
TOTALS_CELL_COUNT = 4

# 0-based positions into the 13 collected cell tokens
RECORD_POSITIONS = {
    'initial_price': 0,
    'total_value': 1,
    'total_interest': 2,
    'ytd_interest': 3,
    'serial_number': 4,
    'series': 5,
    'face_value': 6,
    'issue_date': 7,
    'next_accrual_date': 8,
    'final_accrual_date': 9,
    'interest_rate_note': 12,
}


def cell_token(cell) -> str:
    """First whitespace-delimited word of a cell's text, or '' for an empty cell."""
    text = cell.get_text(" ").replace('\r', '')
    words = text.split()
    return words[0] if words else ''


def _cells_after_marker(soup: BeautifulSoup, marker: str, count: int) -> List[str]:
    anchor = soup.find(string=lambda s: s is not None and marker in s)
    if anchor is None:
        raise ExtractionError(f"Marker {marker!r} not found in calculator response")

    cells = anchor.find_all_next('td', limit=count)
    if len(cells) < count:
        raise ExtractionError(
            f"Expected {count} cells after {marker!r}, found {len(cells)}"
        )
    return [cell_token(cell) for cell in cells]


def extract_redemption_record(html: str) -> RedemptionRecord:
    """
    Parse a calculator results page into a RedemptionRecord.

    Args:
        html: Raw response body from the calculator

    Returns:
        RedemptionRecord with every field as the page shows it

    Raises:
        ExtractionError: If either anchor is missing or too few cells follow it
    """
    soup = BeautifulSoup(html, 'html.parser')

    tokens = _cells_after_marker(soup, SERIAL_MARKER, SERIAL_CELL_COUNT)
    tokens += _cells_after_marker(soup, TOTALS_MARKER, TOTALS_CELL_COUNT)
    logger.debug(f"Extracted cell tokens: {tokens}")

    return RedemptionRecord(**{
        field: tokens[position] for field, position in RECORD_POSITIONS.items()
    })
