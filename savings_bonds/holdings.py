#!/usr/bin/env python3
"""
Holdings file loader.

One bond per line, whitespace separated, no header:

    EE 1990-07-01 C123019924EE 100.00
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from savings_bonds.errors import HoldingsInputError
from savings_bonds.models import Holding, MonthDate

logger = logging.getLogger(__name__)


def parse_holding_line(line: str, line_number: Optional[int] = None) -> Holding:
    """Parse `<series> <issue-date> <serial> <face-value>`; extra fields are ignored."""
    fields = line.split()
    if len(fields) < 4:
        raise HoldingsInputError(
            f"expected series, issue date, serial and face value, got {line.strip()!r}",
            line_number,
        )

    series, issue_text, serial_number, face_text = fields[:4]
    try:
        issue_date = MonthDate.parse_iso(issue_text)
    except ValueError as e:
        raise HoldingsInputError(f"bad issue date {issue_text!r}", line_number) from e
    try:
        face_value = Decimal(face_text.lstrip('$').replace(',', ''))
    except InvalidOperation as e:
        raise HoldingsInputError(f"bad face value {face_text!r}", line_number) from e

    return Holding(
        series=series,
        issue_date=issue_date,
        serial_number=serial_number,
        face_value=face_value,
    )


def load_holdings(path: str) -> List[Holding]:
    """Read every holding in a file. Blank lines are skipped."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except OSError as e:
        raise HoldingsInputError(f"cannot read holdings file {path}: {e}") from e

    holdings = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        holdings.append(parse_holding_line(line, line_number))

    logger.info(f"Loaded {len(holdings)} holdings from {path}")
    return holdings
