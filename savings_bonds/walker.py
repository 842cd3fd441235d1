#!/usr/bin/env python3
"""
Monthly Accrual Walker

Walks one holding month by month from a starting month up to the current
month, querying the calculator for each redemption month and producing one
report row per query.

Each response carries the calculator's canonical serial number, series,
face value and issue date; the next query uses those echoed values rather
than the holding's. The response's next accrual date sets the next month to
query, and its final accrual date can pull the stop month earlier for bonds
that have stopped earning interest.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterator, Optional

from savings_bonds.calculator_client import REQUEST_SERIES, normalize_denomination
from savings_bonds.errors import ExtractionError
from savings_bonds.models import (
    EARLIEST_REDEMPTION_MONTH,
    Holding,
    MonthDate,
    RedemptionRecord,
    ReportRow,
    WalkMode,
)

logger = logging.getLogger(__name__)

# fetch(series, serial_number, face_value, issue_date, redemption_date)
FetchRecord = Callable[[str, str, str, MonthDate, MonthDate], RedemptionRecord]


@dataclass
class WalkState:
    """Working copy of a holding's query inputs plus the loop bounds."""
    cursor: MonthDate
    stop: MonthDate
    issue_date: MonthDate
    serial_number: str
    series: str
    face_value: str

    def adopt(self, record: RedemptionRecord, issue_date: MonthDate):
        self.serial_number = record.serial_number
        self.series = record.series
        self.face_value = record.face_value
        self.issue_date = issue_date


def initial_cursor(holding: Holding, mode: WalkMode, current_month: MonthDate) -> MonthDate:
    """First redemption month to query for a holding."""
    if mode == WalkMode.FULL_HISTORY:
        return max(holding.issue_date, EARLIEST_REDEMPTION_MONTH)
    return current_month


def format_face_value(face_value: str) -> str:
    """Face value as shown in the report, e.g. "$100" -> "100.00"."""
    return f"{normalize_denomination(face_value)}.00"


def _echoed_month(record: RedemptionRecord, field: str) -> MonthDate:
    value = getattr(record, field)
    try:
        return MonthDate.parse_slash(value)
    except ValueError as e:
        raise ExtractionError(f"Calculator returned an unreadable {field}: {value!r}") from e


def build_report_row(redemption_date: MonthDate, record: RedemptionRecord) -> ReportRow:
    return ReportRow(
        redemption_date=redemption_date.to_slash(),
        series=record.series,
        serial_number=record.serial_number,
        issue_date=record.issue_date,
        final_accrual_date=record.final_accrual_date,
        interest_rate_note=record.interest_rate_note,
        face_value=format_face_value(record.face_value),
        initial_price=record.initial_price,
        total_interest=record.total_interest,
        total_value=record.total_value,
    )


def walk_holding(holding: Holding, mode: WalkMode, fetch: FetchRecord,
                 today: Optional[date] = None) -> Iterator[ReportRow]:
    """
    Yield one ReportRow per queried redemption month for a holding.

    Args:
        holding: Bond to value
        mode: CURRENT_MONTH for this month only, FULL_HISTORY from issue
        fetch: Calculator query, normally TreasuryCalculatorClient.fetch_redemption_record
        today: Date that defines the current month (defaults to today)

    Raises:
        FetchError: From the first failing query; no further months are queried
    """
    current_month = MonthDate.from_date(today or date.today())
    state = WalkState(
        cursor=initial_cursor(holding, mode, current_month),
        stop=current_month,
        issue_date=holding.issue_date,
        serial_number=holding.serial_number,
        series=holding.series,
        face_value=normalize_denomination(holding.face_value),
    )

    if holding.series.upper() != REQUEST_SERIES:
        logger.warning(
            f"Bond {holding.serial_number} is series {holding.series}; "
            f"the calculator will be queried as series {REQUEST_SERIES}"
        )
    logger.info(
        f"Walking {holding.serial_number} from {state.cursor} to {state.stop} ({mode.value})"
    )

    while state.cursor <= state.stop:
        record = fetch(state.series, state.serial_number, state.face_value,
                       state.issue_date, state.cursor)
        yield build_report_row(state.cursor, record)

        state.adopt(record, _echoed_month(record, 'issue_date'))

        final_month = _echoed_month(record, 'final_accrual_date')
        if final_month < state.stop:
            logger.debug(f"{state.serial_number} stops accruing {final_month}; stopping there")
            state.stop = final_month

        # next accrual date only matters when another month remains
        if state.cursor >= state.stop:
            return

        next_month = _echoed_month(record, 'next_accrual_date')
        if next_month <= state.cursor:
            next_month = state.cursor.next_month()
        state.cursor = next_month
