#!/usr/bin/env python3
# models.py - Data models for savings bond holdings and calculator results

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import BaseModel


class WalkMode(str, Enum):
    """Which redemption months to query for a holding."""
    CURRENT_MONTH = "current_month"
    FULL_HISTORY = "full_history"


@dataclass(frozen=True, order=True)
class MonthDate:
    """A calendar month. Ordering is chronological."""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month out of range: {self.month}")

    @classmethod
    def from_date(cls, d: date) -> "MonthDate":
        return cls(d.year, d.month)

    @classmethod
    def parse_iso(cls, text: str) -> "MonthDate":
        """Parse `YYYY-MM-DD` (or `YYYY-MM`); the day is ignored."""
        match = re.match(r'^(\d{4})-(\d{1,2})(?:-\d{1,2})?$', text.strip())
        if not match:
            raise ValueError(f"Not an ISO date: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def parse_slash(cls, text: str) -> "MonthDate":
        """Parse the calculator's `mm/yyyy` format."""
        match = re.match(r'^(\d{1,2})/(\d{4})$', text.strip())
        if not match:
            raise ValueError(f"Not a mm/yyyy date: {text!r}")
        return cls(int(match.group(2)), int(match.group(1)))

    def as_int(self) -> int:
        """Sortable `YYYYMM` integer."""
        return self.year * 100 + self.month

    def to_slash(self) -> str:
        return f"{self.month:02d}/{self.year:04d}"

    def next_month(self) -> "MonthDate":
        if self.month == 12:
            return MonthDate(self.year + 1, 1)
        return MonthDate(self.year, self.month + 1)

    def months_until(self, other: "MonthDate") -> int:
        """Number of months from self to other, both inclusive (0 if other is earlier)."""
        count = (other.year - self.year) * 12 + (other.month - self.month) + 1
        return max(count, 0)

    def __str__(self) -> str:
        return self.to_slash()


# The calculator has no data before this month.
EARLIEST_REDEMPTION_MONTH = MonthDate(1996, 1)


class Holding(BaseModel):
    """One bond from the holdings file."""
    series: str
    issue_date: MonthDate
    serial_number: str
    face_value: Decimal

    class Config:
        frozen = True


class RedemptionRecord(BaseModel):
    """Values for one bond as of one redemption month, as echoed by the calculator."""
    initial_price: str
    total_value: str
    total_interest: str
    ytd_interest: str
    serial_number: str
    series: str
    face_value: str
    issue_date: str
    next_accrual_date: str
    final_accrual_date: str
    interest_rate_note: str

    class Config:
        frozen = True


# Column order of the CSV report
CSV_FIELDS: List[str] = [
    'redemption_date',
    'series',
    'serial_number',
    'issue_date',
    'final_accrual_date',
    'interest_rate_note',
    'face_value',
    'initial_price',
    'total_interest',
    'total_value',
]


class ReportRow(BaseModel):
    """One output line: a bond's value as of one redemption month."""
    redemption_date: str
    series: str
    serial_number: str
    issue_date: str
    final_accrual_date: str
    interest_rate_note: str
    face_value: str
    initial_price: str
    total_interest: str
    total_value: str

    class Config:
        frozen = True

    def as_list(self) -> List[str]:
        return [getattr(self, name) for name in CSV_FIELDS]
