#!/usr/bin/env python3
"""
Treasury Calculator Client - fetches savings bond values from TreasuryDirect

Submits the savings bond calculator form for one bond and one redemption
month, then hands the results page to the extractor. One POST per call; no
retries. Requests may be paced with a fixed delay between calls.
"""

import logging
import time
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple, Union

import requests

from savings_bonds.config import CalculatorSettings
from savings_bonds.errors import CalculatorNetworkError
from savings_bonds.extractor import extract_redemption_record
from savings_bonds.models import MonthDate, RedemptionRecord

logger = logging.getLogger(__name__)

# The calculator ignores the holding's series and is always asked for EE.
REQUEST_SERIES = 'EE'
OLD_REDEMPTION_DATE_PLACEHOLDER = '782'


def normalize_denomination(face_value: Union[str, Decimal, int]) -> str:
    """
    Reduce a face value to the bare denomination the calculator accepts.

    "$100.00" -> "100", "100.0" -> "100", "1,000.00" -> "1000", "75.50" -> "75.50"
    """
    text = str(face_value).strip()
    if text.startswith('$'):
        text = text[1:]
    text = text.replace(',', '')
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return text
    if amount.is_finite() and amount == amount.to_integral_value():
        return str(int(amount))
    return text


def build_calculator_form(serial_number: str, face_value: Union[str, Decimal, int],
                          issue_date: MonthDate, redemption_date: MonthDate) -> List[Tuple[str, str]]:
    """Form fields for one calculator query, in the order the calculator page posts them."""
    return [
        ('RedemptionDate', redemption_date.to_slash()),
        ('btnUpdate.x', 'UPDATE'),
        ('Series', REQUEST_SERIES),
        ('Denomination', normalize_denomination(face_value)),
        ('SerialNumber', serial_number),
        ('IssueDate', issue_date.to_slash()),
        ('SerialNumList', ''),
        ('IssueDateList', ''),
        ('SeriesList', ''),
        ('DenominationList', ''),
        ('IssuePriceList', ' '),
        ('InterestList', ' '),
        ('YTDInterestList', ''),
        ('ValueList', ''),
        ('InterestRateList', ''),
        ('NextAccrualDateList', ''),
        ('MaturityDateList', ''),
        ('NoteList', ''),
        ('OldRedemptionDate', OLD_REDEMPTION_DATE_PLACEHOLDER),
        ('ViewPos', '0'),
        ('ViewType', 'Partial'),
        ('Version', '6'),
    ]


class TreasuryCalculatorClient:
    """
    Client for the TreasuryDirect savings bond calculator.

    The calculator has no public API; each query posts the same form the
    calculator web page posts and scrapes the returned page.
    """

    def __init__(self,
                 calculator_url: str = None,
                 user_agent: str = None,
                 request_delay: float = 0.0,
                 timeout: Optional[float] = None):
        """
        Initialize the calculator client.

        Args:
            calculator_url: Calculator endpoint (defaults to TreasuryDirect)
            user_agent: User-Agent header to send
            request_delay: Seconds to wait between consecutive requests
            timeout: Request timeout in seconds, None for no timeout
        """
        defaults = CalculatorSettings()
        self.calculator_url = calculator_url or defaults.calculator_url
        self.headers = {'User-Agent': user_agent or defaults.user_agent}
        self.request_delay = request_delay
        self.timeout = timeout
        self.requests_sent = 0

    @classmethod
    def from_settings(cls, settings: CalculatorSettings) -> "TreasuryCalculatorClient":
        return cls(
            calculator_url=settings.calculator_url,
            user_agent=settings.user_agent,
            request_delay=settings.request_delay,
            timeout=settings.request_timeout,
        )

    def _pace(self):
        if self.requests_sent and self.request_delay > 0:
            time.sleep(self.request_delay)

    def fetch_page(self, form: List[Tuple[str, str]]) -> str:
        """POST the calculator form and return the response body."""
        self._pace()
        self.requests_sent += 1
        try:
            response = requests.post(
                self.calculator_url,
                data=form,
                headers=self.headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise CalculatorNetworkError(f"Calculator request failed: {e}") from e
        return response.text

    def fetch_redemption_record(self, series: str, serial_number: str,
                                face_value: Union[str, Decimal, int],
                                issue_date: MonthDate,
                                redemption_date: MonthDate) -> RedemptionRecord:
        """
        Query the value of one bond as of one redemption month.

        Args:
            series: Bond series from the holding (not sent; the query is always EE)
            serial_number: Bond serial number
            face_value: Face value, with or without currency formatting
            issue_date: Issue month
            redemption_date: Month to value the bond as of

        Returns:
            RedemptionRecord parsed from the calculator page

        Raises:
            CalculatorNetworkError: On transport failure or non-2xx status
            ExtractionError: If the page cannot be parsed
        """
        logger.debug(
            f"Querying {serial_number} (issued {issue_date}) as of {redemption_date}"
        )
        form = build_calculator_form(serial_number, face_value, issue_date, redemption_date)
        page = self.fetch_page(form)
        return extract_redemption_record(page)
