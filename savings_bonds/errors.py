"""
Exceptions raised while loading holdings and querying the calculator.

- HoldingsInputError: the holdings file is unreadable or a line is malformed.
  Fatal for the whole run.
- FetchError: one calculator query failed. Abandons the current holding only.
  - CalculatorNetworkError: transport failure, timeout or non-2xx response.
  - ExtractionError: the response page lacks the expected markers or cells.
"""


class SavingsBondError(Exception):
    """Base class for errors in savings_bonds."""


class HoldingsInputError(SavingsBondError):
    """Raised when the holdings file cannot be read or parsed."""

    def __init__(self, message: str, line_number: int = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class FetchError(SavingsBondError):
    """Raised when a calculator query does not yield a redemption record."""


class CalculatorNetworkError(FetchError):
    """Raised when the calculator request fails or returns a non-2xx status."""


class ExtractionError(FetchError):
    """Raised when the calculator page cannot be reduced to a redemption record."""
