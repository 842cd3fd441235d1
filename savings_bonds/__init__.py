"""
Series EE savings bond values from the TreasuryDirect calculator.

Modules:
- models: holdings, calendar months, calculator records, report rows
- extractor: calculator results page -> RedemptionRecord
- calculator_client: calculator form POST
- walker: month-by-month walk over one holding
- holdings: holdings file loader
- report: CSV output
- cli: `ee-values` command line
"""

__version__ = "1.0.0"
