import pytest
import requests

from savings_bonds.models import RedemptionRecord


CALCULATOR_PAGE = """<html>
<body>
<form name="SBCPrice" method="post" action="/BC/SBCPrice">
<table class="bnddata">
<tr>
  <th>Issue Price</th><th>Value</th><th>Interest</th><th>YTD Interest</th>
  <th>Serial #</th><th>Series</th><th>Denom</th><th>Issue Date</th><th>Next Accrual</th>
</tr>\r
<tr class="altrow1">
  <td>$50.00</td>\r
  <td><strong>$103.68</strong> *</td>\r
  <td>$53.68</td>\r
  <td>$0.96</td>\r
  <td class="lft">C123019924EE</td>\r
  <td>EE</td>\r
  <td>$100</td>\r
  <td>07/1990</td>\r
  <td>11/2026</td>\r
</tr>
</table>
<table class="bnddata">
<tr><th>Total Price</th><th>Total Value</th><th>Total Interest</th><th>Note</th></tr>
<tr>
  <td>07/2020</td>
  <td>$50.00</td>
  <td>$103.68</td>
  <td>MA see note</td>
</tr>
</table>
</form>
</body>
</html>
"""


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


@pytest.fixture
def calculator_page():
    return CALCULATOR_PAGE


@pytest.fixture
def make_record():
    def _make(**overrides):
        values = {
            "initial_price": "$50.00",
            "total_value": "$103.68",
            "total_interest": "$53.68",
            "ytd_interest": "$0.96",
            "serial_number": "C123019924EE",
            "series": "EE",
            "face_value": "$100",
            "issue_date": "07/1990",
            "next_accrual_date": "01/2100",
            "final_accrual_date": "07/2100",
            "interest_rate_note": "4.00%",
        }
        values.update(overrides)
        return RedemptionRecord(**values)
    return _make


@pytest.fixture
def fake_response():
    return FakeResponse
