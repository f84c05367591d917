"""Unit tests for date helpers"""

from datetime import date
from loan_calculator.utils.date_utils import add_months, full_years_between


def test_add_months_clamps_to_month_end():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)


def test_add_months_crosses_years():
    assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)
    assert add_months(date(2024, 2, 15), -3) == date(2023, 11, 15)


def test_full_years_between():
    assert full_years_between(date(2000, 6, 15), date(2024, 6, 15)) == 24
    assert full_years_between(date(2000, 6, 16), date(2024, 6, 15)) == 23
    assert full_years_between(date(2000, 2, 29), date(2024, 2, 28)) == 23
