"""Unit tests for the credit engine and amortization schedule"""

import pytest
from datetime import date
from decimal import Decimal
from loan_calculator.domain.annuity import calculate_monthly_payment, calculate_total_cost, monthly_rate, to_cents
from loan_calculator.domain.credit import build_payment_schedule, calculate_credit, calculate_financed_amount
from loan_calculator.domain.exceptions import InvalidTermError, RefusalError
from loan_calculator.domain.models import EmploymentStatus


def test_calculate_credit_example(make_profile, rate_config, today):
    """1,000,000 over 12 months for a married 40-year-old woman at base 15 -> 9%"""
    profile = make_profile(amount=Decimal("1000000"), term=12)
    credit = calculate_credit(profile, rate_config, today)

    expected_payment = calculate_monthly_payment(Decimal("1000000"), Decimal("9"), 12)
    assert credit.rate == Decimal("9")
    assert credit.amount == Decimal("1000000")
    assert credit.term == 12
    assert credit.monthly_payment == expected_payment
    assert credit.psk == expected_payment * 12
    assert credit.psk >= credit.amount
    assert credit.is_insurance_enabled is False
    assert credit.is_salary_client is False


def test_calculate_credit_with_insurance(make_profile, rate_config, today):
    profile = make_profile(amount=Decimal("200000"), is_insurance_enabled=True)
    credit = calculate_credit(profile, rate_config, today)

    assert credit.amount == Decimal("300000")
    assert credit.rate == Decimal("6")
    assert credit.is_insurance_enabled is True


def test_calculate_credit_refusal_raises(make_profile, rate_config, today):
    profile = make_profile(employment={"employment_status": EmploymentStatus.UNEMPLOYED})

    with pytest.raises(RefusalError) as exc_info:
        calculate_credit(profile, rate_config, today)

    assert exc_info.value.code == "UNEMPLOYED"


def test_calculate_credit_is_idempotent(make_profile, rate_config, today):
    profile = make_profile(amount=Decimal("750000"), term=36, is_salary_client=True)
    assert calculate_credit(profile, rate_config, today) == calculate_credit(profile, rate_config, today)


def test_calculate_credit_defaults_to_current_date(make_profile, rate_config):
    credit = calculate_credit(make_profile(), rate_config)
    assert credit.payment_schedule[0].date > date.today()


def test_schedule_shape(make_profile, rate_config, today):
    credit = calculate_credit(make_profile(amount=Decimal("1000000"), term=12), rate_config, today)
    schedule = credit.payment_schedule

    assert len(schedule) == 12
    assert [entry.number for entry in schedule] == list(range(1, 13))
    assert schedule[0].date == date(2024, 7, 15)
    assert schedule[-1].date == date(2025, 6, 15)


def test_schedule_balance_reaches_zero(make_profile, rate_config, today):
    credit = calculate_credit(make_profile(amount=Decimal("1000000"), term=12), rate_config, today)
    balances = [entry.remaining_debt for entry in credit.payment_schedule]

    assert balances == sorted(balances, reverse=True)
    assert abs(balances[-1]) <= Decimal("0.01")
    assert sum(entry.debt_payment for entry in credit.payment_schedule) == credit.amount


def test_schedule_rows_follow_annuity(make_profile, rate_config, today):
    credit = calculate_credit(make_profile(amount=Decimal("1000000"), term=12), rate_config, today)
    first = credit.payment_schedule[0]

    assert first.interest_payment == to_cents(Decimal("1000000") * monthly_rate(Decimal("9")))
    assert first.debt_payment == credit.monthly_payment - first.interest_payment
    for entry in credit.payment_schedule[:-1]:
        assert entry.total_payment == credit.monthly_payment
        assert entry.interest_payment + entry.debt_payment == entry.total_payment
    assert abs(credit.payment_schedule[-1].total_payment - credit.monthly_payment) < Decimal("1.00")


def test_build_payment_schedule_two_months():
    schedule = build_payment_schedule(Decimal("100000"), Decimal("12"), 2, date(2024, 1, 31))

    assert [(e.interest_payment, e.debt_payment, e.remaining_debt, e.total_payment) for e in schedule] == [
        (Decimal("1000.00"), Decimal("49751.24"), Decimal("50248.76"), Decimal("50751.24")),
        (Decimal("502.49"), Decimal("50248.76"), Decimal("0.00"), Decimal("50751.25")),
    ]
    assert [e.date for e in schedule] == [date(2024, 1, 31), date(2024, 2, 29)]


def test_schedule_totals_differ_from_psk_by_residue():
    """Last installment carries the rounding residue, so totals drift from payment * term"""
    schedule = build_payment_schedule(Decimal("100000"), Decimal("12"), 2, date(2024, 1, 31))
    psk = calculate_total_cost(calculate_monthly_payment(Decimal("100000"), Decimal("12"), 2), 2)

    assert psk == Decimal("101502.48")
    assert sum(e.total_payment for e in schedule) == Decimal("101502.49")


def test_build_payment_schedule_long_term():
    schedule = build_payment_schedule(Decimal("3000000"), Decimal("11.5"), 240, date(2024, 1, 1))

    assert len(schedule) == 240
    assert schedule[-1].remaining_debt == Decimal("0.00")
    assert schedule[-1].date == date(2043, 12, 1)


def test_build_payment_schedule_rejects_zero_term():
    with pytest.raises(InvalidTermError):
        build_payment_schedule(Decimal("100000"), Decimal("12"), 0, date(2024, 1, 1))


def test_calculate_financed_amount(rate_config):
    assert calculate_financed_amount(Decimal("200000"), True, rate_config) == Decimal("300000")
    assert calculate_financed_amount(Decimal("200000"), False, rate_config) == Decimal("200000")
