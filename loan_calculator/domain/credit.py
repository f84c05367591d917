"""Credit calculation engine - refusal check, rate, payment and amortization schedule"""

import logging
from datetime import date
from decimal import Decimal
from typing import List

from loan_calculator.domain.annuity import (
    calculate_monthly_payment,
    calculate_total_cost,
    monthly_rate,
    to_cents,
)
from loan_calculator.domain.exceptions import InvalidTermError, RefusalError
from loan_calculator.domain.models import (
    AmortizationEntry,
    CreditResult,
    RateConfig,
    Refused,
    ScoringProfile,
)
from loan_calculator.domain.rates import calculate_credit_rate
from loan_calculator.domain.refusal import check_eligibility
from loan_calculator.utils.date_utils import add_months


def calculate_financed_amount(amount: Decimal, is_insurance_enabled: bool, config: RateConfig) -> Decimal:
    """Requested amount plus the flat insurance cost when insurance is taken"""
    return amount + config.insurance_cost if is_insurance_enabled else amount


def build_payment_schedule(
    financed_amount: Decimal,
    rate: Decimal,
    term: int,
    start_date: date,
) -> List[AmortizationEntry]:
    """
    Generate the month-by-month amortization schedule for an annuity loan.

    Requirements:
    - `term` entries numbered 1..term, due monthly from start_date
    - Each period: interest = balance * r, debt = payment - interest,
      every figure rounded to cents
    - Last installment absorbs the rounding drift so remaining debt ends at 0.00
    - Because of that, the last total_payment can differ from the fixed
      payment by a few cents (under a currency unit on long terms), so the
      schedule totals do not add up exactly to PSK (payment * term)

    Example:
        100,000 at 12% over 2 months, r = 0.01, payment 50,751.24
        #1: interest 1,000.00, debt 49,751.24, remaining 50,248.76
        #2: interest 502.49, debt 50,248.76, total 50,751.25, remaining 0.00
    """
    if term <= 0:
        raise InvalidTermError(f"Loan term must be positive, got {term}")

    payment = calculate_monthly_payment(financed_amount, rate, term)
    r = monthly_rate(rate)
    balance = financed_amount

    schedule = []
    for number in range(1, term + 1):
        interest = to_cents(balance * r)

        if number == term:
            # Last installment clears whatever rounding left on the balance
            debt = balance
            total = debt + interest
            balance = Decimal("0.00")
        else:
            debt = to_cents(payment - interest)
            total = payment
            balance = to_cents(balance - debt)

        schedule.append(
            AmortizationEntry(
                number=number,
                date=add_months(start_date, number - 1),
                total_payment=total,
                interest_payment=interest,
                debt_payment=debt,
                remaining_debt=balance,
            )
        )

    return schedule


def calculate_credit(profile: ScoringProfile, config: RateConfig, today: date | None = None) -> CreditResult:
    """
    Main entry point: check eligibility and compute the full credit terms.

    Flow:
    1. Run refusal rules (fail fast on the first refusal)
    2. Compute the scoring rate
    3. Add insurance cost to get the financed amount
    4. Annuity payment and PSK
    5. Amortization schedule starting one month after `today`

    Raises:
        RefusalError: applicant failed a refusal rule
        ComputationError: payment cannot be computed for the inputs
    """
    if today is None:
        today = date.today()

    eligibility = check_eligibility(profile, config, today)
    if isinstance(eligibility, Refused):
        raise RefusalError(eligibility.code, eligibility.reason)

    rate = calculate_credit_rate(profile, config, today)
    financed_amount = calculate_financed_amount(profile.amount, profile.is_insurance_enabled, config)
    payment = calculate_monthly_payment(financed_amount, rate, profile.term)
    schedule = build_payment_schedule(financed_amount, rate, profile.term, add_months(today, 1))

    logging.info(
        "Credit calculated",
        extra={"amount": str(financed_amount), "term": profile.term, "rate": str(rate)},
    )

    return CreditResult(
        amount=financed_amount,
        term=profile.term,
        monthly_payment=payment,
        rate=rate,
        psk=calculate_total_cost(payment, profile.term),
        is_insurance_enabled=profile.is_insurance_enabled,
        is_salary_client=profile.is_salary_client,
        payment_schedule=tuple(schedule),
    )
