"""Annuity payment calculation shared by the offer and credit paths"""

from decimal import Decimal, ROUND_HALF_UP, localcontext

from loan_calculator.domain.exceptions import ComputationError, InvalidTermError

# Intermediate results keep 10 fractional digits; money is rounded to cents only at the end
INTERMEDIATE_QUANT = Decimal("0.0000000001")
CENTS = Decimal("0.01")
MONTHS_PERCENT_DIVISOR = Decimal("1200")


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def monthly_rate(annual_rate: Decimal) -> Decimal:
    """Convert an annual percentage rate into a monthly decimal rate (15 -> 0.0125)"""
    return (annual_rate / MONTHS_PERCENT_DIVISOR).quantize(INTERMEDIATE_QUANT, rounding=ROUND_HALF_UP)


def calculate_monthly_payment(principal: Decimal, annual_rate: Decimal, term: int) -> Decimal:
    """
    Fixed monthly annuity payment.

    Formula: PMT = P * r * (1+r)^n / ((1+r)^n - 1), with r = annual_rate / 1200

    Raises:
        InvalidTermError: term is zero or negative
        ComputationError: monthly rate is zero or negative
    """
    if term <= 0:
        raise InvalidTermError(f"Loan term must be positive, got {term}")

    r = monthly_rate(annual_rate)
    if r <= 0:
        raise ComputationError(f"Annual rate must be positive, got {annual_rate}")

    with localcontext() as ctx:
        ctx.prec = 50
        factor = (Decimal(1) + r) ** term
        numerator = principal * r * factor
        denominator = factor - Decimal(1)
        payment = (numerator / denominator).quantize(INTERMEDIATE_QUANT, rounding=ROUND_HALF_UP)

    return to_cents(payment)


def calculate_total_cost(monthly_payment: Decimal, term: int) -> Decimal:
    """PSK: total amount repaid over the life of the loan"""
    return monthly_payment * term
