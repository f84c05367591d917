"""Preliminary loan offers: one per insurance x salary-client combination"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from loan_calculator.domain.annuity import calculate_monthly_payment
from loan_calculator.domain.models import LoanOffer, LoanRequest, RateConfig
from loan_calculator.domain.rates import calculate_offer_rate


@dataclass(frozen=True)
class OfferStrategy:
    """Stateless recipe for one offer variant"""

    is_insurance_enabled: bool
    is_salary_client: bool

    def rate(self, config: RateConfig) -> Decimal:
        return calculate_offer_rate(config, self.is_insurance_enabled, self.is_salary_client)

    def total_amount(self, request: LoanRequest, config: RateConfig) -> Decimal:
        if self.is_insurance_enabled:
            return request.amount + config.insurance_cost
        return request.amount

    def calculate(self, request: LoanRequest, config: RateConfig) -> LoanOffer:
        """Build a new offer for the request; nothing is cached between calls"""
        rate = self.rate(config)
        total_amount = self.total_amount(request, config)

        return LoanOffer(
            requested_amount=request.amount,
            total_amount=total_amount,
            term=request.term,
            monthly_payment=calculate_monthly_payment(total_amount, rate, request.term),
            rate=rate,
            is_insurance_enabled=self.is_insurance_enabled,
            is_salary_client=self.is_salary_client,
        )


OFFER_STRATEGIES = (
    OfferStrategy(is_insurance_enabled=False, is_salary_client=True),
    OfferStrategy(is_insurance_enabled=True, is_salary_client=True),
    OfferStrategy(is_insurance_enabled=False, is_salary_client=False),
    OfferStrategy(is_insurance_enabled=True, is_salary_client=False),
)


def generate_offers(request: LoanRequest, config: RateConfig) -> List[LoanOffer]:
    """
    Calculate all four offers and rank them.

    Offers are sorted by rate descending, so the plain offer (no insurance,
    no salary-client discount) comes first.
    """
    logging.info(
        "Calculating loan offers",
        extra={"amount": str(request.amount), "term": request.term},
    )
    offers = [strategy.calculate(request, config) for strategy in OFFER_STRATEGIES]
    return sorted(offers, key=lambda offer: offer.rate, reverse=True)
