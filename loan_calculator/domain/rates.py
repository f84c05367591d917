"""
Interest rate models.

Two independent models live here:
- calculate_offer_rate: the simplified rate used for the four preliminary offers,
  driven only by the insurance and salary-client flags
- calculate_credit_rate: the full scoring rate, adjusted by employment, position,
  marital status, age/gender band, insurance and salary-client status
"""

import logging
from datetime import date
from decimal import Decimal

from loan_calculator.domain.models import (
    EmploymentStatus,
    Gender,
    MaritalStatus,
    Position,
    RateConfig,
    ScoringProfile,
)
from loan_calculator.utils.date_utils import full_years_between

# Lowest annual rate the full scoring model will return
MIN_CREDIT_RATE = Decimal("1.00")

EMPLOYMENT_ADJUSTMENTS = {
    EmploymentStatus.SELF_EMPLOYED: Decimal("2.0"),
    EmploymentStatus.BUSINESS_OWNER: Decimal("1.0"),
}

POSITION_ADJUSTMENTS = {
    Position.MID_MANAGER: Decimal("-2.0"),
    Position.TOP_MANAGER: Decimal("-3.0"),
}

MARITAL_ADJUSTMENTS = {
    MaritalStatus.MARRIED: Decimal("-3.0"),
    MaritalStatus.DIVORCED: Decimal("1.0"),
}

# Inclusive (min_age, max_age) bands that earn the age discount
AGE_BANDS = {
    Gender.FEMALE: (32, 60),
    Gender.MALE: (30, 55),
}
AGE_BAND_DISCOUNT = Decimal("-3.0")


def calculate_offer_rate(config: RateConfig, is_insurance_enabled: bool, is_salary_client: bool) -> Decimal:
    """Base rate minus the discounts implied by the offer's flags"""
    rate = config.base_rate
    if is_insurance_enabled:
        rate -= config.insurance_discount
    if is_salary_client:
        rate -= config.salary_client_discount
    return rate


def age_band_adjustment(gender: Gender, age: int) -> Decimal:
    band = AGE_BANDS.get(gender)
    if band is None:
        return Decimal("0")
    min_age, max_age = band
    return AGE_BAND_DISCOUNT if min_age <= age <= max_age else Decimal("0")


def calculate_credit_rate(profile: ScoringProfile, config: RateConfig, today: date) -> Decimal:
    """
    Full scoring rate, starting from config.base_rate.

    Adjustments are applied in a fixed order and are additive:
    1. Employment status (self-employed +2, business owner +1)
    2. Position (mid manager -2, top manager -3)
    3. Marital status (married -3, divorced +1)
    4. Age/gender band (female 32-60, male 30-55: -3)
    5. Insurance (-insurance_discount)
    6. Salary client (-salary_client_discount)

    The result is clamped at MIN_CREDIT_RATE.
    """
    employment = profile.employment
    rate = config.base_rate
    rate += EMPLOYMENT_ADJUSTMENTS.get(employment.employment_status, Decimal("0"))
    rate += POSITION_ADJUSTMENTS.get(employment.position, Decimal("0"))
    rate += MARITAL_ADJUSTMENTS.get(profile.marital_status, Decimal("0"))

    if config.gender_age_discount_enabled:
        age = full_years_between(profile.birthdate, today)
        rate += age_band_adjustment(profile.gender, age)

    if profile.is_insurance_enabled:
        rate -= config.insurance_discount
    if profile.is_salary_client:
        rate -= config.salary_client_discount

    if rate < MIN_CREDIT_RATE:
        logging.warning(
            "Credit rate clamped to floor",
            extra={"computed_rate": str(rate), "floor": str(MIN_CREDIT_RATE)},
        )
        rate = MIN_CREDIT_RATE

    return rate
