"""Refusal rules - hard eligibility gates evaluated before the credit calculation"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, List, Union

from loan_calculator.domain.models import (
    Eligible,
    EmploymentStatus,
    Gender,
    RateConfig,
    Refused,
    ScoringProfile,
)
from loan_calculator.utils.date_utils import full_years_between

SALARY_MULTIPLIER = Decimal("24")
MIN_AGE = 20
MAX_AGE = 65
MIN_TOTAL_EXPERIENCE_MONTHS = 18
MIN_CURRENT_EXPERIENCE_MONTHS = 3

EligibilityResult = Union[Eligible, Refused]


@dataclass(frozen=True)
class RefusalRule:
    """A predicate that returns True when the applicant must be refused"""

    code: str
    reason: str
    refuses: Callable[[ScoringProfile, date], bool]


def _is_unemployed(profile: ScoringProfile, today: date) -> bool:
    return profile.employment.employment_status == EmploymentStatus.UNEMPLOYED


def _exceeds_salary_limit(profile: ScoringProfile, today: date) -> bool:
    return profile.amount > profile.employment.salary * SALARY_MULTIPLIER


def _age_out_of_range(profile: ScoringProfile, today: date) -> bool:
    age = full_years_between(profile.birthdate, today)
    return age < MIN_AGE or age > MAX_AGE


def _is_non_binary(profile: ScoringProfile, today: date) -> bool:
    return profile.gender == Gender.NON_BINARY


def _short_total_experience(profile: ScoringProfile, today: date) -> bool:
    return profile.employment.work_experience_total < MIN_TOTAL_EXPERIENCE_MONTHS


def _short_current_experience(profile: ScoringProfile, today: date) -> bool:
    return profile.employment.work_experience_current < MIN_CURRENT_EXPERIENCE_MONTHS


NON_BINARY_GENDER = "NON_BINARY_GENDER"

REFUSAL_RULES = (
    RefusalRule("UNEMPLOYED", "Applicant is unemployed", _is_unemployed),
    RefusalRule(
        "AMOUNT_EXCEEDS_SALARY_LIMIT",
        "Requested amount exceeds 24 monthly salaries",
        _exceeds_salary_limit,
    ),
    RefusalRule(
        "AGE_OUT_OF_RANGE",
        f"Applicant age is outside {MIN_AGE}-{MAX_AGE}",
        _age_out_of_range,
    ),
    RefusalRule(NON_BINARY_GENDER, "Applicant gender is NON_BINARY", _is_non_binary),
    RefusalRule(
        "INSUFFICIENT_TOTAL_EXPERIENCE",
        f"Total work experience is under {MIN_TOTAL_EXPERIENCE_MONTHS} months",
        _short_total_experience,
    ),
    RefusalRule(
        "INSUFFICIENT_CURRENT_EXPERIENCE",
        f"Current work experience is under {MIN_CURRENT_EXPERIENCE_MONTHS} months",
        _short_current_experience,
    ),
)


def active_rules(config: RateConfig) -> List[RefusalRule]:
    """Rules in evaluation order, minus those disabled by policy toggles"""
    return [
        rule for rule in REFUSAL_RULES
        if rule.code != NON_BINARY_GENDER or config.non_binary_refusal_enabled
    ]


def check_eligibility(profile: ScoringProfile, config: RateConfig, today: date) -> EligibilityResult:
    """
    Evaluate refusal rules in order and stop at the first one that refuses.

    Returns Eligible when every rule passes, otherwise Refused with the
    failing rule's code and reason. Rules after the failing one are not run.
    """
    for rule in active_rules(config):
        logging.info("Checking refusal rule", extra={"rule": rule.code})
        if rule.refuses(profile, today):
            logging.warning("Refusal rule triggered", extra={"rule": rule.code, "reason": rule.reason})
            return Refused(code=rule.code, reason=rule.reason)

    return Eligible()
