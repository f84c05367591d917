"""Domain models - immutable dataclasses representing loan applications and results"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class EmploymentStatus(str, Enum):
    UNEMPLOYED = "UNEMPLOYED"
    SELF_EMPLOYED = "SELF_EMPLOYED"
    EMPLOYED = "EMPLOYED"
    BUSINESS_OWNER = "BUSINESS_OWNER"


class Position(str, Enum):
    WORKER = "WORKER"
    MID_MANAGER = "MID_MANAGER"
    TOP_MANAGER = "TOP_MANAGER"
    OWNER = "OWNER"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    NON_BINARY = "NON_BINARY"


class MaritalStatus(str, Enum):
    MARRIED = "MARRIED"
    DIVORCED = "DIVORCED"
    SINGLE = "SINGLE"
    WIDOW_WIDOWER = "WIDOW_WIDOWER"


@dataclass(frozen=True)
class RateConfig:
    """Process-wide rate parameters, built once at startup"""

    base_rate: Decimal
    insurance_cost: Decimal
    insurance_discount: Decimal
    salary_client_discount: Decimal
    non_binary_refusal_enabled: bool = True
    gender_age_discount_enabled: bool = True


@dataclass(frozen=True)
class LoanRequest:
    """Pre-scoring loan request used to build the four offers"""

    amount: Decimal
    term: int
    first_name: str
    last_name: str
    birthdate: date
    middle_name: Optional[str] = None
    is_insurance_enabled: bool = False
    is_salary_client: bool = False


@dataclass(frozen=True)
class EmploymentRecord:
    """Applicant's current job"""

    employment_status: EmploymentStatus
    salary: Decimal
    position: Position
    work_experience_total: int  # months
    work_experience_current: int  # months
    employer_inn: Optional[str] = None


@dataclass(frozen=True)
class ScoringProfile:
    """Full scoring dataset for the credit calculation"""

    amount: Decimal
    term: int
    first_name: str
    last_name: str
    birthdate: date
    gender: Gender
    marital_status: MaritalStatus
    employment: EmploymentRecord
    passport_series: str
    passport_number: str
    middle_name: Optional[str] = None
    passport_issue_date: Optional[date] = None
    passport_issue_branch: Optional[str] = None
    dependent_amount: int = 0
    account_number: Optional[str] = None
    is_insurance_enabled: bool = False
    is_salary_client: bool = False


@dataclass(frozen=True)
class LoanOffer:
    """One of the four preliminary offers"""

    requested_amount: Decimal
    total_amount: Decimal
    term: int
    monthly_payment: Decimal
    rate: Decimal
    is_insurance_enabled: bool
    is_salary_client: bool


@dataclass(frozen=True)
class AmortizationEntry:
    """Single row of the payment schedule"""

    number: int
    date: date
    total_payment: Decimal
    interest_payment: Decimal
    debt_payment: Decimal
    remaining_debt: Decimal


@dataclass(frozen=True)
class CreditResult:
    """Output of the full credit calculation"""

    amount: Decimal
    term: int
    monthly_payment: Decimal
    rate: Decimal
    psk: Decimal
    is_insurance_enabled: bool
    is_salary_client: bool
    payment_schedule: Tuple[AmortizationEntry, ...]


@dataclass(frozen=True)
class Eligible:
    """Applicant passed every refusal rule"""


@dataclass(frozen=True)
class Refused:
    """Applicant failed a refusal rule"""

    code: str
    reason: str
