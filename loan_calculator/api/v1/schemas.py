"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, Field, PlainSerializer

from loan_calculator.config import settings
from loan_calculator.domain.models import (
    CreditResult,
    EmploymentRecord,
    EmploymentStatus,
    Gender,
    LoanOffer,
    LoanRequest,
    MaritalStatus,
    Position,
    ScoringProfile,
)

# Money and rates are Decimal internally and plain JSON numbers on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def _not_in_future(value: date) -> date:
    if value > date.today():
        raise ValueError("must be a date in the past or present")
    return value


PastOrPresentDate = Annotated[date, AfterValidator(_not_in_future)]


class LoanRequestSchema(BaseModel):
    """Request body for POST /calculator/offers"""

    amount: Decimal = Field(..., ge=settings.min_loan_amount, description="Requested amount")
    term: int = Field(..., ge=settings.min_term_months, description="Term in months")
    first_name: str = Field(..., min_length=2, max_length=30)
    last_name: str = Field(..., min_length=2, max_length=30)
    middle_name: Optional[str] = Field(None, min_length=2, max_length=30)
    birthdate: PastOrPresentDate
    is_insurance_enabled: bool = False
    is_salary_client: bool = False

    def to_domain(self) -> LoanRequest:
        return LoanRequest(
            amount=self.amount,
            term=self.term,
            first_name=self.first_name,
            last_name=self.last_name,
            middle_name=self.middle_name,
            birthdate=self.birthdate,
            is_insurance_enabled=self.is_insurance_enabled,
            is_salary_client=self.is_salary_client,
        )


class EmploymentSchema(BaseModel):
    """Applicant employment block"""

    employment_status: EmploymentStatus
    employer_inn: Optional[str] = Field(None, pattern=r"^\d{10}(\d{2})?$")
    salary: Decimal = Field(..., gt=0)
    position: Position
    work_experience_total: int = Field(..., ge=0, description="Months")
    work_experience_current: int = Field(..., ge=0, description="Months")

    def to_domain(self) -> EmploymentRecord:
        return EmploymentRecord(
            employment_status=self.employment_status,
            employer_inn=self.employer_inn,
            salary=self.salary,
            position=self.position,
            work_experience_total=self.work_experience_total,
            work_experience_current=self.work_experience_current,
        )


class ScoringDataSchema(BaseModel):
    """Request body for POST /calculator/calc"""

    amount: Decimal = Field(..., ge=settings.min_scoring_amount)
    term: int = Field(..., ge=settings.min_term_months)
    first_name: str = Field(..., min_length=2, max_length=30)
    last_name: str = Field(..., min_length=2, max_length=30)
    middle_name: Optional[str] = Field(None, min_length=2, max_length=30)
    gender: Gender
    birthdate: PastOrPresentDate
    passport_series: str = Field(..., pattern=r"^\d{4}$")
    passport_number: str = Field(..., pattern=r"^\d{6}$")
    passport_issue_date: Optional[date] = None
    passport_issue_branch: Optional[str] = None
    marital_status: MaritalStatus
    dependent_amount: int = Field(0, ge=0)
    employment: EmploymentSchema
    account_number: Optional[str] = None
    is_insurance_enabled: bool = False
    is_salary_client: bool = False

    def to_domain(self) -> ScoringProfile:
        return ScoringProfile(
            amount=self.amount,
            term=self.term,
            first_name=self.first_name,
            last_name=self.last_name,
            middle_name=self.middle_name,
            birthdate=self.birthdate,
            gender=self.gender,
            marital_status=self.marital_status,
            employment=self.employment.to_domain(),
            passport_series=self.passport_series,
            passport_number=self.passport_number,
            passport_issue_date=self.passport_issue_date,
            passport_issue_branch=self.passport_issue_branch,
            dependent_amount=self.dependent_amount,
            account_number=self.account_number,
            is_insurance_enabled=self.is_insurance_enabled,
            is_salary_client=self.is_salary_client,
        )


class LoanOfferSchema(BaseModel):
    """Single offer in the response of POST /calculator/offers"""

    requested_amount: Money
    total_amount: Money
    term: int
    monthly_payment: Money
    rate: Money
    is_insurance_enabled: bool
    is_salary_client: bool

    @classmethod
    def from_domain(cls, offer: LoanOffer) -> "LoanOfferSchema":
        return cls(
            requested_amount=offer.requested_amount,
            total_amount=offer.total_amount,
            term=offer.term,
            monthly_payment=offer.monthly_payment,
            rate=offer.rate,
            is_insurance_enabled=offer.is_insurance_enabled,
            is_salary_client=offer.is_salary_client,
        )


class PaymentScheduleElementSchema(BaseModel):
    """Single row of the amortization schedule"""

    number: int
    date: date
    total_payment: Money
    interest_payment: Money
    debt_payment: Money
    remaining_debt: Money


class CreditSchema(BaseModel):
    """Response for POST /calculator/calc"""

    amount: Money
    term: int
    monthly_payment: Money
    rate: Money
    psk: Money
    is_insurance_enabled: bool
    is_salary_client: bool
    payment_schedule: List[PaymentScheduleElementSchema]

    @classmethod
    def from_domain(cls, credit: CreditResult) -> "CreditSchema":
        return cls(
            amount=credit.amount,
            term=credit.term,
            monthly_payment=credit.monthly_payment,
            rate=credit.rate,
            psk=credit.psk,
            is_insurance_enabled=credit.is_insurance_enabled,
            is_salary_client=credit.is_salary_client,
            payment_schedule=[
                PaymentScheduleElementSchema(
                    number=entry.number,
                    date=entry.date,
                    total_payment=entry.total_payment,
                    interest_payment=entry.interest_payment,
                    debt_payment=entry.debt_payment,
                    remaining_debt=entry.remaining_debt,
                )
                for entry in credit.payment_schedule
            ],
        )


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response"""

    message: str
    code: Optional[str] = None
