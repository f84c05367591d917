"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from typing import Callable
from fastapi.testclient import TestClient
from loan_calculator.api.main import create_app
from loan_calculator.api.dependencies import get_rate_config
from loan_calculator.domain.models import (
    EmploymentRecord,
    EmploymentStatus,
    Gender,
    LoanRequest,
    MaritalStatus,
    Position,
    RateConfig,
    ScoringProfile,
)
from loan_calculator.utils.date_utils import add_months


# Fixed evaluation date so ages and due dates are deterministic
TODAY = date(2024, 6, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def rate_config() -> RateConfig:
    """Base 15%, insurance 100k flat cost with 3pt discount, salary client 1pt"""
    return RateConfig(
        base_rate=Decimal("15"),
        insurance_cost=Decimal("100000"),
        insurance_discount=Decimal("3"),
        salary_client_discount=Decimal("1"),
    )


@pytest.fixture
def client(rate_config: RateConfig) -> TestClient:
    """Create FastAPI test client with a fixed rate configuration"""
    app = create_app()
    app.dependency_overrides[get_rate_config] = lambda: rate_config
    return TestClient(app)


@pytest.fixture
def make_request() -> Callable[..., LoanRequest]:
    """Factory for loan requests with sensible defaults"""

    def _make(**overrides) -> LoanRequest:
        fields = dict(
            amount=Decimal("500000"),
            term=24,
            first_name="Anna",
            last_name="Smirnova",
            birthdate=date(1990, 3, 1),
        )
        fields.update(overrides)
        return LoanRequest(**fields)

    return _make


@pytest.fixture
def make_profile() -> Callable[..., ScoringProfile]:
    """
    Factory for scoring profiles.

    Defaults describe an eligible 40-year-old married employed woman, which
    gives 15 - 3 (married) - 3 (age band) = 9% on the default config.
    Pass `employment` overrides as a dict to tweak single job fields.
    """

    def _make(employment: dict | None = None, **overrides) -> ScoringProfile:
        job = dict(
            employment_status=EmploymentStatus.EMPLOYED,
            salary=Decimal("50000"),
            position=Position.WORKER,
            work_experience_total=36,
            work_experience_current=12,
        )
        job.update(employment or {})

        fields = dict(
            amount=Decimal("200000"),
            term=12,
            first_name="Anna",
            last_name="Smirnova",
            birthdate=add_months(TODAY, -12 * 40),
            gender=Gender.FEMALE,
            marital_status=MaritalStatus.MARRIED,
            employment=EmploymentRecord(**job),
            passport_series="1234",
            passport_number="567890",
        )
        fields.update(overrides)
        return ScoringProfile(**fields)

    return _make
