"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from payment_schedule.models import Loan, LoanStatus, PaymentRecord


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def as_of() -> date:
    """Fixed classification date."""
    return date(2024, 6, 15)


@pytest.fixture
def sample_loan_id() -> str:
    """Sample loan ID."""
    return "loan-test-001"


@pytest.fixture
def sample_loan(sample_loan_id: str) -> Loan:
    """Active 12-month loan disbursed at the start of 2024."""
    return Loan(
        loan_id=sample_loan_id,
        principal=Decimal("120000"),
        annual_interest_rate=Decimal("12"),
        term_months=12,
        status=LoanStatus.ACTIVE,
        disbursement_date=date(2024, 1, 1),
    )


@pytest.fixture
def make_record():
    """Factory for payment records."""

    def _make(
        number: int,
        due_date,
        status: str = "pending",
        paid_date=None,
        amount: str = "100.00",
    ) -> PaymentRecord:
        return PaymentRecord(
            payment_number=number,
            amount=Decimal(amount),
            due_date=due_date,
            status=status,
            paid_date=paid_date,
            payment_id=f"pay-{number}",
            loan_id="loan-test-001",
        )

    return _make
