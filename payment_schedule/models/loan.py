"""Loan, payment record and installment models."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from payment_schedule.models.enums import InstallmentStatus, LoanStatus

SCHEDULABLE_STATUSES = frozenset({LoanStatus.APPROVED, LoanStatus.ACTIVE})


@dataclass
class Loan:
    """Loan terms as seen by the schedule engine (read-only)."""

    loan_id: str
    principal: Decimal  # Amount borrowed or approved
    annual_interest_rate: Decimal  # Nominal percent, e.g. 12 for 12%
    term_months: int
    status: LoanStatus = LoanStatus.ACTIVE
    disbursement_date: date | None = None
    monthly_payment: Decimal | None = None  # Precomputed by the backend, if any
    loan_number: str | None = None

    @property
    def is_schedulable(self) -> bool:
        """Only approved and active loans carry a payment schedule."""
        return self.status in SCHEDULABLE_STATUSES


@dataclass
class PaymentRecord:
    """Payment record as reported by the payments endpoint.

    ``due_date`` and ``paid_date`` are kept as received (date, datetime,
    ISO string or None) so unusable values can be flagged during
    reconciliation instead of failing at load time.
    """

    payment_number: int
    amount: Decimal
    due_date: date | datetime | str | None
    status: str
    paid_date: date | datetime | str | None = None
    payment_id: str | int | None = None
    loan_id: str | None = None


@dataclass(frozen=True)
class Installment:
    """One scheduled payment obligation with its derived status."""

    payment_number: int  # 1, 2, 3, ...
    amount: Decimal
    due_date: date
    status: InstallmentStatus
    paid_date: date | None = None
    payment_id: str | int | None = None
    loan_id: str | None = None

    @property
    def is_paid(self) -> bool:
        return self.status is InstallmentStatus.PAID
