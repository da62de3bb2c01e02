"""Calculator and summary result models."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from payment_schedule.models.enums import InstallmentStatus
from payment_schedule.models.loan import Installment


@dataclass(frozen=True)
class AmortizationRow:
    """One month of an amortization table."""

    month: int
    due_date: date
    principal_payment: Decimal
    interest_payment: Decimal
    total_payment: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class LoanSummary:
    """Headline figures for a loan quote."""

    monthly_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
    effective_interest_rate: Decimal


@dataclass(frozen=True)
class EarlyPayoff:
    """Outcome of paying a fixed extra amount every month."""

    months: int
    interest_saved: Decimal
    new_total_cost: Decimal


@dataclass
class ScheduleSummary:
    """Status counts and totals over a derived schedule."""

    total_installments: int
    counts: dict[InstallmentStatus, int] = field(default_factory=dict)
    amount_paid: Decimal = Decimal("0")
    amount_outstanding: Decimal = Decimal("0")
    next_payable: Installment | None = None

    @property
    def paid_count(self) -> int:
        return self.counts.get(InstallmentStatus.PAID, 0)

    @property
    def remaining_count(self) -> int:
        return self.total_installments - self.paid_count

    @property
    def has_arrears(self) -> bool:
        """True when any installment is overdue or missed."""
        return bool(
            self.counts.get(InstallmentStatus.OVERDUE, 0)
            or self.counts.get(InstallmentStatus.MISSED, 0)
        )
