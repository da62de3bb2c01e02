"""Domain models for payment schedules."""

from payment_schedule.models.enums import InstallmentStatus, LoanStatus, PaymentStatus
from payment_schedule.models.loan import Installment, Loan, PaymentRecord
from payment_schedule.models.schedule import (
    AmortizationRow,
    EarlyPayoff,
    LoanSummary,
    ScheduleSummary,
)

__all__ = [
    "AmortizationRow",
    "EarlyPayoff",
    "Installment",
    "InstallmentStatus",
    "Loan",
    "LoanStatus",
    "LoanSummary",
    "PaymentRecord",
    "PaymentStatus",
    "ScheduleSummary",
]
