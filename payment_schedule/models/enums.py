"""Enumeration types for loans, payment records and installments."""

from enum import Enum


class LoanStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    ACTIVE = "active"
    COMPLETED = "completed"
    REJECTED = "rejected"
    DEFAULTED = "defaulted"


class PaymentStatus(str, Enum):
    """Raw statuses the payments endpoint reports."""

    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"
    MISSED = "missed"
    AWAITING_VERIFICATION = "awaiting_verification"
    REJECTED = "rejected"


class InstallmentStatus(str, Enum):
    """Derived status of a scheduled installment.

    ``PENDING -> OVERDUE -> MISSED`` happens as time passes; any unpaid
    status moves to ``PAID`` when a payment is recorded. ``PAID`` is
    terminal. ``MISSED`` only ever leaves for ``PAID``.
    """

    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"
    MISSED = "missed"

    @property
    def is_payable(self) -> bool:
        """Whether a borrower can still submit a payment for it."""
        return self is not InstallmentStatus.PAID

    def can_transition_to(self, target: "InstallmentStatus") -> bool:
        """Check whether moving from this status to ``target`` is allowed."""
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[InstallmentStatus, frozenset[InstallmentStatus]] = {
    InstallmentStatus.PENDING: frozenset(
        {InstallmentStatus.OVERDUE, InstallmentStatus.MISSED, InstallmentStatus.PAID}
    ),
    InstallmentStatus.OVERDUE: frozenset({InstallmentStatus.MISSED, InstallmentStatus.PAID}),
    InstallmentStatus.MISSED: frozenset({InstallmentStatus.PAID}),
    InstallmentStatus.PAID: frozenset(),
}
