"""Payment schedule generation and summaries."""

import logging
from collections import Counter
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Sequence

from payment_schedule.config import DEFAULT_MISSED_AFTER_DAYS
from payment_schedule.engine.amortization import compute_flat_installment
from payment_schedule.engine.dates import add_months, resolve_as_of
from payment_schedule.engine.reconcile import PaymentLike, reconcile_statuses
from payment_schedule.exceptions import InvalidLoanTermsError, LoanNotSchedulableError
from payment_schedule.models.enums import InstallmentStatus, PaymentStatus
from payment_schedule.models.loan import Installment, Loan, PaymentRecord
from payment_schedule.models.schedule import ScheduleSummary

logger = logging.getLogger(__name__)


def validate_loan_terms(loan: Loan) -> None:
    """Raise :class:`InvalidLoanTermsError` for a nonpositive term or principal."""
    if loan.term_months < 1:
        raise InvalidLoanTermsError(
            f"Loan {loan.loan_id}: term_months must be at least 1, got {loan.term_months}"
        )
    if loan.principal is None or loan.principal <= 0:
        raise InvalidLoanTermsError(
            f"Loan {loan.loan_id}: principal must be positive, got {loan.principal}"
        )


def installment_amount(loan: Loan) -> Decimal:
    """Amount of each generated installment.

    Uses the backend's precomputed ``monthly_payment`` when the loan has
    one, otherwise the flat ``principal / term_months`` split.
    """
    if loan.monthly_payment:
        return loan.monthly_payment
    return compute_flat_installment(loan.principal, loan.term_months)


def generate_schedule(
    loan: Loan,
    as_of: date | datetime | None = None,
    missed_after_days: int = DEFAULT_MISSED_AFTER_DAYS,
) -> list[Installment]:
    """Synthesize a classified schedule for a loan with no payment records.

    Parameters
    ----------
    loan : Loan
        Loan terms. A missing ``disbursement_date`` anchors on ``as_of``.
    as_of : date | datetime | None
        Classification date (defaults to today, read on every call).
    missed_after_days : int
        Days past due after which an installment counts as missed.

    Returns
    -------
    list[Installment]
        Exactly ``loan.term_months`` installments, numbered from 1, due one
        calendar month apart.

    Raises
    ------
    InvalidLoanTermsError
        If the term or principal is not positive.
    """
    validate_loan_terms(loan)
    today = resolve_as_of(as_of)
    anchor = loan.disbursement_date or today
    amount = installment_amount(loan)

    records = [
        PaymentRecord(
            payment_number=number,
            amount=amount,
            due_date=add_months(anchor, number),
            status=PaymentStatus.PENDING.value,
            loan_id=loan.loan_id,
        )
        for number in range(1, loan.term_months + 1)
    ]

    logger.debug(
        "Generated %d-installment fallback schedule for loan %s from %s",
        loan.term_months,
        loan.loan_id,
        anchor,
    )
    return reconcile_statuses(records, today, missed_after_days)


def build_payment_schedule(
    loan: Loan,
    payments: Sequence[PaymentLike] | None = None,
    as_of: date | datetime | None = None,
    missed_after_days: int = DEFAULT_MISSED_AFTER_DAYS,
) -> list[Installment]:
    """Derive the schedule shown for a loan.

    Reconciles the backend's payment records when there are any, and
    falls back to :func:`generate_schedule` when there are none (including
    when the payments endpoint could not be reached).

    Raises
    ------
    LoanNotSchedulableError
        If the loan is not approved or active.
    InvalidLoanTermsError
        If the fallback is needed and the loan terms are invalid.
    """
    if not loan.is_schedulable:
        raise LoanNotSchedulableError(
            f"Loan {loan.loan_id} is {loan.status.value}; only approved or "
            "active loans have a payment schedule"
        )

    today = resolve_as_of(as_of)
    if payments:
        return reconcile_statuses(payments, today, missed_after_days)

    logger.info("No payment records for loan %s; using generated schedule", loan.loan_id)
    return generate_schedule(loan, today, missed_after_days)


def summarize_schedule(installments: Iterable[Installment]) -> ScheduleSummary:
    """Count installments per status and total paid and outstanding amounts.

    ``next_payable`` is the earliest unpaid installment by payment number.
    """
    items = sorted(installments, key=lambda item: item.payment_number)
    counts = Counter(item.status for item in items)

    paid = sum((item.amount for item in items if item.is_paid), Decimal("0"))
    outstanding = sum((item.amount for item in items if not item.is_paid), Decimal("0"))
    next_payable = next((item for item in items if item.status.is_payable), None)

    return ScheduleSummary(
        total_installments=len(items),
        counts={status: counts.get(status, 0) for status in InstallmentStatus},
        amount_paid=paid,
        amount_outstanding=outstanding,
        next_payable=next_payable,
    )
