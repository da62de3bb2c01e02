"""Installment status reconciliation.

Takes payment-like records (backend payment records, a synthesized
fallback schedule, or previously derived installments) and assigns each
one of ``paid``, ``pending``, ``overdue`` or ``missed`` relative to an
as-of date.
"""

import logging
import warnings
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Protocol

from payment_schedule.config import DEFAULT_MISSED_AFTER_DAYS
from payment_schedule.engine.amortization import to_decimal
from payment_schedule.engine.dates import coerce_date, days_between, resolve_as_of
from payment_schedule.exceptions import DataIntegrityWarning, InvalidAmountError
from payment_schedule.models.enums import InstallmentStatus
from payment_schedule.models.loan import Installment

logger = logging.getLogger(__name__)


class PaymentLike(Protocol):
    """Anything carrying the fields reconciliation reads."""

    payment_number: int
    amount: Any
    due_date: Any
    paid_date: Any
    status: Any


def _status_text(status: object) -> str:
    value = getattr(status, "value", status)
    return str(value).strip().lower() if value is not None else ""


def is_recorded_paid(record: PaymentLike) -> bool:
    """A record counts as paid if its status says so or it has a paid date."""
    return _status_text(record.status) == "paid" or bool(record.paid_date)


def classify_unpaid(
    due_date: date,
    today: date,
    missed_after_days: int = DEFAULT_MISSED_AFTER_DAYS,
) -> InstallmentStatus:
    """Classify an unpaid installment at or beyond the payment frontier.

    Due today or later is pending. Past due by ``missed_after_days`` or
    fewer days is overdue; any later is missed.
    """
    if due_date >= today:
        return InstallmentStatus.PENDING
    days_past = days_between(due_date, today)
    if days_past > missed_after_days:
        return InstallmentStatus.MISSED
    return InstallmentStatus.OVERDUE


def _flag(
    record: PaymentLike,
    problem: str,
    outcome: str = "excluded from schedule",
    stacklevel: int = 4,
) -> None:
    number = getattr(record, "payment_number", None)
    message = f"Payment #{number if number is not None else '?'} {problem}; {outcome}"
    logger.warning(
        message,
        extra={"extra": {"payment_number": number, "loan_id": getattr(record, "loan_id", None)}},
    )
    warnings.warn(message, DataIntegrityWarning, stacklevel=stacklevel)


def _usable_records(
    payments: Iterable[PaymentLike],
) -> list[tuple[PaymentLike, date, Decimal]]:
    usable = []
    for record in payments:
        due = coerce_date(record.due_date)
        if due is None:
            _flag(record, f"has no usable due date ({record.due_date!r})")
            continue
        try:
            amount = _amount(record.amount)
        except InvalidAmountError:
            _flag(record, f"has an unreadable amount ({record.amount!r})")
            continue
        usable.append((record, due, amount))
    return usable


def reconcile_statuses(
    payments: Iterable[PaymentLike],
    as_of: date | datetime | None = None,
    missed_after_days: int = DEFAULT_MISSED_AFTER_DAYS,
) -> list[Installment]:
    """Derive the display status of every installment.

    Parameters
    ----------
    payments : Iterable[PaymentLike]
        Payment records in any order.
    as_of : date | datetime | None
        Classification date. Defaults to the current date, read on every call.
    missed_after_days : int
        Days past due after which an installment counts as missed.

    Returns
    -------
    list[Installment]
        Installments ordered by ``payment_number``.

    Notes
    -----
    Records with a missing or unparseable due date are skipped with a
    :class:`DataIntegrityWarning`. A paid record whose paid date cannot be
    read stays paid, with a warning and no ``paid_date``.

    An unpaid record that sorts before the last paid one is reported as
    ``pending`` whatever its due date. This hides an overdue installment
    sitting behind a later paid one; it is kept as-is pending a product
    decision.
    """
    today = resolve_as_of(as_of)
    # sorted() is stable, so duplicate payment numbers keep input order
    ordered = sorted(_usable_records(payments), key=lambda item: item[0].payment_number)

    last_paid_index = -1
    for index, (record, _, _) in enumerate(ordered):
        if is_recorded_paid(record):
            last_paid_index = index

    installments = []
    for index, (record, due, amount) in enumerate(ordered):
        paid_date = None
        if is_recorded_paid(record):
            status = InstallmentStatus.PAID
            paid_date = coerce_date(record.paid_date)
            if paid_date is None and record.paid_date:
                _flag(
                    record,
                    f"has an unreadable paid date ({record.paid_date!r})",
                    outcome="kept as paid without a paid date",
                    stacklevel=3,
                )
        elif index <= last_paid_index:
            status = InstallmentStatus.PENDING
        else:
            status = classify_unpaid(due, today, missed_after_days)

        installments.append(
            Installment(
                payment_number=record.payment_number,
                amount=amount,
                due_date=due,
                status=status,
                paid_date=paid_date,
                payment_id=getattr(record, "payment_id", None),
                loan_id=getattr(record, "loan_id", None),
            )
        )

    logger.debug(
        "Reconciled %d installments as of %s (last paid index %d)",
        len(installments),
        today,
        last_paid_index,
    )
    return installments


def _amount(value: object) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    return to_decimal(value, "amount")
