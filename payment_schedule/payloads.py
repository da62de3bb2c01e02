"""Adapters from loan-servicing REST payloads to engine models.

The backend answers ``GET /loans/{id}`` with either ``{"loan": {...}}`` or
the bare loan object, and ``GET /loans/{id}/payments`` with
``{"payments": {"data": [...]}}``, ``{"payments": [...]}`` or a bare list.
"""

import logging
import warnings
from typing import Any, Mapping

from payment_schedule.engine.amortization import to_decimal
from payment_schedule.engine.dates import coerce_date
from payment_schedule.exceptions import DataIntegrityWarning, InvalidAmountError, PayloadError
from payment_schedule.models.enums import LoanStatus, PaymentStatus
from payment_schedule.models.loan import Loan, PaymentRecord

logger = logging.getLogger(__name__)

# Checked in order; the first non-empty value wins
PRINCIPAL_FIELDS = ("principal_amount", "approved_amount", "amount")
ANCHOR_FIELDS = ("disbursement_date", "start_date")


def _first_present(data: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = data.get(key)
        if value not in (None, ""):
            return value
    return None


def loan_from_payload(payload: Mapping[str, Any]) -> Loan:
    """Build a :class:`Loan` from a ``GET /loans/{id}`` response body.

    Raises
    ------
    PayloadError
        If the payload is not an object or a required field is missing or
        unreadable.
    """
    if not isinstance(payload, Mapping):
        raise PayloadError(f"Loan payload must be an object, got {type(payload).__name__}")
    data = payload.get("loan", payload)
    if not isinstance(data, Mapping):
        raise PayloadError("Loan payload 'loan' field must be an object")

    loan_id = data.get("id", data.get("loan_id"))
    if loan_id is None:
        raise PayloadError("Loan payload has no id")

    principal = _first_present(data, PRINCIPAL_FIELDS)
    if principal is None:
        raise PayloadError(f"Loan {loan_id} has none of {', '.join(PRINCIPAL_FIELDS)}")

    try:
        term_months = int(data["term_months"])
    except KeyError as exc:
        raise PayloadError(f"Loan {loan_id} has no term_months") from exc
    except (TypeError, ValueError) as exc:
        raise PayloadError(f"Loan {loan_id} term_months is not an integer") from exc

    raw_status = str(data.get("status") or LoanStatus.PENDING.value).lower()
    try:
        status = LoanStatus(raw_status)
    except ValueError as exc:
        raise PayloadError(f"Loan {loan_id} has unknown status {raw_status!r}") from exc

    monthly = data.get("monthly_payment")
    try:
        loan = Loan(
            loan_id=str(loan_id),
            principal=to_decimal(principal, "principal"),
            annual_interest_rate=to_decimal(data.get("interest_rate") or 0, "interest_rate"),
            term_months=term_months,
            status=status,
            disbursement_date=coerce_date(_first_present(data, ANCHOR_FIELDS)),
            monthly_payment=to_decimal(monthly, "monthly_payment") if monthly else None,
            loan_number=data.get("loan_number"),
        )
    except InvalidAmountError as exc:
        raise PayloadError(f"Loan {loan_id}: {exc}") from exc

    return loan


def _payment_items(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping):
        payments = payload.get("payments")
        if isinstance(payments, Mapping) and isinstance(payments.get("data"), list):
            return payments["data"]
        if isinstance(payments, list):
            return payments
    raise PayloadError("Payments payload has no list of payments")


def payments_from_payload(payload: Any) -> list[PaymentRecord]:
    """Build payment records from a ``GET /loans/{id}/payments`` body.

    Items without a usable ``payment_number`` or ``amount`` are skipped
    with a :class:`DataIntegrityWarning`. Dates are passed through raw and
    checked during reconciliation.

    Raises
    ------
    PayloadError
        If no list of payments can be found in the payload.
    """
    records = []
    for position, item in enumerate(_payment_items(payload), start=1):
        if not isinstance(item, Mapping):
            _skip(position, "is not an object")
            continue
        try:
            number = int(item["payment_number"])
        except (KeyError, TypeError, ValueError):
            _skip(position, "has no usable payment_number", payment_id=item.get("id"))
            continue
        try:
            amount = to_decimal(item.get("amount") or 0, "amount")
        except InvalidAmountError:
            _skip(
                position,
                f"has an unreadable amount ({item.get('amount')!r})",
                payment_id=item.get("id"),
            )
            continue

        loan = item.get("loan")
        loan_id = item.get("loan_id")
        if loan_id is None and isinstance(loan, Mapping):
            loan_id = loan.get("id")

        records.append(
            PaymentRecord(
                payment_number=number,
                amount=amount,
                due_date=item.get("due_date"),
                status=str(item.get("status") or PaymentStatus.PENDING.value),
                paid_date=item.get("paid_date"),
                payment_id=item.get("id"),
                loan_id=str(loan_id) if loan_id is not None else None,
            )
        )

    logger.debug("Parsed %d payment records", len(records))
    return records


def _skip(position: int, problem: str, payment_id: object = None) -> None:
    message = f"Payment item {position} {problem}; skipped"
    logger.warning(
        message, extra={"extra": {"item_position": position, "payment_id": payment_id}}
    )
    warnings.warn(message, DataIntegrityWarning, stacklevel=3)
