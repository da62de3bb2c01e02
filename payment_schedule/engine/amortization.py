"""Installment amounts and amortization tables.

Two ways of sizing an installment live here:

- :func:`compute_flat_installment` divides the principal evenly across the
  term with no interest. The fallback schedule uses it.
- :func:`compute_amortized_installment` is the standard annuity formula
  ``M = P * r(1+r)^n / ((1+r)^n - 1)`` with ``r = annual% / 100 / 12``.
  Loan calculators and pre-approval quotes use it.

All arithmetic is done in ``Decimal``; results are rounded half-up to cents.
"""

import logging
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from payment_schedule.config import DEFAULT_CURRENCY_PLACES
from payment_schedule.engine.dates import add_months, resolve_as_of
from payment_schedule.exceptions import InvalidAmountError, InvalidTermError
from payment_schedule.models.schedule import AmortizationRow, EarlyPayoff, LoanSummary

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
# Safety limit for the early payoff simulation (50 years)
MAX_PAYOFF_MONTHS = 600


def to_decimal(value: object, name: str = "amount") -> Decimal:
    """Convert an int, float, str or Decimal to ``Decimal``."""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidAmountError(f"{name} is not a number: {value!r}") from exc
    if not result.is_finite():
        raise InvalidAmountError(f"{name} must be finite, got {value!r}")
    return result


def round_currency(value: Decimal, places: int = DEFAULT_CURRENCY_PLACES) -> Decimal:
    """Round half-up to ``places`` decimal places."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _validate_term(term_months: int) -> None:
    if term_months <= 0:
        raise InvalidTermError(f"term_months must be at least 1, got {term_months}")


def _non_negative(value: object, name: str) -> Decimal:
    result = to_decimal(value, name)
    if result < 0:
        raise InvalidAmountError(f"{name} must not be negative, got {result}")
    return result


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """Convert a nominal annual percentage into a monthly fraction."""
    return annual_rate_percent / 100 / 12


def _exact_payment(principal: Decimal, rate: Decimal, term_months: int) -> Decimal:
    if rate == 0:
        return principal / term_months
    factor = (1 + rate) ** term_months
    return principal * (rate * factor) / (factor - 1)


def compute_flat_installment(
    principal: object,
    term_months: int,
    places: int = DEFAULT_CURRENCY_PLACES,
) -> Decimal:
    """Divide the principal evenly over the term, ignoring interest.

    Parameters
    ----------
    principal : object
        Amount borrowed (int, float, str or Decimal).
    term_months : int
        Number of installments.
    places : int
        Decimal places to round to.

    Returns
    -------
    Decimal
        ``principal / term_months`` rounded to cents.
    """
    _validate_term(term_months)
    amount = _non_negative(principal, "principal")
    return round_currency(amount / term_months, places)


def compute_amortized_installment(
    principal: object,
    annual_rate_percent: object,
    term_months: int,
    places: int = DEFAULT_CURRENCY_PLACES,
) -> Decimal:
    """Compute the fixed monthly payment that amortizes a loan.

    Parameters
    ----------
    principal : object
        Amount borrowed.
    annual_rate_percent : object
        Nominal annual interest rate in percent (12 means 12%).
    term_months : int
        Number of monthly payments.
    places : int
        Decimal places to round to.

    Returns
    -------
    Decimal
        Monthly payment rounded half-up.

    Raises
    ------
    InvalidTermError
        If ``term_months`` is zero or negative.
    InvalidAmountError
        If ``principal`` or ``annual_rate_percent`` is negative.
    """
    _validate_term(term_months)
    amount = _non_negative(principal, "principal")
    rate = monthly_rate(_non_negative(annual_rate_percent, "annual_rate_percent"))
    return round_currency(_exact_payment(amount, rate, term_months), places)


def generate_amortization_schedule(
    principal: object,
    annual_rate_percent: object,
    term_months: int,
    start_date: date | datetime | None = None,
) -> list[AmortizationRow]:
    """Build the month-by-month amortization table.

    The final row pays off whatever balance is left so rounding never
    leaves a residue. Row ``i`` is due ``i`` months after ``start_date``
    (today when not given).
    """
    _validate_term(term_months)
    amount = _non_negative(principal, "principal")
    rate = monthly_rate(_non_negative(annual_rate_percent, "annual_rate_percent"))
    payment = _exact_payment(amount, rate, term_months)
    anchor = resolve_as_of(start_date)

    rows: list[AmortizationRow] = []
    balance = amount
    for month in range(1, term_months + 1):
        interest = balance * rate
        principal_payment = payment - interest
        if month == term_months:
            principal_payment = balance
        balance -= principal_payment

        principal_part = round_currency(max(ZERO, principal_payment))
        interest_part = round_currency(interest)
        rows.append(
            AmortizationRow(
                month=month,
                due_date=add_months(anchor, month),
                principal_payment=principal_part,
                interest_payment=interest_part,
                total_payment=principal_part + interest_part,
                remaining_balance=round_currency(max(ZERO, balance)),
            )
        )

    logger.debug(
        "Built amortization table: principal=%s rate=%s%% term=%d",
        amount,
        annual_rate_percent,
        term_months,
    )
    return rows


def calculate_loan_summary(
    principal: object,
    annual_rate_percent: object,
    term_months: int,
) -> LoanSummary:
    """Summarize monthly payment, total cost and total interest."""
    _validate_term(term_months)
    amount = _non_negative(principal, "principal")
    annual = _non_negative(annual_rate_percent, "annual_rate_percent")
    payment = _exact_payment(amount, monthly_rate(annual), term_months)
    total = payment * term_months

    return LoanSummary(
        monthly_payment=round_currency(payment),
        total_payment=round_currency(total),
        total_interest=round_currency(total - amount),
        effective_interest_rate=annual,
    )


def calculate_remaining_balance(
    principal: object,
    annual_rate_percent: object,
    term_months: int,
    payments_completed: int,
) -> Decimal:
    """Balance left after ``payments_completed`` scheduled payments."""
    _validate_term(term_months)
    amount = _non_negative(principal, "principal")
    _non_negative(annual_rate_percent, "annual_rate_percent")
    if payments_completed <= 0:
        return round_currency(amount)
    if payments_completed >= term_months:
        return ZERO
    rows = generate_amortization_schedule(principal, annual_rate_percent, term_months)
    return rows[payments_completed - 1].remaining_balance


def get_payment_breakdown(
    principal: object,
    annual_rate_percent: object,
    term_months: int,
    payment_number: int,
) -> tuple[Decimal, Decimal]:
    """Split one scheduled payment into ``(principal, interest)``.

    Payment numbers outside ``1..term_months`` yield ``(0, 0)``.
    """
    rows = generate_amortization_schedule(principal, annual_rate_percent, term_months)
    if payment_number < 1 or payment_number > len(rows):
        return ZERO, ZERO
    row = rows[payment_number - 1]
    return row.principal_payment, row.interest_payment


def calculate_payoff_date(
    principal: object,
    annual_rate_percent: object,
    term_months: int,
    start_date: date | datetime | None = None,
) -> date:
    """Due date of the final scheduled payment."""
    rows = generate_amortization_schedule(
        principal, annual_rate_percent, term_months, start_date
    )
    return rows[-1].due_date


def calculate_early_payoff(
    principal: object,
    annual_rate_percent: object,
    term_months: int,
    extra_monthly_payment: object,
) -> EarlyPayoff:
    """Simulate paying ``extra_monthly_payment`` on top of every installment.

    Stops after :data:`MAX_PAYOFF_MONTHS` if the balance never clears.
    """
    _validate_term(term_months)
    amount = _non_negative(principal, "principal")
    annual = _non_negative(annual_rate_percent, "annual_rate_percent")
    extra = _non_negative(extra_monthly_payment, "extra_monthly_payment")
    rate = monthly_rate(annual)
    total_monthly = _exact_payment(amount, rate, term_months) + extra

    balance = amount
    months = 0
    interest_paid = ZERO
    # Exact division leaves sub-cent residue after the final payment
    while round_currency(balance) > 0 and months < MAX_PAYOFF_MONTHS:
        interest = balance * rate
        principal_payment = min(balance, total_monthly - interest)
        balance -= principal_payment
        interest_paid += interest
        months += 1

    if round_currency(balance) > 0:
        logger.warning(
            "Early payoff simulation hit %d-month limit with %s outstanding",
            MAX_PAYOFF_MONTHS,
            round_currency(balance),
        )

    standard = calculate_loan_summary(amount, annual, term_months)
    return EarlyPayoff(
        months=months,
        interest_saved=standard.total_interest - round_currency(interest_paid),
        new_total_cost=round_currency(amount + interest_paid),
    )
