"""Payment schedule engine: generation, reconciliation and amortization math."""

from payment_schedule.engine.amortization import (
    calculate_early_payoff,
    calculate_loan_summary,
    calculate_payoff_date,
    calculate_remaining_balance,
    compute_amortized_installment,
    compute_flat_installment,
    generate_amortization_schedule,
    get_payment_breakdown,
)
from payment_schedule.engine.reconcile import classify_unpaid, reconcile_statuses
from payment_schedule.engine.schedule import (
    build_payment_schedule,
    generate_schedule,
    summarize_schedule,
)

__all__ = [
    "build_payment_schedule",
    "calculate_early_payoff",
    "calculate_loan_summary",
    "calculate_payoff_date",
    "calculate_remaining_balance",
    "classify_unpaid",
    "compute_amortized_installment",
    "compute_flat_installment",
    "generate_amortization_schedule",
    "generate_schedule",
    "get_payment_breakdown",
    "reconcile_statuses",
    "summarize_schedule",
]
