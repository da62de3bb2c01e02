"""Payment schedule derivation and amortization for loan servicing."""

from payment_schedule.engine import (
    build_payment_schedule,
    calculate_early_payoff,
    calculate_loan_summary,
    calculate_payoff_date,
    calculate_remaining_balance,
    compute_amortized_installment,
    compute_flat_installment,
    generate_amortization_schedule,
    generate_schedule,
    get_payment_breakdown,
    reconcile_statuses,
    summarize_schedule,
)
from payment_schedule.exceptions import (
    DataIntegrityWarning,
    InvalidAmountError,
    InvalidLoanTermsError,
    InvalidTermError,
    LoanNotSchedulableError,
    PaymentScheduleError,
)
from payment_schedule.models import (
    Installment,
    InstallmentStatus,
    Loan,
    LoanStatus,
    PaymentRecord,
)
from payment_schedule.payloads import loan_from_payload, payments_from_payload

__version__ = "0.1.0"

__all__ = [
    "DataIntegrityWarning",
    "Installment",
    "InstallmentStatus",
    "InvalidAmountError",
    "InvalidLoanTermsError",
    "InvalidTermError",
    "Loan",
    "LoanNotSchedulableError",
    "LoanStatus",
    "PaymentRecord",
    "PaymentScheduleError",
    "__version__",
    "build_payment_schedule",
    "calculate_early_payoff",
    "calculate_loan_summary",
    "calculate_payoff_date",
    "calculate_remaining_balance",
    "compute_amortized_installment",
    "compute_flat_installment",
    "generate_amortization_schedule",
    "generate_schedule",
    "get_payment_breakdown",
    "loan_from_payload",
    "payments_from_payload",
    "reconcile_statuses",
    "summarize_schedule",
]
