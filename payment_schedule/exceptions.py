"""Custom exception hierarchy for payment-schedule."""


class PaymentScheduleError(Exception):
    """Base exception for all payment-schedule errors."""


class ValidationError(PaymentScheduleError):
    """Raised when loan terms or calculator inputs are invalid."""


class InvalidLoanTermsError(ValidationError):
    """Raised when a loan has a nonpositive term or principal."""


class InvalidTermError(ValidationError):
    """Raised when an installment is requested over zero (or fewer) months."""


class InvalidAmountError(ValidationError):
    """Raised when a principal, rate or payment amount is negative."""


class LoanNotSchedulableError(PaymentScheduleError):
    """Raised when a loan's status does not take part in payment scheduling."""


class PayloadError(PaymentScheduleError):
    """Raised when a REST payload does not have a recognizable shape."""


class ConfigurationError(PaymentScheduleError):
    """Raised when configuration is invalid or missing."""


class SinkError(PaymentScheduleError):
    """Raised when a sink operation fails."""


class DataIntegrityWarning(UserWarning):
    """Issued when a payment record is unusable and skipped.

    Non-fatal: the remaining records are still classified.
    """
