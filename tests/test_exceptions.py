"""Tests for custom exception hierarchy."""

from payment_schedule.exceptions import (
    ConfigurationError,
    DataIntegrityWarning,
    InvalidAmountError,
    InvalidLoanTermsError,
    InvalidTermError,
    LoanNotSchedulableError,
    PayloadError,
    PaymentScheduleError,
    SinkError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_is_exception(self) -> None:
        assert isinstance(PaymentScheduleError("test"), Exception)

    def test_validation_errors(self) -> None:
        for cls in (InvalidLoanTermsError, InvalidTermError, InvalidAmountError):
            err = cls("test")
            assert isinstance(err, ValidationError)
            assert isinstance(err, PaymentScheduleError)

    def test_loan_not_schedulable_is_base_error(self) -> None:
        assert isinstance(LoanNotSchedulableError("test"), PaymentScheduleError)
        assert not isinstance(LoanNotSchedulableError("test"), ValidationError)

    def test_payload_error_is_base_error(self) -> None:
        assert isinstance(PayloadError("test"), PaymentScheduleError)

    def test_configuration_error_is_base_error(self) -> None:
        assert isinstance(ConfigurationError("test"), PaymentScheduleError)

    def test_sink_error_is_base_error(self) -> None:
        assert isinstance(SinkError("test"), PaymentScheduleError)

    def test_data_integrity_is_warning_not_error(self) -> None:
        assert issubclass(DataIntegrityWarning, UserWarning)
        assert not issubclass(DataIntegrityWarning, PaymentScheduleError)

    def test_exception_message(self) -> None:
        err = InvalidLoanTermsError("Loan loan-001: term_months must be at least 1, got 0")
        assert str(err) == "Loan loan-001: term_months must be at least 1, got 0"
