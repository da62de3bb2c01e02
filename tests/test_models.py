"""Tests for domain models."""

from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

import pytest

from payment_schedule.models import (
    AmortizationRow,
    Installment,
    InstallmentStatus,
    Loan,
    LoanStatus,
    PaymentRecord,
    PaymentStatus,
    ScheduleSummary,
)


class TestLoan:
    """Tests for Loan model."""

    def test_loan_defaults(self) -> None:
        loan = Loan(
            loan_id="loan-001",
            principal=Decimal("5000"),
            annual_interest_rate=Decimal("10"),
            term_months=10,
        )

        assert loan.status is LoanStatus.ACTIVE
        assert loan.disbursement_date is None
        assert loan.monthly_payment is None
        assert loan.loan_number is None

    @pytest.mark.parametrize(
        "status,expected",
        [
            (LoanStatus.PENDING, False),
            (LoanStatus.APPROVED, True),
            (LoanStatus.ACTIVE, True),
            (LoanStatus.COMPLETED, False),
            (LoanStatus.REJECTED, False),
            (LoanStatus.DEFAULTED, False),
        ],
    )
    def test_is_schedulable(self, sample_loan: Loan, status: LoanStatus, expected: bool) -> None:
        sample_loan.status = status

        assert sample_loan.is_schedulable is expected


class TestPaymentRecord:
    """Tests for PaymentRecord model."""

    def test_record_defaults(self) -> None:
        record = PaymentRecord(
            payment_number=1,
            amount=Decimal("100"),
            due_date="2024-01-01",
            status="pending",
        )

        assert record.paid_date is None
        assert record.payment_id is None
        assert record.loan_id is None


class TestInstallment:
    """Tests for Installment model."""

    def test_is_frozen(self) -> None:
        item = Installment(1, Decimal("100"), date(2024, 1, 1), InstallmentStatus.PENDING)

        with pytest.raises(FrozenInstanceError):
            item.status = InstallmentStatus.PAID

    def test_is_paid(self) -> None:
        paid = Installment(1, Decimal("100"), date(2024, 1, 1), InstallmentStatus.PAID)
        missed = Installment(2, Decimal("100"), date(2024, 2, 1), InstallmentStatus.MISSED)

        assert paid.is_paid
        assert not missed.is_paid


class TestInstallmentStatus:
    """Tests for the installment state machine."""

    def test_values_match_wire_format(self) -> None:
        assert [status.value for status in InstallmentStatus] == [
            "paid",
            "pending",
            "overdue",
            "missed",
        ]

    def test_time_driven_transitions(self) -> None:
        assert InstallmentStatus.PENDING.can_transition_to(InstallmentStatus.OVERDUE)
        assert InstallmentStatus.OVERDUE.can_transition_to(InstallmentStatus.MISSED)

    def test_every_unpaid_status_can_be_paid(self) -> None:
        for status in (InstallmentStatus.PENDING, InstallmentStatus.OVERDUE, InstallmentStatus.MISSED):
            assert status.can_transition_to(InstallmentStatus.PAID)

    def test_paid_is_terminal(self) -> None:
        for status in InstallmentStatus:
            assert not InstallmentStatus.PAID.can_transition_to(status)

    def test_no_backward_transitions(self) -> None:
        assert not InstallmentStatus.MISSED.can_transition_to(InstallmentStatus.OVERDUE)
        assert not InstallmentStatus.MISSED.can_transition_to(InstallmentStatus.PENDING)
        assert not InstallmentStatus.OVERDUE.can_transition_to(InstallmentStatus.PENDING)

    def test_is_payable(self) -> None:
        assert not InstallmentStatus.PAID.is_payable
        assert InstallmentStatus.PENDING.is_payable
        assert InstallmentStatus.OVERDUE.is_payable
        assert InstallmentStatus.MISSED.is_payable

    def test_compares_to_strings(self) -> None:
        assert InstallmentStatus.MISSED == "missed"


class TestPaymentStatus:
    """Tests for raw payment statuses."""

    def test_includes_review_states(self) -> None:
        assert PaymentStatus("awaiting_verification") is PaymentStatus.AWAITING_VERIFICATION
        assert PaymentStatus("rejected") is PaymentStatus.REJECTED


class TestResultModels:
    """Tests for calculator result models."""

    def test_amortization_row(self) -> None:
        row = AmortizationRow(
            month=1,
            due_date=date(2024, 2, 1),
            principal_payment=Decimal("90"),
            interest_payment=Decimal("10"),
            total_payment=Decimal("100"),
            remaining_balance=Decimal("910"),
        )

        assert row.total_payment == row.principal_payment + row.interest_payment

    def test_schedule_summary_defaults(self) -> None:
        summary = ScheduleSummary(total_installments=0)

        assert summary.counts == {}
        assert summary.paid_count == 0
        assert summary.next_payable is None
        assert summary.has_arrears is False
