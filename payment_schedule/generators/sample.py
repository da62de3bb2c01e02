"""Sample loans and payment histories for demos and scale checks."""

import random
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from payment_schedule.engine.amortization import compute_amortized_installment
from payment_schedule.engine.dates import add_months, resolve_as_of
from payment_schedule.generators.base import BaseGenerator
from payment_schedule.models.enums import LoanStatus, PaymentStatus
from payment_schedule.models.loan import Loan, PaymentRecord


@dataclass
class PaymentBehavior:
    """How a sample borrower pays.

    Attributes
    ----------
    pay_probability : float
        Chance that a due installment was paid.
    max_days_late : int
        Upper bound on days between due date and payment.
    awaiting_verification_rate : float
        Chance that a submitted payment is still waiting for lender review.
    malformed_rate : float
        Chance that a record's due date is corrupted.
    """

    pay_probability: float = 0.9
    max_days_late: int = 10
    awaiting_verification_rate: float = 0.05
    malformed_rate: float = 0.0

    @classmethod
    def reliable(cls) -> "PaymentBehavior":
        return cls(pay_probability=1.0, max_days_late=0, awaiting_verification_rate=0.0)

    @classmethod
    def delinquent(cls) -> "PaymentBehavior":
        return cls(pay_probability=0.4, max_days_late=25, awaiting_verification_rate=0.1)


class SampleLoanGenerator(BaseGenerator):
    """Generate sample loans and their payment records."""

    TERMS = [6, 12, 18, 24, 36, 48, 60]
    # Nominal annual percent
    RATE_RANGE = (0.0, 24.0)

    def generate_loan(
        self,
        as_of: date | None = None,
        status: LoanStatus = LoanStatus.ACTIVE,
    ) -> Loan:
        """Generate an active loan disbursed within the last two years."""
        today = resolve_as_of(as_of)
        principal = Decimal(random.randint(5, 100) * 1000)
        term_months = random.choice(self.TERMS)
        rate = Decimal(str(round(random.uniform(*self.RATE_RANGE), 2)))

        return Loan(
            loan_id=self.fake.uuid4(),
            principal=principal,
            annual_interest_rate=rate,
            term_months=term_months,
            status=status,
            disbursement_date=today - timedelta(days=random.randint(0, 730)),
            monthly_payment=compute_amortized_installment(principal, rate, term_months),
            loan_number=self.fake.bothify("LN-####-????").upper(),
        )

    def generate_payments(
        self,
        loan: Loan,
        as_of: date | None = None,
        behavior: PaymentBehavior | None = None,
    ) -> list[PaymentRecord]:
        """Generate payment records for every installment of ``loan``.

        Installments due after ``as_of`` stay pending. Records come back
        shuffled, the way an unordered endpoint would return them.
        """
        today = resolve_as_of(as_of)
        behavior = behavior or PaymentBehavior()
        anchor = loan.disbursement_date or today
        amount = loan.monthly_payment or compute_amortized_installment(
            loan.principal, loan.annual_interest_rate, loan.term_months
        )

        records = [
            self._record(loan, number, add_months(anchor, number), amount, today, behavior)
            for number in range(1, loan.term_months + 1)
        ]
        random.shuffle(records)
        return records

    def generate_batch(
        self,
        count: int,
        as_of: date | None = None,
        behavior: PaymentBehavior | None = None,
    ) -> Iterator[tuple[Loan, list[PaymentRecord]]]:
        """Yield ``count`` loans with their payment records."""
        for _ in range(count):
            loan = self.generate_loan(as_of)
            yield loan, self.generate_payments(loan, as_of, behavior)

    def _record(
        self,
        loan: Loan,
        number: int,
        due_date: date,
        amount: Decimal,
        today: date,
        behavior: PaymentBehavior,
    ) -> PaymentRecord:
        status = PaymentStatus.PENDING.value
        paid_date = None

        if due_date <= today and random.random() < behavior.pay_probability:
            submitted = min(today, due_date + timedelta(days=random.randint(0, behavior.max_days_late)))
            if random.random() < behavior.awaiting_verification_rate:
                status = PaymentStatus.AWAITING_VERIFICATION.value
            else:
                status = PaymentStatus.PAID.value
                paid_date = submitted.isoformat()

        raw_due: str | None = due_date.isoformat()
        if random.random() < behavior.malformed_rate:
            raw_due = random.choice([None, "", "not-a-date"])

        return PaymentRecord(
            payment_number=number,
            amount=amount,
            due_date=raw_due,
            status=status,
            paid_date=paid_date,
            payment_id=self.fake.uuid4(),
            loan_id=loan.loan_id,
        )
