"""Sample data generators."""

from payment_schedule.generators.sample import PaymentBehavior, SampleLoanGenerator

__all__ = ["PaymentBehavior", "SampleLoanGenerator"]
