#!/usr/bin/env python3
"""Generate sample loans and their derived payment schedules.

Writes loans.json, payments.json, installments.json and summaries.json to
the output directory, plus one amortization CSV for the first loan.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from payment_schedule.config import PaymentScheduleConfig
from payment_schedule.engine import (
    build_payment_schedule,
    generate_amortization_schedule,
    summarize_schedule,
)
from payment_schedule.generators import PaymentBehavior, SampleLoanGenerator
from payment_schedule.logging import setup_logging
from payment_schedule.sinks import ConsoleSink, CsvFileSink, JsonFileSink
from payment_schedule.sinks.serialization import to_dict

logger = logging.getLogger("payment_schedule.scripts.generate_sample_schedules")

BEHAVIORS = {
    "default": PaymentBehavior,
    "reliable": PaymentBehavior.reliable,
    "delinquent": PaymentBehavior.delinquent,
}


def main() -> None:
    """Main entry point."""
    config = PaymentScheduleConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate sample payment schedules")
    parser.add_argument("--loans", type=int, default=10, help="Number of loans (default: 10)")
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="Classification date, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--behavior",
        choices=sorted(BEHAVIORS),
        default="default",
        help="Borrower payment behavior (default: default)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help="Directory for output files",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Print schedules to stdout instead of writing files",
    )
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)

    generator = SampleLoanGenerator(seed=args.seed)
    behavior = BEHAVIORS[args.behavior]()

    loans, payments, installments, summaries = [], [], [], []
    for loan, records in generator.generate_batch(args.loans, args.as_of, behavior):
        schedule = build_payment_schedule(
            loan, records, args.as_of, config.schedule.missed_after_days
        )
        loans.append(loan)
        payments.extend(records)
        installments.extend(schedule)
        summary = summarize_schedule(schedule)
        summaries.append({"loan_id": loan.loan_id, **to_dict(summary)})

    sink = ConsoleSink(max_records=5) if args.console else JsonFileSink(
        args.output_dir, pretty=config.output.pretty_json
    )
    sink.write_batch("loans", loans)
    sink.write_batch("payments", payments)
    sink.write_batch("installments", installments)
    sink.write_batch("summaries", summaries)
    sink.close()

    if loans and not args.console:
        first = loans[0]
        rows = generate_amortization_schedule(
            first.principal,
            first.annual_interest_rate,
            first.term_months,
            first.disbursement_date,
        )
        path = CsvFileSink(args.output_dir).write_amortization(rows)
        logger.info("Amortization table for %s written to %s", first.loan_number, path)


if __name__ == "__main__":
    main()
