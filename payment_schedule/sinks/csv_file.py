"""CSV export of amortization tables."""

import csv
import logging
from pathlib import Path
from typing import Iterable

from payment_schedule.exceptions import SinkError
from payment_schedule.models.schedule import AmortizationRow

logger = logging.getLogger(__name__)

AMORTIZATION_HEADERS = [
    "Month",
    "Due Date",
    "Principal",
    "Interest",
    "Total Payment",
    "Remaining Balance",
]


def amortization_rows(rows: Iterable[AmortizationRow]) -> list[list[str]]:
    """Render amortization rows as CSV cells, amounts to two decimals."""
    return [
        [
            str(row.month),
            row.due_date.isoformat(),
            f"{row.principal_payment:.2f}",
            f"{row.interest_payment:.2f}",
            f"{row.total_payment:.2f}",
            f"{row.remaining_balance:.2f}",
        ]
        for row in rows
    ]


class CsvFileSink:
    """Write amortization tables as CSV files."""

    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write_amortization(
        self,
        rows: Iterable[AmortizationRow],
        filename: str = "amortization-schedule.csv",
    ) -> Path:
        """Write the table with a header row and return the file path."""
        file_path = self.output_dir / filename
        body = amortization_rows(rows)
        try:
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                writer.writerow(AMORTIZATION_HEADERS)
                writer.writerows(body)
        except OSError as exc:
            raise SinkError(f"Could not write {file_path}: {exc}") from exc

        logger.debug("Wrote %d amortization rows to %s", len(body), file_path)
        return file_path
