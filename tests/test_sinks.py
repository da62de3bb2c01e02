"""Tests for sinks and serialization."""

import csv
import json
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import pytest

from payment_schedule.engine.amortization import generate_amortization_schedule
from payment_schedule.exceptions import SinkError
from payment_schedule.models import Installment, InstallmentStatus, ScheduleSummary
from payment_schedule.sinks import ConsoleSink, CsvFileSink, JsonFileSink
from payment_schedule.sinks.csv_file import AMORTIZATION_HEADERS
from payment_schedule.sinks.serialization import serialize_value, to_dict


@pytest.fixture
def installments() -> list[Installment]:
    return [
        Installment(1, Decimal("100.00"), date(2024, 2, 1), InstallmentStatus.PAID, date(2024, 1, 30)),
        Installment(2, Decimal("100.00"), date(2024, 3, 1), InstallmentStatus.MISSED),
    ]


class TestSerialization:
    """Tests for serialization helpers."""

    def test_serialize_decimal_keeps_cents(self) -> None:
        assert serialize_value(Decimal("10.50")) == "10.50"

    def test_serialize_enum(self) -> None:
        assert serialize_value(InstallmentStatus.OVERDUE) == "overdue"

    def test_serialize_dates(self) -> None:
        assert serialize_value(date(2024, 2, 1)) == "2024-02-01"
        assert serialize_value(datetime(2024, 2, 1, 9, 30)) == "2024-02-01T09:30:00"

    def test_serialize_enum_keys(self) -> None:
        assert serialize_value({InstallmentStatus.PAID: 2}) == {"paid": 2}

    def test_to_dict_installment(self, installments: list[Installment]) -> None:
        data = to_dict(installments[0])

        assert data == {
            "payment_number": 1,
            "amount": "100.00",
            "due_date": "2024-02-01",
            "status": "paid",
            "paid_date": "2024-01-30",
            "payment_id": None,
            "loan_id": None,
        }

    def test_to_dict_nested_summary(self, installments: list[Installment]) -> None:
        summary = ScheduleSummary(
            total_installments=2,
            counts={InstallmentStatus.PAID: 1, InstallmentStatus.MISSED: 1},
            next_payable=installments[1],
        )

        data = to_dict(summary)

        assert data["counts"] == {"paid": 1, "missed": 1}
        assert data["next_payable"]["status"] == "missed"

    def test_to_dict_plain_dict(self) -> None:
        assert to_dict({"amount": Decimal("1.00")}) == {"amount": "1.00"}

    def test_to_dict_other(self) -> None:
        assert to_dict(42) == {"value": "42"}


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        sink = ConsoleSink()

        assert sink.pretty is True
        assert sink.max_records is None

    def test_write_batch(self, installments: list[Installment], capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(pretty=False)

        sink.write_batch("installments", installments)
        captured = capsys.readouterr()

        assert "installments (2 records)" in captured.out
        assert '"status": "missed"' in captured.out

    def test_max_records(self, installments: list[Installment], capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(max_records=1)

        sink.write_batch("installments", installments)
        captured = capsys.readouterr()

        assert "... and 1 more records" in captured.out

    def test_close_summary(self, installments: list[Installment], capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink()
        sink.write_batch("installments", installments)
        sink.write_batch("installments", installments)

        sink.close()
        captured = capsys.readouterr()

        assert "installments: 4 records" in captured.out


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "out"

        JsonFileSink(target)

        assert target.is_dir()

    def test_write_batch(self, tmp_path: Path, installments: list[Installment]) -> None:
        sink = JsonFileSink(tmp_path, pretty=True)

        path = sink.write_batch("installments", installments)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert path == tmp_path / "installments.json"
        assert [item["status"] for item in data] == ["paid", "missed"]
        assert sink._counts["installments"] == 2

    def test_write_failure_raises_sink_error(
        self, tmp_path: Path, installments: list[Installment]
    ) -> None:
        sink = JsonFileSink(tmp_path)

        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(SinkError):
                sink.write_batch("installments", installments)


class TestCsvFileSink:
    """Tests for CsvFileSink."""

    def test_write_amortization(self, tmp_path: Path) -> None:
        rows = generate_amortization_schedule(120000, 12, 12, date(2024, 1, 15))

        path = CsvFileSink(tmp_path).write_amortization(rows)

        with open(path, encoding="utf-8", newline="") as f:
            lines = list(csv.reader(f))
        assert lines[0] == AMORTIZATION_HEADERS
        assert lines[1] == ["1", "2024-02-15", "9461.85", "1200.00", "10661.85", "110538.15"]
        assert len(lines) == 13
        assert lines[-1][-1] == "0.00"

    def test_custom_filename(self, tmp_path: Path) -> None:
        rows = generate_amortization_schedule(1200, 0, 2, date(2024, 1, 1))

        path = CsvFileSink(tmp_path).write_amortization(rows, "loan-42.csv")

        assert path.name == "loan-42.csv"
        assert path.exists()
