"""Output sinks for exporting schedules."""

from payment_schedule.sinks.console import ConsoleSink
from payment_schedule.sinks.csv_file import CsvFileSink
from payment_schedule.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "CsvFileSink", "JsonFileSink"]
