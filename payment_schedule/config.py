"""Configuration management for payment-schedule."""

from dataclasses import dataclass, field
from pathlib import Path

from payment_schedule.exceptions import ConfigurationError

DEFAULT_MISSED_AFTER_DAYS = 30
DEFAULT_CURRENCY_PLACES = 2


@dataclass
class ScheduleConfig:
    """Installment classification rules."""

    missed_after_days: int = DEFAULT_MISSED_AFTER_DAYS

    def __post_init__(self) -> None:
        if self.missed_after_days < 0:
            raise ConfigurationError(
                f"missed_after_days must be >= 0, got {self.missed_after_days}"
            )


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class PaymentScheduleConfig:
    """Main configuration for payment-schedule."""

    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "PaymentScheduleConfig":
        """Create config from environment variables."""
        import os

        try:
            schedule = ScheduleConfig(
                missed_after_days=int(
                    os.getenv("MISSED_AFTER_DAYS", str(DEFAULT_MISSED_AFTER_DAYS))
                ),
            )
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric setting: {exc}") from exc

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"Unknown LOG_FORMAT: {log_format}")

        return cls(
            schedule=schedule,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
