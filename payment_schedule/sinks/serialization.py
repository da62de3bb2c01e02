"""JSON-safe conversion of loans, installments and schedule summaries.

Money stays exact: ``Decimal`` amounts are written as strings
(``"10661.85"``), never floats. Statuses are written by value and dates
in ISO format. Status-keyed count maps have their keys converted too.
"""

from dataclasses import asdict, is_dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert a model instance or plain mapping to a JSON-safe dict.

    Anything else is wrapped as ``{"value": str(obj)}``.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj)
    if isinstance(obj, dict):
        return serialize_value(obj)
    return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a dataclass, including nested installments, field by field."""
    return {key: serialize_value(value) for key, value in asdict(obj).items()}


def serialize_value(value: Any) -> Any:
    """Serialize one value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    # datetime is a date subclass
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {serialize_value(k): serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
