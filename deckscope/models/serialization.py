"""
Rendering of result records to JSON-compatible structures.

Every analyzer returns dataclasses. `to_dict` walks them recursively so an
outer layer can hand the result to json.dumps or an HTTP response without
knowing the record types.
"""

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def _key(value: object) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def to_json_value(value: object) -> Any:
    """
    Convert one value to its JSON-compatible form.

    - Enums become their values
    - Decimal amounts become floats
    - Sets and frozensets become sorted lists
    - Datetimes become ISO 8601 strings
    - Mappings (including read-only proxies) become dicts with string keys
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {_key(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, set | frozenset):
        return sorted(to_json_value(v) for v in value)
    if isinstance(value, list | tuple):
        return [to_json_value(v) for v in value]
    return value


def to_dict(record: object) -> dict[str, Any]:
    """
    Convert a result record to a dictionary for API responses.

    Args:
        record: Any dataclass instance produced by the engine

    Returns:
        Dict of field name to JSON-compatible value

    Raises:
        TypeError: If `record` is not a dataclass instance
    """
    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise TypeError(f"to_dict expects a dataclass instance, got {type(record).__name__}")
    return {
        field.name: to_json_value(getattr(record, field.name))
        for field in dataclasses.fields(record)
    }
