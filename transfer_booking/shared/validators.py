"""Shared validation utilities"""

from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from dateutil import parser as date_parser


def is_blank(value: Any) -> bool:
    """True for values a form would submit when a field is left empty"""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(data: dict, required: Iterable[str]) -> list[str]:
    """Return the names of required fields that are absent or blank"""
    return [name for name in required if is_blank(data.get(name))]


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse a submitted date/time into a naive UTC datetime.

    Args:
        value: ISO-8601 string, datetime or empty value

    Returns:
        datetime or None when the value is empty

    Raises:
        ValueError: If the value cannot be read as a date
    """
    if is_blank(value):
        return None

    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = date_parser.parse(str(value))
        except (OverflowError, ValueError) as e:
            raise ValueError(f"Invalid date value: {value}") from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
