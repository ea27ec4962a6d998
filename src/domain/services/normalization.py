"""Domain normalization helpers."""

from datetime import date
import re


_MONTH_KEY_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def month_key(day: date) -> str:
    """Return the YYYY-MM month key for a calendar day.

    Args:
        day: Calendar day.

    Returns:
        str: Month key used to partition transactions.
    """
    return f"{day.year:04d}-{day.month:02d}"


def is_month_key(value: str | None) -> bool:
    """Return True when the value is a well-formed YYYY-MM key."""
    if not value:
        return False
    return bool(_MONTH_KEY_PATTERN.match(value))


def normalize_category(category: str | None) -> str:
    """Normalize free-text category values.

    Args:
        category: Raw category entered by the user.

    Returns:
        str: Stripped category, empty string when missing.
    """
    if not category:
        return ""
    return category.strip()


__all__ = ["month_key", "is_month_key", "normalize_category"]
