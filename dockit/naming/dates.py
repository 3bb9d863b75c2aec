"""Calendar date detection in scanned document filenames."""

from __future__ import annotations

import re
from datetime import date, datetime

from dockit.exceptions import InvalidDateError

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Separators left behind once a date token is cut out of a name.
_SEPARATORS = " _-."


def parse_date(text: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a date.

    Raises:
        InvalidDateError: If the text is not zero-padded ``YYYY-MM-DD`` or
            does not name a real calendar day.
    """
    value = text.strip()
    if not DATE_PATTERN.fullmatch(value):
        raise InvalidDateError("Invalid date format (YYYY-MM-DD)", {"value": text})
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date: {value}", {"value": text}) from exc


def is_valid_date(text: str) -> bool:
    try:
        parse_date(text)
    except InvalidDateError:
        return False
    return True


def extract_date(file_name: str) -> str | None:
    """Return the first ``YYYY-MM-DD`` token in ``file_name`` if it is a real date.

    Only the first match is considered; an invalid first match such as
    ``2024-13-40`` yields None even when a later token would be valid.
    """
    match = DATE_PATTERN.search(file_name)
    if match is None:
        return None
    token = match.group(0)
    return token if is_valid_date(token) else None


def strip_date(name: str, date_token: str) -> str:
    """Remove ``date_token`` from ``name`` along with the separators around it."""
    head, sep, tail = name.partition(date_token)
    if not sep:
        return name.strip(_SEPARATORS)
    head = head.rstrip(_SEPARATORS)
    tail = tail.lstrip(_SEPARATORS)
    if head and tail:
        return f"{head} {tail}"
    return (head or tail).strip(_SEPARATORS)
