"""Field checks shared by the entities. Each raises ValueError with the given message."""

import re
from collections.abc import Callable
from datetime import datetime

_TEN_DIGITS = re.compile(r"[0-9]{10}")

Check = Callable[[object], None]


def max_length(limit: int, message: str) -> Check:
    """Reject None, non-strings, and strings longer than limit characters."""

    def check(value: object) -> None:
        if not isinstance(value, str) or len(value) > limit:
            raise ValueError(message)

    return check


def non_blank_max_length(limit: int, message: str) -> Check:
    """Like max_length, but also reject values that are empty after stripping."""

    def check(value: object) -> None:
        if not isinstance(value, str) or not value.strip() or len(value) > limit:
            raise ValueError(message)

    return check


def ten_digits(message: str) -> Check:
    def check(value: object) -> None:
        if not isinstance(value, str) or _TEN_DIGITS.fullmatch(value) is None:
            raise ValueError(message)

    return check


def is_future(value: datetime) -> bool:
    """True when value is strictly after now. Aware values compare in their own zone."""
    now = datetime.now(value.tzinfo) if value.tzinfo is not None else datetime.now()
    return value > now
