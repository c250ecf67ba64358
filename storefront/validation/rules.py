"""
Rule builders for listing form fields.

Every builder returns a FieldRule: a pure function taking the raw form value
(a string, or None for an unselected dropdown) and returning an error message
or None. Rules never raise on malformed input; malformed input is an error
message.
"""
from __future__ import annotations

import math
import re
from datetime import date
from typing import Any, Callable, Iterable

from storefront.categories.base import FieldRule

_FOUR_DIGITS = re.compile(r"^[0-9]{4}$")
_DIGITS = re.compile(r"[0-9]+")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _parse_int(s: str) -> int | None:
    try:
        return int(s.strip())
    except ValueError:
        return None


def _parse_finite(s: str) -> float | None:
    try:
        v = float(s.strip())
    except ValueError:
        return None
    return v if math.isfinite(v) else None


def required_text(message: str, *, min_length: int = 1) -> FieldRule:
    def rule(value: Any) -> str | None:
        if len(_text(value).strip()) < min_length:
            return message
        return None
    return rule


def text_length(*, min_length: int, max_length: int, too_short: str, too_long: str) -> FieldRule:
    def rule(value: Any) -> str | None:
        n = len(_text(value).strip())
        if n < min_length:
            return too_short
        if n > max_length:
            return too_long
        return None
    return rule


def price_range(*, max_price: float, invalid: str = "Please enter a valid price") -> FieldRule:
    out_of_range = f"Please enter a valid price between 1 and {max_price:.0f}"

    def rule(value: Any) -> str | None:
        s = _text(value)
        price = _parse_finite(s) if s.strip() else None
        if price is None:
            return invalid
        if price <= 0 or price > max_price:
            return out_of_range
        return None
    return rule


def year_range(
    *,
    min_year: int,
    required: str,
    current_year: Callable[[], int] = lambda: date.today().year,
) -> FieldRule:
    def rule(value: Any) -> str | None:
        s = _text(value).strip()
        if not s:
            return required
        max_year = current_year()
        out_of_range = f"Please select a valid year between {min_year} and {max_year}"
        if not _FOUR_DIGITS.match(s):
            return out_of_range
        year = int(s)
        if year < min_year or year > max_year:
            return out_of_range
        return None
    return rule


def optional_non_negative_int(message: str = "Please enter a valid number") -> FieldRule:
    def rule(value: Any) -> str | None:
        s = _text(value)
        if not s.strip():
            return None
        n = _parse_int(s)
        if n is None or n < 0:
            return message
        return None
    return rule


def int_range(
    *,
    min_value: int,
    max_value: int,
    message: str,
    optional: bool = False,
) -> FieldRule:
    def rule(value: Any) -> str | None:
        s = _text(value)
        if not s.strip():
            return None if optional else message
        n = _parse_int(s)
        if n is None or n < min_value or n > max_value:
            return message
        return None
    return rule


def digits(message: str) -> FieldRule:
    def rule(value: Any) -> str | None:
        if not _DIGITS.fullmatch(_text(value).strip()):
            return message
        return None
    return rule


def one_of(choices: Iterable[str], message: str) -> FieldRule:
    allowed = frozenset(choices)

    def rule(value: Any) -> str | None:
        if not value or value not in allowed:
            return message
        return None
    return rule
