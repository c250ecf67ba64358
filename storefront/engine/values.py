"""
Boundary conversions between wire values and form values.

Form values are what inputs hold: strings for text/numeric fields and the
selected choice (or None) for dropdowns. Wire values are what the listing
endpoints send and accept. Validation and diffing work on form values;
only payload building and draft seeding cross the boundary.
"""
from __future__ import annotations

import math
import re
from typing import Any

from storefront.categories.base import CategorySpec, FieldSpec
from storefront.schemas.listing import ListingDetail

FormValue = str | None
FormValues = dict[str, FormValue]

_NON_DIGITS = re.compile(r"[^0-9]")


def _format_number(v: int | float) -> str:
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def format_wire_value(spec: FieldSpec, value: Any) -> FormValue:
    if spec.kind == "enum":
        return str(value) if value else None
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        if spec.zero_is_unset and value == 0:
            return ""
        return _format_number(value)
    return str(value)


def parse_form_value(spec: FieldSpec, raw: FormValue) -> Any:
    """
    Convert a validated form value to its wire type.

    Callers validate first; an unparseable value here is a programming error
    and raises ValueError.
    """
    if spec.kind == "enum":
        return raw or None

    s = (raw or "").strip()
    if spec.kind == "text":
        return s
    if not s:
        if spec.optional:
            return None
        raise ValueError(f"Required field {spec.name} is empty")
    if spec.kind == "integer":
        return int(s)

    number = float(s)
    if not math.isfinite(number):
        raise ValueError(f"Field {spec.name} is not a finite number: {raw!r}")
    return int(number) if number.is_integer() else number


def sanitize_input(spec: FieldSpec, raw: FormValue) -> FormValue:
    """Apply the input filters a form control applies to typed text."""
    if raw is None or spec.kind == "enum":
        return raw
    s = raw
    if spec.digits_only:
        s = _NON_DIGITS.sub("", s)
    if spec.uppercase:
        s = s.upper()
    if spec.max_length is not None:
        s = s[: spec.max_length]
    return s


def form_values_from_detail(category: CategorySpec, detail: ListingDetail) -> FormValues:
    wire = detail.wire_values()
    return {f.name: format_wire_value(f, wire.get(f.wire)) for f in category.fields}
