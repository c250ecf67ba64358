from __future__ import annotations

from typing import Any, Mapping

from storefront.categories.base import CategorySpec
from storefront.categories.registry import get_category


def validate_field(category: str | CategorySpec, field: str, value: Any) -> str | None:
    """
    Run a single field rule. Fields without a rule are always valid.
    Raises KeyError for an unknown category.
    """
    spec = get_category(category)
    rule = spec.rules.get(field)
    if rule is None:
        return None
    return rule(value)


def validate_form(category: str | CategorySpec, values: Mapping[str, Any]) -> dict[str, str]:
    """
    Apply every rule of the category to `values` and return only the failures.

    Fields missing from `values` are validated as empty so that a partial
    draft cannot slip past required-field rules.
    """
    spec = get_category(category)
    errors: dict[str, str] = {}
    for name, rule in spec.rules.items():
        error = rule(values.get(name))
        if error:
            errors[name] = error
    return errors
