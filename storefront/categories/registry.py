from __future__ import annotations

from storefront.categories.base import CategorySpec
from storefront.categories.bike import BIKE
from storefront.categories.car import CAR
from storefront.categories.laptop import LAPTOP
from storefront.categories.mobile import MOBILE


_CATEGORIES: dict[str, CategorySpec] = {
    spec.key: spec for spec in (BIKE, CAR, MOBILE, LAPTOP)
}


def get_category(category: str | CategorySpec) -> CategorySpec:
    if isinstance(category, CategorySpec):
        return category
    key = category.lower().strip()
    if key not in _CATEGORIES:
        raise KeyError(f"Unknown listing category: {category}")
    return _CATEGORIES[key]


def supported_categories() -> list[str]:
    return sorted(_CATEGORIES.keys())
