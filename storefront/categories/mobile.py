from __future__ import annotations

from storefront.categories.base import CategoryMessages, CategorySpec, FieldSpec
from storefront.schemas.listing import MobileDetail
from storefront.validation import rules

MIN_YEAR = 2005
MAX_PRICE = 500_000
CONDITIONS = ("NEW", "LIKE_NEW", "USED", "REFURBISHED")

MOBILE = CategorySpec(
    key="mobile",
    label="Mobile",
    path_segment="mobiles",
    detail_model=MobileDetail,
    fields=(
        FieldSpec("brand", "brand", max_length=40),
        FieldSpec("model", "model", max_length=40),
        FieldSpec("color", "color", max_length=40),
        FieldSpec("storage", "storage", kind="integer", optional=True, max_length=5,
                  digits_only=True, zero_is_unset=True),
        FieldSpec("condition", "condition", kind="enum", choices=CONDITIONS),
        FieldSpec("year_of_purchase", "yearOfPurchase", kind="integer", zero_is_unset=True),
        FieldSpec("price", "price", kind="number", max_length=7, digits_only=True),
        FieldSpec("description", "description", max_length=400),
    ),
    rules={
        "brand": rules.required_text("Brand name is required", min_length=2),
        "model": rules.required_text("Model name is required"),
        "color": rules.required_text("Color is required", min_length=2),
        "storage": rules.optional_non_negative_int("Please enter storage in GB"),
        "condition": rules.one_of(CONDITIONS, "Please select condition"),
        "year_of_purchase": rules.year_range(min_year=MIN_YEAR, required="Please select year of purchase"),
        "price": rules.price_range(max_price=MAX_PRICE),
        "description": rules.text_length(
            min_length=20,
            max_length=400,
            too_short="Description must be at least 20 characters",
            too_long="Description must not exceed 400 characters",
        ),
    },
    messages=CategoryMessages(
        updated="Mobile updated successfully",
        update_failed="Failed to update mobile",
        load_failed="Failed to load mobile details",
    ),
    year_field="year_of_purchase",
    min_year=MIN_YEAR,
)
