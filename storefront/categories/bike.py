from __future__ import annotations

from storefront.categories.base import CategoryMessages, CategorySpec, FieldSpec
from storefront.schemas.listing import BikeDetail
from storefront.validation import rules

MIN_YEAR = 1990
MAX_PRICE = 10_000_000
FUEL_TYPES = ("PETROL", "DIESEL", "ELECTRIC", "CNG")

BIKE = CategorySpec(
    key="bike",
    label="Bike",
    path_segment="bikes",
    detail_model=BikeDetail,
    fields=(
        FieldSpec("brand", "brand", max_length=40),
        FieldSpec("model", "model", max_length=40),
        FieldSpec("variant", "variant", max_length=60),
        FieldSpec("manufacture_year", "manufactureYear", kind="integer", zero_is_unset=True),
        FieldSpec("engine_cc", "engineCC", kind="integer", optional=True, max_length=6,
                  digits_only=True, zero_is_unset=True),
        FieldSpec("kilometers_driven", "kilometersDriven", kind="integer", optional=True, max_length=10,
                  digits_only=True, zero_is_unset=True),
        FieldSpec("fuel_type", "fuelType", kind="enum", choices=FUEL_TYPES),
        FieldSpec("color", "color", max_length=40),
        FieldSpec("registration_number", "registrationNumber", max_length=20, uppercase=True),
        FieldSpec("prize", "prize", kind="number", max_length=10, digits_only=True),
        FieldSpec("description", "description", max_length=400),
    ),
    rules={
        "brand": rules.required_text("Brand name is required", min_length=2),
        "model": rules.required_text("Model name is required"),
        "variant": rules.required_text("Variant is required"),
        "color": rules.required_text("Color is required", min_length=2),
        "description": rules.text_length(
            min_length=20,
            max_length=400,
            too_short="Description must be at least 20 characters",
            too_long="Description must not exceed 400 characters",
        ),
        "prize": rules.price_range(max_price=MAX_PRICE),
        "manufacture_year": rules.year_range(min_year=MIN_YEAR, required="Please select manufacture year"),
        "engine_cc": rules.optional_non_negative_int(),
        "kilometers_driven": rules.optional_non_negative_int(),
        "registration_number": rules.required_text("Registration number is required", min_length=5),
        "fuel_type": rules.one_of(FUEL_TYPES, "Please select fuel type"),
    },
    messages=CategoryMessages(
        updated="Bike updated successfully",
        update_failed="Failed to update bike",
        load_failed="Failed to load bike details",
    ),
    year_field="manufacture_year",
    min_year=MIN_YEAR,
)
