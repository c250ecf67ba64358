from __future__ import annotations

from storefront.categories.base import CategoryMessages, CategorySpec, FieldSpec
from storefront.schemas.listing import LaptopDetail
from storefront.validation import rules

MAX_PRICE = 1_000_000

# (form name, wire key, required message) for the free-text spec sheet fields
_SPEC_SHEET = (
    ("dealer", "dealer", "Please enter Dealer"),
    ("processor", "processor", "Please enter Processor"),
    ("processor_brand", "processorBrand", "Please enter Processor Brand"),
    ("ram", "ram", "Please enter RAM"),
    ("storage", "storage", "Please enter Storage"),
    ("colour", "colour", "Please enter Colour"),
    ("screen_size", "screenSize", "Please enter Screen Size"),
    ("memory_type", "memoryType", "Please enter Memory Type"),
    ("battery", "battery", "Please enter Battery"),
    ("battery_life", "batteryLife", "Please enter Battery Life"),
    ("graphics_card", "graphicsCard", "Please enter Graphics Card"),
    ("graphic_brand", "graphicBrand", "Please enter Graphic Brand"),
    ("weight", "weight", "Please enter Weight"),
    ("manufacturer", "manufacturer", "Please enter Manufacturer"),
)


def _spec_sheet_rule(message: str):
    return rules.text_length(min_length=1, max_length=200, too_short=message, too_long="Value is too long")


LAPTOP = CategorySpec(
    key="laptop",
    label="Laptop",
    path_segment="laptops",
    detail_model=LaptopDetail,
    fields=(
        FieldSpec("serial_number", "serialNumber", max_length=60, uppercase=True),
        FieldSpec("brand", "brand", max_length=40),
        FieldSpec("model", "model", max_length=60),
        FieldSpec("price", "price", kind="number", max_length=7, digits_only=True),
        FieldSpec("warranty_in_year", "warrantyInYear", kind="integer", max_length=2, digits_only=True),
        *(FieldSpec(name, wire, max_length=200) for name, wire, _ in _SPEC_SHEET),
        FieldSpec("usb_ports", "usbPorts", kind="integer", max_length=2, digits_only=True),
    ),
    rules={
        "serial_number": rules.required_text("Please enter Serial Number"),
        "brand": rules.required_text("Please enter Brand"),
        "model": rules.required_text("Please enter Model"),
        "price": rules.price_range(max_price=MAX_PRICE),
        "warranty_in_year": rules.int_range(
            min_value=0, max_value=10, message="Warranty must be between 0 and 10 years"
        ),
        **{name: _spec_sheet_rule(msg) for name, _, msg in _SPEC_SHEET},
        "usb_ports": rules.digits("Please enter number of USB ports"),
    },
    messages=CategoryMessages(
        updated="Laptop updated successfully",
        update_failed="Failed to update laptop",
        load_failed="Failed to load laptop details",
    ),
)
