from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ListingImage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_id: int | None = Field(default=None, alias="imageId")
    image_link: str
    public_id: str | None = Field(default=None, alias="publicId")


class ListingDetail(BaseModel):
    """
    Fields shared by every category's detail response.

    Unknown keys are kept (extra="allow") so a newer server response
    round-trips through the model without losing data.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    seller_id: int | float | None = Field(default=None, alias="sellerId")
    status: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    images: list[ListingImage] = Field(default_factory=list)

    def wire_values(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class BikeDetail(ListingDetail):
    bike_id: int | None = None
    prize: float | None = None
    brand: str | None = None
    model: str | None = None
    variant: str | None = None
    manufacture_year: int | None = Field(default=None, alias="manufactureYear")
    engine_cc: int | None = Field(default=None, alias="engineCC")
    kilometers_driven: int | None = Field(default=None, alias="kilometersDriven")
    fuel_type: str | None = Field(default=None, alias="fuelType")
    color: str | None = None
    registration_number: str | None = Field(default=None, alias="registrationNumber")
    description: str | None = None


class CarDetail(ListingDetail):
    car_id: int | None = Field(default=None, alias="carId")
    price: float | None = None
    brand: str | None = None
    model: str | None = None
    variant: str | None = None
    manufacture_year: int | None = Field(default=None, alias="manufactureYear")
    kilometers_driven: int | None = Field(default=None, alias="kilometersDriven")
    fuel_type: str | None = Field(default=None, alias="fuelType")
    transmission: str | None = None
    owner_count: int | None = Field(default=None, alias="ownerCount")
    color: str | None = None
    registration_number: str | None = Field(default=None, alias="registrationNumber")
    description: str | None = None


class MobileDetail(ListingDetail):
    mobile_id: int | None = Field(default=None, alias="mobileId")
    price: float | None = None
    brand: str | None = None
    model: str | None = None
    color: str | None = None
    storage: int | None = None
    condition: str | None = None
    year_of_purchase: int | None = Field(default=None, alias="yearOfPurchase")
    description: str | None = None


class LaptopDetail(ListingDetail):
    laptop_id: int | None = Field(default=None, alias="laptopId")
    price: float | None = None
    serial_number: str | None = Field(default=None, alias="serialNumber")
    dealer: str | None = None
    brand: str | None = None
    model: str | None = None
    warranty_in_year: int | None = Field(default=None, alias="warrantyInYear")
    processor: str | None = None
    processor_brand: str | None = Field(default=None, alias="processorBrand")
    ram: str | None = None
    storage: str | None = None
    colour: str | None = None
    screen_size: str | None = Field(default=None, alias="screenSize")
    memory_type: str | None = Field(default=None, alias="memoryType")
    battery: str | None = None
    battery_life: str | None = Field(default=None, alias="batteryLife")
    graphics_card: str | None = Field(default=None, alias="graphicsCard")
    graphic_brand: str | None = Field(default=None, alias="graphicBrand")
    weight: str | None = None
    manufacturer: str | None = None
    usb_ports: int | None = Field(default=None, alias="usbPorts")


class UpdateResponse(BaseModel):
    """
    Body of update/delete responses. Servers send the status as a word
    ("success") or an HTTP-style number, and may omit the message.
    """
    model_config = ConfigDict(extra="allow")

    status: str | int | None = None
    message: str | None = None


class ListingPage(BaseModel):
    """
    Paged wrapper for browse screens. The listing endpoints return a bare
    array, so the page is always a single, complete one.
    """
    content: list[dict[str, Any]] = Field(default_factory=list)
    last: bool = True
    first: bool = True
    total_pages: int = 1
    total_elements: int = 0
    size: int = 0
    number: int = 0
    number_of_elements: int = 0
    empty: bool = True

    @classmethod
    def single(cls, items: list[dict[str, Any]]) -> "ListingPage":
        n = len(items)
        return cls(
            content=items,
            total_elements=n,
            size=n,
            number_of_elements=n,
            empty=n == 0,
        )
