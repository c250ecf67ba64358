import pytest

from storefront.categories.registry import get_category
from storefront.connectors.memory import InMemoryListingConnector
from storefront.engine.draft import ListingDraft


BIKE_ID = 7


@pytest.fixture
def bike_wire():
    """Detail response for a bike, as the API returns it."""
    return {
        "bike_id": BIKE_ID,
        "prize": 50000,
        "brand": "Honda",
        "model": "Shine",
        "variant": "Standard",
        "manufactureYear": 2020,
        "engineCC": None,
        "kilometersDriven": None,
        "fuelType": "PETROL",
        "color": "Red",
        "registrationNumber": "MH15AB3456",
        "description": "x" * 25,
        "sellerId": 42,
        "status": "ACTIVE",
    }


@pytest.fixture
def bike_form():
    """The same bike as form values."""
    return {
        "brand": "Honda",
        "model": "Shine",
        "variant": "Standard",
        "manufacture_year": "2020",
        "engine_cc": "",
        "kilometers_driven": "",
        "fuel_type": "PETROL",
        "color": "Red",
        "registration_number": "MH15AB3456",
        "prize": "50000",
        "description": "x" * 25,
    }


@pytest.fixture
def bike():
    return get_category("bike")


@pytest.fixture
def bike_draft(bike, bike_form):
    return ListingDraft(bike, bike_form)


@pytest.fixture
def bike_connector(bike, bike_wire):
    return InMemoryListingConnector(bike, {BIKE_ID: bike_wire})


class Alerts:
    def __init__(self):
        self.calls = []

    def __call__(self, title, message):
        self.calls.append((title, message))

    @property
    def titles(self):
        return [t for t, _ in self.calls]


@pytest.fixture
def alerts():
    return Alerts()
