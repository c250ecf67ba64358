import pytest

from storefront.connectors.memory import InMemoryListingConnector
from storefront.engine.submission import SessionContext
from storefront.services.errors import ListingLoadError
from storefront.services.listings import ListingEditor, browse_listings, delete_listing

BIKE_ID = 7


@pytest.mark.asyncio
async def test_open_seeds_draft_from_listing(bike_connector, bike_form):
    editor = await ListingEditor.open("bike", BIKE_ID, bike_connector)

    assert editor.draft.original == bike_form
    assert editor.draft.current == bike_form
    assert editor.controller.listing_owner_id == 42
    assert not editor.saving


@pytest.mark.asyncio
async def test_open_missing_listing_raises_load_error(bike_connector):
    with pytest.raises(ListingLoadError) as exc:
        await ListingEditor.open("bike", 999, bike_connector)
    assert exc.value.message == "Listing 999 not found"


@pytest.mark.asyncio
async def test_open_uses_category_default_on_unknown_failure(bike_connector):
    bike_connector.fail_with = RuntimeError("socket closed")
    with pytest.raises(ListingLoadError) as exc:
        await ListingEditor.open("bike", BIKE_ID, bike_connector)
    assert exc.value.message == "Failed to load bike details"


@pytest.mark.asyncio
async def test_edit_flow_end_to_end(bike_connector, alerts):
    saved = []
    editor = await ListingEditor.open("bike", BIKE_ID, bike_connector, notify=alerts, on_saved=saved.append)

    editor.change("prize", "4,5000")
    editor.change("registration_number", "mh15ab9999")
    editor.pick("fuel_type", "CNG")
    assert editor.visible_error("prize") is None

    outcome = await editor.save(SessionContext(owner_id=9))

    assert outcome.ok
    _, payload = bike_connector.update_calls[0]
    assert payload == {
        "fuelType": "CNG",
        "registrationNumber": "MH15AB9999",
        "prize": 45000,
        "status": "ACTIVE",
        "sellerId": 42,
    }
    assert len(saved) == 1

    # a second save without edits is a no-op
    again = await editor.save(SessionContext(owner_id=9))
    assert again.kind == "no_changes"
    assert len(bike_connector.update_calls) == 1


@pytest.mark.asyncio
async def test_inline_errors_show_after_blur(bike_connector):
    editor = await ListingEditor.open("bike", BIKE_ID, bike_connector)

    editor.change("brand", "H")
    assert editor.visible_error("brand") is None
    assert editor.blur("brand") == "Brand name is required"
    assert editor.visible_error("brand") == "Brand name is required"


@pytest.mark.asyncio
async def test_year_picker_validates_picked_value(bike_connector):
    editor = await ListingEditor.open("bike", BIKE_ID, bike_connector)

    assert "1990" in editor.year_options()
    editor.pick("manufacture_year", "1989")
    assert editor.visible_error("manufacture_year") is not None
    editor.pick("manufacture_year", "2015")
    assert editor.visible_error("manufacture_year") is None


@pytest.mark.asyncio
async def test_owner_falls_back_to_session_when_listing_has_none(bike_wire):
    bike_wire.pop("sellerId")
    connector = InMemoryListingConnector("bike", {BIKE_ID: bike_wire})
    editor = await ListingEditor.open("bike", BIKE_ID, connector)

    editor.change("prize", "45000")
    await editor.save(SessionContext(owner_id=9))

    _, payload = connector.update_calls[0]
    assert payload["sellerId"] == 9


@pytest.mark.asyncio
async def test_closed_editor_ignores_late_result(bike_connector, alerts):
    editor = await ListingEditor.open("bike", BIKE_ID, bike_connector, notify=alerts)
    editor.change("prize", "45000")
    editor.close()

    outcome = await editor.save(SessionContext())

    assert outcome.kind == "discarded"
    assert alerts.calls == []


@pytest.mark.asyncio
async def test_browse_and_delete(bike_connector, bike_wire):
    page = await browse_listings("bike", bike_connector)
    assert page.total_elements == 1
    assert page.content[0]["brand"] == "Honda"
    assert not page.empty

    response = await delete_listing("bike", BIKE_ID, bike_connector)
    assert response.status == "success"

    page = await browse_listings("bike", bike_connector)
    assert page.empty
    assert page.content == []


@pytest.mark.asyncio
async def test_laptop_editor():
    laptop = {
        "laptopId": 3,
        "price": 55000,
        "serialNumber": "SN123",
        "dealer": "Croma",
        "brand": "Dell",
        "model": "XPS 13",
        "warrantyInYear": 0,
        "processor": "i7",
        "processorBrand": "Intel",
        "ram": "16GB",
        "storage": "512GB",
        "colour": "Silver",
        "screenSize": "13.4",
        "memoryType": "LPDDR5",
        "battery": "4 cell",
        "batteryLife": "10h",
        "graphicsCard": "Iris Xe",
        "graphicBrand": "Intel",
        "weight": "1.2kg",
        "manufacturer": "Dell",
        "usbPorts": 2,
    }
    connector = InMemoryListingConnector("laptop", {3: laptop})
    editor = await ListingEditor.open("laptop", 3, connector)
    assert editor.draft.current["warranty_in_year"] == "0"

    editor.change("warranty_in_year", "2")
    outcome = await editor.save(SessionContext(owner_id=5))

    assert outcome.ok
    assert connector.update_calls == [(3, {"warrantyInYear": 2, "status": "ACTIVE", "sellerId": 5})]
