import pytest

from storefront.services.errors import ListingApiError, UnknownFieldError, translate_error
from storefront.services.http_client import HttpResult

DEFAULT = "Failed to update bike"


def _api_error(status_code=None, detail=None, error_code=None):
    return ListingApiError(
        HttpResult(ok=False, status_code=status_code, detail=detail or {}, error_code=error_code)
    )


def test_server_message_wins_for_client_errors():
    assert translate_error(_api_error(400, {"message": "Registration number already used"}), DEFAULT) == (
        "Registration number already used"
    )


def test_server_message_ignored_for_5xx():
    assert translate_error(_api_error(500, {"message": "NullPointerException"}), DEFAULT) == (
        "Server error. Please try again later."
    )


@pytest.mark.parametrize(
    "error_code, expected",
    [
        ("TIMEOUT", "The request timed out. Please check your connection and try again."),
        ("REQUEST_ERROR", "Unable to reach the server. Please check your connection."),
    ],
)
def test_transport_failures(error_code, expected):
    assert translate_error(_api_error(error_code=error_code), DEFAULT) == expected


def test_known_statuses():
    assert translate_error(_api_error(401), DEFAULT) == "Your session has expired. Please log in again."
    assert translate_error(_api_error(403), DEFAULT) == "You are not allowed to modify this listing."


def test_defaults():
    assert translate_error(_api_error(418), DEFAULT) == DEFAULT
    assert translate_error(ValueError("x"), DEFAULT) == DEFAULT


def test_unknown_field_error_is_a_key_error():
    err = UnknownFieldError("bike", "wheels")
    assert isinstance(err, KeyError)
    assert err.field == "wheels"
