from storefront.engine.diff import compute_changed_fields, normalize


def test_diff_against_itself_is_empty(bike_form):
    assert compute_changed_fields(bike_form, bike_form) == set()
    assert compute_changed_fields(bike_form, dict(bike_form)) == set()


def test_whitespace_only_edit_is_not_a_change(bike_form):
    edited = dict(bike_form, brand="Honda ", color="  Red")
    assert compute_changed_fields(bike_form, edited) == set()


def test_real_edits_are_reported(bike_form):
    edited = dict(bike_form, prize="45000", engine_cc="125")
    assert compute_changed_fields(bike_form, edited) == {"prize", "engine_cc"}


def test_non_strings_compare_by_value():
    assert compute_changed_fields({"fuel_type": None}, {"fuel_type": None}) == set()
    assert compute_changed_fields({"fuel_type": None}, {"fuel_type": "CNG"}) == {"fuel_type"}
    assert compute_changed_fields({"n": 1}, {"n": 1.0}) == set()


def test_key_on_one_side_only_is_a_change():
    assert compute_changed_fields({"a": "x"}, {"a": "x", "b": "y"}) == {"b"}


def test_normalize():
    assert normalize("  a b  ") == "a b"
    assert normalize(5) == 5
    assert normalize(None) is None
