from __future__ import annotations

from typing import Any, Mapping

from storefront.categories.base import CategorySpec
from storefront.categories.registry import get_category
from storefront.engine.diff import compute_changed_fields
from storefront.engine.values import FormValue, FormValues
from storefront.services.errors import DraftLockedError, UnknownFieldError
from storefront.validation.registry import validate_field, validate_form

_UNSET: Any = object()


def blank_form_values(category: CategorySpec) -> FormValues:
    return {f.name: (None if f.kind == "enum" else "") for f in category.fields}


class ListingDraft:
    """
    Editable copy of one listing's form values plus its saved baseline.

    - `original` only changes through reset() (after load and after a save).
    - `current` holds exactly the category's fields; unknown names are rejected.
    - An error is shown for a field only once it has been touched (blurred or
      included in a full-form validation).
    - While a submission is in flight the draft is locked against edits.
    """

    def __init__(self, category: str | CategorySpec, original: Mapping[str, FormValue] | None = None):
        self.category = get_category(category)
        self._original: FormValues = {}
        self._current: FormValues = {}
        self._touched: dict[str, bool] = {}
        self._errors: dict[str, str] = {}
        self._locked = False
        self._closed = False
        self.reset(original if original is not None else blank_form_values(self.category))

    # --- read side

    @property
    def original(self) -> FormValues:
        return dict(self._original)

    @property
    def current(self) -> FormValues:
        return dict(self._current)

    @property
    def touched(self) -> dict[str, bool]:
        return dict(self._touched)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def closed(self) -> bool:
        return self._closed

    def visible_error(self, name: str) -> str | None:
        self._require_field(name)
        if not self._touched.get(name):
            return None
        return self._errors.get(name)

    def changed_fields(self) -> set[str]:
        return compute_changed_fields(self._original, self._current)

    # --- write side

    def set_field(self, name: str, value: FormValue) -> None:
        self._require_field(name)
        self._require_unlocked()
        self._current[name] = value
        if self._touched.get(name):
            self._store_error(name, validate_field(self.category, name, value))

    def blur_field(self, name: str, value: FormValue = _UNSET) -> str | None:
        """
        Mark a field touched and validate it.

        Pickers report their new value alongside the blur, possibly before
        set_field for the same value has landed; an explicit `value` is
        validated instead of the stored one.
        """
        self._require_field(name)
        self._require_unlocked()
        self._touched[name] = True
        to_check = self._current[name] if value is _UNSET else value
        error = validate_field(self.category, name, to_check)
        self._store_error(name, error)
        return error

    def validate_form(self) -> dict[str, str]:
        """
        Validate every field, replacing all stored errors.

        Post-condition: every field is touched, so inline errors become
        visible after a submit attempt even for fields never blurred.
        """
        errors = validate_form(self.category, self._current)
        self._errors = errors
        for name in self._current:
            self._touched[name] = True
        return dict(errors)

    def reset(self, new_original: Mapping[str, FormValue]) -> None:
        unknown = set(new_original) - set(self.category.field_names())
        if unknown:
            raise UnknownFieldError(self.category.key, sorted(unknown)[0])
        baseline = blank_form_values(self.category)
        baseline.update(new_original)
        self._original = baseline
        self._current = dict(baseline)
        self._touched = {}
        self._errors = {}

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    def close(self) -> None:
        """The owning screen is gone; late results must leave this draft alone."""
        self._closed = True

    # --- internals

    def _require_field(self, name: str) -> None:
        if name not in self._current:
            raise UnknownFieldError(self.category.key, name)

    def _require_unlocked(self) -> None:
        if self._locked:
            raise DraftLockedError(f"{self.category.key} draft is locked while a save is in flight")

    def _store_error(self, name: str, error: str | None) -> None:
        if error:
            self._errors[name] = error
        else:
            self._errors.pop(name, None)
