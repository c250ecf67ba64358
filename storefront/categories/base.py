from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Literal, Mapping

from storefront.schemas.listing import ListingDetail
from storefront.services.errors import UnknownFieldError

FieldKind = Literal["text", "integer", "number", "enum"]

# (raw form value) -> error message | None
FieldRule = Callable[[Any], "str | None"]


@dataclass(frozen=True)
class FieldSpec:
    """
    One editable field of a listing form.

    `name` is the form key used by drafts and validators, `wire` the JSON key
    of the listing endpoints. Input filters (digits_only, uppercase,
    max_length) mirror what the form inputs apply to keystrokes.
    """
    name: str
    wire: str
    kind: FieldKind = "text"
    optional: bool = False
    choices: tuple[str, ...] = ()
    max_length: int | None = None
    digits_only: bool = False
    uppercase: bool = False
    # falsy numbers (0) from the server mean "not set" for these fields
    zero_is_unset: bool = False


@dataclass(frozen=True)
class CategoryMessages:
    updated: str
    update_failed: str
    load_failed: str
    invalid_title: str = "Please review the form"
    invalid_body: str = "Correct highlighted fields before saving."
    no_changes_title: str = "No changes detected"
    no_changes_body: str = "Please update at least one field before saving."


@dataclass(frozen=True)
class CategorySpec:
    """
    Everything the edit engine needs to know about a listing category.
    Shared and read-only; drafts never own a CategorySpec.
    """
    key: str
    label: str
    path_segment: str
    detail_model: type[ListingDetail]
    fields: tuple[FieldSpec, ...]
    rules: Mapping[str, FieldRule]
    messages: CategoryMessages
    owner_wire_key: str = "sellerId"
    required_payload: Mapping[str, Any] = field(default_factory=lambda: {"status": "ACTIVE"})
    year_field: str | None = None
    min_year: int | None = None

    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def get_field(self, name: str) -> FieldSpec:
        for f in self.fields:
            if f.name == name:
                return f
        raise UnknownFieldError(self.key, name)

    def has_field(self, name: str) -> bool:
        return any(f.name == name for f in self.fields)

    def year_options(self, *, today: date | None = None) -> list[str]:
        """Year picker entries, newest first."""
        if self.min_year is None:
            return []
        current = (today or date.today()).year
        return [str(y) for y in range(current, self.min_year - 1, -1)]
