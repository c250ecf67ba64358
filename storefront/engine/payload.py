from __future__ import annotations

from typing import Any, Iterable, Mapping

from storefront.categories.base import CategorySpec
from storefront.engine.values import FormValue, parse_form_value


def build_update_payload(
    category: CategorySpec,
    values: Mapping[str, FormValue],
    changed: Iterable[str],
    *,
    owner_id: int | float | None = None,
) -> dict[str, Any]:
    """
    Wire payload for a partial update.

    Only `changed` fields are included, converted to wire types; a cleared
    optional field is sent as null. The category's required fields are
    always added (status is re-sent as ACTIVE on every edit). The owner key
    is present only when an owner id could be resolved.
    """
    payload: dict[str, Any] = {}
    for spec in category.fields:
        if spec.name in changed:
            payload[spec.wire] = parse_form_value(spec, values.get(spec.name))
    payload.update(category.required_payload)
    if owner_id is not None:
        payload[category.owner_wire_key] = owner_id
    return payload
