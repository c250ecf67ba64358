from __future__ import annotations

from typing import Any, Mapping


def normalize(value: Any) -> Any:
    # whitespace-only edits are not changes
    if isinstance(value, str):
        return value.strip()
    return value


def compute_changed_fields(original: Mapping[str, Any], current: Mapping[str, Any]) -> set[str]:
    """
    Names of fields whose normalized value differs between the saved baseline
    and the draft. A key present on only one side counts as changed.
    """
    keys = set(original) | set(current)
    return {k for k in keys if normalize(current.get(k)) != normalize(original.get(k))}
