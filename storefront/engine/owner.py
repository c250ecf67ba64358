from __future__ import annotations

import math
from typing import Any


def is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def resolve_owner_id(listing_owner_id: Any, session_owner_id: Any) -> int | float | None:
    """
    Pick the owner id to attach to an update.

    The listing's own owner wins; the signed-in session is the fallback.
    None means "omit the key" - callers must never send a placeholder.
    """
    if is_finite_number(listing_owner_id):
        return listing_owner_id
    if is_finite_number(session_owner_id):
        return session_owner_id
    return None
