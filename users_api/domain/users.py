"""Domain helpers for user validation, id assignment and lookups."""
from __future__ import annotations

import math
import re
from typing import Any, Iterable, Mapping

USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_number(value: Any) -> bool:
    """Return True for finite JSON numbers; booleans, NaN and infinities are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_usable_name(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def parse_user_id(raw: str | None) -> int:
    """Parse the id taken from the request path. Raises ValueError."""
    if raw is None:
        raise ValueError("missing id")
    value = raw.strip()
    if not USER_ID_PATTERN.fullmatch(value):
        raise ValueError(f"invalid id: {raw!r}")
    return int(value)


def next_user_id(users: Iterable[Mapping[str, Any]]) -> int:
    """Return max(existing id) + 1, or 1 for an empty collection."""
    highest = 0
    for user in users:
        uid = user.get("id")
        if is_number(uid) and uid > highest:
            highest = uid
    return int(highest) + 1


def find_index(users: list[Mapping[str, Any]], user_id: int) -> int | None:
    for index, user in enumerate(users):
        if user.get("id") == user_id:
            return index
    return None


def name_matches(user: Mapping[str, Any], query: str) -> bool:
    """Case-insensitive substring match on ``name``; non-text names never match."""
    name = user.get("name") if isinstance(user, Mapping) else None
    if not isinstance(name, str):
        return False
    return query.casefold() in name.casefold()
