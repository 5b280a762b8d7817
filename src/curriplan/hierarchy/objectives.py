"""
Learning Objective Lists

Objectives are persisted as a JSON array in a TEXT column.
"""

from __future__ import annotations

import json
from typing import Any


def encode_objectives(objectives: Any) -> str:
    """Serialize an objective list for storage.

    Empty or missing values become ``[]``. Anything else is stored as given;
    a stored value that is not an array decodes to an empty list.
    """
    return json.dumps(objectives or [])


def decode_objectives(raw: str | None) -> list[str]:
    """Decode a stored objective list.

    Never raises: absent, malformed, or non-array values decode to an empty list.
    """
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return []
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else str(item) for item in value]
