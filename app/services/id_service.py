"""Opaque user identifiers.

Ids are canonical lowercase UUID4 strings.  Callers treat them as opaque;
only this module knows the format.  The validator accepts either hex case,
so lookups lower-case a validated id before hitting a store.
"""

from __future__ import annotations

import re
from uuid import uuid4

_CANONICAL_UUID = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def new_id() -> str:
    return str(uuid4())


def is_valid_id(value: str) -> bool:
    # uuid.UUID() also accepts braces, urn: prefixes and bare hex; reject those
    return isinstance(value, str) and bool(_CANONICAL_UUID.match(value))
