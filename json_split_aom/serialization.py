from __future__ import annotations

import json
from typing import Any

COMPACT_SEPARATORS = (',', ':')
PRETTY_INDENT = 2


def to_json(value: Any, pretty: bool = False) -> str:
    """Serialize a JSON value, either pretty or compact.

    Keys keep their input order (not sorted) and non-ASCII text is written
    as-is, so a written element parses and re-serializes to the same text.
    """
    if pretty:
        return json.dumps(value, indent=PRETTY_INDENT, ensure_ascii=False, allow_nan=False)
    return json.dumps(value, separators=COMPACT_SEPARATORS, ensure_ascii=False, allow_nan=False)
