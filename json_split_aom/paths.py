from __future__ import annotations

from typing import List

SEP = '.'


def split_path(path: str) -> List[str]:
    """Split a dot path into its key segments.

    The empty path has no segments. Keys containing a literal '.' cannot be
    addressed; there is no escaping.
    """
    if path is None or path == '':
        return []
    if not isinstance(path, str):
        path = str(path)
    parts = path.split(SEP)
    # a single trailing separator addresses the same value as without it
    if len(parts) > 1 and parts[-1] == '':
        parts.pop()
    return parts
