from __future__ import annotations

from typing import Any, List

from .paths import SEP

ROOT_LABEL = '(root)'


def _child_path(parent_key: str, key: str) -> str:
    return f'{parent_key}{SEP}{key}' if parent_key else key


def find_list_paths(data: Any, parent_key: str = '') -> List[str]:
    """Find all dot paths in the JSON that point to a list.

    Only object keys are followed, matching what `descend` can reach. A
    top-level list is reported as '(root)'. Keys containing '.' are skipped.
    """
    paths: List[str] = []
    if isinstance(data, dict):
        for k, v in data.items():
            if SEP in k:
                continue
            current_key = _child_path(parent_key, k)
            if isinstance(v, list):
                paths.append(current_key)
            elif isinstance(v, dict):
                paths.extend(find_list_paths(v, current_key))
    elif isinstance(data, list) and not parent_key:
        paths.append(ROOT_LABEL)
    return sorted(paths)


def find_string_paths(data: Any, parent_key: str = '') -> List[str]:
    """Find all dot paths in an element whose value is a string (ID candidates)."""
    paths: List[str] = []
    if isinstance(data, dict):
        for k, v in data.items():
            if SEP in k:
                continue
            current_key = _child_path(parent_key, k)
            if isinstance(v, str):
                paths.append(current_key)
            elif isinstance(v, dict):
                paths.extend(find_string_paths(v, current_key))
    return sorted(paths)


def root_to_path(label: str) -> str:
    """Map a dropdown label back to a dot path; "(root)" is the empty path."""
    if label in (None, ROOT_LABEL):
        return ''
    return label
