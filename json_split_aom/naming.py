from __future__ import annotations

import os

JSON_EXT = '.json'


def output_filename(array_path: str, id_path: str, element_id: str, ext: str = JSON_EXT) -> str:
    """Build the output file name for one element.

    Nothing is sanitized. Equal inputs always give the same name, which is
    what lets tolerated duplicates overwrite each other.
    """
    return f"{array_path}-{id_path}-{element_id}{ext}"


def output_path(options, element_id: str) -> str:
    name = output_filename(options.array_path, options.id_path, element_id)
    return os.path.join(options.output_dir, name)
