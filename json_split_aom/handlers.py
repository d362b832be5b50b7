from __future__ import annotations

import os
import tempfile
from typing import Any, List

import gradio as gr

from .accessors import as_array, descend
from .errors import SplitError
from .io_utils import read_json_content
from .schema_utils import ROOT_LABEL, find_list_paths, find_string_paths, root_to_path
from .splitter import SplitOptions, split_files


def upload_paths(file_objs) -> List[str]:
    if not file_objs:
        return []
    if not isinstance(file_objs, (list, tuple)):
        file_objs = [file_objs]
    return [f.name if hasattr(f, 'name') else f for f in file_objs]


def id_path_choices(data: Any, array_label: str) -> List[str]:
    """String fields of the first array element, as ID path suggestions."""
    try:
        items = as_array(descend(root_to_path(array_label), data), array_label)
    except SplitError:
        return []
    if not items:
        return []
    return find_string_paths(items[0])


def prepare_upload_payload(file_objs):
    paths = upload_paths(file_objs)
    if not paths:
        return None, gr.update(choices=[]), gr.update(choices=[]), "No file uploaded."

    try:
        data = read_json_content(paths[0])
    except SplitError as e:
        return None, gr.update(choices=[]), gr.update(choices=[]), f"Error parsing JSON: {e}"

    list_paths = find_list_paths(data)
    if not list_paths:
        return data, gr.update(choices=[], value=None), gr.update(choices=[]), "No arrays found in the first file."

    default_root = ROOT_LABEL if ROOT_LABEL in list_paths else list_paths[0]
    id_choices = id_path_choices(data, default_root)
    message = f"Successfully loaded {len(paths)} file(s). Found {len(list_paths)} array path(s)."
    return (
        data,
        gr.update(choices=list_paths, value=default_root),
        gr.update(choices=id_choices, value=id_choices[0] if id_choices else None),
        message,
    )


def handle_array_path_change(data: Any, array_label: str):
    if data is None:
        return gr.update(choices=[])
    choices = id_path_choices(data, array_label)
    return gr.update(choices=choices, value=choices[0] if choices else None)


def split_handler(file_objs, array_label, id_path, pretty, collisions):
    paths = upload_paths(file_objs)
    if not paths:
        return None, "No file uploaded."
    if id_path is None or id_path == '':
        return None, "Select an ID path."

    out_dir = tempfile.mkdtemp(prefix="json-split-")
    options = SplitOptions(
        array_path=root_to_path(array_label),
        id_path=id_path,
        pretty=bool(pretty),
        allow_collisions=bool(collisions),
        output_dir=out_dir,
    )

    try:
        written = split_files(paths, options)
    except SplitError as e:
        # files written before the error stay available
        partial = sorted(os.path.join(out_dir, name) for name in os.listdir(out_dir))
        return partial or None, f"Error: {e}"

    outputs = sorted({w.path for w in written})
    dupes = sum(1 for w in written if w.duplicate)
    message = f"Done! Wrote {len(outputs)} file(s)."
    if dupes:
        message += f" {dupes} duplicate ID(s) overwrote earlier files."
    return outputs, message
