from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Set

from .accessors import as_array, as_string, descend
from .errors import IdCollisionError
from .io_utils import ensure_dir, read_json_file, write_text
from .naming import output_path
from .serialization import to_json

log = logging.getLogger(__name__)

DUPE_MARKER = ' (DUPE!)'


@dataclass(frozen=True)
class SplitOptions:
    array_path: str
    id_path: str
    pretty: bool = False
    allow_collisions: bool = False
    output_dir: str = os.curdir


@dataclass(frozen=True)
class WrittenFile:
    source: str
    element_id: str
    path: str
    duplicate: bool = False


def write_element(element: Any, element_id: str, options: SplitOptions) -> str:
    """Serialize one array element to its own file and return the path."""
    path = output_path(options, element_id)
    write_text(path, to_json(element, options.pretty))
    return path


def split_document(
    document: Any,
    source: str,
    options: SplitOptions,
    seen: Set[str],
) -> List[WrittenFile]:
    """Write every element of the array at `options.array_path`.

    `seen` holds the IDs written so far in this run and is updated in place.
    A repeated ID raises IdCollisionError unless collisions are allowed, in
    which case the earlier file is overwritten.
    """
    items = as_array(descend(options.array_path, document), options.array_path)
    written: List[WrittenFile] = []

    log.info('        * IDs')
    for element in items:
        element_id = as_string(descend(options.id_path, element), options.id_path)

        duplicate = element_id in seen
        if duplicate and not options.allow_collisions:
            raise IdCollisionError(element_id)

        path = write_element(element, element_id, options)
        if duplicate:
            log.warning('            * %r%s', element_id, DUPE_MARKER)
        else:
            log.info('            * %r', element_id)
        seen.add(element_id)
        written.append(WrittenFile(str(source), element_id, path, duplicate))

    return written


def split_files(
    files: Iterable,
    options: SplitOptions,
    seen: Optional[Set[str]] = None,
) -> List[WrittenFile]:
    """Split each input file in turn. The first error ends the run.

    IDs are tracked across all files, so a collision can span two inputs.
    Files written before an error are left in place.
    """
    if seen is None:
        seen = set()

    ensure_dir(options.output_dir)

    written: List[WrittenFile] = []
    log.info('* Files')
    for path in files:
        log.info('    * %r', str(path))
        document = read_json_file(path)
        written.extend(split_document(document, str(path), options, seen))

    log.debug('Wrote %d file(s) for %d unique ID(s)', len(written), len(seen))
    return written
