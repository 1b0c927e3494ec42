"""
Collection of the assists described in a directory of source files.

.. autofunction:: collect_assists

The individual steps are also exposed:

.. autofunction:: iter_source_files

.. autofunction:: scan_source

.. autofunction:: scan_file

.. autofunction:: sort_assists

.. autofunction:: check_unique_ids
"""

from typing import Iterable, Iterator, List, Sequence, Set

from pathlib import Path

import logging

from assist_codegen.assist import Assist, is_assist_block, parse_assist
from assist_codegen.comment_blocks import extract_comment_blocks_with_empty_lines
from assist_codegen.exceptions import (
    CodegenError,
    DuplicateAssistIdError,
    SourceDirectoryError,
    SourceEncodingError,
)

logger = logging.getLogger(__name__)


def iter_source_files(root: Path, suffix: str = ".rs") -> Iterator[Path]:
    """
    Enumerate (recursively, in sorted order) all files beneath a directory with
    the given suffix.
    """
    if not root.is_dir():
        raise SourceDirectoryError(f"{root} is not a directory")

    for path in sorted(root.rglob(f"*{suffix}")):
        if path.is_file():
            yield path


def scan_source(text: str) -> List[Assist]:
    """
    Parse all assist descriptions in the text of a single source file, in the
    order they appear.
    """
    return [
        parse_assist(block)
        for block in extract_comment_blocks_with_empty_lines(text)
        if is_assist_block(block)
    ]


def scan_file(path: Path) -> List[Assist]:
    """
    Parse all assist descriptions in a source file. Exceptions thrown while
    parsing are re-thrown (with the same type) with the filename included in
    the message.
    """
    try:
        text = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceEncodingError(f"{path}: not valid UTF-8 ({e})") from e
    try:
        assists = scan_source(text)
    except CodegenError as e:
        raise type(e)(f"{path}: {e}") from e
    logger.debug("Found %d assist(s) in %s", len(assists), path)
    return assists


def sort_assists(assists: Iterable[Assist]) -> List[Assist]:
    """Sort assists by id. Assists with the same id keep their order."""
    return sorted(assists, key=lambda assist: assist.id)


def check_unique_ids(assists: Sequence[Assist]) -> None:
    """
    Check that no two assists share an id, throwing a
    :py:exc:`~assist_codegen.exceptions.DuplicateAssistIdError` if they do.
    """
    seen: Set[str] = set()
    for assist in assists:
        if assist.id in seen:
            raise DuplicateAssistIdError(f"assist id {assist.id!r} is used twice")
        seen.add(assist.id)


def collect_assists(paths: Iterable[Path]) -> List[Assist]:
    """
    Collect all assists described in the given source files, sorted by id.
    """
    assists: List[Assist] = []
    for path in paths:
        assists.extend(scan_file(path))

    assists = sort_assists(assists)
    check_unique_ids(assists)
    return assists
