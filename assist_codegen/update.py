"""
Writing (or verifying) generated files.

.. autoclass:: Mode
    :members:
    :undoc-members:

.. autofunction:: update
"""

from enum import Enum, auto

from pathlib import Path

import logging

from assist_codegen.exceptions import StaleFileError

logger = logging.getLogger(__name__)


class Mode(Enum):
    """How :py:func:`update` handles a generated file."""

    overwrite = auto()
    """Write the generated contents if the file is out of date."""

    verify = auto()
    """Fail if the file is out of date, never writing anything."""


def update(path: Path, contents: str, mode: Mode) -> bool:
    """
    Make sure the file at path holds exactly the given contents.

    Files which already match are never written. Otherwise, in
    :py:attr:`Mode.overwrite` the file is (re)written while in
    :py:attr:`Mode.verify` a :py:exc:`~assist_codegen.exceptions.StaleFileError`
    is thrown and the file is left untouched.

    Returns True if the file was written.
    """
    new_contents = contents.encode("utf-8")

    if path.is_file() and path.read_bytes() == new_contents:
        return False

    if mode is Mode.verify:
        raise StaleFileError(
            f"`{path}` is not up-to-date, generated output is stale. "
            f"Re-run the generator to update it."
        )

    logger.info("updating %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(new_contents)
    return True
