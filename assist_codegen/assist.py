"""
Parsing of assist description comment blocks into :py:class:`Assist` records.

An assist description comment block has the following shape (shown with the
comment prefixes already removed)::

    Assist: <id>

    <One sentence description.>

    ```
    <before>
    ```
    ->
    ```
    <after>
    ```

.. autoclass:: Assist

.. autofunction:: is_assist_block

.. autofunction:: parse_assist

Malformed assist blocks are never skipped. Instead one of the following
exceptions (all subclasses of
:py:exc:`~assist_codegen.exceptions.CodegenError`) is thrown:

* :py:exc:`~assist_codegen.exceptions.InvalidAssistIdError`
* :py:exc:`~assist_codegen.exceptions.InvalidAssistDocError`
* :py:exc:`~assist_codegen.exceptions.AssistStructureError`
"""

from typing import Iterator, Sequence, Optional

from dataclasses import dataclass

import string

from assist_codegen.exceptions import (
    AssistStructureError,
    InvalidAssistIdError,
    InvalidAssistDocError,
)


ASSIST_MARKER = "Assist: "
FENCE = "```"
TRANSITION = "->"

ID_CHARACTERS = frozenset(string.ascii_lowercase + "_")


@dataclass(frozen=True)
class Assist:
    """A single assist, as described by its comment block."""

    id: str
    """
    The assist's identifier, consisting only of lowercase ASCII letters and
    underscores.
    """

    doc: str
    """A single sentence describing the assist."""

    before: str
    """The example code before the assist is applied."""

    after: str
    """The example code after the assist has been applied."""


def is_assist_block(block: Sequence[str]) -> bool:
    """Test whether a comment block describes an assist."""
    return len(block) > 0 and block[0].startswith(ASSIST_MARKER)


def take_until(lines: Iterator[str], marker: str) -> str:
    """
    Consume lines up to (and including) the first line equal to marker (or
    until the lines are exhausted). Returns the lines before the marker joined
    by newlines.
    """
    buf = []
    for line in lines:
        if line == marker:
            break
        buf.append(line)
    return "\n".join(buf)


def validate_id(assist_id: str) -> None:
    if not assist_id or not all(c in ID_CHARACTERS for c in assist_id):
        raise InvalidAssistIdError(f"invalid assist id: {assist_id!r}")


def validate_doc(assist_id: str, doc: str) -> None:
    if not (doc and doc[0] in string.ascii_uppercase and doc.endswith(".")):
        raise InvalidAssistDocError(
            f"{assist_id}: assist docs should be proper sentences, with "
            f"capitalization and a full stop at the end.\n\n{doc}"
        )


def expect_line(
    assist_id: str, lines: Iterator[str], expected: str, context: str
) -> None:
    line: Optional[str] = next(lines, None)
    if line is None:
        raise AssistStructureError(
            f"{assist_id}: expected {expected!r} {context} but the comment ended"
        )
    if line != expected:
        raise AssistStructureError(
            f"{assist_id}: expected {expected!r} {context} but found {line!r}"
        )


def parse_assist(block: Sequence[str]) -> Assist:
    """
    Parse an assist description comment block (as identified by
    :py:func:`is_assist_block`).

    Raises
    ======
    InvalidAssistIdError
        If the id contains characters other than lowercase ASCII letters and
        underscores (or is empty).
    InvalidAssistDocError
        If the description does not start with a capital letter and end with a
        full stop.
    AssistStructureError
        If the ``->`` line or the fence which follows it are missing.
    """
    if not is_assist_block(block):
        raise AssistStructureError(
            f"comment block does not start with {ASSIST_MARKER!r}"
        )

    lines = iter(block)

    assist_id = next(lines)[len(ASSIST_MARKER) :]
    validate_id(assist_id)

    doc = take_until(lines, FENCE).strip()
    validate_doc(assist_id, doc)

    before = take_until(lines, FENCE)

    expect_line(assist_id, lines, TRANSITION, "after the 'before' example")
    expect_line(assist_id, lines, FENCE, "before the 'after' example")

    after = take_until(lines, FENCE)

    return Assist(id=assist_id, doc=doc, before=before, after=after)
