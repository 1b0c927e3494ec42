"""
Assist examples may contain lines which are needed to make the generated test
compile but which only add noise to the documentation. These lines are
prefixed with ``#`` (in the style of rustdoc), for example::

    # struct Foo;
    fn frobnicate(<|>foo: Foo) {}

:py:func:`hide` removes such lines (for the documentation) while
:py:func:`reveal` keeps them with the marker stripped (for the tests).

.. autofunction:: hide

.. autofunction:: reveal

.. autofunction:: show_cursor
"""

from typing import List


HIDDEN_LINE_PREFIX = "# "
HIDDEN_EMPTY_LINE = "#"

CURSOR = "<|>"
CURSOR_GLYPH = "┃"  # Unicode pseudo-graphics bar


def _lines(text: str) -> List[str]:
    """
    Split text into lines. A trailing newline does not start an extra (empty)
    line and the empty string contains no lines at all.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _is_hidden(line: str) -> bool:
    return line == HIDDEN_EMPTY_LINE or line.startswith(HIDDEN_LINE_PREFIX)


def hide(text: str) -> str:
    """
    Remove all hidden lines. Every remaining line is newline terminated.

    Example::

        >>> hide("a\\n# b\\nc")
        'a\\nc\\n'
    """
    return "".join(f"{line}\n" for line in _lines(text) if not _is_hidden(line))


def reveal(text: str) -> str:
    """
    Strip the hidden-line marker from all hidden lines, keeping their
    contents. Every line is newline terminated.

    Example::

        >>> reveal("a\\n# b\\nc")
        'a\\nb\\nc\\n'
    """
    out = []
    for line in _lines(text):
        if line.startswith(HIDDEN_LINE_PREFIX):
            line = line[len(HIDDEN_LINE_PREFIX) :]
        elif line == HIDDEN_EMPTY_LINE:
            line = ""
        out.append(f"{line}\n")
    return "".join(out)


def show_cursor(text: str) -> str:
    """Replace the ``<|>`` cursor placeholder with a visible glyph."""
    return text.replace(CURSOR, CURSOR_GLYPH)
