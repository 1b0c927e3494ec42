"""
Renders the user-facing markdown listing of every assist.

.. autofunction:: render_docs
"""

from typing import Sequence

from assist_codegen.assist import Assist

from assist_codegen.hash_comments import CURSOR_GLYPH

from assist_codegen.templates import assists_docs_template


def render_docs(assists: Sequence[Assist]) -> str:
    """
    Render the assists markdown document, one section per assist in the order
    given. Hidden lines are removed from the examples and the cursor
    placeholder is replaced with a visible glyph.
    """
    return assists_docs_template.render(assists=assists, cursor_glyph=CURSOR_GLYPH)
