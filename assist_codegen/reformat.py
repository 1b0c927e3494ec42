"""
Formatting of generated Rust sources with an external formatter (typically
``rustfmt``).

.. autofunction:: reformat
"""

from typing import Optional, Sequence

import subprocess

from assist_codegen.exceptions import FormatterError


PREAMBLE = "Generated file, do not edit by hand, see `assist_codegen`"


def reformat(text: str, command: Optional[Sequence[str]]) -> str:
    """
    Format a generated source file and prefix it with a 'do not edit'
    preamble.

    Parameters
    ==========
    text : str
        The unformatted source.
    command : [str, ...] or None
        The formatter command line. The source is written to its stdin and the
        formatted source read from its stdout. If None, the source is not
        formatted (but the preamble is still added).

    Raises
    ======
    FormatterError
        If the formatter could not be started or exits with an error.
    """
    if command is not None:
        try:
            result = subprocess.run(
                list(command),
                input=text,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                encoding="utf-8",
            )
        except OSError as e:
            raise FormatterError(f"Could not run {' '.join(command)}: {e}")
        if result.returncode != 0:
            raise FormatterError(
                f"{' '.join(command)} failed (exit status {result.returncode}):\n"
                f"{result.stderr}"
            )
        text = result.stdout

    return f"//! {PREAMBLE}\n\n{text.rstrip()}\n"
