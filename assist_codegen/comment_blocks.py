"""
Extraction of contiguous ``//`` comment blocks from source files.
"""

from typing import List


COMMENT_PREFIX = "// "
EMPTY_COMMENT = "//"


def extract_comment_blocks(
    text: str, allow_empty_lines: bool = False
) -> List[List[str]]:
    """
    Extract runs of consecutive line comments from a source file.

    Each block is given as a list of lines with the leading indentation and
    ``"// "`` prefix removed. Any line which is not a ``"// "`` comment ends
    the current block.

    Parameters
    ==========
    text : str
        The source file contents.
    allow_empty_lines : bool
        If True, bare ``//`` lines are included in the block as empty strings
        rather than ending it.
    """
    blocks: List[List[str]] = []
    block: List[str] = []

    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        line = line.lstrip()
        if allow_empty_lines and line == EMPTY_COMMENT:
            block.append("")
        elif line.startswith(COMMENT_PREFIX):
            block.append(line[len(COMMENT_PREFIX) :])
        elif block:
            blocks.append(block)
            block = []

    if block:
        blocks.append(block)

    return blocks


def extract_comment_blocks_with_empty_lines(text: str) -> List[List[str]]:
    return extract_comment_blocks(text, allow_empty_lines=True)
