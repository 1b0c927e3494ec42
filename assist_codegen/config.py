"""
Locations of the assist sources and generated files.

.. autoclass:: CodegenConfig
    :members:
"""

from typing import Any, Optional, Tuple

from dataclasses import dataclass, replace

from pathlib import Path


ASSISTS_DIR = Path("crates", "ra_assists", "src", "handlers")
ASSISTS_TESTS = Path("crates", "ra_assists", "src", "tests", "generated.rs")
ASSISTS_DOCS = Path("docs", "user", "assists.md")

DEFAULT_FORMATTER: Tuple[str, ...] = ("rustfmt", "--edition", "2018")


@dataclass(frozen=True)
class CodegenConfig:
    assists_dir: Path
    """The directory (searched recursively) containing assist sources."""

    tests_path: Path
    """The generated test module."""

    docs_path: Path
    """The generated markdown documentation."""

    formatter: Optional[Tuple[str, ...]] = DEFAULT_FORMATTER
    """
    The command used to format the generated test module (see
    :py:func:`assist_codegen.reformat.reformat`) or None to leave it
    unformatted.
    """

    @classmethod
    def from_project_root(cls, root: Path, **overrides: Any) -> "CodegenConfig":
        """
        Create a configuration using the default locations within a project.
        Any field may be overridden using keyword arguments.
        """
        config = cls(
            assists_dir=root / ASSISTS_DIR,
            tests_path=root / ASSISTS_TESTS,
            docs_path=root / ASSISTS_DOCS,
        )
        return replace(config, **overrides)
