"""
The ``assist-codegen`` command regenerates the assist tests and documentation
from the assist description comments in a project.

Usage::

    $ assist-codegen [PROJECT_ROOT]

The generated test module and markdown documentation are rewritten if (and only
if) they are out of date.

In CI, the ``--verify`` (or ``-c``) flag may be used to check that the
generated files are up to date without writing anything. A non-zero exit
status is returned when any generated file is stale.

Malformed assist descriptions (e.g. a description which is not a full
sentence) are always fatal. In all cases the problem is printed to stderr and
a non-zero exit status is returned.
"""

import sys

import logging

from argparse import ArgumentParser

from pathlib import Path

from assist_codegen.config import CodegenConfig
from assist_codegen.exceptions import CodegenError
from assist_codegen.generate import generate
from assist_codegen.update import Mode


def main() -> None:
    parser = ArgumentParser(
        description="""
            Generate assist tests and documentation from assist description
            comments.
        """,
    )

    parser.add_argument(
        "project_root",
        type=Path,
        nargs="?",
        default=Path("."),
        help="""
            The root directory of the project. Defaults to the current
            directory.
        """,
    )

    parser.add_argument(
        "--verify",
        "-c",
        action="store_true",
        default=False,
        help="""
            Check that the generated files are up to date rather than writing
            them.
        """,
    )

    parser.add_argument(
        "--no-format",
        "-F",
        action="store_true",
        default=False,
        help="""
            Do not run the generated test module through rustfmt.
        """,
    )

    parser.add_argument(
        "--assists-dir",
        type=Path,
        default=None,
        help="""
            The directory containing the assist sources. Defaults to
            crates/ra_assists/src/handlers within the project root.
        """,
    )
    parser.add_argument(
        "--tests-path",
        type=Path,
        default=None,
        help="""
            The generated test module filename. Defaults to
            crates/ra_assists/src/tests/generated.rs within the project root.
        """,
    )
    parser.add_argument(
        "--docs-path",
        type=Path,
        default=None,
        help="""
            The generated documentation filename. Defaults to
            docs/user/assists.md within the project root.
        """,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="""
            Report progress. Give twice for debugging output.
        """,
    )

    args = parser.parse_args()

    logging.basicConfig(
        format="%(message)s",
        level={0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG),
    )

    overrides = {
        name: getattr(args, name)
        for name in ("assists_dir", "tests_path", "docs_path")
        if getattr(args, name) is not None
    }
    if args.no_format:
        overrides["formatter"] = None
    config = CodegenConfig.from_project_root(args.project_root, **overrides)

    try:
        generate(config, Mode.verify if args.verify else Mode.overwrite)
    except CodegenError as e:
        sys.stderr.write(f"Error: {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
