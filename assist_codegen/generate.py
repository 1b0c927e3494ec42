"""
Top-level generation of the assist tests and documentation.

.. autofunction:: generate

.. autofunction:: generate_assists_tests

.. autofunction:: generate_assists_docs
"""

from typing import Sequence

import logging

from assist_codegen.assist import Assist
from assist_codegen.collector import collect_assists, iter_source_files
from assist_codegen.config import CodegenConfig
from assist_codegen.reformat import reformat
from assist_codegen.renderer.docs import render_docs
from assist_codegen.renderer.tests import render_tests
from assist_codegen.update import Mode, update

logger = logging.getLogger(__name__)


def generate_assists_tests(
    assists: Sequence[Assist], config: CodegenConfig, mode: Mode
) -> bool:
    """Generate the assist test module. Returns True if it was written."""
    source = reformat(render_tests(assists), config.formatter)
    return update(config.tests_path, source, mode)


def generate_assists_docs(
    assists: Sequence[Assist], config: CodegenConfig, mode: Mode
) -> bool:
    """Generate the assist documentation. Returns True if it was written."""
    return update(config.docs_path, render_docs(assists), mode)


def generate(config: CodegenConfig, mode: Mode = Mode.overwrite) -> None:
    """
    Collect all assists and generate (or, in :py:attr:`Mode.verify`, check)
    both the test module and the documentation.

    Raises
    ======
    CodegenError
        Any malformed assist or (in verify mode) stale generated file aborts
        generation.
    """
    assists = collect_assists(iter_source_files(config.assists_dir))
    logger.info("Collected %d assist(s) from %s", len(assists), config.assists_dir)

    generate_assists_tests(assists, config, mode)
    generate_assists_docs(assists, config, mode)
