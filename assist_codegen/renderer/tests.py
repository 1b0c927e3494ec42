"""
Renders a Rust test module with one test per assist. Each test calls the
shared ``check`` function with the assist's id and its before and after
examples, with hidden lines revealed (see
:py:func:`assist_codegen.hash_comments.reveal`).

.. autofunction:: render_tests

The output is not formatted, see :py:func:`assist_codegen.reformat.reformat`.
"""

from typing import Sequence

from assist_codegen.assist import Assist

from assist_codegen.templates import generated_tests_template


TEST_NAME_PREFIX = "doctest_"
CHECK_FUNCTION = "check"


def doctest_name(assist: Assist) -> str:
    """The name of the generated test function for an assist."""
    return f"{TEST_NAME_PREFIX}{assist.id}"


def render_tests(assists: Sequence[Assist]) -> str:
    """
    Render the (unformatted) Rust source of the generated test module, one test
    per assist in the order given.
    """
    return generated_tests_template.render(
        assists=assists,
        doctest_name=doctest_name,
        check_function=CHECK_FUNCTION,
    )
