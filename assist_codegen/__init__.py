"""
Generates the assist tests and the user-facing assist documentation from the
specially formatted comments found above each assist implementation.

An assist's comment looks like this::

    // Assist: add_import
    //
    // Adds an import.
    //
    // ```
    // fn main() { <|>io::stdin(); }
    // ```
    // ->
    // ```
    // use std::io;
    //
    // fn main() { io::stdin(); }
    // ```

The comments are collected by :py:mod:`assist_codegen.collector`, parsed into
:py:class:`~assist_codegen.assist.Assist` records and rendered by
:py:mod:`assist_codegen.renderer` into a generated test module and a markdown
document. :py:mod:`assist_codegen.update` then writes (or verifies) the
generated files.
"""

__version__ = "1.0"
