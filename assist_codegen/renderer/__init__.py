"""
Collected assists (:py:mod:`assist_codegen.collector`) are rendered into two
generated files: a Rust test module which checks every example and a markdown
document describing every assist.

Both renderers consume the same (sorted) list of
:py:class:`~assist_codegen.assist.Assist` records and are independent of each
other. Both are implemented as :py:mod:`jinja2` templates (see
:py:mod:`assist_codegen.templates`).

:py:mod:`assist_codegen.renderer.tests`: Generated tests
========================================================

.. automodule:: assist_codegen.renderer.tests

:py:mod:`assist_codegen.renderer.docs`: Generated documentation
===============================================================

.. automodule:: assist_codegen.renderer.docs

"""
