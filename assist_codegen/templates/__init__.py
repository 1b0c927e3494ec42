from jinja2 import Environment, PackageLoader

from assist_codegen.hash_comments import hide, reveal, show_cursor

env = Environment(
    loader=PackageLoader("assist_codegen", "templates"),
    autoescape=False,
    trim_blocks=True,
    keep_trailing_newline=True,
)
env.filters["hide"] = hide
env.filters["reveal"] = reveal
env.filters["show_cursor"] = show_cursor

generated_tests_template = env.get_template("generated_tests.rs")
assists_docs_template = env.get_template("assists.md")
