import pytest

from textwrap import dedent

from assist_codegen.comment_blocks import (
    extract_comment_blocks,
    extract_comment_blocks_with_empty_lines,
)


class TestExtractCommentBlocks:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "fn main() {}",
            # Doc comments are not line comments
            "/// Docs\n//! Module docs",
            # Empty comments without allow_empty_lines
            "//\n//",
        ],
    )
    def test_no_blocks(self, text: str) -> None:
        assert extract_comment_blocks(text) == []

    def test_single_block(self) -> None:
        assert extract_comment_blocks("// foo\n// bar\n") == [["foo", "bar"]]

    def test_indentation_stripped(self) -> None:
        assert extract_comment_blocks("    // foo\n\t// bar") == [["foo", "bar"]]

    def test_only_prefix_removed(self) -> None:
        assert extract_comment_blocks("//   foo") == [["  foo"]]

    def test_multiple_blocks(self) -> None:
        text = dedent(
            """
            // first
            // block
            fn foo() {}

            // second
            fn bar() {
                // third
            }
            """
        )
        assert extract_comment_blocks(text) == [
            ["first", "block"],
            ["second"],
            ["third"],
        ]

    def test_empty_comment_ends_block(self) -> None:
        assert extract_comment_blocks("// foo\n//\n// bar") == [["foo"], ["bar"]]

    def test_empty_comment_kept(self) -> None:
        assert extract_comment_blocks("// foo\n//\n// bar", allow_empty_lines=True) == [
            ["foo", "", "bar"]
        ]

    def test_with_empty_lines_shorthand(self) -> None:
        text = dedent(
            """
            // Assist: foo
            //
            // Does foo.
            fn foo() {}
            """
        )
        assert extract_comment_blocks_with_empty_lines(text) == [
            ["Assist: foo", "", "Does foo."],
        ]


class TestLineEndings:
    def test_crlf(self) -> None:
        text = "// foo\r\n//\r\n// bar\r\n"
        assert extract_comment_blocks_with_empty_lines(text) == [["foo", "", "bar"]]

    @pytest.mark.parametrize("separator", ["\f", "\v", "\x1c", "\x85", " "])
    def test_only_newline_splits_lines(self, separator: str) -> None:
        assert extract_comment_blocks(f"// foo{separator}bar\n// baz") == [
            [f"foo{separator}bar", "baz"]
        ]
