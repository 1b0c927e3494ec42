import pytest

from textwrap import dedent

from pathlib import Path

from assist_codegen.assist import Assist

from assist_codegen.collector import (
    iter_source_files,
    scan_source,
    scan_file,
    sort_assists,
    check_unique_ids,
    collect_assists,
)

from assist_codegen.exceptions import (
    DuplicateAssistIdError,
    InvalidAssistDocError,
    SourceDirectoryError,
    SourceEncodingError,
)


def assist_source(assist_id: str, doc: str = "Does a thing.") -> str:
    return dedent(
        f"""
        use crate::{{AssistCtx, Assist}};

        // Assist: {assist_id}
        //
        // {doc}
        //
        // ```
        // fn main() {{
        //     <|>foo();
        // }}
        // ```
        // ->
        // ```
        // fn main() {{
        //     bar();
        // }}
        // ```
        pub(crate) fn {assist_id}(ctx: AssistCtx) -> Option<Assist> {{
            // Not an assist
            None
        }}
        """
    )


class TestIterSourceFiles:
    def test_recursive_and_sorted(self, tmp_path: Path) -> None:
        (tmp_path / "b.rs").touch()
        (tmp_path / "a.rs").touch()
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "c.rs").touch()
        (tmp_path / "readme.md").touch()
        assert list(iter_source_files(tmp_path)) == [
            tmp_path / "a.rs",
            tmp_path / "b.rs",
            tmp_path / "sub" / "c.rs",
        ]

    def test_other_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "a.rs").touch()
        (tmp_path / "b.txt").touch()
        assert list(iter_source_files(tmp_path, ".txt")) == [tmp_path / "b.txt"]

    def test_empty(self, tmp_path: Path) -> None:
        assert list(iter_source_files(tmp_path)) == []

    def test_not_a_directory(self, tmp_path: Path) -> None:
        with pytest.raises(SourceDirectoryError):
            list(iter_source_files(tmp_path / "missing"))


class TestScanSource:
    def test_no_assists(self) -> None:
        assert scan_source("") == []
        assert scan_source("// Just a comment\nfn main() {}\n") == []

    def test_single_assist(self) -> None:
        assert scan_source(assist_source("foo")) == [
            Assist(
                id="foo",
                doc="Does a thing.",
                before="fn main() {\n    <|>foo();\n}",
                after="fn main() {\n    bar();\n}",
            ),
        ]

    def test_file_order_kept(self) -> None:
        text = assist_source("zzz") + assist_source("aaa")
        assert [assist.id for assist in scan_source(text)] == ["zzz", "aaa"]

    def test_errors_propagate(self) -> None:
        with pytest.raises(InvalidAssistDocError):
            scan_source(assist_source("foo", doc="does a thing"))


class TestScanFile:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "foo.rs"
        path.write_text(assist_source("foo"), encoding="utf-8")
        assert [assist.id for assist in scan_file(path)] == ["foo"]

    def test_error_includes_filename(self, tmp_path: Path) -> None:
        path = tmp_path / "foo.rs"
        path.write_text(assist_source("foo", doc="does a thing"), encoding="utf-8")
        with pytest.raises(InvalidAssistDocError) as exc_info:
            scan_file(path)
        assert str(exc_info.value).startswith(f"{path}: foo: ")
        assert "does a thing" in str(exc_info.value)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "foo.rs"
        path.write_bytes(b"\xff\xfe// Assist: foo\n")
        with pytest.raises(SourceEncodingError) as exc_info:
            scan_file(path)
        assert str(exc_info.value).startswith(f"{path}: ")

    def test_crlf_source(self, tmp_path: Path) -> None:
        path = tmp_path / "foo.rs"
        path.write_bytes(assist_source("foo").replace("\n", "\r\n").encode("utf-8"))
        (assist,) = scan_file(path)
        assert assist.id == "foo"
        assert "\r" not in assist.before + assist.after


def test_sort_assists() -> None:
    foo_bar = Assist("foo_bar", "Foo.", "", "")
    add_import = Assist("add_import", "Add.", "", "")
    assert sort_assists([foo_bar, add_import]) == [add_import, foo_bar]


def test_sort_assists_stable() -> None:
    first = Assist("same", "First.", "", "")
    second = Assist("same", "Second.", "", "")
    other = Assist("other", "Other.", "", "")
    assert sort_assists([first, other, second]) == [other, first, second]


def test_sort_assists_code_point_order() -> None:
    ids = ["foo_bar", "foo", "foobar", "_foo"]
    assists = [Assist(assist_id, "Doc.", "", "") for assist_id in ids]
    assert [a.id for a in sort_assists(assists)] == ["_foo", "foo", "foo_bar", "foobar"]


class TestCheckUniqueIds:
    def test_unique(self) -> None:
        check_unique_ids([Assist("a", "A.", "", ""), Assist("b", "B.", "", "")])

    def test_duplicate(self) -> None:
        with pytest.raises(DuplicateAssistIdError, match="'a'"):
            check_unique_ids([Assist("a", "A.", "", ""), Assist("a", "B.", "", "")])


class TestCollectAssists:
    def test_sorted_across_files(self, tmp_path: Path) -> None:
        (tmp_path / "a.rs").write_text(assist_source("foo_bar"), encoding="utf-8")
        (tmp_path / "b.rs").write_text(
            assist_source("zzz") + assist_source("add_import"), encoding="utf-8"
        )
        assists = collect_assists(iter_source_files(tmp_path))
        assert [assist.id for assist in assists] == ["add_import", "foo_bar", "zzz"]

    def test_no_files(self) -> None:
        assert collect_assists([]) == []

    def test_duplicate_across_files(self, tmp_path: Path) -> None:
        (tmp_path / "a.rs").write_text(assist_source("foo"), encoding="utf-8")
        (tmp_path / "b.rs").write_text(assist_source("foo"), encoding="utf-8")
        with pytest.raises(DuplicateAssistIdError):
            collect_assists(iter_source_files(tmp_path))
