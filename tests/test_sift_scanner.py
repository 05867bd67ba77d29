"""Tests for sift/scanner.py: alias discovery and literal collection.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from hypothesis import given

from i18nmerge.constants import MAX_SOURCE_SIZE
from i18nmerge.diagnostics import DiagnosticCode, ScanError
from i18nmerge.sift import (
    collect_literals,
    discover_alias,
    parse_source_file,
    sift,
    strip_literal_quotes,
)
from tests.strategies import go_sources_with_alias


def write(path: Path, source: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    return path


def main_file(body: str) -> str:
    return f"package main\n\nfunc main() {{\n{body}\n}}\n"


# ============================================================================
# End-to-end sifting
# ============================================================================


class TestSift:
    """sift() over directories and single files."""

    def test_alias_and_calls_in_different_files(self, tmp_path: Path) -> None:
        """The alias bound in one file is collected from another."""
        write(tmp_path / "a.go", main_file('\tt := i18n.MustTfunc("en-US")\n\trun(t)'))
        write(
            tmp_path / "b.go",
            "package main\n\n"
            "func run(t func(string) string) {\n"
            '\tfmt.Println(t("hello.world"))\n'
            "}\n",
        )

        result = sift(tmp_path)

        assert result.alias == "t"
        assert result.literals == ('"hello.world"',)
        assert result.identifiers == ("hello.world",)
        assert [path.name for path in result.files] == ["a.go", "b.go"]

    def test_single_file(self, tmp_path: Path) -> None:
        """A file path is scanned on its own."""
        source = write(
            tmp_path / "main.go",
            main_file(
                '\tT := i18n.MustTfunc("en-US")\n'
                '\tT("program.greeting")\n'
                '\tT("program.farewell")'
            ),
        )

        assert sift(source).identifiers == ("program.greeting", "program.farewell")

    def test_no_alias_warns_and_extracts_nothing(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Without a binding, no identifiers are extracted and a warning is logged."""
        write(tmp_path / "main.go", main_file('\tt("orphan")'))

        with caplog.at_level(logging.WARNING, logger="i18nmerge.sift.scanner"):
            result = sift(tmp_path)

        assert result.alias is None
        assert result.identifiers == ()
        assert "no i18n.MustTfunc alias found" in caplog.text

    def test_empty_directory(self, tmp_path: Path) -> None:
        """No source files means no alias and no identifiers."""
        result = sift(tmp_path)
        assert result.files == ()
        assert result.alias is None

    def test_custom_factory(self, tmp_path: Path) -> None:
        """The factory qualifier and name are configurable."""
        write(
            tmp_path / "main.go",
            main_file(
                '\ttr := locale.Translator("de")\n'
                '\ttr("menu.open")\n'
                '\tt := i18n.MustTfunc("en")'
            ),
        )

        result = sift(tmp_path, ("locale", "Translator"))

        assert result.alias == "tr"
        assert result.identifiers == ("menu.open",)

    @given(go_sources_with_alias())
    def test_generated_sources(self, tmp_path: Path, case: tuple[str, str, list[str]]) -> None:
        """Every literal passed to the alias is extracted, in call order."""
        source, alias, ids = case
        path = write(tmp_path / "main.go", source)

        result = sift(path)

        assert result.alias == alias
        assert list(result.identifiers) == ids


# ============================================================================
# Pass one: alias discovery
# ============================================================================


class TestDiscoverAlias:
    """discover_alias() finds the first factory binding."""

    def test_first_binding_wins(self, tmp_path: Path) -> None:
        """Files are searched in order; the first match is used."""
        first = write(tmp_path / "a.go", main_file('\tT := i18n.MustTfunc("en")'))
        second = write(tmp_path / "b.go", main_file('\tU := i18n.MustTfunc("fr")'))

        assert discover_alias([first, second]) == "T"
        assert discover_alias([second, first]) == "U"

    def test_later_files_not_parsed_after_match(self, tmp_path: Path) -> None:
        """A broken file after the binding does not fail discovery."""
        good = write(tmp_path / "a.go", main_file('\tT := i18n.MustTfunc("en")'))
        broken = write(tmp_path / "b.go", "package main\nfunc (\n")

        assert discover_alias([good, broken]) == "T"

    def test_plain_assignment(self, tmp_path: Path) -> None:
        """`=` binds as well as `:=`."""
        body = '\tvar T func(string) string\n\tT = i18n.MustTfunc("en")'
        path = write(tmp_path / "a.go", main_file(body))
        assert discover_alias([path]) == "T"

    def test_first_of_several_targets(self, tmp_path: Path) -> None:
        """With several targets, the first one is the alias."""
        path = write(tmp_path / "a.go", main_file('\tT, err := i18n.MustTfunc("en"), nil'))
        assert discover_alias([path]) == "T"

    def test_binding_in_if_header(self, tmp_path: Path) -> None:
        """Init statements of if headers are searched."""
        path = write(
            tmp_path / "a.go",
            main_file('\tif T := i18n.MustTfunc("en"); T != nil {\n\t\tT("x")\n\t}'),
        )
        assert discover_alias([path]) == "T"

    def test_var_declaration_not_recognized(self, tmp_path: Path) -> None:
        """`var T = i18n.MustTfunc(...)` is a declaration, not an assignment."""
        path = write(tmp_path / "a.go", 'package main\n\nvar T = i18n.MustTfunc("en")\n')
        assert discover_alias([path]) is None

    def test_other_qualifier_ignored(self, tmp_path: Path) -> None:
        """Only the configured package qualifier matches."""
        path = write(tmp_path / "a.go", main_file('\tT := other.MustTfunc("en")'))
        assert discover_alias([path]) is None

    def test_wrapped_call_ignored(self, tmp_path: Path) -> None:
        """The factory call must be the whole right-hand expression."""
        path = write(tmp_path / "a.go", main_file('\tT := wrap(i18n.MustTfunc("en"))'))
        assert discover_alias([path]) is None


# ============================================================================
# Pass two: literal collection
# ============================================================================


class TestCollectLiterals:
    """collect_literals() gathers string arguments of alias calls."""

    def test_non_literal_arguments_ignored(self, tmp_path: Path) -> None:
        """Identifiers, expressions and numbers are not message ids."""
        path = write(
            tmp_path / "a.go",
            main_file('\tT(key)\n\tT("a" + b)\n\tT(42)\n\tT("count", data)'),
        )
        assert collect_literals([path], "T") == ['"count"']

    def test_raw_and_escaped_literals_kept_verbatim(self, tmp_path: Path) -> None:
        """Quotes are kept and escapes are not interpreted."""
        path = write(tmp_path / "a.go", main_file('\tT(`raw.id`)\n\tT("say \\"hi\\"")'))
        assert collect_literals([path], "T") == ["`raw.id`", '"say \\"hi\\""']

    def test_method_calls_not_collected(self, tmp_path: Path) -> None:
        """`x.T("id")` is a selector call, not a call of T."""
        path = write(tmp_path / "a.go", main_file('\tx.T("id")\n\tT("kept")'))
        assert collect_literals([path], "T") == ['"kept"']

    def test_nested_calls_collected(self, tmp_path: Path) -> None:
        """Calls inside argument lists and closures are found."""
        path = write(
            tmp_path / "a.go",
            main_file('\tfmt.Println(T("outer"), func() string { return T("inner") }())'),
        )
        assert collect_literals([path], "T") == ['"outer"', '"inner"']

    def test_duplicates_kept(self, tmp_path: Path) -> None:
        """Each call contributes, even for a repeated id."""
        path = write(tmp_path / "a.go", main_file('\tT("same")\n\tT("same")'))
        assert collect_literals([path], "T") == ['"same"', '"same"']

    def test_empty_alias(self, tmp_path: Path) -> None:
        """An empty alias collects nothing."""
        path = write(tmp_path / "a.go", main_file('\tT("x")'))
        assert collect_literals([path], "") == []

    def test_strip_literal_quotes(self) -> None:
        """The delimiters are removed, nothing else."""
        assert strip_literal_quotes('"hello.world"') == "hello.world"
        assert strip_literal_quotes("`raw`") == "raw"
        assert strip_literal_quotes('"a\\nb"') == "a\\nb"
        assert strip_literal_quotes('""') == ""


# ============================================================================
# Failures
# ============================================================================


class TestScanErrors:
    """Unreadable or unparsable sources raise ScanError."""

    def test_syntax_error_names_file_and_position(self, tmp_path: Path) -> None:
        """Parser errors are attributed to the file."""
        path = write(tmp_path / "bad.go", "package main\n\nfunc f() {\n\tx := \"open\n}\n")

        with pytest.raises(ScanError) as exc_info:
            parse_source_file(path)

        error = exc_info.value
        assert error.path == path
        assert (error.line, error.column) == (4, 7)
        assert str(error).startswith(f"{path}:4:7: ")
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.SOURCE_SYNTAX

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is SOURCE_UNREADABLE."""
        with pytest.raises(ScanError) as exc_info:
            parse_source_file(tmp_path / "missing.go")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SOURCE_UNREADABLE

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Sources must be UTF-8."""
        path = tmp_path / "latin1.go"
        path.write_bytes(b'package main\n\nvar s = "caf\xe9"\n')
        with pytest.raises(ScanError, match="not valid UTF-8"):
            parse_source_file(path)

    def test_oversized_file(self, tmp_path: Path) -> None:
        """Files larger than MAX_SOURCE_SIZE are rejected before parsing."""
        path = tmp_path / "huge.go"
        path.write_bytes(b"package main\n" + b"/" * MAX_SOURCE_SIZE)
        with pytest.raises(ScanError, match="exceeds"):
            parse_source_file(path)

    def test_collection_propagates_errors(self, tmp_path: Path) -> None:
        """Pass two fails on the first file that does not parse."""
        good = write(tmp_path / "a.go", main_file('\tT := i18n.MustTfunc("en")'))
        broken = write(tmp_path / "b.go", "package main\nfunc (\n")
        with pytest.raises(ScanError):
            sift(tmp_path)
        with pytest.raises(ScanError):
            collect_literals([good, broken], "T")
