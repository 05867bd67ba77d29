"""Tests for merge/command.py: whole merge runs.

Python 3.13+.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from i18nmerge.diagnostics import (
    CatalogLoadError,
    CatalogWriteError,
    ConfigurationError,
    DiagnosticCode,
    InvalidLocaleError,
    ScanError,
    UnsupportedFormatError,
)
from i18nmerge.merge import MergeCommand

GO_MAIN = """package main

import "github.com/nicksnyder/go-i18n/i18n"

func main() {
\tT := i18n.MustTfunc("en-US")
\tprintln(T("greeting"))
\tprintln(T("farewell"))
}
"""


@pytest.fixture
def outdir(tmp_path: Path) -> Path:
    path = tmp_path / "out"
    path.mkdir()
    return path


def write_catalog(path: Path, records: list[dict[str, object]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def read_json(path: Path) -> object:
    return json.loads(path.read_text(encoding="utf-8"))


class TestMergeRun:
    """Successful runs."""

    def test_two_locales(self, tmp_path: Path, outdir: Path) -> None:
        """Both views are written for both locales."""
        en = write_catalog(tmp_path / "en-US.json", [{"id": "greeting", "translation": "Hi"}])
        fr = write_catalog(tmp_path / "fr.json", [])

        report = MergeCommand((en, fr), outdir=outdir).execute()

        assert report.locale_ids == ("en-US", "fr")
        assert [path.name for path in report.written] == [
            "en-US.all.json",
            "en-US.untranslated.json",
            "fr.all.json",
            "fr.untranslated.json",
        ]
        assert report.placeholders == 1
        assert read_json(outdir / "fr.all.json") == [{"id": "greeting", "translation": ""}]
        assert read_json(outdir / "fr.untranslated.json") == [
            {"id": "greeting", "translation": "Hi"}
        ]
        assert read_json(outdir / "en-US.untranslated.json") == []

    def test_plural_entries(self, tmp_path: Path, outdir: Path) -> None:
        """Plural placeholders take the target language's categories."""
        en = write_catalog(
            tmp_path / "en-US.json",
            [{"id": "files", "translation": {"one": "{n} file", "other": "{n} files"}}],
        )
        pl = write_catalog(tmp_path / "pl.json", [])

        MergeCommand((en, pl), outdir=outdir).execute()

        assert read_json(outdir / "pl.all.json") == [
            {"id": "files", "translation": {"few": "", "many": "", "one": "", "other": ""}}
        ]
        assert read_json(outdir / "pl.untranslated.json") == [
            {
                "id": "files",
                "translation": {"few": "", "many": "", "one": "{n} file", "other": "{n} files"},
            }
        ]

    def test_source_locale_without_file(self, tmp_path: Path, outdir: Path) -> None:
        """The source locale is written even when no file names it."""
        fr = write_catalog(tmp_path / "fr.json", [{"id": "a", "translation": "x"}])

        report = MergeCommand((fr,), outdir=outdir).execute()

        assert report.locale_ids == ("en-US", "fr")
        assert read_json(outdir / "en-US.all.json") == []

    def test_source_locale_canonicalized(self, tmp_path: Path, outdir: Path) -> None:
        """The source locale may be given in POSIX form."""
        en = write_catalog(tmp_path / "en-US.json", [])
        report = MergeCommand((en,), source_locale_id="en_us", outdir=outdir).execute()
        assert report.source_locale_id == "en-US"
        assert report.locale_ids == ("en-US",)

    def test_yaml_output(self, tmp_path: Path, outdir: Path) -> None:
        """The format selects the encoder and the file extension."""
        en = write_catalog(tmp_path / "en-US.json", [{"id": "greeting", "translation": "Hi"}])

        MergeCommand((en,), outdir=outdir, format="yaml").execute()

        assert sorted(path.name for path in outdir.iterdir()) == [
            "en-US.all.yaml",
            "en-US.untranslated.yaml",
        ]
        assert yaml.safe_load((outdir / "en-US.all.yaml").read_text(encoding="utf-8")) == [
            {"id": "greeting", "translation": "Hi"}
        ]

    def test_sift_adds_identifiers(self, tmp_path: Path, outdir: Path) -> None:
        """Identifiers found in Go source reach every locale."""
        source_dir = tmp_path / "src"
        source_dir.mkdir()
        (source_dir / "main.go").write_text(GO_MAIN, encoding="utf-8")
        en = write_catalog(tmp_path / "en-US.json", [{"id": "greeting", "translation": "Hi"}])
        de = write_catalog(tmp_path / "de.json", [])

        report = MergeCommand((en, de), outdir=outdir, sift=source_dir).execute()

        assert report.scan is not None
        assert report.scan.alias == "T"
        assert report.inserted == ("farewell",)
        assert read_json(outdir / "en-US.all.json") == [
            {"id": "farewell", "translation": ""},
            {"id": "greeting", "translation": "Hi"},
        ]
        assert read_json(outdir / "de.untranslated.json") == [
            {"id": "farewell", "translation": ""},
            {"id": "greeting", "translation": "Hi"},
        ]

    def test_rerun_on_own_output_is_stable(self, tmp_path: Path, outdir: Path) -> None:
        """Merging the all views again reproduces them."""
        en = write_catalog(tmp_path / "en-US.json", [{"id": "greeting", "translation": "Hi"}])
        fr = write_catalog(tmp_path / "fr.json", [{"id": "greeting", "translation": "Salut"}])
        MergeCommand((en, fr), outdir=outdir).execute()
        first = {path.name: path.read_bytes() for path in outdir.iterdir()}

        second_out = tmp_path / "second"
        second_out.mkdir()
        MergeCommand(
            (outdir / "en-US.all.json", outdir / "fr.all.json"), outdir=second_out
        ).execute()

        assert {path.name: path.read_bytes() for path in second_out.iterdir()} == first


class TestMergeFailures:
    """Configuration is checked first; failures stop the run."""

    def test_no_files(self, outdir: Path) -> None:
        """At least one catalog file is required."""
        with pytest.raises(ConfigurationError) as exc_info:
            MergeCommand((), outdir=outdir).execute()
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.NO_TRANSLATION_FILES

    def test_invalid_locale_before_loading(self, tmp_path: Path, outdir: Path) -> None:
        """The source locale is checked before any file is read."""
        command = MergeCommand((tmp_path / "missing.json",), source_locale_id="zz", outdir=outdir)
        with pytest.raises(InvalidLocaleError):
            command.execute()

    def test_unsupported_format_before_loading(self, tmp_path: Path, outdir: Path) -> None:
        """An unknown format fails before loading and writes nothing."""
        en = write_catalog(tmp_path / "en-US.json", [{"id": "a", "translation": "x"}])
        with pytest.raises(UnsupportedFormatError, match="unsupported format: xml"):
            MergeCommand((en, tmp_path / "missing.json"), outdir=outdir, format="xml").execute()
        assert list(outdir.iterdir()) == []

    def test_bad_catalog_writes_nothing(self, tmp_path: Path, outdir: Path) -> None:
        """A catalog that fails to load stops the run before output."""
        en = write_catalog(tmp_path / "en-US.json", [])
        bad = tmp_path / "fr.json"
        bad.write_text("{not json", encoding="utf-8")

        with pytest.raises(CatalogLoadError):
            MergeCommand((en, bad), outdir=outdir).execute()
        assert list(outdir.iterdir()) == []

    def test_scan_error_writes_nothing(self, tmp_path: Path, outdir: Path) -> None:
        """A Go file that does not parse stops the run before output."""
        source = tmp_path / "broken.go"
        source.write_text("package main\nfunc main() {\n", encoding="utf-8")
        en = write_catalog(tmp_path / "en-US.json", [])

        with pytest.raises(ScanError):
            MergeCommand((en,), outdir=outdir, sift=source).execute()
        assert list(outdir.iterdir()) == []

    def test_missing_outdir(self, tmp_path: Path) -> None:
        """A missing output directory is a write failure."""
        en = write_catalog(tmp_path / "en-US.json", [])
        with pytest.raises(CatalogWriteError):
            MergeCommand((en,), outdir=tmp_path / "nope").execute()
