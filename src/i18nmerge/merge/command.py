"""The merge command.

Loads catalogs, optionally sifts Go source for new message identifiers,
reconciles every locale against the source locale, and writes the all and
untranslated views of every locale.

Configuration is validated before any file is read: no catalog files, an
invalid source locale or an unsupported output format fail the run with
nothing loaded and nothing written.

Python 3.13+.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from i18nmerge.catalog import Bundle, MessageId, new_locale, new_marshal_func
from i18nmerge.constants import (
    DEFAULT_FACTORY,
    DEFAULT_FORMAT,
    DEFAULT_OUTDIR,
    DEFAULT_SOURCE_LOCALE,
)
from i18nmerge.diagnostics import ConfigurationError, ErrorTemplate
from i18nmerge.sift import ScanResult
from i18nmerge.sift import sift as sift_sources

from .reconcile import add_discovered, reconcile
from .views import build_views
from .writer import write_view

__all__ = ["MergeCommand", "MergeReport"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MergeReport:
    """What a merge run did.

    Attributes:
        source_locale_id: Canonical source locale id
        locale_ids: Locales written, in output order
        written: Output files, in write order
        scan: Sift result, or None when no sift path was given
        inserted: Discovered identifiers added to the source catalog
        placeholders: Entries added to non-source locales by reconciliation
    """

    source_locale_id: str
    locale_ids: tuple[str, ...]
    written: tuple[Path, ...]
    scan: ScanResult | None
    inserted: tuple[MessageId, ...]
    placeholders: int


@dataclass(frozen=True, slots=True)
class MergeCommand:
    """Merge run configuration.

    Attributes:
        translation_files: Catalog files to load, in load order
        source_locale_id: Locale whose identifiers every locale must have
        outdir: Existing directory receiving the output files
        format: Output format name ("json" or "yaml")
        sift: Go source directory or file to extract identifiers from
        factory: (package, function) whose result binds the translation alias

    Example:
        >>> report = MergeCommand((Path("en-US.json"), Path("fr.json"))).execute()
        >>> report.written[0].name
        'en-US.all.json'
    """

    translation_files: tuple[Path, ...]
    source_locale_id: str = DEFAULT_SOURCE_LOCALE
    outdir: Path = Path(DEFAULT_OUTDIR)
    format: str = DEFAULT_FORMAT
    sift: Path | None = None
    factory: tuple[str, str] = DEFAULT_FACTORY

    def execute(self) -> MergeReport:
        """Run the merge.

        Raises:
            ConfigurationError: No catalog files, invalid source locale or
                unsupported format (before any I/O)
            CatalogLoadError: A catalog file cannot be loaded
            ScanError: A source file cannot be read or parsed
            CatalogWriteError: An output file cannot be written
        """
        if not self.translation_files:
            raise ConfigurationError(ErrorTemplate.no_translation_files())
        source_locale = new_locale(self.source_locale_id)
        marshal = new_marshal_func(self.format)

        bundle = Bundle()
        for path in self.translation_files:
            bundle.load_translation_file(path)
        bundle.ensure_locale(source_locale)

        scan: ScanResult | None = None
        inserted: list[MessageId] = []
        if self.sift is not None:
            scan = sift_sources(self.sift, self.factory)
            inserted = add_discovered(bundle, source_locale, scan.identifiers)
            logger.info(
                "Added %d of %d discovered identifiers to %s",
                len(inserted),
                len(scan.identifiers),
                source_locale.id,
            )

        placeholders = reconcile(bundle, source_locale.id)

        written: list[Path] = []
        locale_views = build_views(bundle, source_locale.id)
        for views in locale_views:
            for kind, translations in views.items():
                written.append(
                    write_view(
                        self.outdir, views.locale.id, kind, translations, marshal, self.format
                    )
                )

        return MergeReport(
            source_locale_id=source_locale.id,
            locale_ids=tuple(views.locale.id for views in locale_views),
            written=tuple(written),
            scan=scan,
            inserted=tuple(inserted),
            placeholders=placeholders,
        )
