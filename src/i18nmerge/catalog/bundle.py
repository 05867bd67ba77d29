"""In-memory collection of catalogs, one per locale.

A Bundle starts empty and is filled by loading catalog files. Several files
may target the same locale; their entries accumulate, and a later entry
with an identifier already present replaces the earlier one.

Python 3.13+.
"""

import logging
from pathlib import Path

import yaml

from i18nmerge.constants import MAX_SOURCE_SIZE
from i18nmerge.diagnostics import (
    CatalogLoadError,
    ErrorTemplate,
    InvalidLocaleError,
    TranslationError,
)

from .formats import CATALOG_EXTENSIONS, format_for_path, unmarshal
from .locale import Locale, new_locale
from .translation import MessageId, Translation, new_translation

__all__ = ["Bundle", "parse_translations"]

logger = logging.getLogger(__name__)

type LocaleCatalog = dict[MessageId, Translation]


def parse_translations(decoded: object) -> list[Translation]:
    """Build entries from a decoded catalog document.

    Accepts a list of {id, translation} records or a flat mapping of
    identifier to translation. An empty document has no entries.

    Raises:
        TranslationError: If the document or one of its records is malformed
    """
    if decoded is None:
        return []
    if isinstance(decoded, list):
        return [new_translation(record) for record in decoded]
    if isinstance(decoded, dict):
        translations = []
        for message_id, translation in decoded.items():
            if not isinstance(message_id, str):
                raise TranslationError(
                    ErrorTemplate.translation_invalid(
                        f"message id must be a string, got {type(message_id).__name__}"
                    )
                )
            translations.append(new_translation({"id": message_id, "translation": translation}))
        return translations
    raise TranslationError(
        ErrorTemplate.translation_invalid(
            f"expected a list of records or a mapping, got {type(decoded).__name__}"
        )
    )


class Bundle:
    """Catalogs keyed by canonical locale identifier.

    Example:
        >>> bundle = Bundle()
        >>> bundle.load_translation_file("locales/fr.json")
        3
        >>> sorted(bundle.translations())
        ['fr']
    """

    __slots__ = ("_locales", "_translations")

    def __init__(self) -> None:
        self._translations: dict[str, LocaleCatalog] = {}
        self._locales: dict[str, Locale] = {}

    @staticmethod
    def locale_for_path(path: Path) -> Locale:
        """Locale named by a catalog file.

        The file name up to its first dot is tried first (fr.json,
        en-US.all.json), then the parent directory name (fr/messages.json).

        Raises:
            CatalogLoadError: If neither names a known locale
        """
        candidates = (path.name.split(".", 1)[0], path.parent.name)
        for candidate in candidates:
            if not candidate:
                continue
            try:
                return new_locale(candidate)
            except InvalidLocaleError:
                logger.debug("%r in %s is not a locale", candidate, path)
        raise CatalogLoadError(ErrorTemplate.catalog_locale_unknown(path), path=path)

    def load_translation_file(self, path: Path | str) -> int:
        """Read a catalog file and add its entries.

        Args:
            path: .json, .yaml or .yml catalog

        Returns:
            Number of entries read

        Raises:
            CatalogLoadError: If the file cannot be read, decoded or mapped
                to a locale, or holds a malformed record
        """
        path = Path(path)
        if format_for_path(path) is None:
            raise CatalogLoadError(
                ErrorTemplate.catalog_format_unknown(path, tuple(CATALOG_EXTENSIONS)), path=path
            )
        try:
            data = path.read_bytes()
        except OSError as e:
            raise CatalogLoadError(
                ErrorTemplate.catalog_unreadable(path, e.strerror or str(e)), path=path
            ) from e
        if len(data) > MAX_SOURCE_SIZE:
            raise CatalogLoadError(
                ErrorTemplate.catalog_unreadable(path, f"it exceeds {MAX_SOURCE_SIZE} bytes"),
                path=path,
            )
        return self.parse_translation_file_bytes(path, data)

    def parse_translation_file_bytes(self, path: Path, data: bytes) -> int:
        """Decode catalog content named by path and add its entries.

        The path is only used for its locale and extension; nothing is read.

        Returns:
            Number of entries read

        Raises:
            CatalogLoadError: As for load_translation_file
        """
        locale = self.locale_for_path(path)
        catalog_format = format_for_path(path)
        if catalog_format is None:
            raise CatalogLoadError(
                ErrorTemplate.catalog_format_unknown(path, tuple(CATALOG_EXTENSIONS)), path=path
            )

        try:
            decoded = unmarshal(data, catalog_format)
        except (ValueError, yaml.YAMLError) as e:
            raise CatalogLoadError(
                ErrorTemplate.catalog_decode_failed(path, str(e)), path=path
            ) from e

        try:
            translations = parse_translations(decoded)
        except TranslationError as e:
            raise CatalogLoadError(
                ErrorTemplate.catalog_translation_invalid(path, str(e)), path=path
            ) from e

        self.add_translation(locale, *translations)
        logger.info("Loaded %d translations for %s from %s", len(translations), locale.id, path)
        return len(translations)

    def ensure_locale(self, locale: Locale) -> LocaleCatalog:
        """Return the locale's catalog, creating an empty one if needed."""
        self._locales.setdefault(locale.id, locale)
        return self._translations.setdefault(locale.id, {})

    def add_translation(self, locale: Locale, *translations: Translation) -> None:
        """Add entries to a locale, replacing entries with the same id."""
        catalog = self.ensure_locale(locale)
        for translation in translations:
            catalog[translation.id] = translation

    def translations(self) -> dict[str, LocaleCatalog]:
        """Catalogs by locale id.

        Returns the live mapping; the reconciler fills catalogs through it.
        """
        return self._translations

    def locale(self, locale_id: str) -> Locale:
        """Locale object for a loaded locale id.

        Raises:
            KeyError: If no catalog exists for the locale
        """
        return self._locales[locale_id]

    @property
    def locale_ids(self) -> list[str]:
        """Loaded locale ids, sorted."""
        return sorted(self._translations)
