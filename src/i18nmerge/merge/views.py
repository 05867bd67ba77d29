"""Per-locale output views.

Each locale gets two views, both sorted by identifier:

- all: every entry, normalized to the locale's plural categories
- untranslated: incomplete entries only, normalized and then backfilled
  from the source locale so translators see the text to translate

Python 3.13+.
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass

from i18nmerge.catalog import Bundle, Language, Locale, MessageId, Translation, sort_by_id
from i18nmerge.enums import ViewKind

__all__ = [
    "LocaleViews",
    "all_view",
    "build_views",
    "filter_translations",
    "untranslated_view",
]

type LocaleCatalog = Mapping[MessageId, Translation]


def filter_translations(
    catalog: LocaleCatalog, transform: Callable[[Translation], Translation | None]
) -> list[Translation]:
    """Apply transform to every entry, drop None results, sort by id."""
    return sort_by_id(
        result
        for result in (transform(translation) for translation in catalog.values())
        if result is not None
    )


def all_view(catalog: LocaleCatalog, language: Language) -> list[Translation]:
    return filter_translations(catalog, lambda translation: translation.normalize(language))


def untranslated_view(
    catalog: LocaleCatalog, language: Language, source: LocaleCatalog
) -> list[Translation]:
    """Incomplete entries, normalized and backfilled from the source catalog.

    An entry without a source counterpart is emitted normalized only.
    """

    def transform(translation: Translation) -> Translation | None:
        if not translation.incomplete(language):
            return None
        return translation.normalize(language).backfill(source.get(translation.id))

    return filter_translations(catalog, transform)


@dataclass(frozen=True, slots=True)
class LocaleViews:
    """Both views of one locale."""

    locale: Locale
    all: tuple[Translation, ...]
    untranslated: tuple[Translation, ...]

    def items(self) -> Iterator[tuple[ViewKind, tuple[Translation, ...]]]:
        """Views in output order: all, then untranslated."""
        yield ViewKind.ALL, self.all
        yield ViewKind.UNTRANSLATED, self.untranslated


def build_views(bundle: Bundle, source_locale_id: str) -> list[LocaleViews]:
    """Views for every locale in the bundle, in locale id order."""
    translations = bundle.translations()
    source = translations.get(source_locale_id, {})
    views = []
    for locale_id in bundle.locale_ids:
        locale = bundle.locale(locale_id)
        catalog = translations[locale_id]
        views.append(
            LocaleViews(
                locale,
                tuple(all_view(catalog, locale.language)),
                tuple(untranslated_view(catalog, locale.language, source)),
            )
        )
    return views
