"""Hypothesis strategies for i18nmerge property-based testing.

Strategies are organized by domain:

- go: Go identifiers, string literals and source files
- catalog: Translation entries and per-locale catalogs

Usage:
    from tests.strategies import go_identifiers, message_ids
    from tests.strategies.catalog import catalog_sets, translations
"""

from .catalog import (
    LOCALE_IDS,
    catalog_sets,
    locale_catalogs,
    plural_translations,
    single_translations,
    translations,
)
from .go import (
    LITERAL_ALPHABET,
    go_identifiers,
    go_sources_with_alias,
    go_string_literals,
    message_ids,
)

__all__ = [
    "LITERAL_ALPHABET",
    "LOCALE_IDS",
    "catalog_sets",
    "go_identifiers",
    "go_sources_with_alias",
    "go_string_literals",
    "locale_catalogs",
    "message_ids",
    "plural_translations",
    "single_translations",
    "translations",
]
