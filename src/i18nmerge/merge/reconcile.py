"""Catalog reconciliation.

Brings every locale up to the source locale's set of identifiers. Entries a
locale already has are kept when they have the source entry's shape;
missing or differently shaped entries are replaced by an untranslated copy
of the source entry.

Python 3.13+.
"""

import logging
from collections.abc import Iterable

from i18nmerge.catalog import Bundle, Locale, MessageId, SingleTranslation

__all__ = ["add_discovered", "reconcile"]

logger = logging.getLogger(__name__)


def add_discovered(
    bundle: Bundle, locale: Locale, identifiers: Iterable[MessageId]
) -> list[MessageId]:
    """Insert identifiers found in source code as untranslated single entries.

    Identifiers the catalog already holds are left as they are, so existing
    source text survives a re-run. Repeated identifiers are inserted once.

    Args:
        bundle: Bundle to update in place
        locale: Source locale
        identifiers: Identifiers in discovery order

    Returns:
        Identifiers actually inserted, in discovery order
    """
    catalog = bundle.ensure_locale(locale)
    inserted: list[MessageId] = []
    for identifier in identifiers:
        if identifier in catalog:
            continue
        catalog[identifier] = SingleTranslation(identifier)
        inserted.append(identifier)
        logger.debug("Added %r to %s", identifier, locale.id)
    return inserted


def reconcile(bundle: Bundle, source_locale_id: str) -> int:
    """Give every locale an entry for every source identifier.

    Idempotent: a second call on the same bundle changes nothing and
    returns 0.

    Args:
        bundle: Bundle to update in place
        source_locale_id: Canonical id of the source locale

    Returns:
        Number of placeholders inserted across all locales
    """
    translations = bundle.translations()
    source = translations.get(source_locale_id, {})
    placeholders = 0
    for message_id, src in list(source.items()):
        for locale_id, catalog in translations.items():
            if locale_id == source_locale_id:
                continue
            dst = catalog.get(message_id)
            if dst is None or dst.shape is not src.shape:
                catalog[message_id] = src.untranslated_copy()
                placeholders += 1
                logger.debug("Placeholder for %r in %s", message_id, locale_id)
    logger.info(
        "Reconciled %d identifiers across %d locales (%d placeholders)",
        len(source),
        len(translations),
        placeholders,
    )
    return placeholders
