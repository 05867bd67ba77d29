"""Locales and their plural categories.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from babel.core import UnknownLocaleError

from i18nmerge.diagnostics import ErrorTemplate, InvalidLocaleError
from i18nmerge.enums import PluralCategory
from i18nmerge.locale_utils import canonical_locale_id, get_babel_locale

__all__ = ["Language", "Locale", "new_locale"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Language:
    """Language-level data needed to judge and shape plural entries.

    Attributes:
        tag: Language subtag ("en", "fr", "zh")
        plural_categories: Categories the language distinguishes, CLDR order,
            always ending in OTHER
    """

    tag: str
    plural_categories: tuple[PluralCategory, ...]


@dataclass(frozen=True, slots=True)
class Locale:
    """A catalog's locale.

    Attributes:
        id: Canonical hyphenated identifier ("en-US", "zh-Hans-CN")
        language: The locale's Language
    """

    id: str
    language: Language


def new_locale(locale_id: str) -> Locale:
    """Validate a locale identifier and resolve its plural categories.

    Args:
        locale_id: BCP-47 or POSIX identifier ("en-US", "en_US", "fr")

    Returns:
        Locale with canonical id

    Raises:
        InvalidLocaleError: If Babel does not recognize the identifier

    Example:
        >>> new_locale("en_us").id
        'en-US'
        >>> new_locale("pl").language.plural_categories
        (<PluralCategory.ONE: 'one'>, <PluralCategory.FEW: 'few'>, ...)
    """
    try:
        babel_locale = get_babel_locale(locale_id)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise InvalidLocaleError(
            ErrorTemplate.invalid_locale(locale_id, str(e)), locale_id=locale_id
        ) from e

    tags = set(babel_locale.plural_form.tags) | {PluralCategory.OTHER.value}
    categories = tuple(category for category in PluralCategory if category.value in tags)
    locale = Locale(
        id=canonical_locale_id(babel_locale),
        language=Language(tag=babel_locale.language, plural_categories=categories),
    )
    logger.debug("Resolved locale %s as %s %s", locale_id, locale.id, categories)
    return locale
