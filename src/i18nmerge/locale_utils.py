"""Locale utilities for BCP-47 to POSIX conversion.

Catalog file names and the --source-language flag use BCP-47 identifiers
(en-US); Babel parses POSIX identifiers (en_US). Everything that talks to
Babel normalizes at this boundary and canonicalizes back on the way out.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "canonical_locale_id",
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "zh-Hans-CN")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "zh_Hans_CN")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Every catalog file and every view lookup resolves its locale through
    here, so each distinct identifier is parsed once per process.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop cached Babel locales (tests that patch Babel use this)."""
    get_babel_locale.cache_clear()


def canonical_locale_id(locale: Locale) -> str:
    """Render a Babel locale as a hyphenated BCP-47-style identifier.

    Example:
        >>> canonical_locale_id(get_babel_locale("en_us"))
        'en-US'
        >>> canonical_locale_id(get_babel_locale("zh-Hans-CN"))
        'zh-Hans-CN'
    """
    parts = (locale.language, locale.script, locale.territory, locale.variant)
    return "-".join(part for part in parts if part)
