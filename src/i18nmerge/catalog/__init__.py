"""Translation catalogs: entries, locales, encodings and the bundle.

Python 3.13+.
"""

from .bundle import Bundle, parse_translations
from .formats import (
    CATALOG_EXTENSIONS,
    SUPPORTED_FORMATS,
    MarshalFunc,
    format_for_path,
    marshal_json,
    marshal_yaml,
    new_marshal_func,
    unmarshal,
)
from .locale import Language, Locale, new_locale
from .translation import (
    MessageId,
    PluralTranslation,
    SingleTranslation,
    Translation,
    new_translation,
    sort_by_id,
)

__all__ = [
    "CATALOG_EXTENSIONS",
    "SUPPORTED_FORMATS",
    "Bundle",
    "Language",
    "Locale",
    "MarshalFunc",
    "MessageId",
    "PluralTranslation",
    "SingleTranslation",
    "Translation",
    "format_for_path",
    "marshal_json",
    "marshal_yaml",
    "new_locale",
    "new_marshal_func",
    "new_translation",
    "parse_translations",
    "sort_by_id",
    "unmarshal",
]
