"""Enumerations for i18nmerge type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they serialize and compare
against plain strings without boilerplate.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"
    """Fallback category every language has."""


class TranslationShape(StrEnum):
    """Structural shape of a translation entry.

    Two entries for the same identifier are compatible only when their
    shapes are equal.
    """

    SINGLE = "single"
    """One text, no plural forms."""

    PLURAL = "plural"
    """One text per plural category."""


class ViewKind(StrEnum):
    """Derived catalog views written for every locale.

    The value is the label used in the output file name:
    ``<locale>.<view>.<format>``.
    """

    ALL = "all"
    """Every entry, normalized for the locale."""

    UNTRANSLATED = "untranslated"
    """Only incomplete entries, backfilled with source text."""


class CatalogFormat(StrEnum):
    """Serialization formats understood by loader and writer."""

    JSON = "json"
    YAML = "yaml"


class TokenKind(StrEnum):
    """Lexical token classes of Go source.

    StrEnum provides automatic string conversion: str(TokenKind.STRING) == "string"
    """

    IDENT = "ident"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    INT = "int"
    FLOAT = "float"
    IMAG = "imag"
    CHAR = "char"
    STRING = "string"
    EOF = "eof"


__all__ = [
    "CatalogFormat",
    "PluralCategory",
    "TokenKind",
    "TranslationShape",
    "ViewKind",
]
