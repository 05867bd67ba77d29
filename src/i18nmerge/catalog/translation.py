"""Translation entries: one message's text for one locale.

Two shapes exist. A single entry holds one text used for every plural
category; a plural entry maps each CLDR plural category to its own text.

Entries are immutable. Every operation that changes content (normalize,
backfill, untranslated_copy) returns a new entry, so a placeholder derived
from the source locale never shares state with it.

Python 3.13+.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from i18nmerge.diagnostics import ErrorTemplate, TranslationError
from i18nmerge.enums import PluralCategory, TranslationShape

from .locale import Language

__all__ = [
    "MessageId",
    "PluralTranslation",
    "SingleTranslation",
    "Translation",
    "new_translation",
    "sort_by_id",
]

type MessageId = str


@dataclass(frozen=True, slots=True)
class SingleTranslation:
    """Message with one text for all plural categories.

    Attributes:
        id: Message identifier
        text: Translated text; empty means untranslated
    """

    id: MessageId
    text: str = ""

    @property
    def shape(self) -> TranslationShape:
        return TranslationShape.SINGLE

    def template(self, category: PluralCategory) -> str:  # noqa: ARG002
        """Text for a plural category: the same text for every category."""
        return self.text

    def incomplete(self, language: Language) -> bool:  # noqa: ARG002
        return not self.text

    def normalize(self, language: Language) -> "SingleTranslation":  # noqa: ARG002
        return self

    def backfill(self, src: "Translation | None") -> "SingleTranslation":
        """Fill an empty text from src's OTHER form.

        Example:
            >>> SingleTranslation("greeting").backfill(SingleTranslation("greeting", "Hi"))
            SingleTranslation(id='greeting', text='Hi')
        """
        if self.text or src is None:
            return self
        return SingleTranslation(self.id, src.template(PluralCategory.OTHER))

    def untranslated_copy(self) -> "SingleTranslation":
        return SingleTranslation(self.id)

    def marshal_interface(self) -> dict[str, Any]:
        return {"id": self.id, "translation": self.text}


@dataclass(frozen=True, slots=True)
class PluralTranslation:
    """Message with one text per plural category.

    Attributes:
        id: Message identifier
        forms: Category to text; read-only view over a private copy
    """

    id: MessageId
    forms: Mapping[PluralCategory, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze forms so entries cannot be changed through the mapping."""
        object.__setattr__(self, "forms", MappingProxyType(dict(self.forms)))

    @property
    def shape(self) -> TranslationShape:
        return TranslationShape.PLURAL

    def template(self, category: PluralCategory) -> str:
        """Text for a plural category, empty when the category is absent."""
        return self.forms.get(category, "")

    def incomplete(self, language: Language) -> bool:
        """True if any category the language uses is missing or empty."""
        return any(not self.forms.get(category) for category in language.plural_categories)

    def normalize(self, language: Language) -> "PluralTranslation":
        """Keep exactly the language's categories, adding empty ones.

        Example:
            >>> entry = PluralTranslation("n", {ONE: "one", FEW: "few", OTHER: "many"})
            >>> entry.normalize(english).forms
            mappingproxy({<PluralCategory.ONE: 'one'>: 'one', <PluralCategory.OTHER: 'other'>: 'many'})
        """
        return PluralTranslation(
            self.id,
            {category: self.forms.get(category, "") for category in language.plural_categories},
        )

    def backfill(self, src: "Translation | None") -> "PluralTranslation":
        """Fill each empty form from src's form for the same category.

        Only categories already present are filled; normalize first to
        create the language's empty slots.
        """
        if src is None:
            return self
        return PluralTranslation(
            self.id,
            {
                category: text or src.template(category)
                for category, text in self.forms.items()
            },
        )

    def untranslated_copy(self) -> "PluralTranslation":
        return PluralTranslation(self.id)

    def marshal_interface(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "translation": {category.value: text for category, text in self.forms.items()},
        }


type Translation = SingleTranslation | PluralTranslation


def sort_by_id(translations: Iterable[Translation]) -> list[Translation]:
    """Return entries ordered by identifier (code-point order)."""
    return sorted(translations, key=lambda translation: translation.id)


def _type_name(value: object) -> str:
    return "null" if value is None else type(value).__name__


def new_translation(data: object) -> Translation:
    """Build an entry from a decoded catalog record.

    A string translation gives a single entry; a mapping of plural
    category names to strings gives a plural entry.

    Args:
        data: Record with "id" and "translation" keys

    Returns:
        SingleTranslation or PluralTranslation

    Raises:
        TranslationError: If the record is malformed

    Example:
        >>> new_translation({"id": "greeting", "translation": "Hello"})
        SingleTranslation(id='greeting', text='Hello')
        >>> new_translation({"id": "n", "translation": {"one": "1 item"}}).shape
        <TranslationShape.PLURAL: 'plural'>
    """
    if not isinstance(data, Mapping):
        raise TranslationError(
            ErrorTemplate.translation_invalid(
                f"expected a record with \"id\" and \"translation\", got {_type_name(data)}"
            )
        )

    message_id = data.get("id")
    if not isinstance(message_id, str):
        raise TranslationError(ErrorTemplate.translation_invalid('missing "id" key'))

    translation = data.get("translation")
    if translation is None:
        raise TranslationError(
            ErrorTemplate.translation_invalid(f'missing "translation" key for {message_id!r}')
        )
    if isinstance(translation, str):
        return SingleTranslation(message_id, translation)
    if not isinstance(translation, Mapping):
        raise TranslationError(
            ErrorTemplate.translation_invalid(
                f'unsupported type for "translation" key {_type_name(translation)}'
            )
        )

    forms: dict[PluralCategory, str] = {}
    for key, text in translation.items():
        if not isinstance(key, str):
            raise TranslationError(
                ErrorTemplate.translation_invalid(
                    f"invalid plural category type {_type_name(key)} for {message_id!r}"
                )
            )
        try:
            category = PluralCategory(key)
        except ValueError as e:
            raise TranslationError(
                ErrorTemplate.translation_invalid(
                    f"invalid plural category {key!r} for {message_id!r}"
                )
            ) from e
        if not isinstance(text, str):
            raise TranslationError(
                ErrorTemplate.translation_invalid(
                    f'plural category "{key}" has value of type {_type_name(text)}; '
                    "expected string"
                )
            )
        forms[category] = text
    return PluralTranslation(message_id, forms)
