"""Catalog encodings: JSON and YAML.

Decoding picks the format from the file extension; encoding is selected by
name through `new_marshal_func`, so an unsupported format is rejected
before any catalog is read.

Python 3.13+.
"""

import json
from collections.abc import Callable, Sequence
from pathlib import Path

import yaml

from i18nmerge.diagnostics import ErrorTemplate, UnsupportedFormatError
from i18nmerge.enums import CatalogFormat

from .translation import Translation

__all__ = [
    "CATALOG_EXTENSIONS",
    "SUPPORTED_FORMATS",
    "MarshalFunc",
    "format_for_path",
    "marshal_json",
    "marshal_yaml",
    "new_marshal_func",
    "unmarshal",
]

type MarshalFunc = Callable[[Sequence[Translation]], bytes]

SUPPORTED_FORMATS: tuple[str, ...] = tuple(fmt.value for fmt in CatalogFormat)

CATALOG_EXTENSIONS: dict[str, CatalogFormat] = {
    ".json": CatalogFormat.JSON,
    ".yaml": CatalogFormat.YAML,
    ".yml": CatalogFormat.YAML,
}


def _marshal_interface(translations: Sequence[Translation]) -> list[dict[str, object]]:
    return [translation.marshal_interface() for translation in translations]


def marshal_json(translations: Sequence[Translation]) -> bytes:
    """Encode entries as an indented JSON array of {id, translation} records."""
    text = json.dumps(
        _marshal_interface(translations), indent=2, sort_keys=True, ensure_ascii=False
    )
    return (text + "\n").encode("utf-8")


def marshal_yaml(translations: Sequence[Translation]) -> bytes:
    """Encode entries as a block-style YAML sequence of {id, translation} records."""
    text = yaml.safe_dump(
        _marshal_interface(translations),
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )
    return text.encode("utf-8")


_MARSHALERS: dict[CatalogFormat, MarshalFunc] = {
    CatalogFormat.JSON: marshal_json,
    CatalogFormat.YAML: marshal_yaml,
}


def new_marshal_func(format_name: str) -> MarshalFunc:
    """Look up the encoder for an output format name.

    Names are matched exactly ("json", not "JSON").

    Raises:
        UnsupportedFormatError: If no encoder has that name

    Example:
        >>> new_marshal_func("json") is marshal_json
        True
    """
    try:
        return _MARSHALERS[CatalogFormat(format_name)]
    except ValueError:
        raise UnsupportedFormatError(
            ErrorTemplate.unsupported_format(format_name, SUPPORTED_FORMATS),
            format_name=format_name,
        ) from None


def format_for_path(path: Path) -> CatalogFormat | None:
    """Decoder format for a catalog file, or None for unknown extensions."""
    return CATALOG_EXTENSIONS.get(path.suffix.lower())


def unmarshal(data: bytes, catalog_format: CatalogFormat) -> object:
    """Decode catalog bytes; empty input decodes to None.

    Raises:
        ValueError: For invalid UTF-8 or invalid JSON
        yaml.YAMLError: For invalid YAML
    """
    if catalog_format is CatalogFormat.JSON:
        text = data.decode("utf-8-sig")
        if not text.strip():
            return None
        return json.loads(text)
    return yaml.safe_load(data)
