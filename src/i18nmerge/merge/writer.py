"""Output of views as <locale>.<view>.<format> files.

Python 3.13+.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

import yaml

from i18nmerge.catalog import MarshalFunc, Translation
from i18nmerge.diagnostics import CatalogWriteError, ErrorTemplate
from i18nmerge.enums import ViewKind

__all__ = ["output_path", "write_view"]

logger = logging.getLogger(__name__)


def output_path(outdir: Path, locale_id: str, kind: ViewKind, format_name: str) -> Path:
    """Destination of one view.

    Example:
        >>> output_path(Path("out"), "fr", ViewKind.UNTRANSLATED, "json")
        PosixPath('out/fr.untranslated.json')
    """
    return outdir / f"{locale_id}.{kind}.{format_name}"


def write_view(
    outdir: Path,
    locale_id: str,
    kind: ViewKind,
    translations: Sequence[Translation],
    marshal: MarshalFunc,
    format_name: str,
) -> Path:
    """Encode a view and write it in a single call.

    The output directory must already exist.

    Returns:
        The written file

    Raises:
        CatalogWriteError: If encoding or writing fails
    """
    path = output_path(outdir, locale_id, kind, format_name)
    try:
        data = marshal(translations)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise CatalogWriteError(
            ErrorTemplate.marshal_failed(locale_id, format_name, str(e)), path=path
        ) from e
    try:
        path.write_bytes(data)
    except OSError as e:
        raise CatalogWriteError(
            ErrorTemplate.write_failed(path, e.strerror or str(e)), path=path
        ) from e
    logger.info("Wrote %d translations to %s", len(translations), path)
    return path
