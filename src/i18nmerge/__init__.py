"""i18nmerge - merge translation catalogs and extract message ids from Go source.

Loads per-locale translation catalogs (JSON or YAML), optionally scans Go
source for identifiers passed to the translation function bound from
`i18n.MustTfunc`, brings every locale up to the source locale's identifiers,
and writes `<locale>.all.<format>` and `<locale>.untranslated.<format>` for
every locale.

Public API:
    MergeCommand - One merge run (configuration + execute())
    Bundle - Catalogs by locale
    sift - Two-pass identifier extraction from Go source
    new_translation - Build an entry from a decoded record

Exceptions:
    MergeError - Base exception class
    ConfigurationError - Invalid run configuration (exit code 2)
    CatalogLoadError, ScanError, CatalogWriteError - Run failures (exit code 1)

Submodules:
    i18nmerge.syntax - Go lexer, parser and syntax tree
    i18nmerge.sift - Alias discovery and literal collection
    i18nmerge.catalog - Translation entries, locales, encodings
    i18nmerge.merge - Reconciliation, views, output
    i18nmerge.diagnostics - Error types and diagnostic formatting
"""

from .catalog import (
    Bundle,
    PluralTranslation,
    SingleTranslation,
    Translation,
    new_locale,
    new_translation,
)
from .diagnostics import (
    CatalogLoadError,
    CatalogWriteError,
    ConfigurationError,
    MergeError,
    ScanError,
)
from .merge import MergeCommand, MergeReport
from .sift import ScanResult, sift

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("i18nmerge")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Bundle",
    "CatalogLoadError",
    "CatalogWriteError",
    "ConfigurationError",
    "MergeCommand",
    "MergeError",
    "MergeReport",
    "PluralTranslation",
    "ScanError",
    "ScanResult",
    "SingleTranslation",
    "Translation",
    "__version__",
    "new_locale",
    "new_translation",
    "sift",
]
