"""i18nmerge exception hierarchy with structured diagnostics.

Every fatal condition of a merge run is a MergeError subclass, so the CLI
can catch one type at the top level and report it uniformly.

    MergeError
    ├── ConfigurationError
    │   ├── InvalidLocaleError
    │   └── UnsupportedFormatError
    ├── CatalogLoadError
    ├── TranslationError
    ├── ScanError
    ├── GoSyntaxError
    └── CatalogWriteError

Python 3.13+. Zero external dependencies.
"""

from pathlib import Path

from .codes import Diagnostic


class MergeError(Exception):
    """Base exception for all i18nmerge errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MergeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(MergeError):
    """Invalid run configuration.

    Raised before any file is read or written: no catalog files, malformed
    factory name, and the two subclasses below.
    """


class InvalidLocaleError(ConfigurationError):
    """Locale identifier is malformed or unknown to CLDR.

    Attributes:
        locale_id: The rejected identifier
    """

    def __init__(self, message: str | Diagnostic, *, locale_id: str = "") -> None:
        super().__init__(message)
        self.locale_id = locale_id


class UnsupportedFormatError(ConfigurationError):
    """Requested catalog format has no marshaling strategy.

    Attributes:
        format_name: The rejected format name
    """

    def __init__(self, message: str | Diagnostic, *, format_name: str = "") -> None:
        super().__init__(message)
        self.format_name = format_name


class TranslationError(MergeError):
    """A decoded catalog record cannot be turned into a translation entry.

    Raised by new_translation(); the bundle wraps it in CatalogLoadError so
    the offending file is named.
    """


class CatalogLoadError(MergeError):
    """Catalog file could not be read, decoded, or attributed to a locale.

    Attributes:
        path: The catalog file
    """

    def __init__(self, message: str | Diagnostic, *, path: Path | str = "") -> None:
        super().__init__(message)
        self.path = Path(path)


class GoSyntaxError(MergeError):
    """Go source could not be tokenized or parsed.

    Carries the position only; ScanError adds the file.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    def __init__(self, message: str | Diagnostic, *, line: int = 1, column: int = 1) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class ScanError(MergeError):
    """Source file selected for sifting could not be read or parsed.

    Attributes:
        path: The source file
        line: Line of the failure (0 when the file could not be read)
        column: Column of the failure (0 when the file could not be read)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        path: Path | str = "",
        line: int = 0,
        column: int = 0,
    ) -> None:
        super().__init__(message)
        self.path = Path(path)
        self.line = line
        self.column = column


class CatalogWriteError(MergeError):
    """Output view could not be marshaled or written.

    Attributes:
        path: The destination file
    """

    def __init__(self, message: str | Diagnostic, *, path: Path | str = "") -> None:
        super().__init__(message)
        self.path = Path(path)
