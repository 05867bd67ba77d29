"""Diagnostic system for merge errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CatalogLoadError,
    CatalogWriteError,
    ConfigurationError,
    GoSyntaxError,
    InvalidLocaleError,
    MergeError,
    ScanError,
    TranslationError,
    UnsupportedFormatError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CatalogLoadError",
    "CatalogWriteError",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GoSyntaxError",
    "InvalidLocaleError",
    "MergeError",
    "OutputFormat",
    "ScanError",
    "SourceSpan",
    "TranslationError",
    "UnsupportedFormatError",
]
