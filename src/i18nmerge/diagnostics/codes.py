"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (detected before any I/O)
        2000-2999: Catalog load errors
        3000-3999: Source scan errors
        4000-4999: Output errors
        5000-5999: Warnings (non-fatal)
    """

    # Configuration errors (1000-1999)
    NO_TRANSLATION_FILES = 1001
    INVALID_LOCALE = 1002
    UNSUPPORTED_FORMAT = 1003
    INVALID_FACTORY = 1004

    # Load errors (2000-2999)
    CATALOG_UNREADABLE = 2001
    CATALOG_FORMAT_UNKNOWN = 2002
    CATALOG_DECODE_FAILED = 2003
    CATALOG_LOCALE_UNKNOWN = 2004
    TRANSLATION_INVALID = 2005

    # Scan errors (3000-3999)
    SOURCE_UNREADABLE = 3001
    SOURCE_SYNTAX = 3002
    SOURCE_NESTING_DEPTH_EXCEEDED = 3003
    SOURCE_TRAVERSAL_DEPTH_EXCEEDED = 3004

    # Output errors (4000-4999)
    OUTPUT_MARSHAL_FAILED = 4001
    OUTPUT_WRITE_FAILED = 4002

    # Warnings (5000-5999)
    ALIAS_NOT_FOUND = 5001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Where in a Go source file a scan error occurred.

    Offsets and columns count characters (code points). After non-ASCII
    text they differ from the byte-based positions the Go toolchain reports.

    Attributes:
        start: First character offset, 0-based
        end: Offset past the last character
        line: 1-based line
        column: 1-based column
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        problems = []
        if self.start < 0:
            problems.append(f"start {self.start} is negative")
        if self.end < self.start:
            problems.append(f"end {self.end} precedes start {self.start}")
        if self.line < 1 or self.column < 1:
            problems.append(f"position {self.line}:{self.column} is not 1-based")
        if problems:
            msg = f"invalid SourceSpan: {'; '.join(problems)}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (scan errors only)
        hint: Suggestion for fixing the error
        location: File the diagnostic refers to (catalog, source or output)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the multi-line compiler style.

        Example output:
            error[UNSUPPORTED_FORMAT]: Unsupported format: xml
              = help: Use one of: json, yaml

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
