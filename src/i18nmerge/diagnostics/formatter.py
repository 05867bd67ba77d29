"""Rendering of diagnostics for the terminal.

Two styles: compiler-like multi-line blocks (the CLI default) and one line
per diagnostic for logs and scripts.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_SEVERITY_COLORS = {"error": "\033[1;31m", "warning": "\033[1;33m"}
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Diagnostic rendering style."""

    RUST = "rust"  # header, location and help lines
    SIMPLE = "simple"  # CODE: message


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns diagnostics into text.

    Attributes:
        output_format: Rendering style
        color: Wrap the severity in ANSI color codes

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> print(formatter.format(ErrorTemplate.unsupported_format("xml", ("json", "yaml"))))
        error[UNSUPPORTED_FORMAT]: unsupported format: xml
          = help: Use one of: json, yaml

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unsupported_format("xml", ("json", "yaml"))))
        UNSUPPORTED_FORMAT: unsupported format: xml
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {diagnostic.message}"

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format several diagnostics, separated by blank lines."""
        return "\n\n".join(self.format(diagnostic) for diagnostic in diagnostics)

    def _severity(self, severity: str) -> str:
        if not self.color:
            return severity
        return f"{_SEVERITY_COLORS[severity]}{severity}{_RESET}"

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Compiler-style block.

        Example output:
            error[SOURCE_SYNTAX]: cmd/main.go:3:9: string literal not terminated
              --> cmd/main.go, line 3, column 9
        """
        severity = self._severity(diagnostic.severity)
        lines = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        where = []
        if diagnostic.location:
            where.append(diagnostic.location)
        if diagnostic.span:
            where.append(f"line {diagnostic.span.line}, column {diagnostic.span.column}")
        if where:
            lines.append(f"  --> {', '.join(where)}")

        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)
