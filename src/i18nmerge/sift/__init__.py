"""Sift phase: extract message identifiers from Go source.

Python 3.13+.
"""

from .files import resolve_source_files
from .scanner import (
    ScanResult,
    collect_literals,
    discover_alias,
    parse_source_file,
    sift,
    strip_literal_quotes,
)

__all__ = [
    "ScanResult",
    "collect_literals",
    "discover_alias",
    "parse_source_file",
    "resolve_source_files",
    "sift",
    "strip_literal_quotes",
]
