"""Shared constants for i18nmerge.

This module provides centralized configuration constants used across the
syntax, sift, catalog and merge packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and AST traversal
- Sift defaults: Which files are scanned and which factory is recognized
- Input limits: Size constraints on scanned and loaded files
- Command defaults: Values used when neither CLI nor pyproject.toml set them

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "MAX_NESTING",
    # Sift defaults
    "DEFAULT_FACTORY",
    "SOURCE_SUFFIXES",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Command defaults
    "DEFAULT_SOURCE_LOCALE",
    "DEFAULT_OUTDIR",
    "DEFAULT_FORMAT",
    "CONFIG_SECTION",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum bracket nesting accepted by the Go parser. Hand-written Go rarely
# nests brackets more than a dozen levels; deeper input is generated or
# malformed and is rejected before it can exhaust the interpreter stack.
MAX_NESTING: int = 64

# Maximum AST node depth walked by ASTVisitor. Selector and call chains add
# one or two levels per link on top of bracket nesting.
MAX_DEPTH: int = 250

# ============================================================================
# SIFT DEFAULTS
# ============================================================================

# Qualified name of the translation-function factory: (package, function).
# `t := i18n.MustTfunc("en-US")` binds the alias `t`.
DEFAULT_FACTORY: tuple[str, str] = ("i18n", "MustTfunc")

# Suffixes of files picked up when a directory is sifted.
SOURCE_SUFFIXES: tuple[str, ...] = (".go",)

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum size of a single source or catalog file (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# COMMAND DEFAULTS
# ============================================================================

DEFAULT_SOURCE_LOCALE: str = "en-US"
DEFAULT_OUTDIR: str = "."
DEFAULT_FORMAT: str = "json"

# pyproject.toml table holding project-level defaults: [tool.i18nmerge]
CONFIG_SECTION: str = "i18nmerge"
