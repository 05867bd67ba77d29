"""Project-level defaults from pyproject.toml.

Supports the following keys in [tool.i18nmerge]:
    source-language: str
    outdir: str
    format: str
    factory: str ("package.Function")

Command-line flags override every key.

Python 3.13+.
"""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from i18nmerge.constants import (
    CONFIG_SECTION,
    DEFAULT_FACTORY,
    DEFAULT_FORMAT,
    DEFAULT_OUTDIR,
    DEFAULT_SOURCE_LOCALE,
)
from i18nmerge.diagnostics import ConfigurationError, ErrorTemplate

__all__ = ["MergeConfig", "load_config", "parse_factory"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MergeConfig:
    """Merge defaults with built-in fallbacks."""

    source_language: str = DEFAULT_SOURCE_LOCALE
    outdir: str = DEFAULT_OUTDIR
    format: str = DEFAULT_FORMAT
    factory: str = ".".join(DEFAULT_FACTORY)


def parse_factory(value: str) -> tuple[str, str]:
    """Split "package.Function" into its two identifiers.

    Raises:
        ConfigurationError: Unless value is two non-empty names joined by one dot

    Example:
        >>> parse_factory("i18n.MustTfunc")
        ('i18n', 'MustTfunc')
    """
    package, dot, function = value.partition(".")
    if not dot or not package.isidentifier() or not function.isidentifier():
        raise ConfigurationError(ErrorTemplate.invalid_factory(value))
    return package, function


def load_config(project_root: Path | None = None) -> MergeConfig:
    """Load configuration from pyproject.toml if available.

    Missing files, unreadable files, invalid TOML and values of the wrong
    type all fall back to the built-in defaults.
    """
    if project_root is None:
        project_root = Path.cwd()

    pyproject = project_root / "pyproject.toml"
    if not pyproject.exists():
        return MergeConfig()

    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring %s: %s", pyproject, e)
        return MergeConfig()

    config_section = data.get("tool", {}).get(CONFIG_SECTION, {})
    if not config_section or not isinstance(config_section, dict):
        return MergeConfig()

    def get_str(key: str, default: str) -> str:
        val = config_section.get(key)
        return val if isinstance(val, str) else default

    defaults = MergeConfig()
    config = MergeConfig(
        source_language=get_str("source-language", defaults.source_language),
        outdir=get_str("outdir", defaults.outdir),
        format=get_str("format", defaults.format),
        factory=get_str("factory", defaults.factory),
    )
    logger.debug("Loaded [tool.%s] from %s: %s", CONFIG_SECTION, pyproject, config)
    return config
