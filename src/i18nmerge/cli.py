"""Command-line front end.

Usage:
    i18nmerge [-sourceLanguage ID] [-outdir DIR] [-format json|yaml]
              [-sift PATH] [-factory PKG.FUNC] [-v | -q] FILE [FILE ...]

Single-dash long flags are kept for existing scripts; each has a GNU-style
spelling as well (--source-language, --outdir, --format, --sift, --factory).
Defaults come from [tool.i18nmerge] in ./pyproject.toml, then built-ins.

Exit codes:
    0: Success
    1: Run failure (catalog load, source scan, output write)
    2: Configuration error (no catalog files, invalid locale, unsupported
       format, malformed factory)

Python 3.13+.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from i18nmerge import __version__
from i18nmerge.catalog import SUPPORTED_FORMATS
from i18nmerge.config import MergeConfig, load_config, parse_factory
from i18nmerge.diagnostics import ConfigurationError, DiagnosticFormatter, MergeError
from i18nmerge.merge import MergeCommand

__all__ = ["configure_logging", "main", "parse_args"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION = 2


def parse_args(
    args: Sequence[str] | None = None, config: MergeConfig | None = None
) -> argparse.Namespace:
    """Parse command line arguments over configured defaults."""
    if config is None:
        config = MergeConfig()
    parser = argparse.ArgumentParser(
        prog="i18nmerge",
        description=(
            "Merge translation files: give every locale every source-locale message "
            "and write <locale>.all.<format> and <locale>.untranslated.<format>"
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-sourceLanguage",
        "--source-language",
        dest="source_language",
        metavar="ID",
        default=config.source_language,
        help=f"Locale of the source messages (default: {config.source_language})",
    )
    parser.add_argument(
        "-outdir",
        "--outdir",
        type=Path,
        metavar="DIR",
        default=Path(config.outdir),
        help=f"Existing directory for output files (default: {config.outdir})",
    )
    parser.add_argument(
        "-format",
        "--format",
        metavar="FORMAT",
        default=config.format,
        help=f"Output format: {', '.join(SUPPORTED_FORMATS)} (default: {config.format})",
    )
    parser.add_argument(
        "-sift",
        "--sift",
        type=Path,
        metavar="PATH",
        default=None,
        help="Go source directory or file to extract message ids from",
    )
    parser.add_argument(
        "-factory",
        "--factory",
        metavar="PKG.FUNC",
        default=config.factory,
        help=f"Call whose result is the translation function (default: {config.factory})",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-vv for debug detail)",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Log errors only",
    )

    parser.add_argument(
        "translation_files",
        type=Path,
        nargs="*",
        metavar="FILE",
        help="Translation files to merge (.json, .yaml, .yml)",
    )
    return parser.parse_args(args)


def configure_logging(verbosity: int = 0, *, quiet: bool = False) -> None:
    """Route log records to stderr at the level the flags select."""
    if quiet:
        level = logging.ERROR
    elif verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _report_error(error: MergeError) -> None:
    if error.diagnostic is not None:
        formatter = DiagnosticFormatter(color=sys.stderr.isatty())
        print(formatter.format(error.diagnostic), file=sys.stderr)
    else:
        print(f"error: {error}", file=sys.stderr)


def main(args: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments (None uses sys.argv)

    Returns:
        Exit code: 0 success, 1 run failure, 2 configuration error
    """
    parsed = parse_args(args, load_config())
    configure_logging(parsed.verbose, quiet=parsed.quiet)

    try:
        command = MergeCommand(
            translation_files=tuple(parsed.translation_files),
            source_locale_id=parsed.source_language,
            outdir=parsed.outdir,
            format=parsed.format,
            sift=parsed.sift,
            factory=parse_factory(parsed.factory),
        )
        report = command.execute()
    except ConfigurationError as e:
        _report_error(e)
        return EXIT_CONFIGURATION
    except MergeError as e:
        _report_error(e)
        return EXIT_FAILURE

    logger.info(
        "Wrote %d files for %d locales", len(report.written), len(report.locale_ids)
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
