"""Source file set resolution for the sift phase.

A directory is walked recursively for regular `.go` files; anything else is
taken as a single file and scanned whatever its name. Symbolic links are
neither followed into nor collected.

Python 3.13+. Zero external dependencies.
"""

import logging
import os
from pathlib import Path

from i18nmerge.constants import SOURCE_SUFFIXES

__all__ = ["resolve_source_files"]

logger = logging.getLogger(__name__)


def resolve_source_files(path: Path | str) -> list[Path]:
    """Resolve a sift path into the ordered list of files to scan.

    Directory entries are returned in lexical walk order: files of a
    directory and its subdirectories sorted by name at every level, so the
    result does not depend on the filesystem's listing order.

    Args:
        path: Directory to walk or single file to scan

    Returns:
        Files to scan, in scan order

    Example:
        >>> resolve_source_files("cmd/app/main.go")
        [PosixPath('cmd/app/main.go')]
    """
    root = Path(path)
    if not root.is_dir():
        return [root]

    files: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root):
        directory = Path(dirpath)
        for filename in filenames:
            candidate = directory / filename
            if candidate.is_symlink() or not candidate.is_file():
                continue
            if candidate.suffix in SOURCE_SUFFIXES:
                files.append(candidate)

    # os.walk yields a directory's files before its subdirectories; sorting
    # by path parts interleaves them by name.
    files.sort(key=lambda file: file.relative_to(root).parts)
    logger.debug("Resolved %d source files under %s", len(files), root)
    return files
