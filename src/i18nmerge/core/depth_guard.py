"""Recursion depth limiting for syntax tree walks.

Go source can nest brackets, selector chains and closures arbitrarily
deep. Walking such a tree recursively must fail with a diagnostic instead
of a RecursionError that would abort the whole merge.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from i18nmerge.constants import MAX_DEPTH
from i18nmerge.diagnostics import MergeError
from i18nmerge.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(MergeError):
    """A guarded walk went deeper than its guard allows."""


@dataclass(slots=True)
class DepthGuard:
    """Counts nesting levels of a recursive walk.

    Each `with guard:` block is one level. Entering a level beyond
    max_depth raises DepthLimitExceededError and leaves the count as it
    was, so the guard stays usable after the error.

    Example:
        >>> guard = DepthGuard(max_depth=2)
        >>> with guard:
        ...     with guard:
        ...         guard.depth
        2

    Attributes:
        max_depth: Deepest level allowed, clamped to the interpreter's limit
        depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        # Checked before counting: __exit__ does not run when __enter__ raises.
        if self.depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.traversal_depth_exceeded(self.max_depth))
        self.depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.depth -= 1


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Lower a depth limit the interpreter stack could not reach.

    A visitor level costs two frames (visit and generic_visit), so the
    usable depth is half the recursion limit left after reserve_frames.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Frames kept free for the caller

    Returns:
        requested_depth, or the largest safe depth if that is smaller
    """
    safe_depth = (sys.getrecursionlimit() - reserve_frames) // 2
    if requested_depth <= safe_depth:
        return requested_depth
    logger.warning(
        "Depth limit %d needs more than the recursion limit %d allows; using %d",
        requested_depth,
        sys.getrecursionlimit(),
        safe_depth,
    )
    return safe_depth
