"""Tests for core/depth_guard.py.

Tests the DepthGuard context manager and depth_clamp() with Hypothesis
for property-based testing.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from i18nmerge.constants import MAX_DEPTH
from i18nmerge.core.depth_guard import DepthGuard, DepthLimitExceededError, depth_clamp
from i18nmerge.diagnostics import DiagnosticCode, MergeError

# ============================================================================
# Construction
# ============================================================================


class TestDepthGuardConstruction:
    """Test DepthGuard construction and defaults."""

    def test_default_construction(self) -> None:
        """DepthGuard uses MAX_DEPTH by default."""
        guard = DepthGuard()

        assert guard.max_depth == depth_clamp(MAX_DEPTH)
        assert guard.depth == 0

    def test_custom_max_depth(self) -> None:
        """DepthGuard accepts custom max_depth."""
        guard = DepthGuard(max_depth=50)

        assert guard.max_depth == 50

    def test_post_init_clamps_max_depth(self) -> None:
        """__post_init__ clamps max_depth against recursion limit."""
        limit = sys.getrecursionlimit()
        guard = DepthGuard(max_depth=limit + 1000)

        assert guard.max_depth == (limit - 50) // 2


# ============================================================================
# Context Manager
# ============================================================================


class TestDepthGuardContextManager:
    """Test DepthGuard as context manager."""

    def test_context_manager_nested(self) -> None:
        """Nested context managers increment depth correctly."""
        guard = DepthGuard(max_depth=10)

        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.depth == 2

        assert guard.depth == 0

    def test_context_manager_raises_on_exceeded(self) -> None:
        """Entering beyond max_depth raises DepthLimitExceededError."""
        guard = DepthGuard(max_depth=3)

        with guard, guard, guard:  # noqa: SIM117
            with pytest.raises(DepthLimitExceededError) as exc_info:
                with guard:
                    pass

        assert isinstance(exc_info.value, MergeError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SOURCE_TRAVERSAL_DEPTH_EXCEEDED
        assert "3" in str(exc_info.value)

    def test_depth_restoration_on_error(self) -> None:
        """Depth is restored even if an exception occurs in context."""
        guard = DepthGuard(max_depth=10)
        test_error_msg = "Test error"

        with guard:
            try:
                with guard:
                    raise ValueError(test_error_msg)
            except ValueError:
                pass
            assert guard.depth == 1

        assert guard.depth == 0

    def test_state_not_corrupted_on_enter_failure(self) -> None:
        """depth unchanged when __enter__ raises."""
        guard = DepthGuard(max_depth=2)

        with guard, guard:
            with pytest.raises(DepthLimitExceededError), guard:
                pass
            assert guard.depth == 2

        assert guard.depth == 0

    @given(st.integers(min_value=1, max_value=60))
    def test_exactly_max_depth_levels_allowed(self, max_depth: int) -> None:
        """max_depth nested entries succeed; one more fails."""
        event(f"depth_bucket={max_depth // 20}")
        guard = DepthGuard(max_depth=max_depth)
        for _ in range(max_depth):
            guard.__enter__()
        with pytest.raises(DepthLimitExceededError):
            guard.__enter__()
        assert guard.depth == max_depth


# ============================================================================
# depth_clamp()
# ============================================================================


class TestDepthClamp:
    """Test depth_clamp() against the interpreter recursion limit."""

    def test_within_limit_unchanged(self) -> None:
        """Small depths pass through."""
        assert depth_clamp(10) == 10

    def test_clamped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Excessive depths are clamped and logged."""
        limit = sys.getrecursionlimit()
        with caplog.at_level(logging.WARNING, logger="i18nmerge.core.depth_guard"):
            result = depth_clamp(limit * 2)
        assert result == (limit - 50) // 2
        assert f"using {result}" in caplog.text

    @given(st.integers(min_value=0, max_value=100_000))
    def test_never_exceeds_safe_depth(self, requested: int) -> None:
        """The result is at most the requested depth and the safe depth."""
        result = depth_clamp(requested)
        assert result <= requested
        assert result <= (sys.getrecursionlimit() - 50) // 2
