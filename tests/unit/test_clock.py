"""Tests for the injectable clock."""

from __future__ import annotations

from datetime import datetime, timezone

from kube_conditions.utils.clock import now, reset_clock, set_clock, with_clock

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestClock:
    """Test cases for clock utilities."""

    def test_default_clock_is_utc(self):
        """Test the system clock returns aware UTC datetimes."""
        assert now().tzinfo == timezone.utc

    def test_with_clock(self):
        """Test a clock is active only inside the block."""
        with with_clock(lambda: T0):
            assert now() == T0
        assert now() != T0

    def test_naive_clock_treated_as_utc(self):
        """Test naive datetimes become UTC."""
        with with_clock(lambda: datetime(2024, 1, 1)):
            assert now() == T0

    def test_set_and_reset_clock(self):
        """Test set_clock returns a token reset_clock accepts."""
        token = set_clock(lambda: T0)
        try:
            assert now() == T0
        finally:
            reset_clock(token)
        assert now() != T0

    def test_reset_clock_without_token(self):
        """Test reset_clock restores the system clock."""
        set_clock(lambda: T0)
        reset_clock()
        assert now() != T0
