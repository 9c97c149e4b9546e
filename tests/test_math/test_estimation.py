"""Tests for Epley one-rep-max estimation."""

from __future__ import annotations

import math

import pytest

from ironpath.math.estimation import epley


class TestEpley:
    def test_logged_top_set(self) -> None:
        """100 kg x 8 → 100 * (1 + 8/30) ≈ 126.7."""
        assert epley(100.0, 8) == pytest.approx(126.667, abs=0.001)

    def test_single_is_the_max(self) -> None:
        assert epley(100.0, 1) == 100.0

    def test_zero_reps_counts_as_single(self) -> None:
        assert epley(100.0, 0) == 100.0
        assert epley(100.0, -3) == 100.0

    def test_never_below_load(self) -> None:
        for reps in range(-2, 25):
            assert epley(80.0, reps) >= 80.0

    def test_monotonic_in_reps(self) -> None:
        estimates = [epley(120.0, reps) for reps in range(0, 21)]
        assert estimates == sorted(estimates)

    @pytest.mark.parametrize("load", [0.0, -50.0, math.nan, math.inf])
    def test_bad_load_gives_zero(self, load: float) -> None:
        assert epley(load, 5) == 0.0

    def test_ten_reps(self) -> None:
        assert epley(90.0, 10) == pytest.approx(120.0)
