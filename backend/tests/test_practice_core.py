"""Tests for practice selection helpers."""

import pytest

from examprep.learning_engine.practice.core import (
    difficulty_band_for_score,
    difficulty_window,
    normalize_count,
)


class TestDifficultyBand:
    @pytest.mark.parametrize(
        "score,band",
        [
            (100.0, 4),
            (85.0, 4),
            (80.0, 4),
            (79.99, 3),
            (60.0, 3),
            (59.5, 2),
            (40.0, 2),
            (39.9, 1),
            (0.0, 1),
        ],
    )
    def test_thresholds(self, score, band):
        assert difficulty_band_for_score(score) == band

    def test_no_progress_uses_default_band(self):
        assert difficulty_band_for_score(None) == 3
        assert difficulty_band_for_score(None, default_band=2) == 2


class TestDifficultyWindow:
    def test_window_is_band_plus_minus_one(self):
        assert difficulty_window(3) == (2, 4)
        assert difficulty_window(4) == (3, 5)

    def test_window_clamped_to_scale(self):
        assert difficulty_window(1) == (1, 2)
        assert difficulty_window(5) == (4, 5)


class TestNormalizeCount:
    @pytest.mark.parametrize("raw", [None, 0, -3])
    def test_absent_or_non_positive_means_one(self, raw):
        assert normalize_count(raw) == 1

    def test_positive_count_kept(self):
        assert normalize_count(7) == 7
