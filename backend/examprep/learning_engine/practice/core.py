"""
Pure helpers for practice selection.

Score thresholds map a user's average score (0-100) to a target difficulty
band; the candidate window is the band plus or minus one level, clamped to
the 1-5 difficulty scale.
"""

from examprep.models.question import MAX_DIFFICULTY, MIN_DIFFICULTY

DEFAULT_COUNT = 1

# (minimum average score, band), checked top down
SCORE_BANDS: tuple[tuple[float, int], ...] = (
    (80.0, 4),
    (60.0, 3),
    (40.0, 2),
)
LOWEST_BAND = 1


def difficulty_band_for_score(average_score: float | None, default_band: int = 3) -> int:
    """
    Map an average score to a target difficulty band.

    Args:
        average_score: User's average score for the question type, None if
            there is no progress record
        default_band: Band used when there is no score

    Returns:
        Band in 1..4 (or `default_band`)
    """
    if average_score is None:
        return default_band
    for threshold, band in SCORE_BANDS:
        if average_score >= threshold:
            return band
    return LOWEST_BAND


def difficulty_window(band: int) -> tuple[int, int]:
    """Inclusive difficulty range around a band, clamped to the difficulty scale."""
    return max(MIN_DIFFICULTY, band - 1), min(MAX_DIFFICULTY, band + 1)


def normalize_count(count: int | None) -> int:
    """Requested count, with absent or non-positive values meaning one question."""
    if count is None or count < 1:
        return DEFAULT_COUNT
    return count
