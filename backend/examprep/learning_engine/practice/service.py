"""Practice selection service."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from examprep.core.app_exceptions import InvalidRequestError, UnauthorizedError
from examprep.core.config import settings
from examprep.learning_engine.practice.core import (
    difficulty_band_for_score,
    difficulty_window,
    normalize_count,
)
from examprep.models import Question
from examprep.repositories.questions import PracticeReader, QuestionFilter

logger = logging.getLogger(__name__)

QUESTION_TYPE_REQUIRED = "question_type_id is required"


@dataclass
class PracticeSelection:
    """Questions chosen for one practice request, plus how they were chosen."""

    question_type_id: str
    count: int
    band: int
    difficulty_range: tuple[int, int]
    recent_count: int
    used_fallback: bool = False
    questions: list[Question] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for logging."""
        return {
            "question_type_id": self.question_type_id,
            "count": self.count,
            "band": self.band,
            "difficulty_range": list(self.difficulty_range),
            "recent_count": self.recent_count,
            "used_fallback": self.used_fallback,
            "selected_count": len(self.questions),
            "selected_questions": [q.id for q in self.questions],
        }


def select_practice_questions(
    reader: PracticeReader,
    user_id: str | None,
    question_type_id: str | None,
    count: int | None = None,
    *,
    now: datetime | None = None,
) -> PracticeSelection:
    """
    Select up to `count` active questions of one type for a user.

    Steps:
    1. Collect questions the user attempted in the recent window
    2. Map the user's average score for the type to a difficulty band
    3. Query active, in-band, not-recent questions, newest first,
       over-fetching `PRACTICE_OVERFETCH_FACTOR` x count
    4. If nothing matches, fall back to the newest active questions of the
       type (no difficulty filter, no recency exclusion), capped at count
    5. Otherwise keep the first `count` candidates in order

    The result is deterministic for identical inputs and data. Nothing is
    written.

    Args:
        reader: Read-only repository
        user_id: Authenticated caller
        question_type_id: Question type to practice
        count: Requested number of questions (absent or < 1 means 1)
        now: End of the recent window (defaults to current UTC time)

    Returns:
        PracticeSelection with the chosen questions

    Raises:
        UnauthorizedError: no user
        InvalidRequestError: no question type
        RepositoryError: a query failed
    """
    if not user_id:
        raise UnauthorizedError()
    if not question_type_id:
        raise InvalidRequestError(QUESTION_TYPE_REQUIRED)

    count = normalize_count(count)
    now = now or datetime.now(timezone.utc)

    since = now - timedelta(days=settings.PRACTICE_RECENT_DAYS)
    recent_ids = reader.recent_question_ids(user_id, since)

    average_score = reader.average_score(user_id, question_type_id)
    band = difficulty_band_for_score(average_score, settings.PRACTICE_DEFAULT_BAND)
    low, high = difficulty_window(band)

    selection = PracticeSelection(
        question_type_id=question_type_id,
        count=count,
        band=band,
        difficulty_range=(low, high),
        recent_count=len(recent_ids),
    )

    candidates = reader.find_questions(
        QuestionFilter(
            question_type_ids=(question_type_id,),
            min_difficulty=low,
            max_difficulty=high,
            exclude_ids=frozenset(recent_ids),
            limit=count * settings.PRACTICE_OVERFETCH_FACTOR,
        )
    )

    if candidates:
        selection.questions = candidates[:count]
    else:
        # TODO: decide whether the fallback should still skip recently attempted questions
        selection.used_fallback = True
        selection.questions = reader.find_questions(
            QuestionFilter(question_type_ids=(question_type_id,), limit=count)
        )

    logger.info("Practice questions selected", extra={"user_id": user_id, **selection.to_dict()})
    return selection
