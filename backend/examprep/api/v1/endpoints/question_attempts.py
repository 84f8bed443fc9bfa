"""Question attempt endpoints."""

import logging

from fastapi import APIRouter, status

from examprep.core.app_exceptions import NotFoundError
from examprep.core.dependencies import CurrentUserId, Repository
from examprep.schemas.question import AttemptCreate, AttemptCreated

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=AttemptCreated, status_code=status.HTTP_201_CREATED)
def create_attempt(payload: AttemptCreate, user_id: CurrentUserId, repo: Repository):
    """
    Record that the caller attempted a question.

    Attempts are append-only; they feed the practice selector's recent set.
    """
    question = repo.get_question(payload.question_id)
    if question is None or not question.is_active:
        raise NotFoundError("Question not found")

    attempt = repo.add_attempt(
        user_id=user_id,
        question_id=question.id,
        response_data=payload.response,
        time_spent_seconds=payload.time_spent_seconds,
    )
    logger.info(
        "Question attempt recorded",
        extra={"user_id": user_id, "question_id": question.id, "attempt_id": attempt.id},
    )
    return AttemptCreated(attempt_id=attempt.id)
