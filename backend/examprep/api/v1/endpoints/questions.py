"""Question browsing and practice endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from examprep.core.app_exceptions import InvalidRequestError, NotFoundError, UnauthorizedError
from examprep.core.dependencies import CurrentUserId, Repository, get_optional_user_id
from examprep.learning_engine.practice import select_practice_questions
from examprep.learning_engine.practice.service import QUESTION_TYPE_REQUIRED
from examprep.models.question import MAX_DIFFICULTY, MIN_DIFFICULTY
from examprep.repositories.questions import QuestionFilter
from examprep.schemas.question import QuestionOut

logger = logging.getLogger(__name__)

router = APIRouter()


def parse_count(raw: str | None) -> int | None:
    """Parse the `count` query parameter; blank means absent."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidRequestError("count must be an integer") from None


@router.get("", response_model=list[QuestionOut])
def list_questions(
    user_id: CurrentUserId,
    repo: Repository,
    question_type_id: str | None = None,
    section_id: str | None = None,
    exam_id: str | None = None,
    difficulty: Annotated[int | None, Query(ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY)] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    offset: Annotated[int, Query(ge=0)] = 0,
):
    """
    List active questions, newest first.

    A section filter takes precedence over an exam filter; both resolve to
    the question types they contain, and an empty resolution yields [].
    """
    type_ids: list[str] = []
    if question_type_id:
        type_ids.append(question_type_id)

    if section_id or exam_id:
        if section_id:
            scoped = repo.question_type_ids_for_section(section_id)
        else:
            scoped = repo.question_type_ids_for_exam(exam_id)
        if type_ids:
            scoped = [t for t in scoped if t in type_ids]
        if not scoped:
            return []
        type_ids = scoped

    return repo.find_questions(
        QuestionFilter(
            question_type_ids=tuple(type_ids),
            min_difficulty=difficulty,
            max_difficulty=difficulty,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/practice", response_model=list[QuestionOut])
def practice_questions(
    user_id: Annotated[str | None, Depends(get_optional_user_id)],
    repo: Repository,
    question_type_id: str | None = None,
    count: str | None = None,
):
    """
    Select practice questions for the caller.

    Questions are matched to the caller's performance band and skip what
    they attempted in the last week, falling back to the newest active
    questions of the type when nothing qualifies.
    """
    if not question_type_id:
        raise InvalidRequestError(QUESTION_TYPE_REQUIRED)
    if not user_id:
        raise UnauthorizedError()

    selection = select_practice_questions(repo, user_id, question_type_id, parse_count(count))
    return selection.questions


@router.get("/{question_id}", response_model=QuestionOut)
def get_question(question_id: str, user_id: CurrentUserId, repo: Repository):
    """Get one active question."""
    question = repo.get_question(question_id)
    if question is None or not question.is_active:
        raise NotFoundError("Question not found")
    return question
