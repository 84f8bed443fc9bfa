"""Admin question management endpoints."""

import logging

from fastapi import APIRouter

from examprep.core.app_exceptions import NotFoundError
from examprep.core.dependencies import AdminUserId, Repository
from examprep.schemas.question import MessageResponse, QuestionOut, QuestionUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_question_or_404(repo: Repository, question_id: str):
    question = repo.get_question(question_id)
    if question is None:
        raise NotFoundError("Question not found")
    return question


@router.get("/{question_id}", response_model=QuestionOut)
def admin_get_question(question_id: str, admin_id: AdminUserId, repo: Repository):
    """Get a question regardless of its active flag."""
    return _get_question_or_404(repo, question_id)


@router.patch("/{question_id}", response_model=QuestionOut)
def admin_update_question(
    question_id: str,
    payload: QuestionUpdate,
    admin_id: AdminUserId,
    repo: Repository,
):
    """Apply a partial update to a question."""
    question = _get_question_or_404(repo, question_id)
    changes = payload.model_dump(exclude_unset=True)
    question = repo.update_question(question, changes)
    logger.info(
        "Question updated",
        extra={"admin_id": admin_id, "question_id": question_id, "fields": sorted(changes)},
    )
    return question


@router.delete("/{question_id}", response_model=MessageResponse)
def admin_delete_question(question_id: str, admin_id: AdminUserId, repo: Repository):
    """Soft delete: the question is deactivated, never removed."""
    question = _get_question_or_404(repo, question_id)
    repo.update_question(question, {"is_active": False})
    logger.info("Question deactivated", extra={"admin_id": admin_id, "question_id": question_id})
    return MessageResponse(message="Question deleted successfully")
