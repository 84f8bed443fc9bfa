"""
Repository layer for questions, attempts and progress.

The practice selector only sees `PracticeReader`, a narrow read-only query
contract (equality / range / not-in filters, newest-first ordering, limit).
`QuestionRepository` widens it with the lookups and writes used by the
other endpoints. `SqlQuestionRepository` is the Postgres implementation;
any SQLAlchemy failure is re-raised as `RepositoryError`.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Collection
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from examprep.core.app_exceptions import RepositoryError
from examprep.models import (
    Question,
    QuestionAttempt,
    QuestionType,
    Section,
    UserProfile,
    UserProgress,
)

logger = logging.getLogger(__name__)

# Columns an admin may patch on a question
UPDATABLE_QUESTION_FIELDS = frozenset(
    {
        "question_type_id",
        "title",
        "content",
        "instructions",
        "difficulty_level",
        "expected_duration_seconds",
        "is_active",
    }
)


@dataclass(frozen=True)
class QuestionFilter:
    """Parameterized question query. Results are always newest first."""

    question_type_ids: tuple[str, ...] = ()
    active_only: bool = True
    min_difficulty: int | None = None
    max_difficulty: int | None = None
    exclude_ids: frozenset[str] = field(default_factory=frozenset)
    limit: int | None = None
    offset: int = 0

    def matches(self, question: Any) -> bool:
        """Evaluate the filter against one row (used by in-memory implementations)."""
        if self.question_type_ids and question.question_type_id not in self.question_type_ids:
            return False
        if self.active_only and not question.is_active:
            return False
        if self.min_difficulty is not None and question.difficulty_level < self.min_difficulty:
            return False
        if self.max_difficulty is not None and question.difficulty_level > self.max_difficulty:
            return False
        return question.id not in self.exclude_ids


class PracticeReader(ABC):
    """Read-only queries needed to select practice questions."""

    @abstractmethod
    def recent_question_ids(self, user_id: str, since: datetime) -> set[str]:
        """Ids of questions the user attempted at or after `since`."""

    @abstractmethod
    def average_score(self, user_id: str, question_type_id: str) -> float | None:
        """The user's average score for a question type, None without a progress record."""

    @abstractmethod
    def find_questions(self, query: QuestionFilter) -> list[Question]:
        """Questions matching `query`, ordered by creation time descending."""


class QuestionRepository(PracticeReader):
    """Full data access contract used by the HTTP layer."""

    @abstractmethod
    def get_question(self, question_id: str) -> Question | None:
        pass

    @abstractmethod
    def question_type_ids_for_section(self, section_id: str) -> list[str]:
        pass

    @abstractmethod
    def question_type_ids_for_exam(self, exam_id: str) -> list[str]:
        pass

    @abstractmethod
    def add_attempt(
        self,
        user_id: str,
        question_id: str,
        response_data: Any,
        time_spent_seconds: int,
    ) -> QuestionAttempt:
        pass

    @abstractmethod
    def update_question(self, question: Question, changes: dict[str, Any]) -> Question:
        pass

    @abstractmethod
    def get_user_role(self, user_id: str) -> str | None:
        """Role from the user's profile, None if the profile does not exist."""


def _repository_error(action: str, exc: SQLAlchemyError) -> RepositoryError:
    message = str(getattr(exc, "orig", None) or exc)
    logger.error(f"Repository query failed while {action}: {message}")
    return RepositoryError(message)


class SqlQuestionRepository(QuestionRepository):
    """SQLAlchemy implementation over the hosted Postgres database."""

    def __init__(self, db: Session):
        self.db = db

    def recent_question_ids(self, user_id: str, since: datetime) -> set[str]:
        stmt = select(QuestionAttempt.question_id.distinct()).where(
            QuestionAttempt.user_id == user_id,
            QuestionAttempt.created_at >= since,
        )
        try:
            return set(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise _repository_error("loading recent attempts", e) from e

    def average_score(self, user_id: str, question_type_id: str) -> float | None:
        stmt = select(UserProgress.average_score).where(
            UserProgress.user_id == user_id,
            UserProgress.question_type_id == question_type_id,
        )
        try:
            score = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise _repository_error("loading user progress", e) from e
        return float(score) if score is not None else None

    def find_questions(self, query: QuestionFilter) -> list[Question]:
        stmt = select(Question)
        if query.question_type_ids:
            stmt = stmt.where(Question.question_type_id.in_(query.question_type_ids))
        if query.active_only:
            stmt = stmt.where(Question.is_active == True)  # noqa: E712
        if query.min_difficulty is not None:
            stmt = stmt.where(Question.difficulty_level >= query.min_difficulty)
        if query.max_difficulty is not None:
            stmt = stmt.where(Question.difficulty_level <= query.max_difficulty)
        if query.exclude_ids:
            stmt = stmt.where(Question.id.notin_(sorted(query.exclude_ids)))

        stmt = stmt.order_by(Question.created_at.desc(), Question.id)
        if query.offset:
            stmt = stmt.offset(query.offset)
        if query.limit is not None:
            stmt = stmt.limit(query.limit)

        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise _repository_error("querying questions", e) from e

    def get_question(self, question_id: str) -> Question | None:
        try:
            return self.db.get(Question, question_id)
        except SQLAlchemyError as e:
            raise _repository_error("loading question", e) from e

    def question_type_ids_for_section(self, section_id: str) -> list[str]:
        stmt = select(QuestionType.id).where(QuestionType.section_id == section_id)
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise _repository_error("resolving section question types", e) from e

    def question_type_ids_for_exam(self, exam_id: str) -> list[str]:
        stmt = (
            select(QuestionType.id)
            .join(Section, QuestionType.section_id == Section.id)
            .where(Section.exam_id == exam_id)
        )
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise _repository_error("resolving exam question types", e) from e

    def add_attempt(
        self,
        user_id: str,
        question_id: str,
        response_data: Any,
        time_spent_seconds: int,
    ) -> QuestionAttempt:
        attempt = QuestionAttempt(
            user_id=user_id,
            question_id=question_id,
            response_data=response_data,
            time_spent_seconds=time_spent_seconds,
        )
        try:
            self.db.add(attempt)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise _repository_error("saving attempt", e) from e
        return attempt

    def update_question(self, question: Question, changes: dict[str, Any]) -> Question:
        unknown = set(changes) - UPDATABLE_QUESTION_FIELDS
        if unknown:
            raise ValueError(f"Cannot update question fields: {sorted(unknown)}")
        for key, value in changes.items():
            setattr(question, key, value)
        try:
            self.db.commit()
            self.db.refresh(question)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise _repository_error("updating question", e) from e
        return question

    def get_user_role(self, user_id: str) -> str | None:
        stmt = select(UserProfile.role).where(UserProfile.id == user_id)
        try:
            return self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise _repository_error("loading user profile", e) from e
