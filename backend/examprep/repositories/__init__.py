"""Data access layer."""

from examprep.repositories.questions import (
    PracticeReader,
    QuestionFilter,
    QuestionRepository,
    SqlQuestionRepository,
)

__all__ = ["PracticeReader", "QuestionFilter", "QuestionRepository", "SqlQuestionRepository"]
