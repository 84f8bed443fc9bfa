"""Database models."""

# Import all models here so metadata.create_all sees every table
from examprep.models.attempt import QuestionAttempt
from examprep.models.exam import Exam, QuestionType, Section
from examprep.models.progress import UserProgress
from examprep.models.question import MAX_DIFFICULTY, MIN_DIFFICULTY, Question
from examprep.models.user import UserProfile, UserRole

__all__ = [
    "Exam",
    "Section",
    "QuestionType",
    "Question",
    "MIN_DIFFICULTY",
    "MAX_DIFFICULTY",
    "QuestionAttempt",
    "UserProgress",
    "UserProfile",
    "UserRole",
]
