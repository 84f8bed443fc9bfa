"""Question model."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    SmallInteger,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from examprep.db.base import Base
from examprep.models.exam import new_id

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5


class Question(Base):
    """A single practice question belonging to one question type."""

    __tablename__ = "questions"

    id = Column(String(36), primary_key=True, default=new_id)
    question_type_id = Column(
        String(36), ForeignKey("question_types.id", ondelete="CASCADE"), nullable=False
    )
    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=True)
    instructions = Column(Text, nullable=True)
    difficulty_level = Column(SmallInteger, nullable=False, default=3)
    expected_duration_seconds = Column(Integer, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    question_type = relationship("QuestionType", back_populates="questions")

    __table_args__ = (
        CheckConstraint(
            f"difficulty_level BETWEEN {MIN_DIFFICULTY} AND {MAX_DIFFICULTY}",
            name="ck_questions_difficulty_level",
        ),
        Index("ix_questions_type_active_created", "question_type_id", "is_active", "created_at"),
    )
