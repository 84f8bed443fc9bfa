"""Question attempt model."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.sql import func

from examprep.db.base import Base
from examprep.models.exam import new_id


class QuestionAttempt(Base):
    """One exposure of a question to a user. Never updated after insert."""

    __tablename__ = "question_attempts"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), nullable=False)
    question_id = Column(
        String(36), ForeignKey("questions.id", ondelete="CASCADE"), nullable=False
    )
    response_data = Column(JSON, nullable=True)
    time_spent_seconds = Column(Integer, default=0, nullable=False)
    score = Column(Numeric(5, 2), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (Index("ix_question_attempts_user_created", "user_id", "created_at"),)
