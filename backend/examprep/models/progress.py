"""Per user, per question-type aggregate progress."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.sql import func

from examprep.db.base import Base
from examprep.models.exam import new_id


class UserProgress(Base):
    """Aggregate score for one user on one question type.

    Maintained by the scoring pipeline; this service only reads it.
    """

    __tablename__ = "user_progress"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), nullable=False)
    question_type_id = Column(
        String(36), ForeignKey("question_types.id", ondelete="CASCADE"), nullable=False
    )
    average_score = Column(Float, nullable=True)  # 0-100
    questions_attempted = Column(Integer, default=0, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("user_id", "question_type_id", name="uq_user_progress_user_type"),
    )
