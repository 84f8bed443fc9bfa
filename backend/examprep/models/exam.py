"""Exam hierarchy models: exams, sections and question types."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from examprep.db.base import Base


def new_id() -> str:
    return str(uuid.uuid4())


class Exam(Base):
    """An exam family, e.g. IELTS Academic or PTE Academic."""

    __tablename__ = "exams"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False, unique=True)
    display_name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    sections = relationship("Section", back_populates="exam", cascade="all, delete-orphan")


class Section(Base):
    """A section of an exam (Speaking, Writing, Reading, Listening)."""

    __tablename__ = "sections"

    id = Column(String(36), primary_key=True, default=new_id)
    exam_id = Column(String(36), ForeignKey("exams.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    display_name = Column(String(200), nullable=True)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    exam = relationship("Exam", back_populates="sections")
    question_types = relationship(
        "QuestionType", back_populates="section", cascade="all, delete-orphan"
    )


class QuestionType(Base):
    """A category of question within a section, e.g. "Read Aloud"."""

    __tablename__ = "question_types"

    id = Column(String(36), primary_key=True, default=new_id)
    section_id = Column(
        String(36), ForeignKey("sections.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    display_name = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    section = relationship("Section", back_populates="question_types")
    questions = relationship("Question", back_populates="question_type")
