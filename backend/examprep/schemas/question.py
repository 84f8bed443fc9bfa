"""Schemas for questions and attempts."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from examprep.models.question import MAX_DIFFICULTY, MIN_DIFFICULTY

# Validation caps (input hardening)
TITLE_MAX_LENGTH = 500
CONTENT_MAX_LENGTH = 20000


class QuestionOut(BaseModel):
    """Question as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    question_type_id: str
    title: str
    content: str | None = None
    instructions: str | None = None
    difficulty_level: int
    expected_duration_seconds: int | None = None
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class QuestionUpdate(BaseModel):
    """Partial update of a question. Omitted fields are left untouched."""

    question_type_id: str | None = Field(None, min_length=1)
    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str | None = Field(None, max_length=CONTENT_MAX_LENGTH)
    instructions: str | None = Field(None, max_length=CONTENT_MAX_LENGTH)
    difficulty_level: int | None = Field(None, ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY)
    expected_duration_seconds: int | None = Field(None, ge=0)
    is_active: bool | None = None


class AttemptCreate(BaseModel):
    """Request to record a question attempt."""

    question_id: str = Field(..., min_length=1)
    response: Any = None
    time_spent_seconds: int = Field(default=0, ge=0)


class AttemptCreated(BaseModel):
    success: bool = True
    attempt_id: str
    message: str = "Attempt saved successfully"


class MessageResponse(BaseModel):
    message: str
