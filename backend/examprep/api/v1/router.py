"""API v1 router - includes all v1 endpoints."""

from fastapi import APIRouter

from examprep.api.v1.endpoints import admin_questions, health, question_attempts, questions

api_router = APIRouter()

api_router.include_router(health.router, prefix="", tags=["Health"])
api_router.include_router(questions.router, prefix="/questions", tags=["Questions"])
api_router.include_router(
    question_attempts.router, prefix="/question-attempts", tags=["Question Attempts"]
)
api_router.include_router(
    admin_questions.router, prefix="/admin/questions", tags=["Admin - Questions"]
)
