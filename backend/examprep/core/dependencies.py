"""FastAPI dependencies for authentication, authorization and data access."""

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from examprep.core.app_exceptions import ForbiddenError, UnauthorizedError
from examprep.core.config import settings
from examprep.core.security import get_user_id_from_token
from examprep.db.session import get_db
from examprep.models.user import UserRole
from examprep.repositories.questions import QuestionRepository, SqlQuestionRepository


def get_question_repository(db: Session = Depends(get_db)) -> QuestionRepository:
    """Dependency to get the question repository bound to the request session."""
    return SqlQuestionRepository(db)


def get_optional_user_id(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """The caller's user id, or None when there is no valid session.

    Accepts `Authorization: Bearer <token>` or the auth provider's session cookie.
    """
    token = None
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            token = credentials.strip()
    if token is None:
        token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    return get_user_id_from_token(token)


def get_current_user_id(
    user_id: Annotated[str | None, Depends(get_optional_user_id)],
) -> str:
    """Dependency to require an authenticated caller."""
    if not user_id:
        raise UnauthorizedError()
    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
Repository = Annotated[QuestionRepository, Depends(get_question_repository)]


def require_roles(*allowed_roles: UserRole):
    """Dependency factory to require one of the given profile roles.

    Returns the caller's user id so routes can use it directly.
    """
    allowed = {role.value for role in allowed_roles}

    def role_checker(user_id: CurrentUserId, repo: Repository) -> str:
        role = repo.get_user_role(user_id)
        if role not in allowed:
            if UserRole.ADMIN.value in allowed:
                raise ForbiddenError("Admin access required")
            raise ForbiddenError(f"Access denied. Required roles: {sorted(allowed)}")
        return user_id

    return role_checker


AdminUserId = Annotated[str, Depends(require_roles(UserRole.ADMIN))]
