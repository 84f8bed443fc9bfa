"""Verification of access tokens issued by the hosted auth provider."""

from typing import Any

import jwt

from examprep.core.config import settings
from examprep.core.logging import get_logger

logger = get_logger(__name__)


def verify_access_token(token: str) -> dict[str, Any]:
    """Verify and decode an access token.

    The provider signs session tokens with the project's shared secret and
    stamps them with the `authenticated` audience. Signature, expiry and
    audience are checked; anything else is the provider's business.

    Raises:
        jwt.InvalidTokenError: token is malformed, expired or not ours
        ValueError: no verification secret is configured
    """
    if not settings.AUTH_JWT_SECRET:
        raise ValueError("AUTH_JWT_SECRET must be set")

    payload = jwt.decode(
        token,
        settings.AUTH_JWT_SECRET,
        algorithms=[settings.AUTH_JWT_ALG],
        audience=settings.AUTH_JWT_AUDIENCE,
        options={"require": ["sub", "exp"]},
    )
    if not payload.get("sub"):
        raise jwt.InvalidTokenError("Token has no subject")
    return payload


def get_user_id_from_token(token: str | None) -> str | None:
    """Return the user id carried by a token, or None if it does not verify."""
    if not token:
        return None
    try:
        payload = verify_access_token(token)
    except jwt.InvalidTokenError as e:
        logger.info("Rejected access token", extra={"reason": str(e)})
        return None
    return str(payload["sub"])
