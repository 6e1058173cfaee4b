"""Signed token helpers."""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from statushook.config import Settings
from statushook.domain.errors import AuthError

logger = logging.getLogger(__name__)


def service_from_token(token: str | None, settings: Settings) -> str:
    """Verify a relay token and return the provider named by its subject.

    Providers cannot send headers, so the token travels in the webhook URL's
    ``token`` query parameter. Tokens signed by older tooling carry the
    provider in a ``subject`` claim instead of ``sub``.
    """

    if not token:
        raise AuthError("Token missing")
    if not settings.signing_secret:
        logger.error("signing secret is not configured, rejecting token")
        raise AuthError("Invalid token: signing secret is not configured")

    try:
        claims = jwt.decode(token, settings.signing_secret, algorithms=settings.jwt_algorithms)
    except jwt.InvalidTokenError as exc:
        raise AuthError(f"Invalid token: {exc}") from exc

    service = claims.get("sub") or claims.get("subject")
    if not isinstance(service, str) or not service:
        raise AuthError("Invalid token: missing subject claim")
    return service


def issue_token(service: str, secret: str, expires_in: timedelta | None = None, algorithm: str = "HS256") -> str:
    """Sign a relay token for one provider."""

    issued_at = datetime.now(timezone.utc)
    claims: dict = {"sub": service, "iat": issued_at}
    if expires_in is not None:
        claims["exp"] = issued_at + expires_in
    return jwt.encode(claims, secret, algorithm=algorithm)
