# app/auth/dependencies.py
import logging

from fastapi import Depends, Header

from app.auth.claims import Principal, default_principal, extract_principal
from app.auth.tokens import decode_token
from app.core.config import Settings, get_settings
from app.core.errors import MissingIdentity

log = logging.getLogger(__name__)


def bearer_token(authorization: str | None = Header(None)) -> str | None:
    """Gets the JWT from an ``Authorization: Bearer <jwt>`` header."""
    if not authorization:
        return None

    parts = authorization.split()
    if not parts or parts[0].lower() != "bearer":
        log.debug("Authorization header lacked bearer")
        return None
    if len(parts) != 2:
        log.debug("Authorization header not 2 parts")
        return None
    return parts[1]


def get_principal(
    token: str | None = Depends(bearer_token),
    settings: Settings = Depends(get_settings),
) -> Principal:
    if not settings.SECURITY_ENABLED:
        return default_principal(settings)
    if not token:
        raise MissingIdentity()
    principal = extract_principal(decode_token(token, settings), settings)
    log.debug("Authenticated %s roles=%s", principal.subject_id, sorted(principal.roles))
    return principal
