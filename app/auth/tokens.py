# app/auth/tokens.py
import logging
import time
from typing import Any

import jwt

from app.auth.policy import ADMIN, SUPPORT, USER
from app.core.config import Settings
from app.core.errors import MissingIdentity

log = logging.getLogger(__name__)

MOCK_ROLES = {
    "admin": [ADMIN, SUPPORT, USER],
    "support": [SUPPORT, USER],
    "user": [USER],
}


def decode_token(token: str, settings: Settings) -> dict[str, Any]:
    """Verify a bearer token and return its claims."""
    if settings.MOCK_JWT and token.startswith("mock-"):
        return decode_mock_token(token, settings)

    options = {"verify_aud": settings.JWT_AUDIENCE is not None}
    try:
        return dict(
            jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=[settings.JWT_ALGORITHM],
                audience=settings.JWT_AUDIENCE,
                issuer=settings.JWT_ISSUER,
                options=options,
            )
        )
    except jwt.ExpiredSignatureError as ex:
        log.debug("decode_token() expired token")
        raise MissingIdentity("Token expired") from ex
    except jwt.InvalidTokenError as ex:
        log.debug("decode_token() invalid token: %s", ex)
        raise MissingIdentity("Invalid token") from ex


def decode_mock_token(token: str, settings: Settings) -> dict[str, Any]:
    """Local development tokens of the form ``mock-{admin|support|user}-{id}``."""
    parts = token.split("-")
    if len(parts) != 3 or parts[0] != "mock" or parts[1].lower() not in MOCK_ROLES or not parts[2]:
        raise MissingIdentity("Invalid mock token, use mock-{admin|support|user}-{id}")
    user_type, user_id = parts[1].lower(), parts[2]
    now = int(time.time())
    return {
        settings.SUBJECT_CLAIM: user_id,
        settings.ROLES_CLAIM: list(MOCK_ROLES[user_type]),
        "sub": user_id,
        "iss": "mock-issuer",
        "iat": now,
        "exp": now + 3600,
    }


def encode_token(claims: dict[str, Any], settings: Settings) -> str:
    """Sign claims with the configured secret. Used by tests and local tooling."""
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
