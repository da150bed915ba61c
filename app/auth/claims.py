# app/auth/claims.py
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app.auth.policy import ADMIN
from app.core.config import Settings
from app.core.errors import MissingIdentity


@dataclass(frozen=True)
class Principal:
    """The authenticated caller for one request."""

    subject_id: str
    roles: frozenset[str] = field(default_factory=frozenset)


def default_principal(settings: Settings) -> Principal:
    return Principal(subject_id=settings.DEFAULT_SUBJECT, roles=frozenset({ADMIN}))


def extract_roles(value: Any) -> frozenset[str]:
    """Upper-cased string roles; anything that is not a list yields no roles."""
    if not isinstance(value, (list, tuple)):
        return frozenset()
    return frozenset(r.upper() for r in value if isinstance(r, str))


def extract_principal(claims: Mapping[str, Any] | None, settings: Settings) -> Principal:
    """Build the caller's identity from an already verified claim set.

    With security disabled the claims are ignored and the fixed default
    administrator is returned. Otherwise the subject claim must be a
    non-empty string or MissingIdentity is raised.
    """
    if not settings.SECURITY_ENABLED:
        return default_principal(settings)

    claims = claims or {}
    subject = claims.get(settings.SUBJECT_CLAIM)
    if not isinstance(subject, str) or not subject:
        raise MissingIdentity(f"Token has no usable {settings.SUBJECT_CLAIM} claim")

    return Principal(subject_id=subject, roles=extract_roles(claims.get(settings.ROLES_CLAIM)))
