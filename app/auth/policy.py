# app/auth/policy.py
"""Who may do what to a ticket.

| action    | allowed when                                   |
|-----------|------------------------------------------------|
| CREATE    | always                                         |
| READ_MINE | always                                         |
| READ_ALL  | ADMIN or SUPPORT                               |
| READ_ONE  | owner, or ADMIN or SUPPORT                     |
| UPDATE    | owner, or ADMIN or SUPPORT                     |
| DELETE    | ADMIN only; owning the ticket is not enough    |
"""
from collections.abc import Iterable
from enum import Enum

ADMIN = "ADMIN"
SUPPORT = "SUPPORT"
USER = "USER"

STAFF_ROLES = frozenset({ADMIN, SUPPORT})


class Action(str, Enum):
    CREATE = "create"
    READ_ONE = "read_one"
    READ_ALL = "read_all"
    READ_MINE = "read_mine"
    UPDATE = "update"
    DELETE = "delete"


def is_allowed(
    subject_id: str,
    subject_roles: Iterable[str],
    resource_owner_id: str | None,
    action: Action,
) -> bool:
    roles = frozenset(subject_roles)
    is_staff = not STAFF_ROLES.isdisjoint(roles)
    is_owner = resource_owner_id is not None and resource_owner_id == subject_id

    if action in (Action.CREATE, Action.READ_MINE):
        return True
    if action is Action.READ_ALL:
        return is_staff
    if action in (Action.READ_ONE, Action.UPDATE):
        return is_owner or is_staff
    if action is Action.DELETE:
        return ADMIN in roles
    return False
