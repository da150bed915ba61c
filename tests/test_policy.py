# tests/test_policy.py
import pytest

from app.auth.policy import Action, is_allowed

OWNER = "alice"


@pytest.mark.parametrize("action", [Action.CREATE, Action.READ_MINE])
def test_always_allowed(action):
    assert is_allowed("anyone", set(), None, action)


def test_read_all_needs_staff_role():
    assert not is_allowed("alice", {"USER"}, None, Action.READ_ALL)
    assert is_allowed("helper", {"SUPPORT"}, None, Action.READ_ALL)
    assert is_allowed("boss", {"ADMIN"}, None, Action.READ_ALL)


@pytest.mark.parametrize("action", [Action.READ_ONE, Action.UPDATE])
def test_owner_or_staff(action):
    assert is_allowed(OWNER, set(), OWNER, action)
    assert is_allowed(OWNER, {"USER"}, OWNER, action)
    assert not is_allowed("mallory", {"USER"}, OWNER, action)
    assert is_allowed("helper", {"SUPPORT"}, OWNER, action)
    assert is_allowed("boss", {"ADMIN"}, OWNER, action)


def test_delete_is_admin_only():
    assert not is_allowed(OWNER, {"USER"}, OWNER, Action.DELETE)
    assert not is_allowed(OWNER, {"SUPPORT"}, OWNER, Action.DELETE)
    assert not is_allowed("helper", {"SUPPORT", "USER"}, None, Action.DELETE)
    assert is_allowed("boss", {"ADMIN"}, None, Action.DELETE)


def test_missing_owner_never_matches():
    assert not is_allowed("", set(), None, Action.READ_ONE)
