"""
tests.test_policy

Authorization predicates are pure; exercise them on transient users.
"""

from __future__ import annotations

import uuid

import pytest

from notes_api.auth.policy import require_admin, require_authenticated, require_owner_or_admin
from notes_api.db.models import Role, User
from notes_api.errors import Forbidden, Unauthenticated


def _user(role: Role = Role.regular) -> User:
    return User(
        id=uuid.uuid4(), name="u", email=f"{uuid.uuid4()}@x.com", password_hash="x", role=role
    )


def test_require_authenticated() -> None:
    user = _user()
    assert require_authenticated(user) is user
    with pytest.raises(Unauthenticated):
        require_authenticated(None)


def test_require_admin() -> None:
    admin = _user(Role.admin)
    assert require_admin(admin) is admin
    with pytest.raises(Forbidden):
        require_admin(_user())
    with pytest.raises(Unauthenticated):
        require_admin(None)


def test_require_owner_or_admin() -> None:
    owner = _user()
    stranger = _user()
    admin = _user(Role.admin)

    assert require_owner_or_admin(owner, owner.id) is owner
    assert require_owner_or_admin(admin, owner.id) is admin
    with pytest.raises(Forbidden):
        require_owner_or_admin(stranger, owner.id)
    with pytest.raises(Unauthenticated):
        require_owner_or_admin(None, owner.id)
