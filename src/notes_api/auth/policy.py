"""
notes_api.auth.policy

Authorization predicates.

Each function takes the optional caller resolved for the request and either
returns the (now known to be present) caller or raises a typed denial. They
touch no storage and must run before any mutation. Admin always wins over
ownership.
"""

from __future__ import annotations

import uuid

from notes_api.db.models import User
from notes_api.errors import Forbidden, Unauthenticated


def require_authenticated(user: User | None) -> User:
    if user is None:
        raise Unauthenticated()
    return user


def require_admin(user: User | None) -> User:
    user = require_authenticated(user)
    if not user.is_admin:
        raise Forbidden("You must be an admin to perform this action")
    return user


def require_owner_or_admin(user: User | None, owner_id: uuid.UUID) -> User:
    user = require_authenticated(user)
    if user.id != owner_id and not user.is_admin:
        raise Forbidden("You can only access your own resources")
    return user
