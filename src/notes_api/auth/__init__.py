"""
notes_api.auth

Authentication/authorization package.

Responsibilities:
- Password hashing and JWT helpers.
- Resolve a bearer token into an optional identity per request.
- Pure policy predicates (authenticated / admin / owner-or-admin).
"""

# Package marker.
