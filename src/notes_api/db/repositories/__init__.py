"""
notes_api.db.repositories

Repository package.

Responsibilities:
- Group data-access repositories for users and notes.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories only read and write rows; permission checks live in services.
