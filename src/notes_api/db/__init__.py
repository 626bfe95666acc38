"""
notes_api.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, repositories and admin seeding.
"""

# Package marker.
