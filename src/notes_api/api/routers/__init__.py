"""
notes_api.api.routers

HTTP routers: health, auth, users, notes.
"""
