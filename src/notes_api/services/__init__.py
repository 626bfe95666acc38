"""
notes_api.services

Service-layer package.

Responsibilities:
- Own transaction boundaries and persistence decisions.
- Compose the authorization policy with repository calls.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services take a `RequestContext` and never import FastAPI, so they can be
# driven from tests or scripts with a plain session.
