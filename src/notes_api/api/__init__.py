"""
notes_api.api

API package for the notes service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and error rendering.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers stay thin: parse input, build a service from the request context,
# return the service's view.
