"""
notes_api

Top-level package for the multi-tenant notes service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
