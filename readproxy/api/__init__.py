"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from readproxy.api import app

    uvicorn readproxy.api:app
"""

from readproxy.api.app import app

__all__ = ["app"]
