"""Shared API dependencies: single import point for all routers.

Re-exports the database session and identity dependencies so that router
modules can import everything they need from one place::

    from deskbooking.api.deps import get_db, get_current_user
"""

from deskbooking.auth.dependencies import get_current_user
from deskbooking.database import get_db

__all__ = [
    "get_db",
    "get_current_user",
]
