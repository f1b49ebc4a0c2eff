"""API routers."""

from taskplanner.api import auth, nextdate, tasks

__all__ = [
    "auth",
    "nextdate",
    "tasks",
]
