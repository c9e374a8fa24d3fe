"""
Core interfaces (protocols) for the collaborators the runner talks to.
"""

from .queue import JobQueue
from .users import HookUser, ScopedUser

__all__ = [
    "JobQueue",
    "HookUser",
    "ScopedUser",
]
