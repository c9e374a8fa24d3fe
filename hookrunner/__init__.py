"""
Event-triggered command runner for file operations.
"""

from hookrunner.core.hooks import HookRunner
from hookrunner.core.interfaces import ScopedUser
from hookrunner.schemas import Job

__all__ = ["HookRunner", "ScopedUser", "Job"]
