"""
Hook execution errors.

Kinds:
- CommandParseError: malformed command string (user configuration error)
- CommandLaunchError: executable missing, permission denied
- CommandRuntimeError: blocking command exited non-zero
- QueueError: after-hook job could not be serialized or pushed

Non-blocking commands that fail after launch never raise; they are logged.
"""

from __future__ import annotations

from typing import Sequence


class HookError(Exception):
    """Base class for hook execution failures."""
    pass


class CommandParseError(HookError):
    """Raised when a raw command string cannot be turned into argv."""
    pass


class CommandLaunchError(HookError):
    """Raised when a command process cannot be started."""

    def __init__(self, command: Sequence[str], reason: str):
        self.command = list(command)
        super().__init__(f"failed to start {self.command[0]!r}: {reason}")


class CommandRuntimeError(HookError):
    """Raised when a blocking command exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int):
        self.command = list(command)
        self.returncode = returncode
        super().__init__(
            f"command {' '.join(self.command)!r} exited with status {returncode}"
        )


class QueueError(HookError):
    """Raised when a job cannot be appended to the queue."""

    def __init__(self, reason: str):
        super().__init__(f"failed to queue job: {reason}")
