"""
Hook data model.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

# Event key ("before_upload", "after_delete", ...) -> ordered raw commands
HookSet = Mapping[str, Sequence[str]]

# argv: tokens[0] is the executable
ParsedCommand = list[str]

BEFORE = "before_"
AFTER = "after_"


@dataclass(frozen=True)
class ExecutionContext:
    """Resolved event context for one command execution."""
    event: str  # prefixed trigger name, e.g. "before_upload"
    path: str
    destination: str
    username: str
    scope: str

    def as_environ(self) -> dict[str, str]:
        """Context variables as exported to the child process."""
        return {
            "FILE": self.path,
            "SCOPE": self.scope,
            "TRIGGER": self.event,
            "USERNAME": self.username,
            "DESTINATION": self.destination,
        }
