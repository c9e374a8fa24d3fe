"""
Hook system for file operation events.
Runs configured commands before an operation and queues the ones that
belong after it.
"""

from .executor import CommandExecutor, split_blocking
from .expander import PlaceholderExpander
from .models import ExecutionContext, HookSet, ParsedCommand
from .parser import parse_command, split_command
from .runner import HookRunner

__all__ = [
    "HookRunner",
    "CommandExecutor",
    "PlaceholderExpander",
    "ExecutionContext",
    "HookSet",
    "ParsedCommand",
    "parse_command",
    "split_command",
    "split_blocking",
]
