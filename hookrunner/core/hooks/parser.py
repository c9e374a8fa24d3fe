"""Command parsing: raw configured command string -> argv."""

from __future__ import annotations

import shlex

from hookrunner.core.config import HookSettings
from hookrunner.core.errors import CommandParseError

from .models import ParsedCommand


def split_command(raw: str) -> ParsedCommand:
    """Split a command with POSIX shell quoting rules."""
    try:
        tokens = shlex.split(raw, posix=True)
    except ValueError as e:
        raise CommandParseError(f"cannot parse command {raw!r}: {e}") from e
    if not tokens:
        raise CommandParseError("empty command")
    return tokens


def parse_command(settings: HookSettings, raw: str) -> ParsedCommand:
    """
    Turn a raw command string into argv.

    With ``settings.shell`` set (e.g. ``["/bin/sh", "-c"]``) the raw string is
    handed to that shell untouched. Otherwise it is split with shlex.
    Whether the program exists is only known at launch time.
    """
    if settings.shell and settings.shell[0]:
        if not raw:
            raise CommandParseError("empty command")
        return [*settings.shell, raw]

    return split_command(raw)
