"""
Placeholder expansion for command arguments.
"""
from __future__ import annotations

import os
import re
from typing import Callable, Optional

from .models import ExecutionContext, ParsedCommand

EnvLookup = Callable[[str], Optional[str]]

# $NAME, ${NAME}, single special characters ($1, $$, $?), and the invalid
# forms "${}" / unterminated "${" which are consumed without output.
_PLACEHOLDER = re.compile(
    r"""\$(?:
        \{(?P<special_braced>[*#$@!?\-0-9])\}
      | \{(?P<braced>[^}]+)\}
      | (?P<invalid>\{\}?)
      | (?P<special>[*#$@!?\-0-9])
      | (?P<named>[A-Za-z0-9_]+)
    )""",
    re.VERBOSE,
)


class PlaceholderExpander:
    """
    Expands ``$NAME`` / ``${NAME}`` references in arguments.

    Context variables (FILE, SCOPE, TRIGGER, USERNAME, DESTINATION) come from
    the ExecutionContext; any other name goes through ``env_lookup``, which
    defaults to the process environment. Unset names expand to "".

    Expansion is a single pass: substituted text is never re-expanded.
    """

    def __init__(self, env_lookup: EnvLookup | None = None):
        self._env_lookup = env_lookup or os.environ.get

    def lookup(self, name: str, ctx: ExecutionContext) -> str:
        context_vars = ctx.as_environ()
        if name in context_vars:
            return context_vars[name]
        return self._env_lookup(name) or ""

    def expand(self, arg: str, ctx: ExecutionContext) -> str:
        def replace(match: re.Match) -> str:
            if match.group("invalid") is not None:
                return ""
            name = (
                match.group("special_braced")
                or match.group("braced")
                or match.group("special")
                or match.group("named")
            )
            return self.lookup(name, ctx)

        return _PLACEHOLDER.sub(replace, arg)

    def expand_command(self, command: ParsedCommand, ctx: ExecutionContext) -> ParsedCommand:
        """
        Expand every argument except the program name and drop arguments
        that expand to nothing.
        """
        if not command:
            return []
        args = [self.expand(arg, ctx) for arg in command[1:]]
        return [command[0], *(arg for arg in args if arg != "")]
