"""
Process execution for hook commands.

A command is blocking unless its configured string ends with ``&``:

    "scan $FILE"          -> caller waits for exit, non-zero exit raises
    "thumbnail $FILE &"   -> caller returns once the process has started

Non-blocking processes are awaited by a detached asyncio task that only logs
the outcome. Nothing joins, times out or cancels that task, so a process
that outlives the service is orphaned.
"""
from __future__ import annotations

import asyncio
import os

import structlog

from hookrunner.core.config import HookSettings
from hookrunner.core.errors import CommandLaunchError, CommandRuntimeError

from .expander import PlaceholderExpander
from .models import ExecutionContext, ParsedCommand
from .parser import parse_command

logger = structlog.get_logger()

NON_BLOCKING_MARKER = "&"


def split_blocking(raw: str) -> tuple[str, bool]:
    """Strip the non-blocking marker. Returns (command, blocking)."""
    raw = raw.strip()
    if raw.endswith(NON_BLOCKING_MARKER):
        return raw[: -len(NON_BLOCKING_MARKER)].rstrip(), False
    return raw, True


class CommandExecutor:
    """Runs one configured command for an event."""

    def __init__(
        self,
        settings: HookSettings,
        expander: PlaceholderExpander | None = None,
    ):
        self.settings = settings
        self.expander = expander or PlaceholderExpander()
        # Strong references only, so the loop doesn't drop running waiters.
        self._detached: set[asyncio.Task] = set()

    @property
    def detached_tasks(self) -> frozenset[asyncio.Task]:
        """Exit waiters of non-blocking commands still running."""
        return frozenset(self._detached)

    def build_command(self, raw: str, ctx: ExecutionContext) -> ParsedCommand:
        """Parse and expand a (marker-free) raw command."""
        command = parse_command(self.settings, raw)
        return self.expander.expand_command(command, ctx)

    def build_env(self, ctx: ExecutionContext) -> dict[str, str]:
        """Current environment with the context variables on top."""
        env = dict(os.environ)
        env.update(ctx.as_environ())
        return env

    async def execute(self, raw: str, ctx: ExecutionContext) -> None:
        """
        Run a command.

        Raises:
            CommandParseError: the command string is malformed
            CommandLaunchError: the process could not be started
            CommandRuntimeError: a blocking command exited non-zero
        """
        raw, blocking = split_blocking(raw)
        if not blocking:
            logger.debug("Non-blocking marker found", trigger=ctx.event)

        command = self.build_command(raw, ctx)
        printable = " ".join(command)

        if blocking:
            logger.info("Blocking command", command=printable, trigger=ctx.event)
        else:
            logger.info("Non-blocking command", command=printable, trigger=ctx.event)

        process = await self._spawn(command, ctx)

        if not blocking:
            task = asyncio.create_task(self._wait_detached(process, printable, ctx.event))
            self._detached.add(task)
            task.add_done_callback(self._detached.discard)
            return

        returncode = await process.wait()
        if returncode != 0:
            raise CommandRuntimeError(command, returncode)

    async def _spawn(
        self,
        command: ParsedCommand,
        ctx: ExecutionContext,
    ) -> asyncio.subprocess.Process:
        # stdin/stdout/stderr default to the parent's streams
        try:
            return await asyncio.create_subprocess_exec(
                *command,
                env=self.build_env(ctx),
            )
        except OSError as e:
            raise CommandLaunchError(command, e.strerror or str(e)) from e

    async def _wait_detached(
        self,
        process: asyncio.subprocess.Process,
        printable: str,
        trigger: str,
    ) -> None:
        try:
            returncode = await process.wait()
        except OSError as e:
            logger.warning(
                "Non-blocking command failed",
                command=printable,
                trigger=trigger,
                error=str(e),
            )
            return

        if returncode != 0:
            logger.warning(
                "Non-blocking command failed",
                command=printable,
                trigger=trigger,
                returncode=returncode,
            )
