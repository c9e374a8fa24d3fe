"""
Hook runner: wraps a file operation with its before/after commands.
"""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Union

import structlog
from pydantic import ValidationError

from hookrunner.core.config import HookSettings
from hookrunner.core.errors import QueueError
from hookrunner.core.interfaces.queue import JobQueue
from hookrunner.core.interfaces.users import HookUser
from hookrunner.schemas.job import Job

from .executor import CommandExecutor
from .models import AFTER, BEFORE, ExecutionContext

logger = structlog.get_logger()

Operation = Callable[[], Union[Awaitable[Any], Any]]


class HookRunner:
    """
    Runs configured commands around a file operation.

    Before-hooks run inline, in order, and any failure aborts the operation:
    the operation may depend on what they did. After-hooks are never run
    here; each one becomes a Job pushed onto the queue for a worker, and only
    once the operation has succeeded.

    Example usage:
    ```python
    runner = HookRunner(settings.hooks, RedisJobQueue(redis_url))

    async with runner:
        await runner.run_hook(
            lambda: storage.save(path, data),
            "upload",
            path,
            "",
            user,
        )
    ```

    Nothing is retried. Every error reaches the caller.
    """

    def __init__(
        self,
        settings: HookSettings,
        queue: JobQueue,
        executor: CommandExecutor | None = None,
    ):
        self.settings = settings
        self.queue = queue
        self.executor = executor or CommandExecutor(settings)

    @property
    def enabled(self) -> bool:
        return self.settings.enabled

    async def __aenter__(self) -> "HookRunner":
        await self.queue.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.queue.disconnect()

    async def run_hook(
        self,
        operation: Operation,
        event: str,
        path: str,
        destination: str,
        user: HookUser,
    ) -> None:
        """
        Run before-hooks, the operation, then queue after-hooks.

        Args:
            operation: Zero-argument callable doing the actual work; may
                return an awaitable
            event: Event name, e.g. "upload"; selects before_/after_ commands
            path: Source path relative to the user's scope
            destination: Destination path relative to the user's scope
            user: Acting user

        Raises:
            HookError: a before-hook failed, or an after-hook job could not
                be queued
            Exception: whatever the operation raised
        """
        path = user.full_path(path)
        destination = user.full_path(destination)

        if self.enabled:
            await self.run_before(event, path, destination, user)

        result = operation()
        if inspect.isawaitable(result):
            await result

        if self.enabled:
            await self.queue_after(event, path, destination, user)

    async def run_before(
        self,
        event: str,
        path: str,
        destination: str,
        user: HookUser,
    ) -> None:
        """Execute before-hooks in declared order, stopping at the first failure."""
        trigger = BEFORE + event
        ctx = ExecutionContext(
            event=trigger,
            path=path,
            destination=destination,
            username=user.username,
            scope=user.scope,
        )
        for command in self.settings.commands_for(trigger):
            await self.executor.execute(command, ctx)

    async def queue_after(
        self,
        event: str,
        path: str,
        destination: str,
        user: HookUser,
    ) -> None:
        """Push one job per after-hook, stopping at the first failed push."""
        trigger = AFTER + event
        for command in self.settings.commands_for(trigger):
            try:
                job = Job(
                    command=command,
                    event=trigger,
                    path=path,
                    destination=destination,
                    username=user.username,
                    user_scope=user.scope,
                )
            except ValidationError as e:
                raise QueueError(str(e)) from e

            await self.queue.push(job)
            logger.debug("Queued after-hook", trigger=trigger, command=command)
