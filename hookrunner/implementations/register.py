"""
Register queue backend implementations and build runners from settings.

Import this module at startup; ``create_runner`` registers the backends
on first use.
"""

from __future__ import annotations

from hookrunner.core.config import Settings, get_settings
from hookrunner.core.hooks.runner import HookRunner
from hookrunner.core.plugins.registry import queue_backends


def register_backends() -> None:
    """Register all queue backend implementations."""

    def create_redis_queue(**config):
        from hookrunner.implementations.queue.redis import RedisJobQueue
        return RedisJobQueue(
            redis_url=config.get("url", "redis://localhost:6379/0"),
            name=config.get("name", "fbq"),
            max_connections=config.get("max_connections", 10),
        )

    def create_memory_queue(**config):
        from hookrunner.implementations.queue.memory import MemoryJobQueue
        return MemoryJobQueue(name=config.get("name", "fbq"))

    queue_backends.register("redis", create_redis_queue, default=True)
    queue_backends.register("memory", create_memory_queue)


def create_runner(settings: Settings | None = None) -> HookRunner:
    """Build a HookRunner with the configured queue backend."""
    settings = settings or get_settings()

    if not queue_backends.has(settings.queue.backend):
        register_backends()

    queue = queue_backends.get(
        settings.queue.backend,
        config=settings.get_queue_config(),
    )
    return HookRunner(settings.hooks, queue)
