"""Job queue implementations."""

from hookrunner.implementations.queue.memory import MemoryJobQueue
from hookrunner.implementations.queue.redis import RedisJobQueue

__all__ = ["MemoryJobQueue", "RedisJobQueue"]
