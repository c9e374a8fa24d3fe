"""
Job queue protocol.
Implementations: RedisJobQueue, MemoryJobQueue
"""
from __future__ import annotations

from typing import Protocol

from hookrunner.schemas.job import Job


class JobQueue(Protocol):
    """
    Protocol for the producer side of the after-hook queue.

    The runner only ever appends. Reading and executing jobs belongs to a
    separate worker; atomicity of a single push is the backend's concern.

    Example implementations:
    - RedisJobQueue: LPUSH onto a well-known Redis list
    - MemoryJobQueue: For testing
    """

    name: str

    async def push(self, job: Job) -> None:
        """
        Append a job to the queue.
        Raises QueueError on serialization or transport failure.
        """
        ...

    async def connect(self) -> None:
        """Open the backend connection (no-op if already open)."""
        ...

    async def disconnect(self) -> None:
        """Close the backend connection."""
        ...
