"""
In-memory job queue for testing and development.
"""

from __future__ import annotations

import json
from collections import deque
from typing import Any

from hookrunner.schemas.job import Job


class MemoryJobQueue:
    """
    In-memory job queue for testing and development.

    Payloads are stored serialized, newest first, the way LPUSH leaves a
    Redis list. Nothing consumes them.

    Usage:
        queue = MemoryJobQueue()
        await queue.push(job)

        queue.jobs()  # oldest first, as a worker would receive them
    """

    def __init__(self, name: str = "fbq"):
        self.name = name
        self._items: deque[str] = deque()

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass

    async def push(self, job: Job) -> None:
        self._items.appendleft(job.to_json())

    async def length(self) -> int:
        return len(self._items)

    @property
    def payloads(self) -> list[str]:
        """Raw payloads, head of the list first."""
        return list(self._items)

    def jobs(self) -> list[dict[str, Any]]:
        """Decoded jobs in consumption order (oldest first)."""
        return [json.loads(item) for item in reversed(self._items)]

    def clear(self) -> None:
        self._items.clear()
