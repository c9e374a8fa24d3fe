"""
Redis job queue implementation.
"""

from __future__ import annotations

import redis.asyncio as redis
from redis.exceptions import RedisError

from hookrunner.core.errors import QueueError
from hookrunner.schemas.job import Job

DEFAULT_QUEUE_NAME = "fbq"


class RedisJobQueue:
    """
    Redis list producer for after-hook jobs.

    Each push is a single LPUSH of one JSON object onto ``name``; the worker
    pops from the other end, so the list behaves as a FIFO.

    Usage:
        queue = RedisJobQueue(redis_url="redis://localhost:6379/0")
        await queue.connect()

        await queue.push(job)
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        name: str = DEFAULT_QUEUE_NAME,
        max_connections: int = 10,
    ):
        self.redis_url = redis_url
        self.name = name
        self.max_connections = max_connections
        self._client: redis.Redis | None = None

    async def connect(self) -> None:
        """Connect to Redis."""
        if self._client is None:
            self._client = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
                max_connections=self.max_connections,
            )

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            raise RuntimeError("Queue not connected. Call connect() first.")
        return self._client

    async def push(self, job: Job) -> None:
        """Serialize and append a job. Raises QueueError on failure."""
        await self.connect()
        try:
            payload = job.to_json()
            await self.client.lpush(self.name, payload)
        except (RedisError, OSError, ValueError) as e:
            raise QueueError(str(e)) from e

    async def length(self) -> int:
        """Number of jobs waiting in the list."""
        return await self.client.llen(self.name)
