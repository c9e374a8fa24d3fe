"""
Pytest fixtures for testing.

Provides:
- Hook settings and user factories
- Mock implementations for the queue and executor collaborators
- A fake Redis client for the Redis queue producer
"""

from typing import Callable

import pytest
import structlog
from redis.exceptions import ConnectionError as RedisConnectionError

from hookrunner.core.config import HookSettings
from hookrunner.core.errors import QueueError
from hookrunner.core.hooks.models import ExecutionContext
from hookrunner.core.interfaces.users import ScopedUser
from hookrunner.implementations.queue.redis import RedisJobQueue
from hookrunner.schemas.job import Job


# ============ Factory Fixtures ============


@pytest.fixture
def make_settings() -> Callable[..., HookSettings]:
    """Build a HookSettings snapshot without touching the environment."""

    def factory(
        commands: dict[str, list[str]] | None = None,
        enabled: bool = True,
        shell: list[str] | None = None,
    ) -> HookSettings:
        return HookSettings(
            enabled=enabled,
            commands=commands or {},
            shell=shell or [],
        )

    return factory


@pytest.fixture
def user() -> ScopedUser:
    return ScopedUser(username="alice", scope="/users/alice", root="/srv")


@pytest.fixture
def ctx() -> ExecutionContext:
    return ExecutionContext(
        event="before_upload",
        path="/a/b",
        destination="/c/d",
        username="alice",
        scope="u1",
    )


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


# ============ Mock Implementations ============


class MockJobQueue:
    """Records pushed jobs; optionally fails on the n-th push (1-based)."""

    def __init__(self, fail_on: int | None = None):
        self.name = "fbq"
        self.fail_on = fail_on
        self.pushed: list[Job] = []
        self.attempts = 0
        self.connected = False

    async def connect(self) -> None:
        self.connected = True

    async def disconnect(self) -> None:
        self.connected = False

    async def push(self, job: Job) -> None:
        self.attempts += 1
        if self.fail_on is not None and self.attempts == self.fail_on:
            raise QueueError("broker unavailable")
        self.pushed.append(job)


class MockExecutor:
    """Records executed commands; raises the mapped error for a command."""

    def __init__(self, failures: dict[str, Exception] | None = None):
        self.failures = failures or {}
        self.calls: list[tuple[str, ExecutionContext]] = []

    async def execute(self, raw: str, ctx: ExecutionContext) -> None:
        self.calls.append((raw, ctx))
        if raw in self.failures:
            raise self.failures[raw]

    @property
    def commands(self) -> list[str]:
        return [raw for raw, _ in self.calls]


class FakeRedis:
    """Just enough of redis.asyncio.Redis for the job queue."""

    def __init__(self, fail_on: int | None = None):
        self.lists: dict[str, list[str]] = {}
        self.fail_on = fail_on
        self.calls = 0
        self.closed = False

    async def lpush(self, name: str, *values: str) -> int:
        self.calls += 1
        if self.fail_on is not None and self.calls == self.fail_on:
            raise RedisConnectionError("Connection refused")
        items = self.lists.setdefault(name, [])
        for value in values:
            items.insert(0, value)
        return len(items)

    async def llen(self, name: str) -> int:
        return len(self.lists.get(name, []))

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def mock_queue() -> MockJobQueue:
    return MockJobQueue()


@pytest.fixture
def mock_executor() -> MockExecutor:
    return MockExecutor()


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def redis_queue(fake_redis: FakeRedis) -> RedisJobQueue:
    queue = RedisJobQueue(redis_url="redis://localhost:6379/0")
    queue._client = fake_redis
    return queue


@pytest.fixture
def make_queue() -> Callable[..., MockJobQueue]:
    return MockJobQueue


@pytest.fixture
def make_executor() -> Callable[..., MockExecutor]:
    return MockExecutor


@pytest.fixture
def make_fake_redis() -> Callable[..., FakeRedis]:
    return FakeRedis
