"""
Registry for swappable backend implementations.
"""
from __future__ import annotations

from typing import TypeVar, Generic, Callable, Any
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BackendRegistry(Generic[T]):
    """
    Named factories for one kind of backend.

    Example usage:
    ```python
    queue_registry = BackendRegistry[JobQueue]("queue")

    queue_registry.register("redis", RedisJobQueue, default=True)
    queue_registry.register("memory", MemoryJobQueue)

    queue = queue_registry.get("redis", config={"redis_url": "redis://..."})
    ```
    """

    def __init__(self, name: str):
        self.name = name
        self._factories: dict[str, Callable[..., T]] = {}
        self._default: str | None = None

    def register(
        self,
        name: str,
        factory: Callable[..., T],
        *,
        default: bool = False,
    ) -> None:
        """
        Register a backend implementation.

        Args:
            name: Unique identifier for this implementation
            factory: Callable that creates the implementation
            default: Set as default implementation
        """
        if name in self._factories:
            logger.warning(f"Overwriting existing {self.name} backend: {name}")

        self._factories[name] = factory

        if default or self._default is None:
            self._default = name

        logger.debug(f"Registered {self.name} backend: {name}")

    def unregister(self, name: str) -> bool:
        """Unregister a backend."""
        if name in self._factories:
            del self._factories[name]
            if name == self._default:
                self._default = next(iter(self._factories), None)
            return True
        return False

    def get(
        self,
        name: str | None = None,
        *,
        config: dict[str, Any] | None = None,
    ) -> T:
        """
        Create a backend instance.

        Args:
            name: Backend name (uses default if not specified)
            config: Keyword arguments for the factory
        """
        name = name or self._default

        if name is None:
            raise ValueError(f"No {self.name} backend registered")

        if name not in self._factories:
            available = ", ".join(self._factories.keys())
            raise ValueError(
                f"Unknown {self.name} backend: {name}. "
                f"Available: {available}"
            )

        return self._factories[name](**(config or {}))

    def list(self) -> list[str]:
        """List all registered backend names."""
        return list(self._factories.keys())

    def has(self, name: str) -> bool:
        """Check if backend is registered."""
        return name in self._factories

    @property
    def default(self) -> str | None:
        """Get default backend name."""
        return self._default


queue_backends = BackendRegistry[Any]("queue")
