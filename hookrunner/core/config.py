"""
Runner configuration using Pydantic Settings.
"""

from functools import lru_cache
from pydantic import Field, field_validator, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


HOOK_PREFIXES = ("before_", "after_")


class HookSettings(BaseSettings):
    """
    Event hook configuration.

    Frozen so the runner can hold it as a read-only snapshot.

    ``commands`` maps event keys such as ``before_upload`` or
    ``after_delete`` to an ordered list of raw command strings. From the
    environment it is read as JSON:

        HOOKS_ENABLED=true
        HOOKS_COMMANDS='{"before_upload": ["scan $FILE"], "after_delete": ["notify &"]}'
    """

    model_config = SettingsConfigDict(env_prefix="HOOKS_", frozen=True)

    enabled: bool = Field(default=False, description="Execute configured hook commands")
    commands: dict[str, list[str]] = Field(default_factory=dict)
    shell: list[str] = Field(
        default_factory=list,
        description="Wrap every command in this shell, e.g. ['/bin/sh', '-c']",
    )

    @field_validator("commands")
    @classmethod
    def validate_commands(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        for key in v:
            if not key.startswith(HOOK_PREFIXES):
                raise ValueError(
                    f"hook key {key!r} must start with one of {HOOK_PREFIXES}"
                )
        return v

    def commands_for(self, key: str) -> list[str]:
        """Ordered commands for an event key (empty if none)."""
        return list(self.commands.get(key, ()))


class RedisSettings(BaseSettings):
    """Redis configuration."""

    model_config = SettingsConfigDict(env_prefix="REDIS_")

    url: RedisDsn = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL",
    )
    max_connections: int = Field(default=10, ge=1)


class QueueSettings(BaseSettings):
    """Job queue configuration."""

    model_config = SettingsConfigDict(env_prefix="QUEUE_")

    backend: str = Field(default="redis", description="redis or memory")
    name: str = Field(default="fbq", description="Redis list that receives after-hook jobs")


class Settings(BaseSettings):
    """Main runner settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", description="json or text")

    # Nested settings
    hooks: HookSettings = Field(default_factory=HookSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    queue: QueueSettings = Field(default_factory=QueueSettings)

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "text"}
        if v not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v

    def get_queue_config(self) -> dict:
        """Get keyword configuration for the queue backend factory."""
        return {
            "url": str(self.redis.url),
            "name": self.queue.name,
            "max_connections": self.redis.max_connections,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
