"""Queued hook job schema."""

from pydantic import BaseModel, ConfigDict


class Job(BaseModel):
    """One deferred after-hook command, as read by the queue worker."""

    model_config = ConfigDict(frozen=True)

    command: str
    event: str
    path: str
    destination: str
    username: str
    user_scope: str

    def to_json(self) -> str:
        """Serialize to the wire format: one flat JSON object."""
        return self.model_dump_json()
