"""
Backend registry.
Lets the queue implementation be chosen by name from configuration.
"""

from .registry import BackendRegistry, queue_backends

__all__ = [
    "BackendRegistry",
    "queue_backends",
]
