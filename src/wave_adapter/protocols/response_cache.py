"""Response cache protocol.

Any store with synchronous, non-blocking ``get``/``set`` satisfies it.
``ExpiringCache`` is the default implementation.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResponseCache(Protocol):
    """Protocol for the shared response cache."""

    def get(self, key: str) -> Any | None:
        """Return the live value for ``key``, or None if absent or expired."""
        ...

    def set(self, key: str, value: Any, ttl: float) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds."""
        ...
