"""Response cache interface.

Only the pass-through implementation ships: read responses are offered to the
cache and looked up from it, but nothing is ever stored.
"""

from typing import Any


class NullCache:
    """Cache that never holds anything."""

    def get(self, key: str, default: Any = None) -> Any:
        return default

    def set(self, key: str, value: Any, ttl: float | None = None) -> bool:
        return True

    def delete(self, key: str) -> bool:
        return True

    def clear(self) -> bool:
        return True
