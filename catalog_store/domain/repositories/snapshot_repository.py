"""Snapshot repository interface."""

from abc import ABC, abstractmethod
from typing import Optional


class SnapshotRepository(ABC):
    """Abstract local key/value text store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the text stored under ``key``."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove ``key`` and return whether it existed."""
        pass
