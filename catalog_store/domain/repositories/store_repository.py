"""Document store interface."""

from abc import ABC, abstractmethod
from typing import List

from .collection_repository import CollectionRepository


class DocumentStore(ABC):
    """Abstract owner of a fixed set of named collections."""

    @abstractmethod
    def collection(self, name: str) -> CollectionRepository:
        """Get a registered collection; unknown names raise CollectionNotFoundError."""
        pass

    @abstractmethod
    def collection_names(self) -> List[str]:
        """Names of all registered collections."""
        pass
