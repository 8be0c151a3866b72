"""Collection repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from ..query import Predicate


class CollectionRepository(ABC):
    """Abstract interface for one named collection of documents.

    Every operation is total over valid input: a missing document is reported
    through ``None`` or ``False``, never through an exception.
    """

    name: str

    @abstractmethod
    def find(self, predicate: Optional[Predicate] = None) -> List[Dict[str, Any]]:
        """Return copies of matching documents in insertion order."""
        pass

    @abstractmethod
    def find_by_id(self, document_id: str) -> Optional[Dict[str, Any]]:
        """Return a copy of the document with ``document_id`` or None."""
        pass

    @abstractmethod
    def insert(self, document: Mapping[str, Any]) -> str:
        """Store a new document and return its assigned ID."""
        pass

    @abstractmethod
    def update_by_id(self, document_id: str, fields: Mapping[str, Any]) -> bool:
        """Shallow-merge ``fields`` into a document; False when it does not exist."""
        pass

    @abstractmethod
    def delete_by_id(self, document_id: str) -> bool:
        """Remove a document and return whether anything was removed."""
        pass

    @abstractmethod
    def distinct_values(self, field: str) -> List[str]:
        """Distinct non-empty strings found in ``field`` across all documents."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of documents in the collection."""
        pass
