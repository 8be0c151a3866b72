"""In-memory collection implementation."""

import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from ...domain.query import Predicate, evaluate
from ...domain.repositories import CollectionRepository
from ...exceptions import StoreError
from ...logging_config import get_logger
from .identity import MonotonicClock, UuidIdGenerator

logger = get_logger(__name__)

# Fields owned by the store; callers cannot set or change them
PROTECTED_FIELDS = ("id", "created_at", "updated_at")


def _naive_utc(value: Any) -> datetime:
    """Seed timestamps are stored the way the clock issues them: naive UTC."""
    if not isinstance(value, datetime):
        raise StoreError(
            message=f"Seed timestamp must be a datetime, got {type(value).__name__}",
            details={'value': repr(value)}
        )
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class InMemoryCollection(CollectionRepository):
    """List-backed implementation of CollectionRepository.

    Documents keep insertion order. An id index gives O(1) point lookups.
    Documents are copied on the way in and on the way out so no caller ever
    holds a reference into the collection.
    """

    def __init__(
        self,
        name: str,
        seed: Optional[Iterable[Mapping[str, Any]]] = None,
        id_generator: Optional[Callable[[], str]] = None,
        clock: Optional[MonotonicClock] = None,
    ):
        self.name = name
        self._id_generator = id_generator or UuidIdGenerator()
        self._clock = clock or MonotonicClock()
        self._documents: List[Dict[str, Any]] = []
        self._index: Dict[str, Dict[str, Any]] = {}

        for document in seed or []:
            self._load_seed(document)

    def _load_seed(self, document: Mapping[str, Any]) -> None:
        """Load a seed document, keeping its id and timestamps when present."""
        doc = copy.deepcopy(dict(document))
        doc_id = doc.get("id")
        if not doc_id or doc_id in self._index:
            doc_id = self._new_id()
        doc["id"] = doc_id
        created_at = _naive_utc(doc.get("created_at") or self._clock.now())
        updated_at = _naive_utc(doc.get("updated_at") or created_at)
        doc["created_at"] = created_at
        doc["updated_at"] = max(created_at, updated_at)
        self._documents.append(doc)
        self._index[doc_id] = doc

    def _touch(self, doc: Dict[str, Any]) -> datetime:
        """Next ``updated_at`` for ``doc``: the clock, but always past the stored value."""
        return max(self._clock.now(), doc["updated_at"] + timedelta(microseconds=1))

    def _new_id(self) -> str:
        doc_id = self._id_generator()
        while doc_id in self._index:
            logger.warning(f"Generated duplicate id {doc_id} in '{self.name}', retrying")
            doc_id = self._id_generator()
        return doc_id

    def find(self, predicate: Optional[Predicate] = None) -> List[Dict[str, Any]]:
        """Return copies of matching documents in insertion order."""
        return [copy.deepcopy(doc) for doc in self._documents if evaluate(predicate, doc)]

    def find_by_id(self, document_id: str) -> Optional[Dict[str, Any]]:
        doc = self._index.get(document_id)
        return copy.deepcopy(doc) if doc is not None else None

    def insert(self, document: Mapping[str, Any]) -> str:
        """Store a copy of ``document`` under a freshly generated id."""
        doc = {k: copy.deepcopy(v) for k, v in document.items() if k not in PROTECTED_FIELDS}
        doc_id = self._new_id()
        now = self._clock.now()
        doc["id"] = doc_id
        doc["created_at"] = now
        doc["updated_at"] = now

        self._documents.append(doc)
        self._index[doc_id] = doc
        logger.debug(f"Inserted {doc_id} into '{self.name}'")
        return doc_id

    def update_by_id(self, document_id: str, fields: Mapping[str, Any]) -> bool:
        """Shallow-merge ``fields`` into the stored document and bump ``updated_at``."""
        doc = self._index.get(document_id)
        if doc is None:
            return False

        ignored = [k for k in fields if k in PROTECTED_FIELDS]
        if ignored:
            logger.warning(f"Ignoring store-owned fields {ignored} in update of {document_id}")

        doc.update({k: copy.deepcopy(v) for k, v in fields.items() if k not in PROTECTED_FIELDS})
        doc["updated_at"] = self._touch(doc)
        return True

    def delete_by_id(self, document_id: str) -> bool:
        doc = self._index.pop(document_id, None)
        if doc is None:
            return False
        self._documents = [d for d in self._documents if d is not doc]
        logger.debug(f"Deleted {document_id} from '{self.name}'")
        return True

    def distinct_values(self, field: str) -> List[str]:
        """Distinct non-empty strings in ``field``; list fields contribute every element."""
        values: Dict[str, None] = {}
        for doc in self._documents:
            value = doc.get(field)
            items = value if isinstance(value, (list, tuple)) else [value]
            for item in items:
                if isinstance(item, str) and item:
                    values[item] = None
        return list(values)

    def count(self) -> int:
        return len(self._documents)
