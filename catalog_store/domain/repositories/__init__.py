"""Repository interfaces package."""

from .collection_repository import CollectionRepository
from .store_repository import DocumentStore
from .snapshot_repository import SnapshotRepository

__all__ = [
    'CollectionRepository',
    'DocumentStore',
    'SnapshotRepository'
]
