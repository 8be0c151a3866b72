"""Storage infrastructure module."""

from .identity import UuidIdGenerator, TimestampIdGenerator, MonotonicClock, make_id_generator
from .memory_collection import InMemoryCollection
from .memory_store import InMemoryStore, build_store
from .snapshot_store import FileSnapshotStore, CartSnapshot, CartLine

__all__ = [
    'UuidIdGenerator',
    'TimestampIdGenerator',
    'MonotonicClock',
    'make_id_generator',
    'InMemoryCollection',
    'InMemoryStore',
    'build_store',
    'FileSnapshotStore',
    'CartSnapshot',
    'CartLine'
]
