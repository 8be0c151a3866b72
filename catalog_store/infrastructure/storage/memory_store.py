"""In-memory document store."""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from ...config import COLLECTION_NAMES, SEED_MODES
from ...domain.repositories import DocumentStore
from ...error_handler import validate_choice
from ...exceptions import CollectionNotFoundError
from ...logging_config import get_logger
from .identity import MonotonicClock, make_id_generator
from .memory_collection import InMemoryCollection
from .seed_data import demo_seed

logger = get_logger(__name__)


class InMemoryStore(DocumentStore):
    """Owns a fixed set of in-memory collections for its whole lifetime.

    Construct it once where the application is composed and pass it to the
    services that need it.
    """

    def __init__(
        self,
        names: Iterable[str] = COLLECTION_NAMES,
        seed: Optional[Mapping[str, Iterable[Mapping[str, Any]]]] = None,
        id_generator: Optional[Callable[[], str]] = None,
        clock: Optional[MonotonicClock] = None,
    ):
        seed = seed or {}
        clock = clock or MonotonicClock()
        self._collections: Dict[str, InMemoryCollection] = {
            name: InMemoryCollection(
                name,
                seed=seed.get(name),
                id_generator=id_generator,
                clock=clock,
            )
            for name in names
        }
        unknown = set(seed) - set(self._collections)
        if unknown:
            raise CollectionNotFoundError(
                message=f"Seed data given for unregistered collections: {', '.join(sorted(unknown))}",
                details={'registered': list(self._collections), 'unknown': sorted(unknown)}
            )
        logger.info(
            "InMemoryStore ready: "
            + ", ".join(f"{name}={c.count()}" for name, c in self._collections.items())
        )

    def collection(self, name: str) -> InMemoryCollection:
        try:
            return self._collections[name]
        except KeyError:
            raise CollectionNotFoundError(
                message=f"Collection '{name}' is not registered",
                details={'requested': name, 'registered': list(self._collections)}
            ) from None

    def collection_names(self) -> List[str]:
        return list(self._collections)


def build_store(seed_mode: str = "demo", id_strategy: str = "uuid") -> InMemoryStore:
    """Build a store according to the seed mode and ID strategy settings."""
    validate_choice(seed_mode, SEED_MODES, "seed mode")
    seed = demo_seed() if seed_mode == "demo" else {}
    return InMemoryStore(seed=seed, id_generator=make_id_generator(id_strategy))
