"""Dependency injection container."""

from typing import Optional

from .domain.repositories import DocumentStore, SnapshotRepository
from .domain.services import ProductService, ArticleService, OrderService, OrderStatusPolicy
from .infrastructure.storage import FileSnapshotStore, CartSnapshot, build_store
from .config import SEED_MODE, ID_STRATEGY, SNAPSHOT_PATH
from .error_handler import validate_config
from .logging_config import get_logger

logger = get_logger(__name__)


class Container:
    """Composes the store, the repository services and the snapshot store.

    Build one per application and pass it (or the services it hands out)
    down to the callers. Every dependency is created lazily and then reused.
    """

    def __init__(
        self,
        seed_mode: str = SEED_MODE,
        id_strategy: str = ID_STRATEGY,
        snapshot_path: str = SNAPSHOT_PATH,
        status_policy: Optional[OrderStatusPolicy] = None
    ):
        validate_config(
            {'seed_mode': seed_mode, 'id_strategy': id_strategy, 'snapshot_path': snapshot_path},
            ['seed_mode', 'id_strategy', 'snapshot_path'],
            context="Container"
        )
        self.seed_mode = seed_mode
        self.id_strategy = id_strategy
        self.snapshot_path = snapshot_path
        self.status_policy = status_policy
        self._store: Optional[DocumentStore] = None
        self._snapshot_repository: Optional[SnapshotRepository] = None
        self._product_service: Optional[ProductService] = None
        self._article_service: Optional[ArticleService] = None
        self._order_service: Optional[OrderService] = None
        self._cart_snapshot: Optional[CartSnapshot] = None

    def store(self) -> DocumentStore:
        """Get document store instance."""
        if self._store is None:
            logger.info(f"Creating InMemoryStore (seed_mode={self.seed_mode}, id_strategy={self.id_strategy})")
            self._store = build_store(self.seed_mode, self.id_strategy)
        return self._store

    async def connect(self) -> DocumentStore:
        """Awaitable handle to the store, mirroring a networked client's connect."""
        return self.store()

    def snapshot_repository(self) -> SnapshotRepository:
        """Get snapshot repository instance."""
        if self._snapshot_repository is None:
            logger.info(f"Creating FileSnapshotStore with path: {self.snapshot_path}")
            self._snapshot_repository = FileSnapshotStore(self.snapshot_path)
        return self._snapshot_repository

    def product_service(self) -> ProductService:
        if self._product_service is None:
            self._product_service = ProductService(self.store())
        return self._product_service

    def article_service(self) -> ArticleService:
        if self._article_service is None:
            self._article_service = ArticleService(self.store())
        return self._article_service

    def order_service(self) -> OrderService:
        if self._order_service is None:
            self._order_service = OrderService(self.store(), status_policy=self.status_policy)
        return self._order_service

    def cart_snapshot(self) -> CartSnapshot:
        if self._cart_snapshot is None:
            self._cart_snapshot = CartSnapshot(self.snapshot_repository())
        return self._cart_snapshot

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._store = None
        self._snapshot_repository = None
        self._product_service = None
        self._article_service = None
        self._order_service = None
        self._cart_snapshot = None
        logger.info("Container reset")
