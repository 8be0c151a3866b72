"""Custom exceptions for the catalog store."""

from typing import Optional


class CatalogStoreError(Exception):
    """Base exception for all catalog store errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(CatalogStoreError):
    """Raised when configuration is invalid. Programmer error, never swallowed."""
    pass


class CollectionNotFoundError(ConfigurationError):
    """Raised when an unregistered collection name is requested."""
    pass


class StoreError(CatalogStoreError):
    """Raised when a collection or store operation fails."""
    pass


class InvalidQueryError(StoreError):
    """Raised when a predicate cannot be built or evaluated."""
    pass


class EntityValidationError(CatalogStoreError):
    """Raised when entity data is rejected before reaching the store."""
    pass


class RepositoryError(CatalogStoreError):
    """Raised when a write through a repository service does not take effect."""
    pass


class StatusTransitionError(EntityValidationError):
    """Raised when an order status change is not allowed by the policy."""
    pass


class SnapshotError(CatalogStoreError):
    """Raised when the local snapshot file cannot be read or written."""
    pass
