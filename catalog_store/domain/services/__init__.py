"""Domain services package."""

from .entity_service import EntityService
from .catalog_services import ProductService, ArticleService
from .order_service import OrderService
from .order_status_policy import OrderStatusPolicy

__all__ = [
    'EntityService',
    'ProductService',
    'ArticleService',
    'OrderService',
    'OrderStatusPolicy'
]
