"""Domain entities package."""

from .catalog import Product, Article
from .order import Order, OrderItem, CustomerInfo, OrderStatus
from .filters import ProductFilter, ArticleFilter, OrderFilter

__all__ = [
    'Product',
    'Article',
    'Order',
    'OrderItem',
    'CustomerInfo',
    'OrderStatus',
    'ProductFilter',
    'ArticleFilter',
    'OrderFilter'
]
