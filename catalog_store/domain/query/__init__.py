"""Query predicates and filter translation."""

from .predicates import (
    Predicate, Equals, RegexMatch, AnyOf, Range, TextSearch, And,
    evaluate, resolve_field
)
from .translation import product_predicate, article_predicate, order_predicate

__all__ = [
    'Predicate',
    'Equals',
    'RegexMatch',
    'AnyOf',
    'Range',
    'TextSearch',
    'And',
    'evaluate',
    'resolve_field',
    'product_predicate',
    'article_predicate',
    'order_predicate'
]
