"""Translate typed filter objects into query predicates."""

import re
from typing import List, Optional, Union

from ..entities import ProductFilter, ArticleFilter, OrderFilter, OrderStatus
from .predicates import And, AnyOf, Equals, Predicate, Range, RegexMatch, TextSearch

PRODUCT_TEXT_FIELDS = ("name", "description")
ARTICLE_TEXT_FIELDS = ("title", "content")


def _category_clause(category: Optional[str]) -> Optional[Predicate]:
    # An empty category ("all categories" in a UI) is the same as no category
    if not category:
        return None
    return RegexMatch("category", re.escape(category), anchored=True)


def _tags_clause(tags: Union[List[str], str, None]) -> Optional[Predicate]:
    if not tags:
        return None
    # A single tag sent as a plain string is one tag, not its characters
    if isinstance(tags, str):
        tags = [tags]
    return AnyOf("tags", tuple(tags))


def _search_clause(term: Optional[str], text_fields) -> Optional[Predicate]:
    if term is None:
        return None
    return TextSearch(text_fields, term)


def _combine(*clauses: Optional[Predicate]) -> And:
    return And(tuple(clause for clause in clauses if clause is not None))


def article_predicate(filter: Optional[ArticleFilter] = None) -> And:
    """Build the predicate for an article listing."""
    f = filter or ArticleFilter()
    return _combine(
        _category_clause(f.category),
        _tags_clause(f.tags),
        _search_clause(f.search_term, ARTICLE_TEXT_FIELDS),
    )


def product_predicate(filter: Optional[ProductFilter] = None) -> And:
    """Build the predicate for a product listing."""
    f = filter or ProductFilter()
    price = None
    if f.min_price is not None or f.max_price is not None:
        price = Range("price", f.min_price, f.max_price)
    return _combine(
        _category_clause(f.category),
        _tags_clause(f.tags),
        _search_clause(f.search_term, PRODUCT_TEXT_FIELDS),
        price,
    )


def order_predicate(filter: Optional[OrderFilter] = None) -> And:
    """Build the predicate for an order listing."""
    f = filter or OrderFilter()
    status = f.status.value if isinstance(f.status, OrderStatus) else f.status
    return _combine(
        Equals("customer_info.email", f.customer_email) if f.customer_email is not None else None,
        Equals("status", status) if status is not None else None,
    )
