"""Filter objects accepted by the repository services.

Every field is optional; an absent field imposes no constraint. Filters can be
built from a plain mapping (as a UI layer would send them): unknown keys are
ignored and the camelCase spellings the UI uses are accepted alongside the
snake_case field names.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

F = TypeVar("F")

_ALIASES = {
    "searchTerm": "search_term",
    "minPrice": "min_price",
    "maxPrice": "max_price",
    "customerEmail": "customer_email",
}


def _from_mapping(cls: Type[F], data: Optional[Mapping[str, Any]]) -> F:
    known = {f.name for f in fields(cls)}
    kwargs: Dict[str, Any] = {}
    for key, value in (data or {}).items():
        name = _ALIASES.get(key, key)
        if name in known:
            kwargs[name] = value
    return cls(**kwargs)


@dataclass
class ArticleFilter:
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    search_term: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ArticleFilter":
        return _from_mapping(cls, data)


@dataclass
class ProductFilter:
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    search_term: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ProductFilter":
        return _from_mapping(cls, data)


@dataclass
class OrderFilter:
    customer_email: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "OrderFilter":
        return _from_mapping(cls, data)
