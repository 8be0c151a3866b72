"""Catalog domain entities: products and articles."""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any
from datetime import datetime


@dataclass
class Product:
    """Represents a product in the catalog."""
    id: str
    name: str
    description: str
    price: float
    category: str
    tags: List[str]
    image_url: str
    inventory: int
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Product ID cannot be empty")
        if self.price < 0:
            raise ValueError("Price must be non-negative")
        if self.inventory < 0:
            raise ValueError("Inventory must be non-negative")

    @property
    def in_stock(self) -> bool:
        return self.inventory > 0

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Product":
        return cls(
            id=document["id"],
            name=document.get("name", ""),
            description=document.get("description", ""),
            price=document.get("price", 0),
            category=document.get("category", ""),
            tags=list(document.get("tags", [])),
            image_url=document.get("image_url", ""),
            inventory=document.get("inventory", 0),
            created_at=document["created_at"],
            updated_at=document["updated_at"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Article:
    """Represents an article."""
    id: str
    title: str
    content: str
    category: str
    created_at: datetime
    updated_at: datetime
    tags: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Article ID cannot be empty")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Article":
        return cls(
            id=document["id"],
            title=document.get("title", ""),
            content=document.get("content", ""),
            category=document.get("category", ""),
            tags=list(document.get("tags", [])),
            created_at=document["created_at"],
            updated_at=document["updated_at"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
