"""Order domain entities."""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import List, Dict, Any
from datetime import datetime
from enum import Enum


class OrderStatus(Enum):
    """Order lifecycle states."""
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass
class CustomerInfo:
    """Shipping and contact details attached to an order."""
    name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    zip_code: str

    def __post_init__(self) -> None:
        missing = [name for name, value in asdict(self).items() if not value]
        if missing:
            raise ValueError(f"Customer info fields cannot be empty: {', '.join(missing)}")


@dataclass
class OrderItem:
    """One product line in an order."""
    product_id: str
    quantity: int
    name: str = ""
    price: float = 0.0

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def __post_init__(self) -> None:
        if not self.product_id:
            raise ValueError("Product ID cannot be empty")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")
        if self.price < 0:
            raise ValueError("Price must be non-negative")


@dataclass
class Order:
    """Represents a customer order."""
    id: str
    items: List[OrderItem]
    customer_info: CustomerInfo
    total_amount: float
    status: OrderStatus
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Order ID cannot be empty")
        if self.total_amount < 0:
            raise ValueError("Total amount must be non-negative")

    @property
    def items_total(self) -> float:
        return sum(item.line_total for item in self.items)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Order":
        return cls(
            id=document["id"],
            items=[OrderItem(**item) for item in document.get("items", [])],
            customer_info=CustomerInfo(**document["customer_info"]),
            total_amount=document.get("total_amount", 0),
            status=OrderStatus(document.get("status", OrderStatus.PENDING.value)),
            created_at=document["created_at"],
            updated_at=document["updated_at"],
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data
